"""
Quote Endpoints Module

CRUD endpoints for estimates, plus the estimate calculator itself. When
VERIFY_QUOTE_TOTALS is on, quotes made entirely of calculator items are
re-priced and rejected if the submitted total disagrees.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from junkcrm.api import deps
from junkcrm.core.config import settings
from junkcrm.core.pricing import PricingError, calculate_estimate, verify_quote_total
from junkcrm.db import storage
from junkcrm.db.session import get_db
from junkcrm.models.quote import QuoteCreate, QuoteRead, QuoteUpdate
from junkcrm.schemas.pricing import EstimateRequest, EstimateResponse

router = APIRouter()


def _check_total(items: List[str], total) -> None:
    if not settings.VERIFY_QUOTE_TOTALS:
        return
    try:
        verify_quote_total(items, total)
    except PricingError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=List[QuoteRead])
def list_quotes(
    db: Session = Depends(get_db),
    role=Depends(deps.core_read),
):
    """
    Retrieve all quotes, newest first.
    """
    return storage.quotes.list(db)


@router.post("/estimate", response_model=EstimateResponse)
def estimate(
    estimate_in: EstimateRequest,
    role=Depends(deps.core_read),
):
    """
    Price a truck-load tier plus surcharges.

    Returns:
        EstimateResponse: The total as a fixed-point string

    Raises:
        HTTPException 400: If the tier or a surcharge is unknown
    """
    try:
        total = calculate_estimate(estimate_in.tier, estimate_in.surcharges)
    except PricingError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return {"total": total}


@router.get("/{quote_id}", response_model=QuoteRead)
def read_quote(
    quote_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.core_read),
):
    quote = storage.quotes.get(db, quote_id)
    if not quote:
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote


@router.post("", response_model=QuoteRead, status_code=status.HTTP_201_CREATED)
def create_quote(
    quote_in: QuoteCreate,
    db: Session = Depends(get_db),
    role=Depends(deps.core_write),
):
    """
    Create a new quote.

    Raises:
        HTTPException 400: If a calculator quote's total does not match its items
    """
    _check_total(quote_in.items, quote_in.total)
    return storage.quotes.create(db, quote_in)


@router.patch("/{quote_id}", response_model=QuoteRead)
def update_quote(
    quote_id: int,
    quote_update: QuoteUpdate,
    db: Session = Depends(get_db),
    role=Depends(deps.core_write),
):
    """
    Partially update a quote.

    If items or total change, the merged quote is checked the same way as on
    create.
    """
    quote = storage.quotes.get(db, quote_id)
    if not quote:
        raise HTTPException(status_code=404, detail="Quote not found")

    changes = quote_update.model_dump(exclude_unset=True)
    if "items" in changes or "total" in changes:
        _check_total(changes.get("items", quote.items), changes.get("total", quote.total))

    return storage.quotes.update(db, quote_id, changes)


@router.delete("/{quote_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_quote(
    quote_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.core_write),
):
    if not storage.quotes.delete(db, quote_id):
        raise HTTPException(status_code=404, detail="Quote not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
