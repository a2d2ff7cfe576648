"""
Transaction Endpoints Module

Income and expense entries can be listed, added and deleted; there is no
update route. Both the list and the summary accept an optional inclusive
?start=&end= date range.
"""
from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from junkcrm.api import deps
from junkcrm.core.finance import summarize_transactions
from junkcrm.db import storage
from junkcrm.db.session import get_db
from junkcrm.models.base import as_utc
from junkcrm.models.transaction import TransactionCreate, TransactionRead
from junkcrm.schemas.finance import TransactionSummary

router = APIRouter()


def _select_transactions(db: Session, start: Optional[datetime], end: Optional[datetime]):
    if start is None and end is None:
        return storage.transactions.list(db)
    if start is None or end is None:
        raise HTTPException(status_code=400, detail="Both start and end are required to filter by date")
    start, end = as_utc(start), as_utc(end)
    if start > end:
        raise HTTPException(status_code=400, detail="start must not be after end")
    return storage.transactions.by_date_range(db, start, end)


@router.get("", response_model=List[TransactionRead])
def list_transactions(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    db: Session = Depends(get_db),
    role=Depends(deps.core_read),
):
    """
    Retrieve transactions by date, latest first.

    Args:
        start: Optional inclusive lower bound on `date`
        end: Optional inclusive upper bound on `date`
        db: Database session
        role: Request role (checked only when core routes are protected)
    """
    return _select_transactions(db, start, end)


@router.get("/summary", response_model=TransactionSummary)
def transaction_summary(
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    db: Session = Depends(get_db),
    role=Depends(deps.core_read),
):
    """
    Income, expense and profit totals for the dashboard's finance cards.
    """
    return summarize_transactions(_select_transactions(db, start, end))


@router.get("/{transaction_id}", response_model=TransactionRead)
def read_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.core_read),
):
    transaction = storage.transactions.get(db, transaction_id)
    if not transaction:
        raise HTTPException(status_code=404, detail="Transaction not found")
    return transaction


@router.post("", response_model=TransactionRead, status_code=status.HTTP_201_CREATED)
def create_transaction(
    transaction_in: TransactionCreate,
    db: Session = Depends(get_db),
    role=Depends(deps.core_write),
):
    return storage.transactions.create(db, transaction_in)


@router.delete("/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.core_write),
):
    if not storage.transactions.delete(db, transaction_id):
        raise HTTPException(status_code=404, detail="Transaction not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
