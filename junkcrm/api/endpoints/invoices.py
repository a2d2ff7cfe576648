"""
Invoice Endpoints Module

Every role may read invoices; admins and dispatchers may create and update
them; only admins may delete one.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from junkcrm.api import deps
from junkcrm.db import storage
from junkcrm.db.session import get_db
from junkcrm.models.invoice import InvoiceCreate, InvoiceRead, InvoiceUpdate
from junkcrm.services import notifier

router = APIRouter()


@router.get("", response_model=List[InvoiceRead])
def list_invoices(
    db: Session = Depends(get_db),
    role=Depends(deps.allow_read),
):
    """
    Retrieve all invoices, most recently issued first.
    """
    return storage.invoices.list(db)


@router.get("/{invoice_id}", response_model=InvoiceRead)
def read_invoice(
    invoice_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.allow_read),
):
    invoice = storage.invoices.get(db, invoice_id)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    return invoice


@router.post("", response_model=InvoiceRead, status_code=status.HTTP_201_CREATED)
def create_invoice(
    invoice_in: InvoiceCreate,
    db: Session = Depends(get_db),
    role=Depends(deps.allow_write),
):
    """
    Issue a new invoice. issuedAt is set by the server.
    """
    return storage.invoices.create(db, invoice_in)


@router.patch("/{invoice_id}", response_model=InvoiceRead)
def update_invoice(
    invoice_id: int,
    invoice_update: InvoiceUpdate,
    db: Session = Depends(get_db),
    role=Depends(deps.allow_write),
):
    """
    Partially update an invoice.

    Status changes are never automatic; marking an invoice Paid raises an
    "Invoice paid" notification.

    Raises:
        HTTPException 404: If the invoice doesn't exist
    """
    invoice = storage.invoices.get(db, invoice_id)
    if not invoice:
        raise HTTPException(status_code=404, detail="Invoice not found")
    previous_status = invoice.status

    invoice = storage.invoices.update(db, invoice_id, invoice_update.model_dump(exclude_unset=True))
    notifier.invoice_updated(db, invoice, previous_status)
    return invoice


@router.delete("/{invoice_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_invoice(
    invoice_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.allow_admin),
):
    """
    Delete an invoice. Admins only.
    """
    if not storage.invoices.delete(db, invoice_id):
        raise HTTPException(status_code=404, detail="Invoice not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
