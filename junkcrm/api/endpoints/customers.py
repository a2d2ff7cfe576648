"""
Customer Endpoints Module

This module provides CRUD endpoints for customer records. Customers are shared
resources; the routes are open unless PROTECT_CORE_ROUTES is enabled, in which
case every role may read and admins/dispatchers may write.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from junkcrm.api import deps
from junkcrm.db import storage
from junkcrm.db.session import get_db
from junkcrm.models.customer import CustomerCreate, CustomerRead, CustomerUpdate
from junkcrm.models.job import JobRead

router = APIRouter()


@router.get("", response_model=List[CustomerRead])
def list_customers(
    db: Session = Depends(get_db),
    role=Depends(deps.core_read),
):
    """
    Retrieve all customers, newest first.
    """
    return storage.customers.list(db)


@router.get("/{customer_id}", response_model=CustomerRead)
def read_customer(
    customer_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.core_read),
):
    """
    Get a specific customer by ID.

    Raises:
        HTTPException 404: If the customer doesn't exist
    """
    customer = storage.customers.get(db, customer_id)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.get("/{customer_id}/jobs", response_model=List[JobRead])
def list_customer_jobs(
    customer_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.core_read),
):
    """
    List the jobs booked for a customer, most recent date first.

    Jobs keep their customerId after the customer is deleted, so this still
    answers for a removed customer.
    """
    return storage.jobs.by_customer(db, customer_id)


@router.post("", response_model=CustomerRead, status_code=status.HTTP_201_CREATED)
def create_customer(
    customer_in: CustomerCreate,
    db: Session = Depends(get_db),
    role=Depends(deps.core_write),
):
    """
    Create a new customer.

    totalSpent always starts at 0.00 regardless of the request body.

    Args:
        customer_in: Validated customer fields
        db: Database session
        role: Request role (checked only when core routes are protected)

    Returns:
        CustomerRead: The stored customer including id and timestamps
    """
    return storage.customers.create(db, customer_in)


@router.patch("/{customer_id}", response_model=CustomerRead)
def update_customer(
    customer_id: int,
    customer_update: CustomerUpdate,
    db: Session = Depends(get_db),
    role=Depends(deps.core_write),
):
    """
    Partially update a customer.

    Only fields present in the body change; everything else keeps its value.

    Raises:
        HTTPException 404: If the customer doesn't exist
    """
    customer = storage.customers.update(
        db, customer_id, customer_update.model_dump(exclude_unset=True)
    )
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_customer(
    customer_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.core_write),
):
    """
    Delete a customer. Their jobs, quotes and invoices are left in place.

    Raises:
        HTTPException 404: If the customer doesn't exist
    """
    if not storage.customers.delete(db, customer_id):
        raise HTTPException(status_code=404, detail="Customer not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
