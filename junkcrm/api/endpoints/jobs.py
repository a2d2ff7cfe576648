"""
Job Endpoints Module

CRUD endpoints for scheduled pickups.
"""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from junkcrm.api import deps
from junkcrm.db import storage
from junkcrm.db.session import get_db
from junkcrm.models.job import JobCreate, JobRead, JobUpdate

router = APIRouter()


@router.get("", response_model=List[JobRead])
def list_jobs(
    customerId: Optional[int] = None,
    db: Session = Depends(get_db),
    role=Depends(deps.core_read),
):
    """
    Retrieve jobs ordered by scheduled date, latest first.

    Optionally filter to one customer with ?customerId=.
    """
    if customerId is not None:
        return storage.jobs.by_customer(db, customerId)
    return storage.jobs.list(db)


@router.get("/{job_id}", response_model=JobRead)
def read_job(
    job_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.core_read),
):
    job = storage.jobs.get(db, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.post("", response_model=JobRead, status_code=status.HTTP_201_CREATED)
def create_job(
    job_in: JobCreate,
    db: Session = Depends(get_db),
    role=Depends(deps.core_write),
):
    """
    Schedule a new job.

    customerId is not checked against the customers table; the job keeps its
    own customerName and address.
    """
    return storage.jobs.create(db, job_in)


@router.patch("/{job_id}", response_model=JobRead)
def update_job(
    job_id: int,
    job_update: JobUpdate,
    db: Session = Depends(get_db),
    role=Depends(deps.core_write),
):
    job = storage.jobs.update(db, job_id, job_update.model_dump(exclude_unset=True))
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.delete("/{job_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.core_write),
):
    if not storage.jobs.delete(db, job_id):
        raise HTTPException(status_code=404, detail="Job not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
