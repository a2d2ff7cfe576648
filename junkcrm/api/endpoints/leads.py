"""
Lead Endpoints Module

This module provides the sales pipeline endpoints. Every role may read leads;
only admins and dispatchers may create, change, move or delete them.
"""
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlmodel import Session
from junkcrm.api import deps
from junkcrm.core.pipeline import PipelineError, move_stage
from junkcrm.db import storage
from junkcrm.db.session import get_db
from junkcrm.models.lead import LeadCreate, LeadRead, LeadUpdate
from junkcrm.schemas.pipeline import LeadMove
from junkcrm.services import notifier

router = APIRouter()


@router.get("", response_model=List[LeadRead])
def list_leads(
    db: Session = Depends(get_db),
    role=Depends(deps.allow_read),
):
    """
    Retrieve all leads, most recently updated first.
    """
    return storage.leads.list(db)


@router.get("/{lead_id}", response_model=LeadRead)
def read_lead(
    lead_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.allow_read),
):
    lead = storage.leads.get(db, lead_id)
    if not lead:
        raise HTTPException(status_code=404, detail="Lead not found")
    return lead


@router.post("", response_model=LeadRead, status_code=status.HTTP_201_CREATED)
def create_lead(
    lead_in: LeadCreate,
    db: Session = Depends(get_db),
    role=Depends(deps.allow_write),
):
    """
    Add a lead to the pipeline and raise a "New lead logged" notification.
    """
    lead = storage.leads.create(db, lead_in)
    notifier.lead_created(db, lead)
    return lead


@router.patch("/{lead_id}", response_model=LeadRead)
def update_lead(
    lead_id: int,
    lead_update: LeadUpdate,
    db: Session = Depends(get_db),
    role=Depends(deps.allow_write),
):
    """
    Partially update a lead.

    Any stage may be set directly here; use the move endpoint for one-step
    pipeline nudges. Reaching "Won" raises a notification.

    Raises:
        HTTPException 404: If the lead doesn't exist
    """
    lead = storage.leads.get(db, lead_id)
    if not lead:
        raise HTTPException(status_code=404, detail="Lead not found")
    previous_stage = lead.stage

    lead = storage.leads.update(db, lead_id, lead_update.model_dump(exclude_unset=True))
    notifier.lead_updated(db, lead, previous_stage)
    return lead


@router.post("/{lead_id}/move", response_model=LeadRead)
def move_lead(
    lead_id: int,
    move: LeadMove,
    db: Session = Depends(get_db),
    role=Depends(deps.allow_write),
):
    """
    Move a lead one stage forward (direction 1) or back (direction -1).

    Raises:
        HTTPException 404: If the lead doesn't exist
        HTTPException 400: If the lead is already at that end of the pipeline
    """
    lead = storage.leads.get(db, lead_id)
    if not lead:
        raise HTTPException(status_code=404, detail="Lead not found")
    previous_stage = lead.stage

    try:
        next_stage = move_stage(lead.stage, move.direction)
    except PipelineError as e:
        raise HTTPException(status_code=400, detail=str(e))

    lead = storage.leads.update(db, lead_id, {"stage": next_stage})
    notifier.lead_updated(db, lead, previous_stage)
    return lead


@router.delete("/{lead_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_lead(
    lead_id: int,
    db: Session = Depends(get_db),
    role=Depends(deps.allow_write),
):
    if not storage.leads.delete(db, lead_id):
        raise HTTPException(status_code=404, detail="Lead not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
