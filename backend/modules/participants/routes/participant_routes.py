# backend/modules/participants/routes/participant_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response_models import CreatedResponse, MessageResponse

from ..schemas import (
    ParticipantCreate,
    ParticipantLookup,
    ParticipantOption,
    ParticipantOut,
    ParticipantUpdate,
)
from ..services import ParticipantService

router = APIRouter(prefix="/api/participants", tags=["Participants"])
logistics_router = APIRouter(prefix="/api/logistics", tags=["Logistics"])


@router.get("/data/lookup", response_model=ParticipantLookup)
def get_lookup(db: Session = Depends(get_db)):
    """Institutes, hostels and messes for the participant form"""
    return ParticipantService(db).get_lookup()


@router.get("/", response_model=List[ParticipantOut])
def list_participants(
    search: Optional[str] = Query(None, description="Name, institute or hostel"),
    db: Session = Depends(get_db),
):
    return ParticipantService(db).list_participants(search)


@router.post("/", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_participant(participant_data: ParticipantCreate, db: Session = Depends(get_db)):
    participant = ParticipantService(db).create_participant(participant_data)
    return CreatedResponse(id=participant.id, message="Participant registered successfully.")


@router.put("/{participant_id}", response_model=MessageResponse)
def update_participant(
    participant_id: int, update_data: ParticipantUpdate, db: Session = Depends(get_db)
):
    ParticipantService(db).update_participant(participant_id, update_data)
    return MessageResponse(message=f"Participant {participant_id} updated successfully.")


@router.delete("/{participant_id}", response_model=MessageResponse)
def delete_participant(participant_id: int, db: Session = Depends(get_db)):
    ParticipantService(db).delete_participant(participant_id)
    return MessageResponse(message=f"Participant {participant_id} deleted successfully.")


@logistics_router.get("/participants", response_model=List[ParticipantOption])
def list_participant_options(db: Session = Depends(get_db)):
    """Participants for the equipment and transport dropdowns"""
    return ParticipantService(db).list_options()
