# backend/modules/events/routes/event_routes.py

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response_models import CreatedResponse, MessageResponse

from ..schemas import EventCreate, EventLookup, MatchCreate, MatchOut, MatchResult
from ..services import EventService

router = APIRouter(prefix="/api/events", tags=["Events"])


@router.get("/data/lookup", response_model=List[EventLookup])
def list_event_lookup(db: Session = Depends(get_db)):
    """Events for dropdowns, by name"""
    return EventService(db).list_lookup()


@router.post("/", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_event(event_data: EventCreate, db: Session = Depends(get_db)):
    event = EventService(db).create_event(event_data)
    return CreatedResponse(id=event.id, message=f"Event {event.name} created successfully.")


@router.get("/matches", response_model=List[MatchOut])
def list_matches(
    event_id: Optional[int] = Query(None, alias="eventId"),
    db: Session = Depends(get_db),
):
    return EventService(db).list_matches(event_id)


@router.get("/matches/{match_id}", response_model=MatchOut)
def get_match(match_id: int, db: Session = Depends(get_db)):
    return EventService(db).get_match(match_id)


@router.post("/matches", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def schedule_match(match_data: MatchCreate, db: Session = Depends(get_db)):
    match = EventService(db).schedule_match(match_data)
    return CreatedResponse(id=match.id, message=f"Match {match.id} scheduled successfully.")


@router.put("/matches/{match_id}/result", response_model=MessageResponse)
def record_match_result(match_id: int, result: MatchResult, db: Session = Depends(get_db)):
    EventService(db).record_result(match_id, result)
    return MessageResponse(message=f"Result for match {match_id} recorded successfully.")
