# backend/modules/participants/services/participant_service.py

import logging
from typing import List, Optional

from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.database_utils import write_transaction
from core.exceptions import NotFoundError, StoreFailureError

from ..models import Hostel, Institute, Mess, Participant
from ..schemas import (
    HostelOut,
    InstituteOut,
    MessOut,
    ParticipantCreate,
    ParticipantLookup,
    ParticipantOption,
    ParticipantOut,
    ParticipantUpdate,
)

logger = logging.getLogger(__name__)


class ParticipantService:
    """Service for participant registration and search"""

    def __init__(self, db: Session):
        self.db = db

    def get_lookup(self) -> ParticipantLookup:
        try:
            institutes = self.db.query(Institute).order_by(Institute.id).all()
            hostels = self.db.query(Hostel).order_by(Hostel.id).all()
            messes = self.db.query(Mess).order_by(Mess.id).all()
        except SQLAlchemyError as e:
            logger.error(f"Error fetching lookup data: {str(e)}")
            raise StoreFailureError("Error fetching lookup data.")

        return ParticipantLookup(
            institutes=[InstituteOut.model_validate(i) for i in institutes],
            hostels=[HostelOut.model_validate(h) for h in hostels],
            messes=[MessOut.model_validate(m) for m in messes],
        )

    def list_participants(self, search: Optional[str] = None) -> List[ParticipantOut]:
        """
        Participants ordered by institute, then name.

        ``search`` is a case-insensitive substring matched against the
        participant name, institute short name and hostel name.
        """
        query = (
            self.db.query(
                Participant.id,
                Participant.name,
                Participant.date_of_birth,
                Participant.gender,
                Participant.email,
                Institute.short_name.label("institute"),
                Hostel.hostel_name.label("hostel"),
                Mess.mess_name.label("mess"),
                Participant.institute_id,
                Participant.hostel_id,
                Participant.mess_id,
            )
            .join(Institute, Participant.institute_id == Institute.id)
            .outerjoin(Hostel, Participant.hostel_id == Hostel.id)
            .outerjoin(Mess, Participant.mess_id == Mess.id)
        )

        if search:
            pattern = f"%{search}%"
            query = query.filter(
                or_(
                    Participant.name.ilike(pattern),
                    Institute.short_name.ilike(pattern),
                    Hostel.hostel_name.ilike(pattern),
                )
            )

        try:
            rows = query.order_by(Participant.institute_id, Participant.name).all()
        except SQLAlchemyError as e:
            logger.error(f"Database error listing participants: {str(e)}")
            raise StoreFailureError("Failed to fetch participants data.")
        return [ParticipantOut.model_validate(dict(row._mapping)) for row in rows]

    def list_options(self) -> List[ParticipantOption]:
        """Participants by name with their institute short name"""
        try:
            rows = (
                self.db.query(
                    Participant.id,
                    Participant.name,
                    Institute.short_name.label("institute"),
                )
                .join(Institute, Participant.institute_id == Institute.id)
                .order_by(Participant.name, Participant.id)
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error fetching participant options: {str(e)}")
            raise StoreFailureError("Failed to fetch participants data.")
        return [ParticipantOption.model_validate(dict(row._mapping)) for row in rows]

    def get_participant(self, participant_id: int) -> Participant:
        participant = (
            self.db.query(Participant).filter(Participant.id == participant_id).first()
        )
        if not participant:
            raise NotFoundError("Participant not found.")
        return participant

    def create_participant(self, participant_data: ParticipantCreate) -> Participant:
        participant = Participant(**participant_data.model_dump())
        with write_transaction(
            self.db,
            duplicate_message="Registration failed. Email is already registered.",
            reference_message=(
                "Registration failed. Check that the Hostel, Institute and Mess exist."
            ),
            failure_message="Registration failed due to a database error.",
        ):
            self.db.add(participant)
        self.db.refresh(participant)
        logger.info(f"Registered participant {participant.id} ({participant.name})")
        return participant

    def update_participant(
        self, participant_id: int, update_data: ParticipantUpdate
    ) -> Participant:
        participant = self.get_participant(participant_id)
        with write_transaction(
            self.db,
            duplicate_message="Update failed. Email is already registered.",
            reference_message="Update failed. Check that the Hostel, Institute and Mess exist.",
            failure_message="Update failed due to a database error.",
        ):
            for field, value in update_data.model_dump().items():
                setattr(participant, field, value)
        self.db.refresh(participant)
        return participant

    def delete_participant(self, participant_id: int) -> None:
        participant = self.get_participant(participant_id)
        with write_transaction(
            self.db,
            reference_message=(
                "Deletion failed. Participant is referenced in other records "
                "(e.g., Teams, Incidents or Transactions)."
            ),
            failure_message="Deletion failed due to a database error.",
        ):
            self.db.delete(participant)
        logger.info(f"Deleted participant {participant_id}")
