# backend/modules/financials/services/financial_service.py

import logging
from datetime import datetime, timezone
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.database_utils import write_transaction
from core.exceptions import NotFoundError, StoreFailureError
from modules.events.models import Event
from modules.participants.models import Participant
from modules.staff.models import StaffMember

from ..models import FinancialTransaction, IncidentReport
from ..schemas import (
    IncidentCreate,
    IncidentOut,
    IncidentUpdate,
    TransactionCreate,
    TransactionOut,
    TransactionUpdate,
)

logger = logging.getLogger(__name__)


class FinancialService:
    """Service for the transaction ledger and the incident log"""

    def __init__(self, db: Session):
        self.db = db

    # Transactions
    def list_transactions(self) -> List[TransactionOut]:
        try:
            rows = (
                self.db.query(
                    FinancialTransaction.id,
                    FinancialTransaction.amount,
                    FinancialTransaction.transaction_date,
                    FinancialTransaction.payment_status,
                    FinancialTransaction.type,
                    FinancialTransaction.participant_id,
                    Participant.name.label("participant_name"),
                    FinancialTransaction.event_id,
                    Event.name.label("event_name"),
                )
                .join(Participant, FinancialTransaction.participant_id == Participant.id)
                .join(Event, FinancialTransaction.event_id == Event.id)
                .order_by(
                    FinancialTransaction.transaction_date.desc(),
                    FinancialTransaction.id.desc(),
                )
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error fetching financial transactions: {str(e)}")
            raise StoreFailureError("Failed to fetch financial transactions.")
        return [TransactionOut.model_validate(dict(row._mapping)) for row in rows]

    def get_transaction(self, transaction_id: int) -> FinancialTransaction:
        transaction = (
            self.db.query(FinancialTransaction)
            .filter(FinancialTransaction.id == transaction_id)
            .first()
        )
        if not transaction:
            raise NotFoundError("Transaction not found.")
        return transaction

    def create_transaction(self, transaction_data: TransactionCreate) -> FinancialTransaction:
        transaction = FinancialTransaction(**transaction_data.model_dump())
        kind = transaction_data.type.value
        with write_transaction(
            self.db,
            reference_message="Participant or event does not exist.",
            failure_message=f"Failed to record {kind} transaction due to a database error.",
        ):
            self.db.add(transaction)
        self.db.refresh(transaction)
        logger.info(
            f"Recorded {kind} transaction {transaction.id} for participant "
            f"{transaction.participant_id}"
        )
        return transaction

    def update_transaction(
        self, transaction_id: int, transaction_data: TransactionUpdate
    ) -> FinancialTransaction:
        transaction = self.get_transaction(transaction_id)
        with write_transaction(
            self.db,
            reference_message="Participant or event does not exist.",
            failure_message="Transaction update failed due to a database error.",
        ):
            for field, value in transaction_data.model_dump().items():
                setattr(transaction, field, value)
        self.db.refresh(transaction)
        return transaction

    def delete_transaction(self, transaction_id: int) -> None:
        transaction = self.get_transaction(transaction_id)
        with write_transaction(
            self.db,
            failure_message="Deletion failed. This transaction may be linked to other records.",
        ):
            self.db.delete(transaction)
        logger.info(f"Deleted transaction {transaction_id}")

    # Incidents
    def list_incidents(self) -> List[IncidentOut]:
        """Incident log, newest first; the participant is optional"""
        try:
            rows = (
                self.db.query(
                    IncidentReport.id,
                    IncidentReport.time,
                    IncidentReport.description,
                    IncidentReport.action_taken,
                    IncidentReport.severity,
                    IncidentReport.participant_id,
                    Participant.name.label("participant_name"),
                    IncidentReport.staff_id,
                    StaffMember.name.label("staff_reporter"),
                )
                .join(StaffMember, IncidentReport.staff_id == StaffMember.id)
                .outerjoin(Participant, IncidentReport.participant_id == Participant.id)
                .order_by(IncidentReport.time.desc(), IncidentReport.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            logger.error(f"Error fetching incident reports: {str(e)}")
            raise StoreFailureError("Failed to fetch incident reports.")
        return [IncidentOut.model_validate(dict(row._mapping)) for row in rows]

    def get_incident(self, incident_id: int) -> IncidentReport:
        incident = (
            self.db.query(IncidentReport).filter(IncidentReport.id == incident_id).first()
        )
        if not incident:
            raise NotFoundError("Incident report not found.")
        return incident

    def create_incident(self, incident_data: IncidentCreate) -> IncidentReport:
        incident = IncidentReport(
            **incident_data.model_dump(), time=datetime.now(timezone.utc)
        )
        with write_transaction(
            self.db,
            reference_message="Reporting staff member or participant does not exist.",
            failure_message="Failed to create incident report.",
        ):
            self.db.add(incident)
        self.db.refresh(incident)
        logger.info(
            f"Incident {incident.id} filed by staff {incident.staff_id} "
            f"(severity {incident.severity.value})"
        )
        return incident

    def update_incident(
        self, incident_id: int, incident_data: IncidentUpdate
    ) -> IncidentReport:
        incident = self.get_incident(incident_id)
        with write_transaction(
            self.db,
            reference_message="Reporting staff member or participant does not exist.",
            failure_message="Incident update failed due to a database error.",
        ):
            for field, value in incident_data.model_dump().items():
                setattr(incident, field, value)
        self.db.refresh(incident)
        return incident

    def delete_incident(self, incident_id: int) -> None:
        incident = self.get_incident(incident_id)
        with write_transaction(
            self.db,
            failure_message="Deletion failed. This incident may be linked to other records.",
        ):
            self.db.delete(incident)
        logger.info(f"Deleted incident report {incident_id}")
