# backend/modules/financials/routes/financial_routes.py

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from core.database import get_db
from core.response_models import CreatedResponse, MessageResponse

from ..schemas import (
    IncidentCreate,
    IncidentOut,
    IncidentUpdate,
    TransactionCreate,
    TransactionOut,
    TransactionUpdate,
)
from ..services import FinancialService

router = APIRouter(prefix="/api/financials", tags=["Financials"])


# Financial transactions
@router.get("/transactions", response_model=List[TransactionOut])
def list_transactions(db: Session = Depends(get_db)):
    """Transactions with participant and event names, newest first"""
    return FinancialService(db).list_transactions()


@router.post(
    "/transactions", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED
)
def create_transaction(transaction_data: TransactionCreate, db: Session = Depends(get_db)):
    transaction = FinancialService(db).create_transaction(transaction_data)
    return CreatedResponse(
        id=transaction.id,
        message=(
            f"{transaction.type.value} transaction recorded successfully. "
            f"ID: {transaction.id}"
        ),
    )


@router.put("/transactions/{transaction_id}", response_model=MessageResponse)
def update_transaction(
    transaction_id: int,
    transaction_data: TransactionUpdate,
    db: Session = Depends(get_db),
):
    FinancialService(db).update_transaction(transaction_id, transaction_data)
    return MessageResponse(message=f"Transaction {transaction_id} updated successfully.")


@router.delete("/transactions/{transaction_id}", response_model=MessageResponse)
def delete_transaction(transaction_id: int, db: Session = Depends(get_db)):
    FinancialService(db).delete_transaction(transaction_id)
    return MessageResponse(message=f"Transaction {transaction_id} deleted successfully.")


# Incident reports
@router.get("/incidents", response_model=List[IncidentOut])
def list_incidents(db: Session = Depends(get_db)):
    return FinancialService(db).list_incidents()


@router.post("/incidents", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
def create_incident(incident_data: IncidentCreate, db: Session = Depends(get_db)):
    incident = FinancialService(db).create_incident(incident_data)
    return CreatedResponse(
        id=incident.id, message=f"Incident report ID {incident.id} filed successfully."
    )


@router.put("/incidents/{incident_id}", response_model=MessageResponse)
def update_incident(
    incident_id: int, incident_data: IncidentUpdate, db: Session = Depends(get_db)
):
    FinancialService(db).update_incident(incident_id, incident_data)
    return MessageResponse(message=f"Incident report {incident_id} updated successfully.")


@router.delete("/incidents/{incident_id}", response_model=MessageResponse)
def delete_incident(incident_id: int, db: Session = Depends(get_db)):
    FinancialService(db).delete_incident(incident_id)
    return MessageResponse(message=f"Incident report {incident_id} deleted successfully.")
