"""Financial schemas module"""

from .financial_schemas import (
    IncidentCreate,
    IncidentOut,
    IncidentUpdate,
    TransactionCreate,
    TransactionOut,
    TransactionUpdate,
)

__all__ = [
    "IncidentCreate",
    "IncidentOut",
    "IncidentUpdate",
    "TransactionCreate",
    "TransactionOut",
    "TransactionUpdate",
]
