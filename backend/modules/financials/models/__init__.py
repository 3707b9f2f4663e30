"""Financial models module"""

from .financial_models import (
    FinancialTransaction,
    IncidentReport,
    IncidentSeverity,
    PaymentStatus,
    TransactionType,
)

__all__ = [
    "FinancialTransaction",
    "IncidentReport",
    "IncidentSeverity",
    "PaymentStatus",
    "TransactionType",
]
