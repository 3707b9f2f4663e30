from .financial_service import FinancialService

__all__ = ["FinancialService"]
