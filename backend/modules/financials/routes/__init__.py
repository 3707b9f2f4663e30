from .financial_routes import router

__all__ = ["router"]
