from fintrack.api.router import router

__all__ = ["router"]
