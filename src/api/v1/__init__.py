from src.api.v1.endpoints import router

__all__ = ["router"]
