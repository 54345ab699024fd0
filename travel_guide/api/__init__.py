"""HTTP API for the travel guide."""
from .routes import router

__all__ = ["router"]
