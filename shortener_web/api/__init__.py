"""JSON API for URL shortener."""

from .routes import router as api_router
from .errors import register_exception_handlers

__all__ = ["api_router", "register_exception_handlers"]
