"""API adapter for HTTP endpoints."""

from .app import create_app
from .models import ErrorResponse, HealthResponse, LookupResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LookupResponse",
    "create_app",
]
