"""API-specific dependencies."""

from .dependencies import get_session_service

__all__ = ["get_session_service"]
