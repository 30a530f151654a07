"""Pydantic API schemas."""

from session_api.models.session import SessionResponse

__all__ = ["SessionResponse"]
