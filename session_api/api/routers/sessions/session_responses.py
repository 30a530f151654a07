"""
Session response mapping utilities.

Transforms ORM models into Pydantic response models.

Dependencies: session_api.models.session
System role: Session response transformation
"""

from typing import Iterable

from session_api.boundary.db.models.session_model import SessionModel
from session_api.models.session import SessionResponse


def map_session_to_response(session: SessionModel) -> SessionResponse:
    """
    Transform a SessionModel into SessionResponse.

    Args:
        session: Loaded ORM instance

    Returns:
        SessionResponse: Pydantic model for API response
    """
    return SessionResponse.model_validate(session)


def map_sessions_to_response(sessions: Iterable[SessionModel]) -> list[SessionResponse]:
    """
    Transform SessionModels into a list of SessionResponse.

    Args:
        sessions: Loaded ORM instances

    Returns:
        list[SessionResponse]: List of Pydantic models for API response
    """
    return [map_session_to_response(session) for session in sessions]
