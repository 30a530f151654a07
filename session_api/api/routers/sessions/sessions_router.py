"""
Session API endpoints.

Routes:
- GET /session - List all sessions
- POST /session - Create new session
- GET /session/{id} - Get single session
- PUT /session/{id} - Upsert session at id
- PATCH /session/{id} - Apply JSON-Patch to session
- DELETE /session/{id} - Delete session

Dependencies: session_api.application.services, session_api.models
System role: Session resource HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response, status

from session_api.application.services.session_service import SessionService
from session_api.api.deps.dependencies import get_session_service
from session_api.models.session import SessionResponse

from .session_error_handling import handle_session_errors
from .session_responses import map_session_to_response, map_sessions_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/session", tags=["session"])


@router.get("", response_model=list[SessionResponse])
@handle_session_errors
async def index(
    session_service: SessionService = Depends(get_session_service),
) -> list[SessionResponse]:
    """
    List all sessions.

    Returns:
        list[SessionResponse]: Every session, empty list if none

    Raises:
        500: Retrieval failed
    """
    sessions = await session_service.index()
    logger.info("Sessions retrieved", extra={"count": len(sessions)})
    return map_sessions_to_response(sessions)


@router.post("", response_model=SessionResponse, status_code=status.HTTP_201_CREATED)
@handle_session_errors
async def create(
    body: Any = Body(...),
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """
    Create new session from the request body.

    Args:
        body: Session fields (unknown keys are ignored)
        session_service: Injected SessionService

    Returns:
        SessionResponse: Created session

    Raises:
        500: Creation failed
    """
    session = await session_service.create(body)
    return map_session_to_response(session)


@router.get("/{session_id}", response_model=SessionResponse)
@handle_session_errors
async def show(
    session_id: int,
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """
    Get single session by ID.

    Raises:
        422: session_id is not an integer (rejected by path validation)
        404: Session not found (empty body)
        500: Retrieval failed
    """
    session = await session_service.show(session_id)
    return map_session_to_response(session)


@router.put("/{session_id}", response_model=SessionResponse)
@handle_session_errors
async def upsert(
    session_id: int,
    body: Any = Body(...),
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """
    Insert or update the session at the given ID.

    Any id in the body is ignored in favour of the path id.

    Returns:
        SessionResponse: The stored session

    Raises:
        422: session_id is not an integer (rejected by path validation)
        500: Upsert failed
    """
    session = await session_service.upsert(session_id, body)
    return map_session_to_response(session)


@router.patch("/{session_id}", response_model=SessionResponse)
@handle_session_errors
async def patch(
    session_id: int,
    body: Any = Body(...),
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """
    Apply a JSON-Patch document to a session.

    Args:
        session_id: Session id
        body: RFC 6902 operation list
        session_service: Injected SessionService

    Returns:
        SessionResponse: Patched session

    Raises:
        422: session_id is not an integer (rejected by path validation)
        404: Session not found (empty body, nothing saved)
        500: Invalid patch or save failed (nothing saved)
    """
    session = await session_service.patch(session_id, body)
    return map_session_to_response(session)


@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
@handle_session_errors
async def destroy(
    session_id: int,
    session_service: SessionService = Depends(get_session_service),
) -> Response:
    """
    Delete session by ID.

    Raises:
        422: session_id is not an integer (rejected by path validation)
        404: Session not found (empty body)
        500: Deletion failed
    """
    await session_service.destroy(session_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
