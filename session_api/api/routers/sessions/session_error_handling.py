"""
Session error handling utilities.

Provides a decorator for consistent error handling across session
API endpoints: missing sessions become a bare 404, everything else
a 500 carrying the serialized error.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, Response, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from session_api.core.exceptions import PatchError, SessionNotFoundError

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def serialize_error(error: Exception) -> dict[str, Any]:
    """
    Serialize an exception into a JSON-safe error payload.

    Args:
        error: Exception raised while handling the request

    Returns:
        dict: name and message, plus details for domain exceptions
    """
    payload: dict[str, Any] = {
        "name": type(error).__name__,
        "message": getattr(error, "message", None) or str(error),
    }
    details = getattr(error, "details", None)
    if isinstance(details, dict) and details:
        payload["details"] = jsonable_encoder(details)
    return payload


def error_response(error: Exception, status_code: int = 500) -> JSONResponse:
    """Build a JSON response carrying the serialized error."""
    return JSONResponse(status_code=status_code, content=serialize_error(error))


def handle_session_errors(func: F) -> F:
    """
    Decorator to handle session-related errors and turn them into responses.

    This centralizes:
    - Logging of errors with context (session_id)
    - Mapping SessionNotFoundError to an empty 404
    - Mapping patch and datastore failures to 500 with the error payload
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except SessionNotFoundError as e:
            logger.warning(
                "Session not found",
                extra={"session_id": str(e.session_id)}
            )
            return Response(status_code=status.HTTP_404_NOT_FOUND)

        except PatchError as e:
            logger.warning(
                "Patch rejected",
                extra={"session_id": str(kwargs.get("session_id")), "error": str(e)}
            )
            return error_response(e)

        except Exception as e:
            logger.exception(
                "Unexpected failure in session operation",
                extra={"session_id": str(kwargs.get("session_id")), "error": str(e)}
            )
            return error_response(e)

    return wrapper  # type: ignore
