"""
Dependency injection container.

Factory functions for FastAPI dependencies.

Dependencies: session_api.application, session_api.boundary
System role: DI container for service injection
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from session_api.boundary.db import get_async_db
from session_api.application.services import SessionService


def get_session_service(db: AsyncSession = Depends(get_async_db)) -> SessionService:
    """
    Get session service instance.

    Args:
        db: Async database session (injected via Depends)

    Returns:
        SessionService: Session service instance
    """
    return SessionService(db=db)
