"""
Session service orchestrator.

Implements the six Session resource operations (index, show, create,
upsert, patch, destroy) on top of SessionCRUD. Each write runs in its own
commit/rollback unit so a failed request leaves no partial changes.

Dependencies: session_api.boundary.db.CRUD, session_api.application.json_patch
System role: Session use case orchestration
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from session_api.application.json_patch import apply_patch, strip_identity_operations
from session_api.boundary.db.CRUD.session_crud import session_crud
from session_api.boundary.db.models.session_model import SessionModel
from session_api.core.exceptions import SessionNotFoundError
from session_api.models.session import SessionResponse

logger = logging.getLogger(__name__)


def _require_mapping(body: Any) -> dict[str, Any]:
    if not isinstance(body, dict):
        raise TypeError(
            f"Request body must be a JSON object, got {type(body).__name__}"
        )
    return body


class SessionService:
    """Session service orchestrator."""

    def __init__(self, db: AsyncSession) -> None:
        """
        Initialize session service with async database session.

        Args:
            db: Async SQLAlchemy session
        """
        self.db = db

    @asynccontextmanager
    async def _unit_of_work(self) -> AsyncIterator[None]:
        """Commit on success, roll back and re-raise on any failure."""
        try:
            yield
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    async def _get_or_raise(self, session_id: int) -> SessionModel:
        # Ids outside the column range cannot exist; drivers reject them outright
        if not SessionModel.is_storable_id(session_id):
            raise SessionNotFoundError(session_id)
        session = await session_crud.get_by_id(self.db, session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    async def index(self) -> Sequence[SessionModel]:
        """
        Get all sessions.

        Returns:
            Sequence[SessionModel]: Every stored session, possibly empty
        """
        return await session_crud.get_all(self.db)

    async def show(self, session_id: int) -> SessionModel:
        """
        Get session by ID.

        Args:
            session_id: Session id

        Returns:
            SessionModel: The stored session

        Raises:
            SessionNotFoundError: If session not found
        """
        return await self._get_or_raise(session_id)

    async def create(self, body: Any) -> SessionModel:
        """
        Create a session from a request body.

        Args:
            body: Field mapping; unknown and protected keys are ignored

        Returns:
            SessionModel: Created session with its assigned id

        Raises:
            TypeError: If body is not a mapping
            SQLAlchemyError: If the insert fails
        """
        data = _require_mapping(body)
        async with self._unit_of_work():
            session = await session_crud.create(self.db, **data)

        logger.info("Session created", extra={"session_id": session.id})
        return session

    async def upsert(self, session_id: int, body: Any) -> SessionModel:
        """
        Insert or update the session stored under session_id.

        Any id in the body is discarded; the path id always wins.

        Args:
            session_id: Session id from the URL
            body: Field mapping to write

        Returns:
            SessionModel: The inserted or updated session
        """
        data = dict(_require_mapping(body))
        data.pop("id", None)

        async with self._unit_of_work():
            session, created = await session_crud.upsert(self.db, session_id, **data)

        logger.info(
            "Session upserted",
            extra={"session_id": session.id, "inserted": created},
        )
        return session

    async def patch(self, session_id: int, operations: Any) -> SessionModel:
        """
        Apply a JSON-Patch document to a stored session and persist it.

        The patch is applied to a JSON copy of the session first; the entity
        is only touched and saved once every operation has succeeded.

        Args:
            session_id: Session id
            operations: RFC 6902 operation list

        Returns:
            SessionModel: The saved session

        Raises:
            SessionNotFoundError: If session not found (nothing is saved)
            PatchError: If the patch is invalid (nothing is saved)
        """
        operations = strip_identity_operations(operations)
        session = await self._get_or_raise(session_id)

        document = SessionResponse.model_validate(session).model_dump(mode="json")
        patched = apply_patch(document, operations)

        async with self._unit_of_work():
            for field in SessionModel.writable_fields():
                setattr(session, field, patched.get(field))
            session = await session_crud.save(self.db, session)

        logger.info(
            "Session patched",
            extra={"session_id": session.id, "operation_count": len(operations)},
        )
        return session

    async def destroy(self, session_id: int) -> None:
        """
        Delete session by ID.

        Args:
            session_id: Session id

        Raises:
            SessionNotFoundError: If session not found (nothing is deleted)
        """
        session = await self._get_or_raise(session_id)
        async with self._unit_of_work():
            await session_crud.delete(self.db, session)

        logger.info("Session deleted", extra={"session_id": session_id})
