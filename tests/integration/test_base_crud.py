"""
Test suite for BaseCRUD generic database operations.

Verifies call sequencing against a mocked AsyncSession: flush before
refresh, upsert insert/update branching, and delete flushing.

System role: Verification of generic database layer foundation
"""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from session_api.boundary.db.CRUD.base_crud import BaseCRUD
from session_api.boundary.db.models.session_model import SessionModel


@pytest.fixture
def base_crud() -> BaseCRUD:
    """Provide BaseCRUD instance for testing."""
    return BaseCRUD(SessionModel)


@pytest.fixture
def mock_session() -> AsyncSession:
    """Provide mock async database session."""
    session = AsyncMock(spec=AsyncSession)
    session.add = MagicMock()
    return session


def _result_returning(value: Any) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none = MagicMock(return_value=value)
    return result


class TestBaseCRUDCreate:
    """Test suite for BaseCRUD.create() method."""

    async def test_create_should_flush_before_refresh(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test flush is called before refresh to ensure ID generation."""
        # Arrange
        call_order = []

        async def flush_effect() -> None:
            call_order.append("flush")

        async def refresh_effect(obj: Any) -> None:
            call_order.append("refresh")

        mock_session.flush = AsyncMock(side_effect=flush_effect)
        mock_session.refresh = AsyncMock(side_effect=refresh_effect)

        # Act
        instance = await base_crud.create(mock_session, name="s1", unknown="x")

        # Assert
        assert call_order == ["flush", "refresh"]
        mock_session.add.assert_called_once_with(instance)
        assert instance.name == "s1"


class TestBaseCRUDUpsert:
    """Test suite for BaseCRUD.upsert() method."""

    async def test_upsert_should_add_new_instance_when_missing(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test upsert inserts with the requested id when nothing is stored."""
        # Arrange
        mock_session.execute = AsyncMock(return_value=_result_returning(None))

        # Act
        instance, created = await base_crud.upsert(mock_session, 11, name="s1")

        # Assert
        assert created is True
        assert instance.id == 11
        mock_session.add.assert_called_once_with(instance)

    async def test_upsert_should_update_loaded_instance(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test upsert mutates the existing row instead of adding one."""
        # Arrange
        existing = SessionModel(id=11, name="old")
        mock_session.execute = AsyncMock(return_value=_result_returning(existing))

        # Act
        instance, created = await base_crud.upsert(mock_session, 11, name="new", id=99)

        # Assert
        assert created is False
        assert instance is existing
        assert instance.name == "new"
        assert instance.id == 11
        mock_session.add.assert_not_called()
        mock_session.flush.assert_awaited_once()


class TestBaseCRUDDelete:
    """Test suite for BaseCRUD.delete() method."""

    async def test_delete_should_delete_and_flush(
        self, base_crud: BaseCRUD, mock_session: AsyncSession
    ) -> None:
        """Test delete issues session.delete followed by flush."""
        instance = SessionModel(id=3)

        await base_crud.delete(mock_session, instance)

        mock_session.delete.assert_awaited_once_with(instance)
        mock_session.flush.assert_awaited_once()
