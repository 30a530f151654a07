"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Update, Delete operations that can be
inherited and extended by model-specific CRUD classes.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from session_api.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Provides standard database operations that work with any SQLAlchemy model.
    Only writable columns are forwarded from caller data; unknown keys and
    protected columns (id, timestamps) are dropped.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    def writable_values(self, data: dict[str, Any]) -> dict[str, Any]:
        """
        Filter caller data down to the model's writable columns.

        Args:
            data: Arbitrary field mapping

        Returns:
            dict: Only keys the model accepts from clients
        """
        allowed = self.model.writable_fields()
        return {key: value for key, value in data.items() if key in allowed}

    async def get_all(self, session: AsyncSession) -> Sequence[ModelT]:
        """
        Retrieve all records ordered by primary key.

        Args:
            session: Async database session

        Returns:
            Sequence of model instances (empty if none)
        """
        stmt = select(self.model).order_by(self.model.id)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def get_by_id(self, session: AsyncSession, id: Any) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Async database session
            id: Primary key value

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, session: AsyncSession, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Async database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**self.writable_values(kwargs))
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def upsert(
        self,
        session: AsyncSession,
        id: Any,
        **kwargs,
    ) -> tuple[ModelT, bool]:
        """
        Insert a record with the given primary key or update the existing one.

        Args:
            session: Async database session
            id: Primary key the record is addressed by
            **kwargs: Field values to write

        Returns:
            tuple: (model instance, True if a new row was inserted)
        """
        values = self.writable_values(kwargs)
        instance = await self.get_by_id(session, id)
        created = instance is None
        if created:
            instance = self.model(id=id, **values)
            session.add(instance)
        else:
            for key, value in values.items():
                setattr(instance, key, value)
        await session.flush()
        await session.refresh(instance)
        return instance, created

    async def save(self, session: AsyncSession, instance: ModelT) -> ModelT:
        """
        Flush pending changes on an already loaded instance.

        Args:
            session: Async database session
            instance: Mutated model instance

        Returns:
            The refreshed instance
        """
        session.add(instance)
        await session.flush()
        await session.refresh(instance)
        return instance

    async def delete(self, session: AsyncSession, instance: ModelT) -> None:
        """
        Delete a loaded instance.

        Args:
            session: Async database session
            instance: Model instance to remove
        """
        await session.delete(instance)
        await session.flush()

    async def exists(self, session: AsyncSession, id: Any) -> bool:
        """
        Check if a record exists by primary key.

        Args:
            session: Async database session
            id: Primary key value

        Returns:
            True if record exists, False otherwise
        """
        stmt = select(self.model.id).where(self.model.id == id)
        result = await session.execute(stmt)
        return result.scalar_one_or_none() is not None
