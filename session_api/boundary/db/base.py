"""
SQLAlchemy declarative base and common mixins.

Provides base class for all ORM models and reusable mixins
for common fields (integer identity, timestamps).

Dependencies: sqlalchemy
System role: Foundation for all database models
"""

from datetime import datetime, timezone
from typing import Any

from sqlalchemy import DateTime, Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """
    SQLAlchemy declarative base for ORM model registration.

    All database models inherit from this class to ensure they're
    registered with the metadata and included in table creation.
    """

    # Columns the API never accepts from a request body
    protected_fields = frozenset({"id", "created_at", "updated_at"})

    @classmethod
    def writable_fields(cls) -> list[str]:
        """
        List column names a client may set.

        Returns:
            list[str]: Mapped column keys minus the protected ones
        """
        return [
            column.key
            for column in cls.__table__.columns
            if column.key not in cls.protected_fields
        ]

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize mapped columns to a plain dict.

        Returns:
            dict: Column name to current attribute value
        """
        return {
            column.key: getattr(self, column.key)
            for column in self.__table__.columns
        }


class IntegerIDMixin:
    """
    Mixin providing an autoincrement integer primary key.

    Attributes:
        id: Server-assigned integer identity
    """

    # Range of a 32-bit INTEGER column
    ID_MIN = -(2**31)
    ID_MAX = 2**31 - 1

    @classmethod
    def is_storable_id(cls, value: int) -> bool:
        """Whether value fits the id column, i.e. could address a stored row."""
        return cls.ID_MIN <= value <= cls.ID_MAX

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )


class TimestampMixin:
    """
    Mixin providing automatic timestamp tracking to all models.

    created_at is set once on row creation and never changes.
    updated_at is refreshed on every update via onupdate hook.
    Both use UTC timezone for consistency across deployments.

    Attributes:
        created_at: Row creation timestamp (UTC, immutable)
        updated_at: Last modification timestamp (UTC, auto-updated)
    """

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
