"""
Session ORM model.

Represents a Session record exposed through the /session resource.
The API treats it as an opaque field mapping keyed by integer id.

Dependencies: sqlalchemy, session_api.boundary.db.base
System role: Session persistence
"""

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from session_api.boundary.db.base import Base, IntegerIDMixin, TimestampMixin


class SessionModel(Base, IntegerIDMixin, TimestampMixin):
    """
    Session ORM model.

    Attributes:
        id: Integer primary key (auto-generated)
        name: Display name
        info: Free-form description
        active: Whether the session is active
        created_at: Creation timestamp (UTC)
        updated_at: Last modification timestamp (UTC)
    """

    __tablename__ = "sessions"

    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
        default=None,
    )
    info: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        default=None,
    )
    active: Mapped[bool | None] = mapped_column(
        Boolean,
        nullable=True,
        default=True,
    )

    def __repr__(self) -> str:
        return f"<SessionModel id={self.id} name={self.name!r}>"
