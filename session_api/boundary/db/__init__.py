"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, IntegerIDMixin, TimestampMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Async connection management
  - SessionModel: Session entity
  - session_crud: CRUD operation singleton

Dependencies: sqlalchemy, session_api.configs
System role: Database adapter providing persistent storage for sessions
"""

from session_api.boundary.db.base import Base, IntegerIDMixin, TimestampMixin
from session_api.boundary.db.connection import (
    dispose_engine,
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from session_api.boundary.db.models.session_model import SessionModel
from session_api.boundary.db.CRUD import BaseCRUD, SessionCRUD, session_crud

__all__ = [
    # Base classes
    "Base",
    "IntegerIDMixin",
    "TimestampMixin",
    # Connection
    "dispose_engine",
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    # Models
    "SessionModel",
    # CRUD
    "BaseCRUD",
    "SessionCRUD",
    "session_crud",
]
