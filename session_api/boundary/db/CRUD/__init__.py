"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from session_api.boundary.db.CRUD import session_crud

    session = await session_crud.get_by_id(db, session_id)
"""

from session_api.boundary.db.CRUD.base_crud import BaseCRUD
from session_api.boundary.db.CRUD.session_crud import SessionCRUD, session_crud

__all__ = [
    "BaseCRUD",
    "SessionCRUD",
    "session_crud",
]
