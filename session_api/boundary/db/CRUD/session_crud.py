"""
Session CRUD operations.

Provides Create, Read, Update, Delete operations for SessionModel.

Dependencies: sqlalchemy, session_api.boundary.db.models
System role: Session persistence operations
"""

from session_api.boundary.db.models.session_model import SessionModel
from session_api.boundary.db.CRUD.base_crud import BaseCRUD


class SessionCRUD(BaseCRUD[SessionModel]):
    """CRUD operations for SessionModel."""

    def __init__(self) -> None:
        """Initialize SessionCRUD with SessionModel."""
        super().__init__(SessionModel)


session_crud = SessionCRUD()
