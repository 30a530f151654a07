"""
Database models package.

Exports:
  - SessionModel: Session ORM model

Dependencies: sqlalchemy, session_api.boundary.db.base
System role: Database model definitions for domain entities
"""

from session_api.boundary.db.models.session_model import SessionModel

__all__ = ["SessionModel"]
