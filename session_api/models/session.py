"""
Session domain models and schemas.

Response schema for session operations. Request bodies are accepted as
raw JSON and filtered by the datastore layer.

Dependencies: pydantic
System role: Session API contracts
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class SessionResponse(BaseModel):
    """Response schema for session operations."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None = None
    info: str | None = None
    active: bool | None = None
    created_at: datetime
    updated_at: datetime
