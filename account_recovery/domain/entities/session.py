"""
Session Entity

Logged-in client context, invalidated in bulk after a password reset.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class Session(SQLModel, table=True):
    """
    Session entity - created and destroyed by authentication.

    Business Rules:
    - This service only ever sets invalidated = True, in bulk per user
    - After a password reset every session of the user is invalidated
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    invalidated: bool = Field(default=False)
    invalidated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_session_user_invalidated", "user_id", "invalidated"),)
