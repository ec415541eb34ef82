"""
User Entity

Account whose credential and email ownership this service recovers and verifies.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow


class User(SQLModel, table=True):
    """
    User entity - an account that can reset its password and verify its email.

    Business Rules:
    - Email is unique and compared case-insensitively
    - Password stored as bcrypt hash only, never in plaintext
    - email_verified only ever moves from False to True here
    - Created by registration, never deleted by this service
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    display_name: Optional[str] = Field(default=None, max_length=255)

    email_verified: bool = Field(default=False)
    email_verified_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_email_verified", "email_verified"),)
