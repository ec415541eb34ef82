"""
RecoveryToken Entity

Single-use tokens for password reset and email verification.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utcnow
from .enums import TokenPurpose


class RecoveryToken(SQLModel, table=True):
    """
    RecoveryToken entity - one row per issued reset or verification token.

    Business Rules:
    - Token is stored as SHA-256 hash of a 256-bit random value
    - Valid iff used is False and now < expires_at
    - used never goes back to False; used_at is set only on redemption
    - At most one valid token per user and purpose (prior ones invalidated on issue)
    - Rows are kept for audit; purging expired rows is optional housekeeping
    """

    __tablename__ = "recovery_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False)
    purpose: TokenPurpose = Field(nullable=False)
    token_hash: str = Field(max_length=64, unique=True)  # SHA-256 output

    used: bool = Field(default=False)
    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_recovery_token_expires_at", "expires_at"),
        Index("idx_recovery_token_user_purpose", "user_id", "purpose", "used"),
    )

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
