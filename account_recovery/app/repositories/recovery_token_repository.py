from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from account_recovery.domain.entities import RecoveryToken, TokenPurpose


class IRecoveryTokenRepository(ABC):
    """
    RecoveryToken repository interface - application layer

    Each instance is bound to a single TokenPurpose; every query is scoped to it.
    """

    purpose: TokenPurpose

    @abstractmethod
    async def create(self, token: RecoveryToken) -> RecoveryToken:
        """Create a new token"""
        pass

    @abstractmethod
    async def get_unused_by_token_hash(self, token_hash: str) -> Optional[RecoveryToken]:
        """Get a token that has not been used yet by its hash (expiry is not checked)"""
        pass

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[RecoveryToken]:
        """Get all tokens issued to a user, newest first"""
        pass

    @abstractmethod
    async def claim(self, token_id: UUID, used_at: datetime) -> bool:
        """
        Mark a token as used only if it is still unused.

        Returns True if this call flipped the flag, False if another
        transaction already did.
        """
        pass

    @abstractmethod
    async def invalidate_unused_by_user_id(self, user_id: UUID) -> int:
        """Mark all unused tokens of a user as used. Returns count."""
        pass

    @abstractmethod
    async def delete_expired_before(self, cutoff: datetime) -> int:
        """Delete tokens that expired before cutoff. Returns count."""
        pass
