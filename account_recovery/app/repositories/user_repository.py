from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from account_recovery.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str, for_update: bool = False) -> Optional[User]:
        """Get user by email address (case-insensitive)"""
        pass

    @abstractmethod
    async def get_unverified_by_email(self, email: str) -> Optional[User]:
        """Get user by email address only while email_verified is False (row locked)"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass
