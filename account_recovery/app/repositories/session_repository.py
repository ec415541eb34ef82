from abc import ABC, abstractmethod
from datetime import datetime
from uuid import UUID


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def invalidate_all_by_user_id(self, user_id: UUID, invalidated_at: datetime) -> int:
        """Invalidate every session of a user. Returns count of newly invalidated sessions."""
        pass
