from datetime import datetime
from uuid import UUID

from sqlmodel import update
from sqlmodel.ext.asyncio.session import AsyncSession

from account_recovery.app.repositories.session_repository import ISessionRepository
from account_recovery.domain.entities import Session


class SessionRepository(ISessionRepository):
    """Session repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def invalidate_all_by_user_id(self, user_id: UUID, invalidated_at: datetime) -> int:
        """Invalidate all active sessions for a user"""
        stmt = (
            update(Session)
            .where(Session.user_id == user_id, Session.invalidated == False)
            .values(invalidated=True, invalidated_at=invalidated_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
