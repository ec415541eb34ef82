from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from account_recovery.app.repositories.recovery_token_repository import IRecoveryTokenRepository
from account_recovery.domain.entities import RecoveryToken, TokenPurpose


class RecoveryTokenRepository(IRecoveryTokenRepository):
    """RecoveryToken repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession, purpose: TokenPurpose):
        self.session = session
        self.purpose = purpose

    async def create(self, token: RecoveryToken) -> RecoveryToken:
        """Create a new token"""
        token.purpose = self.purpose
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def get_unused_by_token_hash(self, token_hash: str) -> Optional[RecoveryToken]:
        """Get a token that has not been used yet by its hash"""
        stmt = select(RecoveryToken).where(
            RecoveryToken.purpose == self.purpose,
            RecoveryToken.token_hash == token_hash,
            RecoveryToken.used == False,
        )
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_user_id(self, user_id: UUID) -> List[RecoveryToken]:
        """Get all tokens issued to a user, newest first"""
        stmt = (
            select(RecoveryToken)
            .where(RecoveryToken.purpose == self.purpose, RecoveryToken.user_id == user_id)
            .order_by(RecoveryToken.created_at.desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def claim(self, token_id: UUID, used_at: datetime) -> bool:
        """Mark a token as used only if it is still unused"""
        stmt = (
            update(RecoveryToken)
            .where(
                RecoveryToken.id == token_id,
                RecoveryToken.purpose == self.purpose,
                RecoveryToken.used == False,
            )
            .values(used=True, used_at=used_at)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1

    async def invalidate_unused_by_user_id(self, user_id: UUID) -> int:
        """Mark all unused tokens of a user as used"""
        stmt = (
            update(RecoveryToken)
            .where(
                RecoveryToken.user_id == user_id,
                RecoveryToken.purpose == self.purpose,
                RecoveryToken.used == False,
            )
            .values(used=True)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_expired_before(self, cutoff: datetime) -> int:
        """Delete tokens that expired before cutoff"""
        stmt = delete(RecoveryToken).where(
            RecoveryToken.purpose == self.purpose,
            RecoveryToken.expires_at < cutoff,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
