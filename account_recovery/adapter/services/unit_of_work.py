from sqlalchemy.exc import SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from account_recovery.adapter.repositories.audit_event_repository import AuditEventRepository
from account_recovery.adapter.repositories.recovery_token_repository import RecoveryTokenRepository
from account_recovery.adapter.repositories.session_repository import SessionRepository
from account_recovery.adapter.repositories.user_repository import UserRepository
from account_recovery.app.services.unit_of_work import StoreError, UnitOfWork
from account_recovery.domain.entities import TokenPurpose


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.reset_tokens = RecoveryTokenRepository(self.session, TokenPurpose.password_reset)
        self.verification_tokens = RecoveryTokenRepository(
            self.session, TokenPurpose.email_verification
        )
        self.audit_events = AuditEventRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.rollback()
        if isinstance(exc, SQLAlchemyError):
            raise StoreError(str(exc)) from exc
        return False

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
