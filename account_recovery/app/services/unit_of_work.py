from abc import ABC, abstractmethod

from account_recovery.app.repositories.audit_event_repository import IAuditEventRepository
from account_recovery.app.repositories.recovery_token_repository import IRecoveryTokenRepository
from account_recovery.app.repositories.session_repository import ISessionRepository
from account_recovery.app.repositories.user_repository import IUserRepository


class StoreError(Exception):
    """Raised when the store fails inside a unit of work; the work was rolled back"""


class UnitOfWork(ABC):
    """
    Abstract UnitOfWork - defines repository access and transaction management

    Effects become durable only through commit(). Leaving the block without
    commit (return, exception, cancellation) rolls everything back.
    """

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    sessions: ISessionRepository
    reset_tokens: IRecoveryTokenRepository
    verification_tokens: IRecoveryTokenRepository
    audit_events: IAuditEventRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
