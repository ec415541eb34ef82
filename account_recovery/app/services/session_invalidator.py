from datetime import datetime
from uuid import UUID

from account_recovery.app.services.unit_of_work import UnitOfWork


class SessionInvalidator:
    """
    Invalidates every session of a user.

    Operates on an already entered UnitOfWork so the invalidation commits
    (or rolls back) together with the credential change that triggered it.
    Idempotent: a second call finds nothing left to invalidate.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def invalidate_all_sessions(self, user_id: UUID, now: datetime) -> int:
        return await self.uow.sessions.invalidate_all_by_user_id(user_id, now)
