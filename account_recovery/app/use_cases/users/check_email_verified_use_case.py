"""
Check Email Verified Use Case

Pure read used by access-control checks elsewhere.
"""

import logging
from uuid import UUID

from pydantic import BaseModel

from account_recovery.core.result import Error, Result, Return
from account_recovery.app.services.unit_of_work import StoreError, UnitOfWork

logger = logging.getLogger(__name__)


class EmailVerifiedResponse(BaseModel):
    """Response DTO for CheckEmailVerifiedUseCase"""

    user_id: str
    email_verified: bool


class CheckEmailVerifiedUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[EmailVerifiedResponse]:
        """Unknown users read back as not verified."""
        try:
            async with self.uow:
                user = await self.uow.users.get_by_id(user_id)
                return Return.ok(
                    EmailVerifiedResponse(
                        user_id=str(user_id),
                        email_verified=user is not None and user.email_verified is True,
                    )
                )
        except StoreError as e:
            logger.error(f"Email verified lookup failed: {e}")
            return Return.err(Error("TRANSACTION_FAILED", "Verification status unavailable"))
