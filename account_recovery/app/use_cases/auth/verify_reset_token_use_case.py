"""
Verify Reset Token Use Case

Read-only probe so a client can tell a dead link apart before asking
for a new password. Never consumes the token.
"""

import logging
from datetime import datetime
from typing import Callable

from account_recovery.core.result import Error, Result, Return
from account_recovery.app.services.token_generator import hash_token
from account_recovery.app.services.unit_of_work import StoreError, UnitOfWork
from account_recovery.domain.base import utcnow
from .dtos import VerifyResetTokenResponse

logger = logging.getLogger(__name__)


class VerifyResetTokenUseCase:
    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str) -> Result[VerifyResetTokenResponse]:
        """
        Returns valid=True with the owning user id, or valid=False with
        reason INVALID_TOKEN (unknown or used) / TOKEN_EXPIRED.
        """
        try:
            async with self.uow:
                reset_token = await self.uow.reset_tokens.get_unused_by_token_hash(
                    hash_token(token)
                )

                if reset_token is None:
                    return Return.ok(
                        VerifyResetTokenResponse(
                            valid=False, reason="INVALID_TOKEN", error="Invalid reset token"
                        )
                    )

                if reset_token.is_expired(self.clock()):
                    return Return.ok(
                        VerifyResetTokenResponse(
                            valid=False, reason="TOKEN_EXPIRED", error="Reset token expired"
                        )
                    )

                return Return.ok(
                    VerifyResetTokenResponse(valid=True, user_id=str(reset_token.user_id))
                )
        except StoreError as e:
            logger.error(f"Reset token lookup failed: {e}")
            return Return.err(Error("TRANSACTION_FAILED", "Reset token could not be checked"))
