"""
Verify Email Use Case

Handles email verification via single-use token.
"""

import logging
from datetime import datetime
from typing import Callable

from account_recovery.core.result import Error, Result, Return
from account_recovery.app.services.token_generator import hash_token
from account_recovery.app.services.unit_of_work import StoreError, UnitOfWork
from account_recovery.domain.base import utcnow
from account_recovery.domain.entities import AuditEvent
from .dtos import VerifyEmailResponse

logger = logging.getLogger(__name__)


class VerifyEmailUseCase:
    """
    Use case for email verification.

    Business Rules:
    - Token must be unused and unexpired (24 hours from issue)
    - Sets email_verified = True and stamps email_verified_at
    - Token is claimed in the same transaction (single-use)
    - Records audit event
    """

    def __init__(self, uow: UnitOfWork, clock: Callable[[], datetime] = utcnow):
        self.uow = uow
        self.clock = clock

    async def execute(self, token: str) -> Result[VerifyEmailResponse]:
        """
        Execute email verification use case.

        Args:
            token: Verification token from email link

        Returns:
            Result with verification status and user id, or Error

        Errors:
            - INVALID_TOKEN: Token not found, already used, or claimed concurrently
            - TOKEN_EXPIRED: Token has expired (>24 hours)
            - USER_NOT_FOUND: Token owner no longer exists
            - TRANSACTION_FAILED: Store failure, nothing was changed
        """
        try:
            async with self.uow:
                verification_token = await self.uow.verification_tokens.get_unused_by_token_hash(
                    hash_token(token)
                )

                if verification_token is None:
                    return Return.err(
                        Error("INVALID_TOKEN", "Invalid or expired verification token")
                    )

                now = self.clock()
                if verification_token.is_expired(now):
                    return Return.err(
                        Error(
                            "TOKEN_EXPIRED",
                            "Verification token has expired. Please request a new verification email.",
                        )
                    )

                user = await self.uow.users.get_by_id(verification_token.user_id)
                if user is None:
                    return Return.err(Error("USER_NOT_FOUND", "User not found"))

                claimed = await self.uow.verification_tokens.claim(verification_token.id, now)
                if not claimed:
                    return Return.err(
                        Error("INVALID_TOKEN", "Invalid or expired verification token")
                    )

                user.email_verified = True
                if user.email_verified_at is None:
                    user.email_verified_at = now
                user.updated_at = now
                await self.uow.users.update(user)

                audit = AuditEvent(
                    user_id=user.id,
                    action="email_verified",
                    event_metadata={"token_id": str(verification_token.id)},
                )
                await self.uow.audit_events.create(audit)

                verified_user_id = str(user.id)

                await self.uow.commit()
        except StoreError as e:
            logger.error(f"Email verification rolled back: {e}")
            return Return.err(Error("TRANSACTION_FAILED", "Email could not be verified"))

        return Return.ok(
            VerifyEmailResponse(
                status="verified",
                message="Email successfully verified",
                user_id=verified_user_id,
            )
        )
