"""
Confirm Password Reset Use Case

Redeems a reset token: replaces the credential, spends the token and
invalidates every session of the user in one transaction.
"""

import logging
from datetime import datetime
from typing import Callable

import bcrypt

from account_recovery.core.result import Error, Result, Return
from account_recovery.app.services.session_invalidator import SessionInvalidator
from account_recovery.app.services.token_generator import hash_token
from account_recovery.app.services.unit_of_work import StoreError, UnitOfWork
from account_recovery.domain.base import utcnow
from account_recovery.domain.entities import AuditEvent
from .dtos import ConfirmPasswordResetResponse

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8
# bcrypt only accepts up to 72 bytes of input
MAX_PASSWORD_BYTES = 72


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token is looked up by SHA-256 hash among unused tokens only
    - Expiry is re-checked here, not trusted from an earlier probe
    - New password must be at least 8 characters and at most 72 bytes (UTF-8)
    - Password is hashed with bcrypt (cost factor 12)
    - Token is claimed with a conditional update; a concurrent loser gets INVALID_TOKEN
    - All user sessions are invalidated in the same transaction
    - Any store failure rolls back every step
    """

    def __init__(
        self,
        uow: UnitOfWork,
        clock: Callable[[], datetime] = utcnow,
        bcrypt_rounds: int = 12,
    ):
        self.uow = uow
        self.clock = clock
        self.bcrypt_rounds = bcrypt_rounds

    def _validate_password(self, password: str) -> Result[None]:
        """
        Validate password against the minimum policy.

        Args:
            password: Password to validate

        Returns:
            Result with None if valid, or Error if invalid
        """
        if len(password) < MIN_PASSWORD_LENGTH:
            return Return.err(
                Error(
                    "WEAK_PASSWORD",
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
                )
            )

        if len(password.encode()) > MAX_PASSWORD_BYTES:
            return Return.err(
                Error(
                    "WEAK_PASSWORD",
                    f"Password must be at most {MAX_PASSWORD_BYTES} bytes long",
                )
            )

        return Return.ok(None)

    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (plain text from email)
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error

        Errors:
            - INVALID_TOKEN: Token not found, already used, or claimed concurrently
            - TOKEN_EXPIRED: Token has expired
            - WEAK_PASSWORD: Password does not meet the minimum policy
            - USER_NOT_FOUND: Token owner no longer exists
            - TRANSACTION_FAILED: Store failure, nothing was changed
        """
        try:
            async with self.uow:
                reset_token = await self.uow.reset_tokens.get_unused_by_token_hash(
                    hash_token(token)
                )

                if reset_token is None:
                    return Return.err(
                        Error("INVALID_TOKEN", "Invalid or expired password reset token")
                    )

                now = self.clock()
                if reset_token.is_expired(now):
                    return Return.err(Error("TOKEN_EXPIRED", "Password reset token has expired"))

                password_validation = self._validate_password(new_password)
                if password_validation.is_err():
                    return Return.err(password_validation.error)

                user = await self.uow.users.get_by_id(reset_token.user_id)
                if user is None:
                    return Return.err(Error("USER_NOT_FOUND", "User not found"))

                password_hash = bcrypt.hashpw(
                    new_password.encode(), bcrypt.gensalt(self.bcrypt_rounds)
                )

                claimed = await self.uow.reset_tokens.claim(reset_token.id, now)
                if not claimed:
                    return Return.err(
                        Error("INVALID_TOKEN", "Invalid or expired password reset token")
                    )

                user.password_hash = password_hash.decode()
                user.updated_at = now
                await self.uow.users.update(user)

                invalidated = await SessionInvalidator(self.uow).invalidate_all_sessions(
                    user.id, now
                )

                audit_event = AuditEvent(
                    user_id=user.id,
                    action="password_reset_confirmed",
                    event_metadata={
                        "token_id": str(reset_token.id),
                        "sessions_invalidated": invalidated,
                    },
                )
                await self.uow.audit_events.create(audit_event)

                await self.uow.commit()
        except StoreError as e:
            logger.error(f"Password reset rolled back: {e}")
            return Return.err(Error("TRANSACTION_FAILED", "Password could not be reset"))

        return Return.ok(
            ConfirmPasswordResetResponse(
                status="success",
                message="Password has been reset successfully",
            )
        )
