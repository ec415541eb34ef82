"""
Request Password Reset Use Case

Issues a password reset token and hands it to the mailer.
"""

import logging
from typing import Optional

from account_recovery.core.result import Error, Result, Return
from account_recovery.app.services.recovery_mailer import RecoveryMailer
from account_recovery.app.services.token_generator import TokenGenerator, hash_token
from account_recovery.app.services.unit_of_work import StoreError, UnitOfWork
from account_recovery.domain.entities import AuditEvent, RecoveryToken, TokenPurpose
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)

RESET_REQUESTED = RequestPasswordResetResponse(
    status="sent",
    message="If the email exists, a password reset link has been sent",
)


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - No email enumeration: same response object for known and unknown emails
    - Unknown email performs no writes
    - Previously issued unused reset tokens are invalidated before a new one is stored
    - Token is 256 bits of randomness, stored only as its SHA-256 hash
    - Token expires in 1 hour
    - Plain token goes to the mailer, never back to the caller
    """

    def __init__(
        self,
        uow: UnitOfWork,
        mailer: Optional[RecoveryMailer] = None,
        token_generator: Optional[TokenGenerator] = None,
    ):
        self.uow = uow
        self.mailer = mailer
        self.token_generator = token_generator or TokenGenerator()

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: Email address as typed by the user (not pre-validated)

        Returns:
            Result with the generic RESET_REQUESTED response, or Error

        Errors:
            - TRANSACTION_FAILED: Store failure, nothing was written
        """
        recipient = None
        try:
            async with self.uow:
                user = await self.uow.users.get_by_email(email, for_update=True)

                if user is None:
                    return Return.ok(RESET_REQUESTED)

                invalidated = await self.uow.reset_tokens.invalidate_unused_by_user_id(user.id)

                generated = self.token_generator.generate(TokenPurpose.password_reset)
                reset_token = RecoveryToken(
                    user_id=user.id,
                    purpose=TokenPurpose.password_reset,
                    token_hash=hash_token(generated.token),
                    expires_at=generated.expires_at,
                )
                await self.uow.reset_tokens.create(reset_token)

                audit_event = AuditEvent(
                    user_id=user.id,
                    action="password_reset_requested",
                    event_metadata={
                        "token_id": str(reset_token.id),
                        "tokens_invalidated": invalidated,
                    },
                )
                await self.uow.audit_events.create(audit_event)

                recipient = (user.email, user.display_name, generated.token)

                await self.uow.commit()
        except StoreError as e:
            logger.error(f"Password reset request rolled back: {e}")
            return Return.err(
                Error("TRANSACTION_FAILED", "Password reset request could not be processed")
            )

        if self.mailer is not None:
            email_address, display_name, token = recipient
            await self.mailer.send_password_reset_email(email_address, token, display_name)

        return Return.ok(RESET_REQUESTED)
