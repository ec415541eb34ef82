"""
Resend Verification Email Use Case

Issues a fresh verification token for an unverified address.
"""

import logging
from typing import Optional

from account_recovery.core.result import Error, Result, Return
from account_recovery.app.services.recovery_mailer import RecoveryMailer
from account_recovery.app.services.token_generator import TokenGenerator, hash_token
from account_recovery.app.services.unit_of_work import StoreError, UnitOfWork
from account_recovery.domain.entities import AuditEvent, RecoveryToken, TokenPurpose
from .dtos import ResendVerificationResponse

logger = logging.getLogger(__name__)

VERIFICATION_SENT = ResendVerificationResponse(
    status="sent",
    message="If the email exists, a verification link has been sent",
)


class ResendVerificationUseCase:
    """
    Use case for resending email verification.

    Business Rules:
    - Only users whose email is still unverified get a new token
    - Unknown and already verified emails perform no writes
    - Same response object in every branch (no enumeration)
    - Previous unused verification tokens are invalidated
    - New token expires 24 hours from now
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

    async def execute(self, email: str) -> Result[ResendVerificationResponse]:
        """
        Execute resend verification email use case.

        Args:
            email: User's email address

        Returns:
            Result with the generic VERIFICATION_SENT response, or Error

        Errors:
            - TRANSACTION_FAILED: Store failure, nothing was written
        """
        recipient = None
        try:
            async with self.uow:
                user = await self.uow.users.get_unverified_by_email(email)

                if user is None:
                    return Return.ok(VERIFICATION_SENT)

                invalidated = await self.uow.verification_tokens.invalidate_unused_by_user_id(
                    user.id
                )

                generated = self.token_generator.generate(TokenPurpose.email_verification)
                verification_token = RecoveryToken(
                    user_id=user.id,
                    purpose=TokenPurpose.email_verification,
                    token_hash=hash_token(generated.token),
                    expires_at=generated.expires_at,
                )
                await self.uow.verification_tokens.create(verification_token)

                audit = AuditEvent(
                    user_id=user.id,
                    action="verification_resent",
                    event_metadata={
                        "token_id": str(verification_token.id),
                        "tokens_invalidated": invalidated,
                    },
                )
                await self.uow.audit_events.create(audit)

                recipient = (user.email, user.display_name, generated.token)

                await self.uow.commit()
        except StoreError as e:
            logger.error(f"Verification resend rolled back: {e}")
            return Return.err(
                Error("TRANSACTION_FAILED", "Verification email could not be resent")
            )

        if self.mailer is not None:
            email_address, display_name, token = recipient
            await self.mailer.send_verification_email(email_address, token, display_name)

        return Return.ok(VERIFICATION_SENT)
