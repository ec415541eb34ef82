"""
Send Verification Email Use Case

Builds the verification link and delegates delivery. Does not touch the store.
"""

from typing import Optional

from account_recovery.core.result import Result, Return
from account_recovery.app.services.recovery_mailer import RecoveryMailer
from .dtos import SendVerificationEmailResponse


class SendVerificationEmailUseCase:
    def __init__(self, mailer: RecoveryMailer):
        self.mailer = mailer

    async def execute(
        self, email: str, token: str, display_name: Optional[str] = None
    ) -> Result[SendVerificationEmailResponse]:
        delivered = await self.mailer.send_verification_email(email, token, display_name)

        if not delivered:
            return Return.ok(
                SendVerificationEmailResponse(
                    success=False, message="Verification email could not be sent"
                )
            )

        return Return.ok(
            SendVerificationEmailResponse(success=True, message="Verification email sent")
        )
