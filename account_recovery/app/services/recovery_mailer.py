"""
Recovery Mailer

Renders password reset and verification emails and hands them to the
email delivery collaborator. Never touches the store.
"""

import logging
from typing import Optional
from urllib.parse import urlencode

from account_recovery.app.services.email_sender import (
    EmailDeliveryError,
    EmailMessage,
    IEmailSender,
)

logger = logging.getLogger(__name__)


class RecoveryMailer:
    def __init__(self, sender: IEmailSender, frontend_url: str):
        self.sender = sender
        self.frontend_url = frontend_url.rstrip("/")

    def build_link(self, path: str, token: str) -> str:
        return f"{self.frontend_url}/{path}?{urlencode({'token': token})}"

    async def send_verification_email(
        self, email: str, token: str, display_name: Optional[str] = None
    ) -> bool:
        link = self.build_link("verify-email", token)
        message = EmailMessage(
            recipient=email,
            subject="Verify your email address",
            text_body=(
                f"Hi {display_name or 'there'},\n\n"
                f"Please confirm your email address by opening the link below:\n\n"
                f"{link}\n\n"
                "This link expires in 24 hours."
            ),
        )
        return await self._deliver(message, "verification")

    async def send_password_reset_email(
        self, email: str, token: str, display_name: Optional[str] = None
    ) -> bool:
        link = self.build_link("reset-password", token)
        message = EmailMessage(
            recipient=email,
            subject="Reset your password",
            text_body=(
                f"Hi {display_name or 'there'},\n\n"
                f"We received a request to reset your password. Open the link below to choose a new one:\n\n"
                f"{link}\n\n"
                "This link expires in 1 hour. If you did not request a reset, you can ignore this email."
            ),
        )
        return await self._deliver(message, "password reset")

    async def _deliver(self, message: EmailMessage, kind: str) -> bool:
        try:
            delivered = await self.sender.deliver(message)
        except EmailDeliveryError as e:
            logger.warning(f"Failed to deliver {kind} email: {e}")
            return False
        except Exception:
            logger.exception(f"Email transport failed while sending {kind} email")
            return False

        if not delivered:
            logger.warning(f"Email provider did not accept {kind} email")
        return delivered
