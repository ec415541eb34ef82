import logging

from account_recovery.app.services.email_sender import EmailMessage, IEmailSender

logger = logging.getLogger(__name__)


class LoggingEmailSender(IEmailSender):
    """
    Development email sender - logs messages instead of sending them.

    Production deployments plug a provider-backed IEmailSender in its place.
    """

    def __init__(self, from_email: str, from_name: str):
        self.from_email = from_email
        self.from_name = from_name

    async def deliver(self, message: EmailMessage) -> bool:
        logger.info("EMAIL (development mode - not sent)")
        logger.info(f"From: {self.from_name} <{self.from_email}>")
        logger.info(f"To: {message.recipient}")
        logger.info(f"Subject: {message.subject}")
        logger.debug(message.text_body)
        return True
