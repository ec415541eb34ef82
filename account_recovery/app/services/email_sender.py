from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel


class EmailMessage(BaseModel):
    """Outbound message handed to the delivery collaborator"""

    recipient: str
    subject: str
    text_body: str
    html_body: Optional[str] = None


class EmailDeliveryError(Exception):
    """Raised by an email sender when the provider rejects or fails the delivery"""


class IEmailSender(ABC):
    """Email delivery interface - application layer"""

    @abstractmethod
    async def deliver(self, message: EmailMessage) -> bool:
        """Deliver a message. Returns True if the provider accepted it."""
        pass
