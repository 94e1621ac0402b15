"""
Mail sender interface and data types.

The sender is the only collaborator that talks to a mail transport. Transport
failures are reported through SendResult, never raised.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone


@dataclass(frozen=True)
class MailMessage:
    """Plain-text email message to be sent."""

    to_email: str
    subject: str
    body_text: str
    from_email: str | None = None
    reply_to: str | None = None
    headers: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class SendResult:
    """Result of a send operation."""

    success: bool
    provider_message_id: str | None = None
    error_message: str | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class MailSender(ABC):
    """
    Abstract interface for mail senders.

    Implementations can use SMTP, an HTTP mail API, or an in-memory outbox.
    """

    @abstractmethod
    async def send(self, message: MailMessage) -> SendResult:
        """
        Send a mail message.

        Args:
            message: The message to send.

        Returns:
            SendResult with success status and provider details.
        """

    @abstractmethod
    async def health_check(self) -> bool:
        """
        Check if the mail transport is reachable.

        Returns:
            True if the transport is available, False otherwise.
        """
