from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4

from contact_relay.mail.interfaces import MailMessage, MailSender, SendResult
from contact_relay.shared.logging import get_logger, mask_email

logger = get_logger(__name__)


@dataclass
class MockMailSender(MailSender):
    """
    In-memory sender for local development and tests.
    Never touches a mail server; every message lands in `outbox`.
    """

    fail_with: str | None = None
    healthy: bool = True
    outbox: list[MailMessage] = field(default_factory=list)

    async def send(self, message: MailMessage) -> SendResult:
        self.outbox.append(message)
        if self.fail_with is not None:
            return SendResult(success=False, error_message=self.fail_with)

        message_id = f"<mock-{uuid4()}@localhost>"
        logger.info(
            "Mock mail recorded",
            extra={"to": mask_email(message.to_email), "message_id": message_id},
        )
        return SendResult(success=True, provider_message_id=message_id)

    async def health_check(self) -> bool:
        return self.healthy
