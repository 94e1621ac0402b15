"""
Contact form submission handler.

Turns one form post into at most one outbound mail and a redirect target.
Recipient, subject and redirect targets come from ContactFormConfig only,
never from the request.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from contact_relay.config import ContactFormConfig
from contact_relay.contact.models import Submission, compose_body, is_submitted
from contact_relay.mail.interfaces import MailMessage, MailSender, SendResult
from contact_relay.shared.logging import get_logger, mask_email

logger = get_logger(__name__)


class OutcomeStatus(str, Enum):
    """Result of handling one request."""

    SENT = "sent"
    DELIVERY_FAILED = "delivery_failed"
    NOT_SUBMITTED = "not_submitted"


@dataclass(frozen=True)
class HandlerOutcome:
    status: OutcomeStatus
    redirect_to: str | None = None
    submission: Submission | None = None
    send_result: SendResult | None = None


class SubmissionHandler:
    """Relays contact form submissions to the configured recipient."""

    def __init__(self, config: ContactFormConfig, mail_sender: MailSender) -> None:
        self._config = config
        self._mail_sender = mail_sender

    def build_message(self, submission: Submission) -> MailMessage:
        return MailMessage(
            to_email=self._config.recipient,
            subject=self._config.subject,
            body_text=compose_body(submission),
            reply_to=submission.email,
        )

    async def handle(self, form: Mapping[str, Any]) -> HandlerOutcome:
        """
        Handle one form post.

        Args:
            form: Raw form fields (submit, Name, Email, Message).

        Returns:
            HandlerOutcome describing what happened and where to redirect.

        Raises:
            InvalidEmailError: the reject policy is active and Email is invalid.
        """
        if not is_submitted(form):
            logger.info("Form post without submit flag; nothing sent")
            return HandlerOutcome(status=OutcomeStatus.NOT_SUBMITTED)

        submission = Submission.from_form(form, policy=self._config.invalid_email_policy)
        if submission.email is None:
            logger.info("Submission email invalid or missing; relaying with empty E-Mail block")

        message = self.build_message(submission)
        result = await self._send(message)

        if result.success:
            logger.info(
                "Submission relayed",
                extra={
                    "sender": mask_email(submission.email),
                    "message_id": result.provider_message_id,
                },
            )
            return HandlerOutcome(
                status=OutcomeStatus.SENT,
                redirect_to=self._config.confirmation_path,
                submission=submission,
                send_result=result,
            )

        logger.error(
            "Submission could not be delivered",
            extra={
                "sender": mask_email(submission.email),
                "error": result.error_message,
            },
        )
        return HandlerOutcome(
            status=OutcomeStatus.DELIVERY_FAILED,
            redirect_to=self._config.delivery_failure_path or self._config.confirmation_path,
            submission=submission,
            send_result=result,
        )

    async def _send(self, message: MailMessage) -> SendResult:
        try:
            return await self._mail_sender.send(message)
        except Exception as e:
            # Senders report failures via SendResult; a raising one is a bug there.
            logger.exception("Mail sender raised instead of returning a result")
            return SendResult(success=False, error_message=str(e))
