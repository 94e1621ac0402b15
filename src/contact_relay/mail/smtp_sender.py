"""
SMTP mail sender implementation.
"""

import asyncio
import smtplib
import ssl
from email.message import EmailMessage
from email.utils import formatdate, make_msgid

from contact_relay.mail.config import MailConfig
from contact_relay.mail.interfaces import MailMessage, MailSender, SendResult
from contact_relay.shared.logging import get_logger, mask_email

logger = get_logger(__name__)


class SMTPMailSender(MailSender):
    """
    SMTP-based mail sender.

    Supports STARTTLS and authentication. The blocking smtplib session runs
    in the default thread pool so the event loop keeps serving requests.
    """

    def __init__(self, config: MailConfig):
        self._config = config

    async def send(self, message: MailMessage) -> SendResult:
        try:
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(None, self._send_sync, message)
        except Exception as e:
            logger.exception(
                "Unexpected error sending mail",
                extra={"to": mask_email(message.to_email)},
            )
            return SendResult(success=False, error_message=str(e))

    def _build_message(self, message: MailMessage) -> EmailMessage:
        msg = EmailMessage()
        msg["Subject"] = message.subject
        msg["From"] = message.from_email or self._config.default_from
        msg["To"] = message.to_email
        msg["Date"] = formatdate(localtime=True)
        msg["Message-ID"] = make_msgid(domain=self._config.smtp_host)

        if message.reply_to:
            msg["Reply-To"] = message.reply_to

        for header_name, header_value in message.headers.items():
            msg[header_name] = header_value

        msg.set_content(message.body_text, subtype="plain", charset="utf-8")
        return msg

    def _send_sync(self, message: MailMessage) -> SendResult:
        msg = self._build_message(message)
        message_id = msg["Message-ID"]
        cfg = self._config

        try:
            with smtplib.SMTP(cfg.smtp_host, cfg.smtp_port, timeout=cfg.smtp_timeout_seconds) as server:
                if cfg.smtp_use_tls:
                    server.starttls(context=ssl.create_default_context())
                if cfg.smtp_username and cfg.smtp_password:
                    server.login(cfg.smtp_username, cfg.smtp_password)
                server.send_message(msg)
        except (smtplib.SMTPException, OSError) as e:
            logger.error(
                "SMTP error sending mail",
                extra={"to": mask_email(message.to_email), "error": str(e)},
            )
            return SendResult(success=False, error_message=f"SMTP error: {e}")

        logger.info(
            "Mail sent",
            extra={"to": mask_email(message.to_email), "message_id": message_id},
        )
        return SendResult(success=True, provider_message_id=message_id)

    async def health_check(self) -> bool:
        try:
            loop = asyncio.get_running_loop()
            return await loop.run_in_executor(None, self._health_check_sync)
        except Exception as e:
            logger.warning("SMTP health check failed", extra={"error": str(e)})
            return False

    def _health_check_sync(self) -> bool:
        cfg = self._config
        try:
            with smtplib.SMTP(cfg.smtp_host, cfg.smtp_port, timeout=cfg.smtp_timeout_seconds) as server:
                server.noop()
            return True
        except (smtplib.SMTPException, OSError):
            return False
