"""
Mail sender factory.

Single source of truth for configuration: MailConfig (Pydantic Settings),
loaded from OS env + .env. Never read raw os.getenv("MAIL_*") here.
"""

from __future__ import annotations

from functools import lru_cache

from contact_relay.mail.config import MailConfig, ProviderType, get_mail_config
from contact_relay.mail.interfaces import MailSender
from contact_relay.mail.mock_sender import MockMailSender
from contact_relay.mail.smtp_sender import SMTPMailSender
from contact_relay.shared.exceptions import ConfigurationError
from contact_relay.shared.logging import get_logger

logger = get_logger(__name__)


def _mask(s: str | None, keep: int = 2) -> str:
    if not s:
        return ""
    if len(s) <= keep:
        return "*" * len(s)
    return f"{s[:keep]}***"


def create_mail_sender(cfg: MailConfig) -> MailSender:
    """Build the sender selected by cfg.provider_type."""
    logger.info(
        "Mail config resolved",
        extra={
            "provider_type": cfg.provider_type.value,
            "smtp_host": cfg.smtp_host,
            "smtp_port": cfg.smtp_port,
            "smtp_username": cfg.smtp_username,
            "smtp_password": _mask(cfg.smtp_password),
            "smtp_use_tls": cfg.smtp_use_tls,
            "from_email": cfg.from_email,
        },
    )

    if cfg.provider_type == ProviderType.SMTP:
        if not cfg.smtp_host:
            raise ConfigurationError("MAIL_SMTP_HOST is required for the smtp provider")
        return SMTPMailSender(cfg)

    if cfg.provider_type == ProviderType.MOCK:
        return MockMailSender()

    raise ConfigurationError(f"Unsupported mail provider_type: {cfg.provider_type}")


@lru_cache(maxsize=1)
def get_mail_sender() -> MailSender:
    """Create and cache the mail sender for this process."""
    return create_mail_sender(get_mail_config())
