"""
Tests for mail sender factory and the in-memory sender.
"""

import pytest

from contact_relay.mail.config import MailConfig, ProviderType
from contact_relay.mail.factory import _mask, create_mail_sender
from contact_relay.mail.interfaces import MailMessage
from contact_relay.mail.mock_sender import MockMailSender
from contact_relay.mail.smtp_sender import SMTPMailSender
from contact_relay.shared.exceptions import ConfigurationError


class TestCreateMailSender:
    def test_smtp_provider(self) -> None:
        sender = create_mail_sender(MailConfig(provider_type=ProviderType.SMTP, smtp_host="smtp.example.com"))

        assert isinstance(sender, SMTPMailSender)

    def test_mock_provider(self) -> None:
        sender = create_mail_sender(MailConfig(provider_type=ProviderType.MOCK))

        assert isinstance(sender, MockMailSender)

    def test_smtp_without_host_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            create_mail_sender(MailConfig(provider_type=ProviderType.SMTP, smtp_host=""))

    def test_password_masked(self) -> None:
        assert _mask("secret-password") == "se***"
        assert _mask("ab") == "**"
        assert _mask(None) == ""


class TestMockMailSender:
    @pytest.mark.asyncio
    async def test_records_message(self) -> None:
        sender = MockMailSender()
        message = MailMessage(to_email="a@example.com", subject="S", body_text="B")

        result = await sender.send(message)

        assert result.success is True
        assert result.provider_message_id.startswith("<mock-")
        assert sender.outbox == [message]

    @pytest.mark.asyncio
    async def test_configured_failure(self) -> None:
        sender = MockMailSender(fail_with="mailbox full")

        result = await sender.send(MailMessage(to_email="a@example.com", subject="S", body_text="B"))

        assert result.success is False
        assert result.error_message == "mailbox full"

    @pytest.mark.asyncio
    async def test_health_check(self) -> None:
        assert await MockMailSender().health_check() is True
        assert await MockMailSender(healthy=False).health_check() is False
