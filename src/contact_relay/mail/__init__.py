"""
Outbound mail transport.
"""

from contact_relay.mail.interfaces import MailMessage, MailSender, SendResult
from contact_relay.mail.mock_sender import MockMailSender
from contact_relay.mail.smtp_sender import SMTPMailSender

__all__ = [
    "MailMessage",
    "MailSender",
    "MockMailSender",
    "SMTPMailSender",
    "SendResult",
]
