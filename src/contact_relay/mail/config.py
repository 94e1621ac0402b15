"""
Mail transport configuration.
"""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderType(str, Enum):
    """Supported mail sender types."""

    SMTP = "smtp"
    MOCK = "mock"


class MailConfig(BaseSettings):
    """Mail transport configuration from environment."""

    model_config = SettingsConfigDict(
        env_prefix="MAIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    provider_type: ProviderType = Field(default=ProviderType.SMTP)

    # SMTP settings
    smtp_host: str = Field(default="localhost")
    smtp_port: int = Field(default=587, ge=1, le=65535)
    smtp_username: str | None = Field(default=None)
    smtp_password: str | None = Field(default=None)
    smtp_use_tls: bool = Field(default=True)
    smtp_timeout_seconds: float = Field(default=30.0, gt=0, le=300)

    # Envelope sender; the visitor's address only ever goes into Reply-To.
    from_email: str = Field(default="noreply@example.com")
    from_name: str = Field(default="Contact Form")

    @property
    def default_from(self) -> str:
        if self.from_name:
            return f"{self.from_name} <{self.from_email}>"
        return self.from_email


def get_mail_config() -> MailConfig:
    return MailConfig()
