"""
Application configuration with environment-driven settings.

The contact form constants (recipient, subject, confirmation page) are
deployment-time values: they are read once from the environment and handed
to the submission handler as an immutable ContactFormConfig.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

from pydantic import EmailStr, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

InvalidEmailPolicy = Literal["blank", "reject"]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "contact-relay"
    app_env: Literal["dev", "qa", "uat", "prod"] = "dev"
    debug: bool = False
    log_level: str = "INFO"

    # Contact form
    contact_recipient: EmailStr = Field(
        default="contact@example.com",
        description="Fixed destination address of every relayed submission",
    )
    contact_subject: str = Field(
        default="Website Contact",
        min_length=1,
        description="Fixed subject line of every relayed submission",
    )
    confirmation_path: str = Field(
        default="/confirmation.htm",
        description="Where the sender is redirected after a submission",
    )
    invalid_email_policy: InvalidEmailPolicy = Field(
        default="blank",
        description="blank: relay with an empty E-Mail block; reject: answer 422",
    )
    delivery_failure_path: str | None = Field(
        default=None,
        description="Redirect target when the mail transport fails (defaults to confirmation_path)",
    )

    # CORS
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )

    @field_validator("confirmation_path", "delivery_failure_path")
    @classmethod
    def validate_redirect_target(cls, v: str | None) -> str | None:
        """Redirect targets must be site paths or absolute http(s) URLs."""
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("redirect target must not be empty")
        if v.startswith("//"):
            raise ValueError(f"protocol-relative redirect target not allowed: {v!r}")
        if v.startswith(("/", "http://", "https://")):
            return v
        if "://" in v:
            raise ValueError(f"unsupported redirect target: {v!r}")
        # Bare file names such as "confirmation.htm" resolve from the site root.
        return f"/{v}"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@dataclass(frozen=True)
class ContactFormConfig:
    """Fixed destination of relayed submissions."""

    recipient: str
    subject: str
    confirmation_path: str
    invalid_email_policy: InvalidEmailPolicy = "blank"
    delivery_failure_path: str | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> ContactFormConfig:
        return cls(
            recipient=str(settings.contact_recipient),
            subject=settings.contact_subject,
            confirmation_path=settings.confirmation_path,
            invalid_email_policy=settings.invalid_email_policy,
            delivery_failure_path=settings.delivery_failure_path,
        )


@lru_cache(maxsize=1)
def _get_settings_cached() -> Settings:
    return Settings()


def get_settings() -> Settings:
    # Tests monkeypatch the environment between cases; never hand them a frozen copy.
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return Settings()
    return _get_settings_cached()
