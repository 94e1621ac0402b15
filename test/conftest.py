"""
Pytest configuration and fixtures.
"""

from __future__ import annotations

import os
from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from contact_relay.config import ContactFormConfig
from contact_relay.contact.handler import SubmissionHandler
from contact_relay.contact.router import get_contact_config
from contact_relay.mail.factory import get_mail_sender
from contact_relay.mail.mock_sender import MockMailSender
from contact_relay.main import create_app


@pytest.fixture(autouse=True)
def reset_env() -> Generator[None, None, None]:
    """Reset environment variables between tests."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def contact_config() -> ContactFormConfig:
    """Fake destination, never the deployment one."""
    return ContactFormConfig(
        recipient="inbox@test.example.com",
        subject="Test Site Contact",
        confirmation_path="/confirmation.htm",
    )


@pytest.fixture
def mock_sender() -> MockMailSender:
    return MockMailSender()


@pytest.fixture
def handler(contact_config: ContactFormConfig, mock_sender: MockMailSender) -> SubmissionHandler:
    return SubmissionHandler(config=contact_config, mail_sender=mock_sender)


@pytest.fixture
def valid_form() -> dict[str, str]:
    return {
        "submit": "Send",
        "Name": "Jane Doe",
        "Email": "jane@example.com",
        "Message": "Hello there,\nI'd like a quote.",
    }


@pytest.fixture
def app(contact_config: ContactFormConfig, mock_sender: MockMailSender) -> Generator[FastAPI, None, None]:
    """Application with the contact config and mail sender overridden."""
    application = create_app()
    application.dependency_overrides[get_contact_config] = lambda: contact_config
    application.dependency_overrides[get_mail_sender] = lambda: mock_sender
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, follow_redirects=False)
