"""
Contact form submission model and plain-text body codec.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from contact_relay.config import InvalidEmailPolicy
from contact_relay.contact.sanitize import sanitize_text, validate_email
from contact_relay.shared.exceptions import InvalidEmailError

# Form field names as posted by the site's contact form.
FIELD_SUBMIT = "submit"
FIELD_NAME = "Name"
FIELD_EMAIL = "Email"
FIELD_MESSAGE = "Message"

# A present flag counts as submitted, even with an empty value, unless it
# explicitly says otherwise.
FALSE_VALUES = {"0", "false", "off", "no"}

BODY_TEMPLATE = "From: {name}\n\nE-Mail: {email}\n\nMessage:\n\n{message}"

BODY_PATTERN = re.compile(
    r"From: (?P<name>[^\n]*)\n\nE-Mail: (?P<email>[^\n]*)\n\nMessage:\n\n(?P<message>.*)\Z",
    re.DOTALL,
)


def is_submitted(form: Mapping[str, Any]) -> bool:
    """True when the form carries a submit flag that is not explicitly false."""
    if FIELD_SUBMIT not in form:
        return False
    value = form[FIELD_SUBMIT]
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_VALUES
    return bool(value)


@dataclass(frozen=True)
class Submission:
    """Sanitised name/email/message triple from one form post."""

    name: str
    email: str | None
    message: str

    @classmethod
    def from_form(
        cls,
        form: Mapping[str, Any],
        *,
        policy: InvalidEmailPolicy = "blank",
    ) -> Submission:
        """Build a submission from raw form data.

        Raises:
            InvalidEmailError: policy is "reject" and the address is invalid.
        """
        email = validate_email(form.get(FIELD_EMAIL))
        if email is None and policy == "reject":
            raise InvalidEmailError()

        return cls(
            name=sanitize_text(form.get(FIELD_NAME), single_line=True),
            email=email,
            message=sanitize_text(form.get(FIELD_MESSAGE)),
        )


def compose_body(submission: Submission) -> str:
    return BODY_TEMPLATE.format(
        name=submission.name,
        email=submission.email or "",
        message=submission.message,
    )


def parse_body(body: str) -> Submission:
    """Recover the submission embedded in a body produced by compose_body.

    Raises:
        ValueError: body does not have the From/E-Mail/Message layout.
    """
    match = BODY_PATTERN.match(body)
    if match is None:
        raise ValueError("Not a contact form body")
    return Submission(
        name=match["name"],
        email=match["email"] or None,
        message=match["message"],
    )
