"""
Input sanitising for contact form fields.

Form fields are free text, never HTML: markup is removed rather than
escaped, because the relayed body is plain text.
"""

import re
from typing import Any

from email_validator import EmailNotValidError
from email_validator import validate_email as _validate_address

# A comment, or a tag: "<" directly followed by a name, "/", "!" or "?".
# "a < b", "x > y" and "I <3 it" are plain text and stay.
TAG_PATTERN = re.compile(r"<!--.*?-->|<[A-Za-z/!?][^<>]*>", re.DOTALL)

# C0 and C1 control characters except tab (\x09) and newline (\x0a).
CONTROL_PATTERN = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")

WHITESPACE_PATTERN = re.compile(r"\s+")


def strip_tags(text: str) -> str:
    """Remove tags until none are left, so split tags cannot reassemble."""
    while True:
        stripped = TAG_PATTERN.sub("", text)
        if stripped == text:
            return stripped
        text = stripped


def sanitize_text(value: Any, *, single_line: bool = False) -> str:
    """Neutralise a free-text form field for plain-text embedding.

    Args:
        value: Raw form value. Non-string values (e.g. file uploads) read as "".
        single_line: Collapse all whitespace runs, newlines included, to one space.

    Returns:
        The cleaned text with surrounding whitespace stripped.
    """
    if not isinstance(value, str):
        return ""

    text = value.replace("\r\n", "\n").replace("\r", "\n")
    text = CONTROL_PATTERN.sub("", text)
    text = strip_tags(text)

    if single_line:
        text = WHITESPACE_PATTERN.sub(" ", text)

    return text.strip()


def validate_email(value: Any) -> str | None:
    """Return the normalised address, or None when it is not a valid email.

    Syntax only: no DNS or deliverability lookups. Internationalised
    (SMTPUTF8) local parts are refused: the address ends up in Reply-To,
    which a non-SMTPUTF8 relay cannot carry.
    """
    if not isinstance(value, str):
        return None

    candidate = value.strip()
    if not candidate or CONTROL_PATTERN.search(candidate) or "\n" in candidate:
        return None

    try:
        validated = _validate_address(
            candidate,
            allow_smtputf8=False,
            check_deliverability=False,
        )
    except EmailNotValidError:
        return None
    # Punycode domain, so the address is header-safe without SMTPUTF8.
    return validated.ascii_email or validated.normalized
