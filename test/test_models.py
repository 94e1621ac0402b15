"""
Tests for the submission model and body composition.
"""

import pytest

from contact_relay.contact.models import Submission, compose_body, is_submitted, parse_body
from contact_relay.shared.exceptions import InvalidEmailError


class TestIsSubmitted:
    @pytest.mark.parametrize("value", ["Send", "1", "true", "on", "Submit Message", "", "  "])
    def test_truthy_flag(self, value: str) -> None:
        assert is_submitted({"submit": value}) is True

    @pytest.mark.parametrize("value", ["0", "false", "OFF", "no", " No "])
    def test_falsy_flag(self, value: str) -> None:
        assert is_submitted({"submit": value}) is False

    def test_missing_flag(self) -> None:
        assert is_submitted({"Name": "Jane"}) is False


class TestSubmissionFromForm:
    def test_fields_sanitised(self) -> None:
        submission = Submission.from_form(
            {
                "Name": "  <b>Jane</b> Doe ",
                "Email": "jane@example.com",
                "Message": "<p>Hi</p>\r\nThanks",
            }
        )

        assert submission == Submission(name="Jane Doe", email="jane@example.com", message="Hi\nThanks")

    def test_missing_fields_read_as_empty(self) -> None:
        submission = Submission.from_form({"submit": "1"})

        assert submission.name == ""
        assert submission.email is None
        assert submission.message == ""

    def test_invalid_email_blanked_by_default(self) -> None:
        submission = Submission.from_form({"Name": "Jane", "Email": "not-an-email", "Message": "Hi"})

        assert submission.email is None
        assert submission.name == "Jane"

    def test_invalid_email_rejected_under_reject_policy(self) -> None:
        with pytest.raises(InvalidEmailError) as exc_info:
            Submission.from_form({"Email": "not-an-email"}, policy="reject")

        assert exc_info.value.code == "INVALID_EMAIL"


class TestComposeBody:
    def test_fields_in_fixed_order(self) -> None:
        body = compose_body(Submission(name="Jane", email="jane@example.com", message="Hello"))

        assert body == "From: Jane\n\nE-Mail: jane@example.com\n\nMessage:\n\nHello"

    def test_missing_email_leaves_block_empty(self) -> None:
        body = compose_body(Submission(name="Jane", email=None, message="Hello"))

        assert "E-Mail: \n\n" in body

    def test_parse_recovers_message_with_special_characters(self) -> None:
        raw = 'Line one\n\nE-Mail: fake@example.com\n"quoted" and \'single\'\n\nMessage:\n\nend'
        submission = Submission.from_form(
            {"Name": "O'Brien \"Jo\"", "Email": "jo@example.com", "Message": raw}
        )

        parsed = parse_body(compose_body(submission))

        assert parsed == submission
        assert parsed.message == raw

    def test_parse_rejects_foreign_body(self) -> None:
        with pytest.raises(ValueError):
            parse_body("Hello, this is not a contact form body")
