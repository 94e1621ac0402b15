"""
Contact form relay: sanitise, compose, send, redirect.
"""

from contact_relay.contact.handler import HandlerOutcome, OutcomeStatus, SubmissionHandler
from contact_relay.contact.models import Submission, compose_body, parse_body

__all__ = [
    "HandlerOutcome",
    "OutcomeStatus",
    "Submission",
    "SubmissionHandler",
    "compose_body",
    "parse_body",
]
