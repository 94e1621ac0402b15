"""
FastAPI router for the contact form endpoint.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from contact_relay.config import ContactFormConfig, get_settings
from contact_relay.contact.handler import OutcomeStatus, SubmissionHandler
from contact_relay.mail.factory import get_mail_sender
from contact_relay.mail.interfaces import MailSender
from contact_relay.shared.exceptions import NotSubmittedError

router = APIRouter(tags=["contact"])


def get_contact_config() -> ContactFormConfig:
    return ContactFormConfig.from_settings(get_settings())


def get_submission_handler(
    config: Annotated[ContactFormConfig, Depends(get_contact_config)],
    mail_sender: Annotated[MailSender, Depends(get_mail_sender)],
) -> SubmissionHandler:
    return SubmissionHandler(config=config, mail_sender=mail_sender)


@router.post("/mailer", status_code=status.HTTP_303_SEE_OTHER)
async def submit_contact_form(
    request: Request,
    handler: Annotated[SubmissionHandler, Depends(get_submission_handler)],
) -> RedirectResponse:
    form = await request.form()
    outcome = await handler.handle(form)

    if outcome.status == OutcomeStatus.NOT_SUBMITTED or outcome.redirect_to is None:
        raise NotSubmittedError()

    return RedirectResponse(url=outcome.redirect_to, status_code=status.HTTP_303_SEE_OTHER)
