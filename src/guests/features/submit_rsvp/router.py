from fastapi import APIRouter, Depends, Form

from src.email_service import get_email_service
from src.guests.features.submit_rsvp.dtos import (
    ATTENDING_FIELD,
    EMAIL_FIELD,
    FULL_NAME_FIELD,
    GUEST_COUNT_FIELD,
    MESSAGE_FIELD,
    SubmitRSVPResponse,
)
from src.guests.features.submit_rsvp.handler import RSVPSubmissionHandler
from src.guests.repository.write_models import SqlGuestWriteModel
from src.guests.urls import SUBMIT_RSVP_URL

router = APIRouter()


def get_rsvp_submission_handler() -> RSVPSubmissionHandler:
    """Dependency to get the RSVP submission handler."""
    return RSVPSubmissionHandler(
        guest_write_model=SqlGuestWriteModel(),
        email_service=get_email_service(),
    )


@router.post(SUBMIT_RSVP_URL, response_model=SubmitRSVPResponse)
async def submit_rsvp(
    full_name: str | None = Form(None, alias=FULL_NAME_FIELD),
    email: str | None = Form(None, alias=EMAIL_FIELD),
    guest_count: str | None = Form(None, alias=GUEST_COUNT_FIELD),
    attending: str | None = Form(None, alias=ATTENDING_FIELD),
    message: str | None = Form(None, alias=MESSAGE_FIELD),
    handler: RSVPSubmissionHandler = Depends(get_rsvp_submission_handler),
) -> SubmitRSVPResponse:
    """
    Submit the public RSVP form.

    Always answers 200; `success` tells whether the RSVP was stored and
    `message` is meant to be shown to the guest.
    """
    return await handler.submit(
        {
            FULL_NAME_FIELD: full_name,
            EMAIL_FIELD: email,
            GUEST_COUNT_FIELD: guest_count,
            ATTENDING_FIELD: attending,
            MESSAGE_FIELD: message,
        }
    )
