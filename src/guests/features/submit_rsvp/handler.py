"""Handler for the RSVP submission feature.

Validates the posted form, stores one guest row and sends a confirmation
email. The stored row is what makes a submission successful; the email is
best effort and its failures only reach the logs.
"""

import logging
import re
from collections.abc import Mapping

from src.email_service.base import EmailMessage, EmailServiceBase
from src.email_service.templates import (
    EmailTemplates,
    render_rsvp_email,
    render_rsvp_email_text,
)
from src.guests.dtos import NewGuestDTO
from src.guests.features.submit_rsvp.dtos import (
    ATTENDING_FIELD,
    ATTENDING_MESSAGE,
    DECLINING_MESSAGE,
    EMAIL_FIELD,
    EMAIL_REQUIRED_MESSAGE,
    FULL_NAME_FIELD,
    GUEST_COUNT_FIELD,
    MESSAGE_FIELD,
    NAME_REQUIRED_MESSAGE,
    SAVE_FAILED_MESSAGE,
    SubmitRSVPResponse,
)
from src.guests.repository.write_models import GuestWriteModel

logger = logging.getLogger(__name__)

DEFAULT_GUEST_COUNT = 1

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_guest_count(raw: str | None) -> int:
    """Read the leading integer of ``raw``; anything unusable counts as one guest."""
    if raw is None:
        return DEFAULT_GUEST_COUNT
    match = _LEADING_INT.match(raw)
    if match is None:
        return DEFAULT_GUEST_COUNT
    count = int(match.group(1))
    return count if count >= 1 else DEFAULT_GUEST_COUNT


def normalize_submission(fields: Mapping[str, str | None]) -> NewGuestDTO:
    """Build the guest row from already validated form fields."""
    message = fields.get(MESSAGE_FIELD)
    return NewGuestDTO(
        name=fields[FULL_NAME_FIELD].strip(),
        email=fields[EMAIL_FIELD].strip().lower(),
        guest_count=parse_guest_count(fields.get(GUEST_COUNT_FIELD)),
        attending=fields.get(ATTENDING_FIELD) == "yes",
        message=(message.strip() or None) if message is not None else None,
    )


def validate_submission(fields: Mapping[str, str | None]) -> str | None:
    """Return the message for the first missing required field, if any."""
    full_name = fields.get(FULL_NAME_FIELD)
    if not full_name or not full_name.strip():
        return NAME_REQUIRED_MESSAGE
    email = fields.get(EMAIL_FIELD)
    if not email or not email.strip():
        return EMAIL_REQUIRED_MESSAGE
    return None


class RSVPSubmissionHandler:
    def __init__(
        self,
        guest_write_model: GuestWriteModel,
        email_service: EmailServiceBase | None = None,
    ) -> None:
        self.guest_write_model = guest_write_model
        self.email_service = email_service

    async def submit(self, fields: Mapping[str, str | None]) -> SubmitRSVPResponse:
        """Process one RSVP form submission. Never raises."""
        try:
            return await self._submit(fields)
        except Exception:
            logger.exception("Unexpected error while submitting RSVP")
            return SubmitRSVPResponse(success=False, message=SAVE_FAILED_MESSAGE)

    async def _submit(self, fields: Mapping[str, str | None]) -> SubmitRSVPResponse:
        validation_error = validate_submission(fields)
        if validation_error:
            return SubmitRSVPResponse(success=False, message=validation_error)

        guest = normalize_submission(fields)

        result = await self.guest_write_model.insert_guest(guest)
        if not result.ok:
            logger.error(f"Failed to store RSVP for {guest.email}: {result.error}")
            return SubmitRSVPResponse(success=False, message=SAVE_FAILED_MESSAGE)

        logger.info(f"Stored RSVP {result.guest_id} (attending={guest.attending})")

        await self._send_confirmation(guest)

        return SubmitRSVPResponse(
            success=True,
            message=ATTENDING_MESSAGE if guest.attending else DECLINING_MESSAGE,
        )

    async def _send_confirmation(self, guest: NewGuestDTO) -> None:
        if self.email_service is None:
            return
        try:
            message = EmailMessage(
                to=guest.email,
                subject=EmailTemplates.get_confirmation_subject(guest.attending),
                html=render_rsvp_email(guest.name, guest.attending, guest.guest_count),
                text=render_rsvp_email_text(guest.name, guest.attending, guest.guest_count),
            )
            await self.email_service.send(message)
        except Exception:
            # The RSVP is already stored
            logger.exception(f"Failed to send RSVP confirmation to {guest.email}")
