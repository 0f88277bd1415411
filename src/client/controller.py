"""Client side of the RSVP form.

The controller owns the form state for one visitor and walks it through
IDLE -> SUBMITTING -> SUCCEEDED | FAILED for each submission. Only one
submission can be in flight; a second ``submit()`` while SUBMITTING is ignored.
"""

import asyncio
import logging

from src.client.form_state import (
    FORM_FIELD_NAMES,
    ConfirmationSummary,
    FormState,
    SubmissionStatus,
)
from src.client.submitter import RSVPSubmitter
from src.guests.features.submit_rsvp.dtos import (
    ATTENDING_FIELD,
    EMAIL_FIELD,
    FULL_NAME_FIELD,
    GUEST_COUNT_FIELD,
    MESSAGE_FIELD,
)

logger = logging.getLogger(__name__)

CONFETTI_SECONDS = 4.0
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


class RSVPFormController:
    def __init__(
        self,
        submitter: RSVPSubmitter,
        confetti_seconds: float = CONFETTI_SECONDS,
    ) -> None:
        self.state = FormState()
        self._submitter = submitter
        self._confetti_seconds = confetti_seconds
        self._confetti_timer: asyncio.TimerHandle | None = None

    def update_field(self, name: str, value: str) -> None:
        if name not in FORM_FIELD_NAMES:
            raise ValueError(f"Unknown RSVP form field: {name}")
        setattr(self.state, name, value)

    def form_fields(self) -> dict[str, str]:
        """The five fields as the submission handler expects them."""
        return {
            FULL_NAME_FIELD: self.state.name,
            EMAIL_FIELD: self.state.email,
            GUEST_COUNT_FIELD: self.state.guests,
            ATTENDING_FIELD: self.state.attending,
            MESSAGE_FIELD: self.state.message,
        }

    async def submit(self) -> bool:
        """Submit the form once.

        Returns False without doing anything when a submission is already in
        flight, True otherwise (whatever the outcome).
        """
        if self.state.is_submitting:
            return False

        self._clear_confetti()
        self.state.status = SubmissionStatus.SUBMITTING
        self.state.error = None

        try:
            result = await self._submitter(self.form_fields())
        except Exception as e:
            logger.warning(f"RSVP submission failed: {e}")
            self._fail(UNEXPECTED_ERROR_MESSAGE)
            return True
        finally:
            # cancelled mid-flight: no outcome, unlock the form
            if self.state.status is SubmissionStatus.SUBMITTING:
                self.state.status = SubmissionStatus.IDLE

        if result.success:
            self.state.status = SubmissionStatus.SUCCEEDED
            if self.state.is_attending:
                self._start_confetti()
        else:
            self._fail(result.message)
        return True

    def close_modal(self) -> None:
        if self.state.status is SubmissionStatus.SUCCEEDED:
            self.state.status = SubmissionStatus.IDLE
        self._clear_confetti()

    def confirmation(self) -> ConfirmationSummary:
        return ConfirmationSummary.from_form(self.state)

    def _fail(self, message: str) -> None:
        self.state.status = SubmissionStatus.FAILED
        self.state.error = message

    def _start_confetti(self) -> None:
        self.state.show_confetti = True
        loop = asyncio.get_running_loop()
        self._confetti_timer = loop.call_later(self._confetti_seconds, self._stop_confetti)

    def _stop_confetti(self) -> None:
        self.state.show_confetti = False
        self._confetti_timer = None

    def _clear_confetti(self) -> None:
        if self._confetti_timer is not None:
            self._confetti_timer.cancel()
        self._stop_confetti()
