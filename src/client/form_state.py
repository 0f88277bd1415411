from dataclasses import dataclass, field
from enum import Enum

from src.config.settings import settings

FORM_FIELD_NAMES = ("name", "email", "guests", "attending", "message")


class SubmissionStatus(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass
class FormState:
    """Fields of the RSVP form as typed, plus where the last submission stands."""

    name: str = ""
    email: str = ""
    guests: str = "1"
    attending: str = ""
    message: str = ""
    status: SubmissionStatus = SubmissionStatus.IDLE
    error: str | None = None
    show_confetti: bool = False

    @property
    def is_submitting(self) -> bool:
        return self.status is SubmissionStatus.SUBMITTING

    @property
    def show_modal(self) -> bool:
        return self.status is SubmissionStatus.SUCCEEDED

    @property
    def is_attending(self) -> bool:
        return self.attending == "yes"


@dataclass(frozen=True)
class EventDetails:
    venue_name: str
    venue_address: str
    event_date: str
    schedule: str

    @classmethod
    def from_settings(cls) -> "EventDetails":
        return cls(
            venue_name=settings.venue_name,
            venue_address=settings.venue_address,
            event_date=settings.event_date,
            schedule=f"Ceremony: {settings.ceremony_time} • Reception: {settings.reception_time}",
        )


@dataclass(frozen=True)
class ConfirmationSummary:
    """What the confirmation overlay shows, built from the submitted form only."""

    headline: str
    subheadline: str
    rows: list[tuple[str, str]] = field(default_factory=list)
    event_details: EventDetails | None = None
    message: str | None = None

    @classmethod
    def from_form(cls, form: FormState) -> "ConfirmationSummary":
        attending = form.is_attending
        return cls(
            headline="See You There!" if attending else "We'll Miss You!",
            subheadline=(
                "Thank you for confirming your attendance!"
                if attending
                else "Thank you for letting us know."
            ),
            rows=[
                ("Name", form.name),
                ("Email", form.email),
                ("Guests", form.guests),
                ("Response", "Attending ✨" if attending else "Not Attending"),
            ],
            event_details=EventDetails.from_settings() if attending else None,
            message=form.message or None,
        )
