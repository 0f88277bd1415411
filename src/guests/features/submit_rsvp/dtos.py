"""DTOs for the RSVP submission feature."""

from pydantic import BaseModel

# Names of the form fields posted by the RSVP form
FULL_NAME_FIELD = "fullName"
EMAIL_FIELD = "email"
GUEST_COUNT_FIELD = "guestCount"
ATTENDING_FIELD = "attending"
MESSAGE_FIELD = "message"

FORM_FIELDS = (
    FULL_NAME_FIELD,
    EMAIL_FIELD,
    GUEST_COUNT_FIELD,
    ATTENDING_FIELD,
    MESSAGE_FIELD,
)

NAME_REQUIRED_MESSAGE = "Please provide your full name."
EMAIL_REQUIRED_MESSAGE = "Please provide your email address."
SAVE_FAILED_MESSAGE = "Failed to save your RSVP. Please try again."
ATTENDING_MESSAGE = "Thank you! Your attendance has been confirmed."
DECLINING_MESSAGE = "Thank you for letting us know. We'll miss you!"


class SubmitRSVPResponse(BaseModel):
    """Result of an RSVP submission, shown to the guest as-is."""

    success: bool
    message: str
