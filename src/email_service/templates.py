from dataclasses import dataclass
from html import escape

from src.config.settings import settings


@dataclass
class EmailTemplates:
    CONFIRMATION_SUBJECT_ATTENDING = "🎉 Your RSVP is Confirmed! | Wedding Celebration"
    CONFIRMATION_SUBJECT_DECLINING = "Thank You for Your Response | Wedding Celebration"

    CONFIRMATION_HTML = """
    <!DOCTYPE html>
    <html>
    <head>
        <meta charset="utf-8">
        <meta name="viewport" content="width=device-width, initial-scale=1.0">
        <title>Thank You for Your RSVP</title>
    </head>
    <body style="background-color: #F5F5F0; font-family: Georgia, 'Times New Roman', serif; padding: 40px 20px;">
        <span style="display: none; max-height: 0; overflow: hidden;">{preview}</span>
        <div style="background-color: #FDFBF7; border: 2px solid #C9A962; border-radius: 8px; margin: 0 auto; max-width: 580px; overflow: hidden;">
            <div style="background-color: #C9A962; height: 6px;"></div>

            <p style="color: #C9A962; font-size: 24px; letter-spacing: 8px; text-align: center; padding: 30px 40px 10px; margin: 0;">✿ ❀ ✿</p>

            <h1 style="color: #2B2B2B; font-family: 'Playfair Display', Georgia, serif; font-size: 32px; font-weight: 600; text-align: center; padding: 0 40px; margin: 0;">
                Thank You for Your RSVP
            </h1>

            <hr style="border: none; border-top: 1px solid #C9A962; margin: 24px 40px; opacity: 0.4;">

            <p style="color: #4A4A4A; font-size: 18px; text-align: center; padding: 0 40px; margin: 0 0 24px;">Dear {guest_name},</p>

            <div style="background-color: #FAF7F2; border-radius: 8px; margin: 0 40px 24px; padding: 24px; text-align: center;">
                <p style="color: #6B6B6B; font-size: 12px; letter-spacing: 2px; text-transform: uppercase; margin: 0 0 8px;">Your Response</p>
                <p style="color: {status_color}; font-family: 'Playfair Display', Georgia, serif; font-size: 24px; font-weight: 600; margin: 0;">{status}</p>
            </div>
            {guest_count_section}
            <hr style="border: none; border-top: 1px solid #C9A962; margin: 24px 40px; opacity: 0.4;">

            <p style="color: #4A4A4A; font-size: 16px; font-style: italic; line-height: 1.8; text-align: center; padding: 0 40px; margin: 0 0 24px;">{warm_message}</p>
            {event_section}
            <div style="padding: 16px 40px 24px; text-align: center;">
                <p style="color: #6B6B6B; font-size: 16px; font-style: italic; margin: 0 0 8px;">With love,</p>
                <p style="color: #2B2B2B; font-family: 'Playfair Display', Georgia, serif; font-size: 24px; font-weight: 500; margin: 0;">{couple_names}</p>
            </div>

            <p style="color: #C9A962; font-size: 24px; letter-spacing: 8px; text-align: center; padding: 0 40px 30px; margin: 0;">❀ ✿ ❀</p>

            <div style="background-color: #C9A962; height: 6px;"></div>
        </div>
    </body>
    </html>
    """

    GUEST_COUNT_HTML = """
            <div style="background-color: #FAF7F2; border-radius: 8px; margin: 0 40px 24px; padding: 20px; text-align: center;">
                <p style="color: #6B6B6B; font-size: 12px; letter-spacing: 2px; text-transform: uppercase; margin: 0 0 8px;">Number of Seats Reserved</p>
                <p style="color: #2B2B2B; font-family: 'Playfair Display', Georgia, serif; font-size: 20px; font-weight: 500; margin: 0;">{guest_count_label}</p>
            </div>
    """

    EVENT_DETAILS_HTML = """
            <div style="background-color: #FAF7F2; border-left: 4px solid #C9A962; margin: 0 40px 24px; padding: 24px;">
                <p style="color: #C9A962; font-size: 12px; letter-spacing: 2px; text-transform: uppercase; margin: 0 0 16px;">Event Details</p>
                <p style="color: #4A4A4A; font-size: 15px; line-height: 1.8; margin: 0 0 8px;">📅 <strong>{event_date}</strong></p>
                <p style="color: #4A4A4A; font-size: 15px; line-height: 1.8; margin: 0 0 8px;">🕓 <strong>Ceremony:</strong> {ceremony_time}</p>
                <p style="color: #4A4A4A; font-size: 15px; line-height: 1.8; margin: 0 0 8px;">🍽️ <strong>Reception:</strong> {reception_time}</p>
                <p style="color: #4A4A4A; font-size: 15px; line-height: 1.8; margin: 0 0 8px;">📍 <strong>{venue_name}</strong><br>{venue_address}</p>
            </div>
    """

    CONFIRMATION_TEXT = """
    Dear {guest_name},

    Thank you for your RSVP!

    Your Response: {status}
    {guest_count_line}
    {warm_message}
    {event_lines}
    With love,
    {couple_names}
    """

    EVENT_DETAILS_TEXT = """
    Event Details:
    - Date: {event_date}
    - Ceremony: {ceremony_time}
    - Reception: {reception_time}
    - Venue: {venue_name}, {venue_address}
    """

    STATUS_ATTENDING = "✨ Joyfully Attending ✨"
    STATUS_DECLINING = "Regretfully Declining"

    WARM_MESSAGE_ATTENDING = (
        "We can't wait to celebrate with you! "
        "Your presence will make our special day even more memorable."
    )
    WARM_MESSAGE_DECLINING = (
        "While we'll miss your presence, we truly appreciate you taking the time "
        "to let us know. You'll be in our thoughts on our special day."
    )

    @classmethod
    def get_confirmation_subject(cls, attending: bool) -> str:
        return cls.CONFIRMATION_SUBJECT_ATTENDING if attending else cls.CONFIRMATION_SUBJECT_DECLINING


def guest_count_label(guest_count: int) -> str:
    return f"{guest_count} {'Guest' if guest_count == 1 else 'Guests'}"


def _event_details() -> dict[str, str]:
    return {
        "event_date": settings.event_date,
        "ceremony_time": settings.ceremony_time,
        "reception_time": settings.reception_time,
        "venue_name": settings.venue_name,
        "venue_address": settings.venue_address,
    }


def render_rsvp_email(full_name: str, attending: bool, guest_count: int) -> str:
    """Render the HTML confirmation sent after an RSVP is stored.

    The seats and event details blocks are only included for guests who
    are attending.
    """
    guest_name = escape(full_name)
    if attending:
        preview = f"Thank you for confirming your attendance, {guest_name}!"
        guest_count_section = EmailTemplates.GUEST_COUNT_HTML.format(
            guest_count_label=guest_count_label(guest_count)
        )
        event_section = EmailTemplates.EVENT_DETAILS_HTML.format(
            **{key: escape(value) for key, value in _event_details().items()}
        )
    else:
        preview = f"We'll miss you, {guest_name}. Thank you for letting us know."
        guest_count_section = ""
        event_section = ""

    return EmailTemplates.CONFIRMATION_HTML.format(
        preview=preview,
        guest_name=guest_name,
        status=EmailTemplates.STATUS_ATTENDING if attending else EmailTemplates.STATUS_DECLINING,
        status_color="#2E7D32" if attending else "#C62828",
        guest_count_section=guest_count_section,
        warm_message=escape(
            EmailTemplates.WARM_MESSAGE_ATTENDING
            if attending
            else EmailTemplates.WARM_MESSAGE_DECLINING
        ),
        event_section=event_section,
        couple_names=escape(settings.couple_names),
    )


def render_rsvp_email_text(full_name: str, attending: bool, guest_count: int) -> str:
    """Plain-text alternative of :func:`render_rsvp_email`."""
    return EmailTemplates.CONFIRMATION_TEXT.format(
        guest_name=full_name,
        status=EmailTemplates.STATUS_ATTENDING if attending else EmailTemplates.STATUS_DECLINING,
        guest_count_line=(
            f"Number of Seats Reserved: {guest_count_label(guest_count)}\n" if attending else ""
        ),
        warm_message=(
            EmailTemplates.WARM_MESSAGE_ATTENDING
            if attending
            else EmailTemplates.WARM_MESSAGE_DECLINING
        ),
        event_lines=EmailTemplates.EVENT_DETAILS_TEXT.format(**_event_details()) if attending else "",
        couple_names=settings.couple_names,
    )
