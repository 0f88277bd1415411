from src.config.settings import settings
from src.email_service.base import EmailMessage, EmailServiceBase
from src.email_service.resend_service import ResendEmailService
from src.email_service.smtp_service import SMTPEmailService
from src.email_service.templates import EmailTemplates, render_rsvp_email, render_rsvp_email_text


def get_email_service() -> EmailServiceBase:
    if settings.resend_api_key:
        return ResendEmailService(config=settings)
    return SMTPEmailService()


__all__ = [
    "EmailMessage",
    "EmailServiceBase",
    "EmailTemplates",
    "get_email_service",
    "render_rsvp_email",
    "render_rsvp_email_text",
]
