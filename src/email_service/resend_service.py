import logging
from typing import Protocol

import httpx

from src.email_service.base import EmailMessage, EmailServiceBase

logger = logging.getLogger(__name__)

RESEND_EMAILS_URL = "https://api.resend.com/emails"


class ResendEmailConfig(Protocol):
    resend_api_key: str
    emails_from: str


class ResendEmailService(EmailServiceBase):
    def __init__(
        self,
        config: ResendEmailConfig,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._config = config
        self._http_client_class = http_client_class

    async def send(self, message: EmailMessage) -> str | None:
        """Send email via Resend and return Resend's email id."""
        payload = {
            "from": self._config.emails_from,
            "to": [message.to],
            "subject": message.subject,
            "html": message.html,
        }
        if message.text:
            payload["text"] = message.text

        async with self._http_client_class() as client:
            response = await client.post(
                RESEND_EMAILS_URL,
                headers={
                    "Authorization": f"Bearer {self._config.resend_api_key}",
                    "Content-Type": "application/json",
                },
                json=payload,
            )
            response.raise_for_status()

            resend_email_id = response.json().get("id")
            logger.info(f"Sent '{message.subject}' via Resend: {resend_email_id}")
            return resend_email_id
