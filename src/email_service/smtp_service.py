import asyncio
import logging
import smtplib
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText

from src.config.settings import settings
from src.email_service.base import EmailMessage, EmailServiceBase

logger = logging.getLogger(__name__)


class SMTPEmailService(EmailServiceBase):
    def __init__(self, smtp_class: type[smtplib.SMTP] = smtplib.SMTP):
        self.host = settings.smtp_host
        self.port = settings.smtp_port
        self.username = settings.smtp_user
        self.password = settings.smtp_password
        self.from_address = settings.emails_from
        self._smtp_class = smtp_class

    def _create_message(self, message: EmailMessage) -> MIMEMultipart:
        msg = MIMEMultipart("alternative")
        msg["Subject"] = message.subject
        msg["From"] = self.from_address
        msg["To"] = message.to

        # Plain text first so clients prefer the HTML part
        if message.text:
            msg.attach(MIMEText(message.text, "plain"))
        msg.attach(MIMEText(message.html, "html"))

        return msg

    def _send(self, msg: MIMEMultipart) -> None:
        with self._smtp_class(self.host, self.port) as server:
            if self.username and self.password:
                server.starttls()
                server.login(self.username, self.password)
            server.send_message(msg)

    async def send(self, message: EmailMessage) -> str | None:
        msg = self._create_message(message)
        # smtplib blocks; keep the event loop free
        await asyncio.to_thread(self._send, msg)
        logger.info(f"Sent '{message.subject}' via SMTP {self.host}:{self.port}")
        return None
