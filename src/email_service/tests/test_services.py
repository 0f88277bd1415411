"""Unit tests for the Resend and SMTP email services, without a network."""

import httpx
import pytest

from src.email_service.base import EmailMessage
from src.email_service.resend_service import RESEND_EMAILS_URL, ResendEmailService
from src.email_service.smtp_service import SMTPEmailService

MESSAGE = EmailMessage(
    to="jane@example.com",
    subject="Thank You for Your Response | Wedding Celebration",
    html="<p>Hello</p>",
    text="Hello",
)


class MockResponse:
    def __init__(self, *, json_data=None, status_code=200):
        self._json_data = json_data
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise httpx.HTTPStatusError(
                f"HTTP {self.status_code}",
                request=httpx.Request("POST", RESEND_EMAILS_URL),
                response=httpx.Response(self.status_code),
            )

    def json(self):
        return self._json_data


class MockHttpClient:
    """Stands in for httpx.AsyncClient; calling it returns itself."""

    def __init__(self, response: MockResponse):
        self.post_calls: list[dict] = []
        self._response = response

    async def post(self, url: str, **kwargs) -> MockResponse:
        self.post_calls.append({"url": url, **kwargs})
        return self._response

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        pass

    def __call__(self):
        return self


class MockConfig:
    resend_api_key = "test-api-key"
    emails_from = "rsvp@example.com"


@pytest.mark.asyncio
async def test_resend_posts_message():
    client = MockHttpClient(MockResponse(json_data={"id": "email-123"}))
    service = ResendEmailService(config=MockConfig(), http_client_class=client)

    email_id = await service.send(MESSAGE)

    assert email_id == "email-123"
    assert len(client.post_calls) == 1
    call = client.post_calls[0]
    assert call["url"] == RESEND_EMAILS_URL
    assert call["headers"]["Authorization"] == "Bearer test-api-key"
    assert call["json"] == {
        "from": "rsvp@example.com",
        "to": ["jane@example.com"],
        "subject": MESSAGE.subject,
        "html": "<p>Hello</p>",
        "text": "Hello",
    }


@pytest.mark.asyncio
async def test_resend_raises_on_http_error():
    client = MockHttpClient(MockResponse(status_code=422))
    service = ResendEmailService(config=MockConfig(), http_client_class=client)

    with pytest.raises(httpx.HTTPStatusError):
        await service.send(MESSAGE)


class MockSMTP:
    instances: list["MockSMTP"] = []

    def __init__(self, host, port):
        self.host = host
        self.port = port
        self.sent = []
        self.logged_in = False
        MockSMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        pass

    def starttls(self):
        pass

    def login(self, username, password):
        self.logged_in = True

    def send_message(self, msg):
        self.sent.append(msg)


@pytest.mark.asyncio
async def test_smtp_sends_multipart_message():
    MockSMTP.instances.clear()
    service = SMTPEmailService(smtp_class=MockSMTP)
    service.username = ""
    service.password = ""

    email_id = await service.send(MESSAGE)

    assert email_id is None
    smtp = MockSMTP.instances[0]
    assert smtp.logged_in is False
    msg = smtp.sent[0]
    assert msg["To"] == "jane@example.com"
    assert msg["Subject"] == MESSAGE.subject
    assert [part.get_content_type() for part in msg.get_payload()] == ["text/plain", "text/html"]


@pytest.mark.asyncio
async def test_smtp_logs_in_when_credentials_are_set():
    MockSMTP.instances.clear()
    service = SMTPEmailService(smtp_class=MockSMTP)
    service.username = "user"
    service.password = "secret"

    await service.send(MESSAGE)

    assert MockSMTP.instances[0].logged_in is True
