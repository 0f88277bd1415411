"""In-memory collaborators for RSVP submission tests."""

from uuid import uuid4

from src.email_service.base import EmailMessage, EmailServiceBase
from src.guests.dtos import GuestInsertResult, NewGuestDTO
from src.guests.repository.write_models import GuestWriteModel


class InMemoryGuestWriteModel(GuestWriteModel):
    def __init__(self, error: str | None = None):
        self.inserted: list[NewGuestDTO] = []
        self._error = error

    async def insert_guest(self, guest: NewGuestDTO) -> GuestInsertResult:
        if self._error:
            return GuestInsertResult(error=self._error)
        self.inserted.append(guest)
        return GuestInsertResult(guest_id=uuid4())


class ExplodingGuestWriteModel(GuestWriteModel):
    """Raises instead of reporting an error result."""

    async def insert_guest(self, guest: NewGuestDTO) -> GuestInsertResult:
        raise RuntimeError("connection reset by peer")


class MockEmailService(EmailServiceBase):
    def __init__(self, fail_with: Exception | None = None):
        self.sent: list[EmailMessage] = []
        self._fail_with = fail_with

    async def send(self, message: EmailMessage) -> str | None:
        if self._fail_with:
            raise self._fail_with
        self.sent.append(message)
        return "mock-email-id"
