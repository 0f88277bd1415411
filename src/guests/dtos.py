from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class NewGuestDTO:
    """Normalized RSVP, ready to be stored as one guest row."""

    name: str
    email: str
    guest_count: int
    attending: bool
    message: str | None = None


@dataclass(frozen=True)
class GuestInsertResult:
    """Outcome of a guest insert: either the new id or an error description."""

    guest_id: UUID | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
