"""Guest write models - store RSVPs and return DTOs, never ORM models."""

from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import GuestInsertResult, NewGuestDTO
from src.guests.repository.orm_models import Guest


class GuestWriteModel(ABC):
    @abstractmethod
    async def insert_guest(self, guest: NewGuestDTO) -> GuestInsertResult:
        """
        Insert one guest row.
        Storage errors are reported in the result, not raised.
        """
        raise NotImplementedError


class SqlGuestWriteModel(GuestWriteModel):
    """SQL implementation of the guest datastore."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def insert_guest(self, guest: NewGuestDTO) -> GuestInsertResult:
        try:
            async with self.async_session_manager(
                session_overwrite=self.session_overwrite
            ) as session:
                row = Guest(
                    name=guest.name,
                    email=guest.email,
                    guest_count=guest.guest_count,
                    attending=guest.attending,
                    message=guest.message,
                )
                session.add(row)
                await session.flush()
                guest_id = row.uuid
        except SQLAlchemyError as e:
            return GuestInsertResult(error=str(e))

        return GuestInsertResult(guest_id=guest_id)
