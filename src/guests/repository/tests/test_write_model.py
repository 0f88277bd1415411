"""Tests for SqlGuestWriteModel."""

from unittest.mock import AsyncMock

import pytest
from sqlalchemy import select
from sqlalchemy.exc import OperationalError

from src.guests.dtos import NewGuestDTO
from src.guests.repository.orm_models import Guest
from src.guests.repository.write_models import SqlGuestWriteModel


def new_guest(**overrides) -> NewGuestDTO:
    data = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "guest_count": 2,
        "attending": True,
        "message": None,
    }
    data.update(overrides)
    return NewGuestDTO(**data)


@pytest.mark.asyncio
async def test_insert_guest_stores_row(db_session):
    write_model = SqlGuestWriteModel(session_overwrite=db_session)

    result = await write_model.insert_guest(new_guest(message="See you soon"))

    assert result.ok
    assert result.guest_id is not None

    row = (await db_session.execute(select(Guest).where(Guest.uuid == result.guest_id))).scalar_one()
    assert row.name == "Jane Doe"
    assert row.email == "jane@example.com"
    assert row.guest_count == 2
    assert row.attending is True
    assert row.message == "See you soon"


@pytest.mark.asyncio
async def test_insert_guest_assigns_created_at(db_session):
    write_model = SqlGuestWriteModel(session_overwrite=db_session)

    result = await write_model.insert_guest(new_guest())
    await db_session.commit()

    stmt = select(Guest).where(Guest.uuid == result.guest_id).execution_options(populate_existing=True)
    row = (await db_session.execute(stmt)).scalar_one()
    assert row.created_at is not None


@pytest.mark.asyncio
async def test_insert_guest_twice_creates_two_rows(db_session):
    write_model = SqlGuestWriteModel(session_overwrite=db_session)

    first = await write_model.insert_guest(new_guest())
    second = await write_model.insert_guest(new_guest())

    assert first.guest_id != second.guest_id
    rows = (await db_session.execute(select(Guest))).scalars().all()
    assert len(rows) == 2


@pytest.mark.asyncio
async def test_insert_guest_reports_storage_error(db_session, monkeypatch):
    error = OperationalError("INSERT", {}, Exception("disk I/O error"))
    monkeypatch.setattr(db_session, "flush", AsyncMock(side_effect=error))
    write_model = SqlGuestWriteModel(session_overwrite=db_session)

    result = await write_model.insert_guest(new_guest())

    assert not result.ok
    assert result.guest_id is None
    assert "disk I/O error" in result.error
