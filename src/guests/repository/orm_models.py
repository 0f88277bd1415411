from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, CreatedAt


class Guest(Base, CreatedAt):
    __tablename__ = TableNames.GUESTS.value

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    guest_count: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    attending: Mapped[bool] = mapped_column(Boolean, nullable=False)
    message: Mapped[str | None] = mapped_column(Text, nullable=True)

    def __repr__(self) -> str:
        return f"<Guest {self.name} ({'attending' if self.attending else 'declined'})>"
