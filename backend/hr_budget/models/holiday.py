"""Holiday calendar entries."""
import datetime

from sqlalchemy import Boolean, Date, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class Holiday(Base):
    """A holiday; ``year`` is the Gregorian year of ``date``."""

    __tablename__ = "holidays"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    year: Mapped[int] = mapped_column(Integer, index=True)
    date: Mapped[datetime.date] = mapped_column(Date, unique=True)
    name: Mapped[str] = mapped_column(String)
    is_special: Mapped[bool] = mapped_column(Boolean, default=False)
