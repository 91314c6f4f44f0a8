"""Year-keyed ledgers (Buddhist-era years) for special assistance and overtime."""
from sqlalchemy import Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class SpecialAssistItem(TimestampMixin, Base):
    __tablename__ = "special_assist_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    year: Mapped[int] = mapped_column(Integer, index=True)
    item: Mapped[str] = mapped_column(String, default="")
    times_per_year: Mapped[float] = mapped_column(Float, default=1)
    days: Mapped[float] = mapped_column(Float, default=1)
    people: Mapped[float] = mapped_column(Float, default=1)
    rate: Mapped[float] = mapped_column(Float, default=0.0)
    notes: Mapped[str] = mapped_column(Text, default="")


class OvertimeYear(TimestampMixin, Base):
    """Base salary shared by all overtime lines of a year."""

    __tablename__ = "overtime_years"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    year: Mapped[int] = mapped_column(Integer, unique=True, index=True)
    salary: Mapped[float] = mapped_column(Float, default=0.0)
    notes: Mapped[str] = mapped_column(Text, default="")


class OvertimeItem(TimestampMixin, Base):
    __tablename__ = "overtime_items"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    year: Mapped[int] = mapped_column(Integer, index=True)
    item: Mapped[str] = mapped_column(String, default="")
    days: Mapped[float] = mapped_column(Float, default=1)
    hours: Mapped[float] = mapped_column(Float, default=8)
    people: Mapped[float] = mapped_column(Float, default=1)
    hourly_rate: Mapped[float | None] = mapped_column(Float, nullable=True)
