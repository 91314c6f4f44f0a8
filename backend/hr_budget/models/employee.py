"""Employee model for the backend API."""
from typing import Any

from sqlalchemy import JSON, Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class Employee(TimestampMixin, Base):
    """Employee inputs for the allowance calculators."""

    __tablename__ = "employees"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    employee_id: Mapped[str] = mapped_column(String, unique=True, index=True)
    name: Mapped[str] = mapped_column(String, index=True)
    gender: Mapped[str] = mapped_column(String)
    start_year: Mapped[int] = mapped_column(Integer)
    level: Mapped[str] = mapped_column(String, index=True)
    status: Mapped[str] = mapped_column(String, default="eligible")
    visit_province: Mapped[str] = mapped_column(String, default="")
    home_visit_bus_fare: Mapped[float] = mapped_column(Float, default=0.0)
    working_days: Mapped[int] = mapped_column(Integer, default=1)
    travel_working_days: Mapped[int] = mapped_column(Integer, default=1)
    custom_travel_rates: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
