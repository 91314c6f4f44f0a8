"""Standard allowance rates per job level."""
from sqlalchemy import Float, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base, TimestampMixin


class MasterRate(TimestampMixin, Base):
    __tablename__ = "master_rates"

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    level: Mapped[str] = mapped_column(String, unique=True, index=True)
    position: Mapped[str] = mapped_column(String, default="")
    rent: Mapped[float] = mapped_column(Float, default=0.0)
    monthly_assist: Mapped[float] = mapped_column(Float, default=0.0)
    souvenir_allowance: Mapped[float] = mapped_column(Float, default=0.0)
    travel: Mapped[float] = mapped_column(Float, default=0.0)
    local: Mapped[float] = mapped_column(Float, default=0.0)
    per_diem: Mapped[float] = mapped_column(Float, default=0.0)
    hotel: Mapped[float] = mapped_column(Float, default=0.0)
