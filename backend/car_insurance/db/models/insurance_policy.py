"""
InsurancePolicy: coverage window for a car.

Both ``start_date`` and ``end_date`` are inclusive: the car is insured
on every calendar date d with start_date <= d <= end_date.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from car_insurance.db.models.base import Base

if TYPE_CHECKING:
    from car_insurance.db.models.car import Car


class InsurancePolicy(Base):
    __tablename__ = "policies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    car_id: Mapped[int] = mapped_column(
        ForeignKey("cars.id", ondelete="CASCADE"), nullable=False, index=True
    )
    provider: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)

    car: Mapped["Car"] = relationship(back_populates="policies")

    def __repr__(self) -> str:
        return f"<InsurancePolicy id={self.id} car={self.car_id} {self.start_date}..{self.end_date}>"
