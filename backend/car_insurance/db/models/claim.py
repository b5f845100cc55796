"""
Claim model: an insurance claim filed against a car.

Claims are attached to the car, not to a specific policy.  Requiring an
active policy on the claim date was considered and left out.
"""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, Integer, Numeric, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from car_insurance.db.models.base import Base

if TYPE_CHECKING:
    from car_insurance.db.models.car import Car


class Claim(Base):
    __tablename__ = "claims"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    car_id: Mapped[int] = mapped_column(
        ForeignKey("cars.id", ondelete="CASCADE"), nullable=False, index=True
    )
    claim_date: Mapped[date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    amount: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)

    car: Mapped["Car"] = relationship(back_populates="claims")

    def __repr__(self) -> str:
        return f"<Claim id={self.id} car={self.car_id} date={self.claim_date} amount={self.amount}>"
