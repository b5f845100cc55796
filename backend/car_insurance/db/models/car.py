"""
Car model: one insured vehicle, identified by its VIN.

Policies and claims hang off the car; a car belongs to exactly one owner.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from car_insurance.db.models.base import Base

if TYPE_CHECKING:
    from car_insurance.db.models.claim import Claim
    from car_insurance.db.models.insurance_policy import InsurancePolicy
    from car_insurance.db.models.owner import Owner


class Car(Base):
    __tablename__ = "cars"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    vin: Mapped[str] = mapped_column(String(32), unique=True, nullable=False, index=True)
    make: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    model: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    year_of_manufacture: Mapped[int] = mapped_column(Integer, nullable=False)

    owner_id: Mapped[int] = mapped_column(
        ForeignKey("owners.id"), nullable=False, index=True
    )

    # ── Relationships ─────────────────────────
    owner: Mapped["Owner"] = relationship(back_populates="cars")
    policies: Mapped[list["InsurancePolicy"]] = relationship(
        back_populates="car", cascade="all, delete-orphan"
    )
    claims: Mapped[list["Claim"]] = relationship(
        back_populates="car", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Car id={self.id} vin={self.vin} owner={self.owner_id}>"
