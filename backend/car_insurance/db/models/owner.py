"""
Owner model: the person a car is registered to.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from car_insurance.db.models.base import Base

if TYPE_CHECKING:
    from car_insurance.db.models.car import Car


class Owner(Base):
    __tablename__ = "owners"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)

    cars: Mapped[list["Car"]] = relationship(back_populates="owner")

    def __repr__(self) -> str:
        return f"<Owner id={self.id} {self.name}>"
