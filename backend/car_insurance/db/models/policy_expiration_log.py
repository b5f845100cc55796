"""
PolicyExpirationLog: one row per policy whose expiration was reported.

Acts as the idempotence marker for the expiration sweep: a policy with a
row here is never reported again.  ``policy_id`` is unique.
"""

from __future__ import annotations

from datetime import date, datetime

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from car_insurance.db.models.base import Base, utcnow


class PolicyExpirationLog(Base):
    __tablename__ = "policy_expiration_logs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    policy_id: Mapped[int] = mapped_column(
        ForeignKey("policies.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    expiration_date: Mapped[date] = mapped_column(Date, nullable=False)
    processed_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    log_message: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<PolicyExpirationLog policy={self.policy_id} expired={self.expiration_date}>"
