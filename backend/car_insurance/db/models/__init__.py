"""
Models package: re-exports Base and all models.

Import models here so Alembic's `target_metadata = Base.metadata`
picks up every table automatically.

When adding a new model:
    1. Create `car_insurance/db/models/<table_name>.py`
    2. Import it here
"""

from car_insurance.db.models.base import Base
from car_insurance.db.models.owner import Owner
from car_insurance.db.models.car import Car
from car_insurance.db.models.insurance_policy import InsurancePolicy
from car_insurance.db.models.claim import Claim
from car_insurance.db.models.policy_expiration_log import PolicyExpirationLog

__all__ = [
    "Base",
    "Owner",
    "Car",
    "InsurancePolicy",
    "Claim",
    "PolicyExpirationLog",
]
