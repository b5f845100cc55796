"""Initial schema: owners, cars, policies, claims, policy expiration logs.

Revision ID: 0001
Revises:
Create Date: 2024-01-01 00:00:00
"""

from alembic import op
import sqlalchemy as sa

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "owners",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
    )
    op.create_table(
        "cars",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("vin", sa.String(32), nullable=False),
        sa.Column("make", sa.String(100), nullable=True),
        sa.Column("model", sa.String(100), nullable=True),
        sa.Column("year_of_manufacture", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.Integer(), sa.ForeignKey("owners.id"), nullable=False),
    )
    op.create_index("ix_cars_vin", "cars", ["vin"], unique=True)
    op.create_index("ix_cars_owner_id", "cars", ["owner_id"])

    op.create_table(
        "policies",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("car_id", sa.Integer(), sa.ForeignKey("cars.id", ondelete="CASCADE"), nullable=False),
        sa.Column("provider", sa.String(255), nullable=False),
        sa.Column("start_date", sa.Date(), nullable=False),
        sa.Column("end_date", sa.Date(), nullable=False),
    )
    op.create_index("ix_policies_car_id", "policies", ["car_id"])
    op.create_index("ix_policies_end_date", "policies", ["end_date"])

    op.create_table(
        "claims",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("car_id", sa.Integer(), sa.ForeignKey("cars.id", ondelete="CASCADE"), nullable=False),
        sa.Column("claim_date", sa.Date(), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("amount", sa.Numeric(12, 2), nullable=False),
    )
    op.create_index("ix_claims_car_id", "claims", ["car_id"])

    op.create_table(
        "policy_expiration_logs",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column(
            "policy_id",
            sa.Integer(),
            sa.ForeignKey("policies.id", ondelete="CASCADE"),
            nullable=False,
            unique=True,
        ),
        sa.Column("expiration_date", sa.Date(), nullable=False),
        sa.Column("processed_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("log_message", sa.Text(), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("policy_expiration_logs")
    op.drop_index("ix_claims_car_id", table_name="claims")
    op.drop_table("claims")
    op.drop_index("ix_policies_end_date", table_name="policies")
    op.drop_index("ix_policies_car_id", table_name="policies")
    op.drop_table("policies")
    op.drop_index("ix_cars_owner_id", table_name="cars")
    op.drop_index("ix_cars_vin", table_name="cars")
    op.drop_table("cars")
    op.drop_table("owners")
