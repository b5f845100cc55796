"""
Alembic migration environment for the car insurance schema.

The URL defaults to the sync (psycopg2) URL from settings; override it per
invocation with ``alembic -x db_url=sqlite:///local.db upgrade head``.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from car_insurance.core.config import settings
# Importing the models package registers every table on Base.metadata.
from car_insurance.db.models import Base  # noqa: F401

config = context.config

db_url = context.get_x_argument(as_dictionary=True).get("db_url") or settings.DATABASE_URL_SYNC
config.set_main_option("sqlalchemy.url", db_url)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of connecting."""
    context.configure(
        url=db_url,
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a short-lived sync connection."""
    connectable = create_engine(db_url, poolclass=pool.NullPool)
    try:
        with connectable.connect() as connection:
            context.configure(
                connection=connection,
                target_metadata=target_metadata,
                compare_type=True,
            )
            with context.begin_transaction():
                context.run_migrations()
    finally:
        connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
