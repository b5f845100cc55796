"""
Pydantic Settings: centralized configuration loaded from environment variables.
"""

from datetime import date

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ── Database ──────────────────────────────
    POSTGRES_USER: str = "car_insurance_user"
    POSTGRES_PASSWORD: str = "car_insurance_pass"
    POSTGRES_SERVER: str = "localhost"
    POSTGRES_PORT: int = 5432
    POSTGRES_DB: str = "car_insurance_db"
    DB_POOL_SIZE: int = 20
    DB_MAX_OVERFLOW: int = 10

    @property
    def DATABASE_URL(self) -> str:
        """Async URL for app runtime (asyncpg)."""
        return f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    @property
    def DATABASE_URL_SYNC(self) -> str:
        """Sync URL for Alembic migrations (psycopg2)."""
        return f"postgresql://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}@{self.POSTGRES_SERVER}:{self.POSTGRES_PORT}/{self.POSTGRES_DB}"

    # ── Redis / Celery ────────────────────────
    REDIS_URL: str = "redis://localhost:6379/0"
    CELERY_BROKER_URL: str = "redis://localhost:6379/0"
    CELERY_RESULT_BACKEND: str = "redis://localhost:6379/1"

    # ── Expiration sweep ──────────────────────
    # Run the sweep inside the API process. Disable when Celery beat drives it.
    EXPIRATION_SWEEP_ENABLED: bool = True
    EXPIRATION_SWEEP_INTERVAL_SECONDS: float = 15 * 60

    # ── Date validation bounds ────────────────
    MIN_VALID_DATE: date = date(1900, 1, 1)
    MAX_VALID_YEARS_AHEAD: int = 100

    # ── Application ───────────────────────────
    APP_ENV: str = "development"
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ["../.env", ".env"], "extra": "ignore"}


settings = Settings()
