"""
Async SQLAlchemy session factory.
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from car_insurance.core.config import settings

engine = create_async_engine(
    settings.DATABASE_URL,
    echo=(settings.APP_ENV == "development"),
    pool_size=settings.DB_POOL_SIZE,
    max_overflow=settings.DB_MAX_OVERFLOW,
    pool_pre_ping=True,
)

async_session = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


def make_session_factory(url: str | None = None) -> tuple[async_sessionmaker[AsyncSession], AsyncEngine]:
    """Create a fresh engine + session factory (for Celery workers and scripts).

    The caller owns the engine and must ``await engine.dispose()``.
    """
    fresh_engine = create_async_engine(url or settings.DATABASE_URL, echo=False)
    factory = async_sessionmaker(fresh_engine, class_=AsyncSession, expire_on_commit=False)
    return factory, fresh_engine


async def get_db() -> AsyncSession:
    """Dependency that yields an async DB session."""
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
