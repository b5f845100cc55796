"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from car_insurance.api.v1 import cars
from car_insurance.core.config import settings
from car_insurance.core.errors import InvalidInputError, NotFoundError
from car_insurance.core.logging import get_logger, setup_logging
from car_insurance.db.session import async_session
from car_insurance.services.expiration_scheduler import ExpirationSweepScheduler, session_scoped_sweep


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown lifecycle hooks."""
    setup_logging("DEBUG" if settings.APP_ENV == "development" else settings.LOG_LEVEL)
    logger = get_logger("startup")
    logger.info("Application starting", env=settings.APP_ENV)

    scheduler = None
    if settings.EXPIRATION_SWEEP_ENABLED:
        scheduler = ExpirationSweepScheduler(
            run_sweep=session_scoped_sweep(async_session),
            interval_seconds=settings.EXPIRATION_SWEEP_INTERVAL_SECONDS,
        )
        scheduler.start()
    app.state.expiration_scheduler = scheduler

    yield

    if scheduler is not None:
        await scheduler.stop()
    logger.info("Application shutting down")


app = FastAPI(
    title="Car Insurance API",
    description="Cars, insurance policies, claims and policy expiration tracking",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Restrict in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


@app.exception_handler(InvalidInputError)
async def invalid_input_handler(request: Request, exc: InvalidInputError) -> JSONResponse:
    get_logger("api").info(
        "Request rejected",
        path=request.url.path,
        reason=exc.message,
        details=exc.details,
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": exc.message})


API_PREFIX = "/api/v1"
app.include_router(cars.router, prefix=API_PREFIX)


@app.get("/health", tags=["Health"])
async def health_check() -> dict[str, str]:
    """Public health-check endpoint."""
    return {"status": "ok", "env": settings.APP_ENV}
