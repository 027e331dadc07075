"""FastAPI application entry point."""
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from event_ingest.api import events
from event_ingest.config import settings
from event_ingest.core.auth import ServiceAuthDependency
from event_ingest.core.logging import get_logger, request_context_middleware, setup_logging
from event_ingest.db.connection import close_db_pool, init_db_pool
from event_ingest.db.repositories import EventRepository
from event_ingest.models.schemas import HealthResponse

# Setup logging
setup_logging(
    service_name=settings.service_name,
    service_version=settings.service_version,
    log_level=settings.log_level,
    log_format=settings.log_format,
)
logger = get_logger(__name__)

# No-op while service_auth_secret is empty
require_service_auth = ServiceAuthDependency(secret=settings.service_auth_secret)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle (startup/shutdown)."""
    # Startup
    logger.info("Starting Event Ingest Service...")
    await init_db_pool()
    try:
        await EventRepository.ensure_schema()
        logger.info("Events table ready")
    except Exception as e:
        logger.warning("Could not ensure events table", error=str(e))
    logger.info("Event Ingest Service started successfully")
    yield
    # Shutdown
    logger.info("Shutting down Event Ingest Service...")
    await close_db_pool()
    logger.info("Event Ingest Service shutdown complete")


app = FastAPI(
    title="Event Ingest Service",
    description="Event ingestion with document store enrichment",
    version=settings.service_version,
    lifespan=lifespan,
)

# CORS configuration
_allowed_origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]
if _allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.middleware("http")(request_context_middleware)

app.include_router(events.router, dependencies=[Depends(require_service_auth)])


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        service=settings.service_name,
        version=settings.service_version,
    )


@app.get("/")
async def root():
    """Root endpoint with service info."""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "docs": "/docs",
    }
