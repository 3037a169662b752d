"""
LifeHub API - Main Application
==============================

FastAPI application entry point with middleware configuration
and route registration.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import newrelic.agent

from lifehub.config import settings

# Configure logging for the application (root logger defaults to WARNING)
logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lifehub.core.errors import setup_exception_handlers
from lifehub.db.session import close_db, get_session_factory, init_db
from lifehub.services.relaxation_service import RelaxationService

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


# =============================================================================
# New Relic Transaction Enrichment Middleware (Raw ASGI)
# =============================================================================

class NewRelicTransactionMiddleware:
    """
    Raw ASGI middleware that adds custom attributes to every New Relic
    transaction: HTTP method, route pattern, status, latency and the
    user ID when the request was authenticated.

    Raw ASGI keeps the handler in the same task, so the agent's
    contextvars-based spans stay attached to the transaction.
    Does nothing when no agent transaction is active.
    """

    def __init__(self, app):
        self.app = app

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        status_code = 500  # until the response starts

        async def send_wrapper(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_wrapper)
        finally:
            txn = newrelic.agent.current_transaction()
            if txn:
                duration_ms = (time.perf_counter() - start) * 1000

                # Route pattern (e.g. "/api/v1/habits/{habit_id}") for grouping
                route = scope.get("route")
                route_path = route.path if route else scope.get("path", "unknown")

                newrelic.agent.add_custom_attributes([
                    ("http.method", scope.get("method", "")),
                    ("http.route", route_path),
                    ("http.status_code", status_code),
                    ("http.duration_ms", round(duration_ms, 2)),
                    ("environment", settings.ENVIRONMENT),
                ])

                # Set by the auth dependency
                state = scope.get("state")
                user_id = state.get("user_id") if isinstance(state, dict) else None
                if user_id:
                    newrelic.agent.add_custom_attribute("enduser.id", str(user_id))


async def seed_relaxation_sounds() -> None:
    """Insert the default sound catalogue if the table is empty."""
    session_factory = get_session_factory()
    async with session_factory() as session:
        await RelaxationService(session).seed_sounds()
        await session.commit()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Verifies the database on startup, seeds the relaxation catalogue,
    and disposes of connections on shutdown.
    """
    logger.info("Starting LifeHub API (%s)", settings.ENVIRONMENT)

    if settings.auth_disabled:
        logger.warning(
            "Authentication is DISABLED (DEV_AUTH_DISABLED=true); "
            "all requests use the development user"
        )

    # Continue startup even if the database is down so /health still answers
    try:
        await init_db()
        if settings.SEED_RELAXATION_SOUNDS:
            await seed_relaxation_sounds()
    except Exception:
        logger.exception("Database initialisation failed")

    yield

    logger.info("Shutting down LifeHub API")
    await close_db()


# Create FastAPI application
app = FastAPI(
    title="LifeHub API",
    description="""
## LifeHub Personal Productivity Backend

Habits, journaling, pomodoro and meditation timers, relaxation sounds,
a bookshelf, energy and finance tracking, with dashboard and analytics
aggregates.
    """,
    version=VERSION,
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
    openapi_url="/openapi.json" if settings.is_development else None,
    lifespan=lifespan,
    responses={
        400: {"description": "Validation error"},
        401: {"description": "Not authenticated"},
        404: {"description": "Resource not found"},
        409: {"description": "Resource conflict"},
        500: {"description": "Internal server error"},
    },
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# New Relic transaction enrichment
app.add_middleware(NewRelicTransactionMiddleware)

# Setup exception handlers
setup_exception_handlers(app)


# =============================================================================
# Health Check Endpoints
# =============================================================================

@app.get("/health", tags=["Health"])
async def health_check() -> dict:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": VERSION,
        "environment": settings.ENVIRONMENT,
    }


@app.get("/", tags=["Health"])
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "LifeHub API",
        "version": VERSION,
        "docs": "/docs" if settings.is_development else "Disabled in production",
    }


# =============================================================================
# API Routes
# =============================================================================

from lifehub.api.v1 import habits
app.include_router(habits.router, prefix="/api/v1/habits", tags=["Habits"])

from lifehub.api.v1 import journal
app.include_router(journal.router, prefix="/api/v1/journal", tags=["Journal"])

from lifehub.api.v1 import pomodoro, meditation
app.include_router(pomodoro.router, prefix="/api/v1/pomodoro", tags=["Pomodoro"])
app.include_router(meditation.router, prefix="/api/v1/meditation", tags=["Meditation"])

from lifehub.api.v1 import relaxation
app.include_router(relaxation.router, prefix="/api/v1/relaxation", tags=["Relaxation"])

from lifehub.api.v1 import books
app.include_router(books.router, prefix="/api/v1/books", tags=["Books"])

from lifehub.api.v1 import profile, settings as settings_api
app.include_router(profile.router, prefix="/api/v1/profile", tags=["Profile"])
app.include_router(settings_api.router, prefix="/api/v1/settings", tags=["Settings"])

from lifehub.api.v1 import analytics
app.include_router(analytics.dashboard_router, prefix="/api/v1/dashboard", tags=["Dashboard"])
app.include_router(analytics.router, prefix="/api/v1/analytics", tags=["Analytics"])

from lifehub.api.v1 import tracking
app.include_router(tracking.energy_router, prefix="/api/v1/energy", tags=["Energy"])
app.include_router(tracking.transactions_router, prefix="/api/v1/transactions", tags=["Transactions"])
