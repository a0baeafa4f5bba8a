"""FastAPI application factory.

Creates and configures the FastAPI application with routers, middleware
and exception handlers.

API Versioning:
    All API endpoints are versioned under /api/v1/ prefix.
    The health check endpoint remains unversioned at /health.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pathviz import __version__
from pathviz.presentation.api.exception_handlers import setup_exception_handlers
from pathviz.presentation.api.routers import charts_router
from pathviz.presentation.api.schemas import HealthResponse
from pathviz_config import Settings, configure_logging, get_settings

logger = logging.getLogger(__name__)

API_VERSION = __version__
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Charts",
        "description": """Chart-ready data derived from a scenario.

**Metrics:**
- `/metrics/{node_id}/summary` - Headline values, percent change, plot series
- `/outcome/total` - Sum of outcome nodes at a year

**Actions:**
- `/actions/mac` - Marginal abatement cost chart
- `/actions/comparison` - Impact comparison at a year
- `/actions/list` - Action list with impact shares

**Flows:**
- `/flows/{flow_id}/sankey` - One Sankey frame
- `/flows/{flow_id}/animation` - Frames for every year with slider steps
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    settings = get_settings()
    logger.info("Starting pathviz API v%s...", API_VERSION)
    if settings.snapshot_path is None:
        logger.warning("SNAPSHOT_PATH not set, chart endpoints will return 503")
    else:
        logger.info("Serving scenario snapshot %s", settings.snapshot_path)
    yield
    logger.info("Shutting down pathviz API...")


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(charts_router, prefix="/charts", tags=["Charts"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Chart data for **emission scenarios**: metric summaries, "
            "action cost efficiency and dimensional flow Sankey frames."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    # Unversioned for load balancer/monitoring compatibility
    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            api_versions=["v1"],
        )

    return app


# Application instance for uvicorn
app = create_app()
