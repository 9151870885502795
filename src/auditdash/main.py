"""FastAPI application factory and lifespan management."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auditdash import __version__
from auditdash.config import settings
from auditdash.logging_config import configure_logging
from auditdash.repositories.report_store import ReportStore

# Configure logging at import time
configure_logging(log_level=settings.log_level, json_output=settings.json_logs)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log where reports are read from; there is nothing to open or close."""
    store: ReportStore = app.state.store
    if not store.data_dir.is_dir():
        logger.warning("Data directory %s does not exist; serving empty dashboard", store.data_dir)
    logger.info("Audit dashboard started (data_dir=%s, dates=%d)", store.data_dir, len(store.list_dates()))
    yield
    logger.info("Audit dashboard shutdown complete")


def create_app(data_dir: Path | str | None = None, static_dir: Path | str | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title="Audit Dashboard API",
        version=__version__,
        description="Health, trends, diffs and findings timeline over daily audit-agent reports.",
        lifespan=lifespan,
    )

    app.state.store = ReportStore(data_dir if data_dir is not None else settings.data_dir)
    app.state.static_dir = Path(static_dir if static_dir is not None else settings.static_dir)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    from auditdash.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    # Register error handlers
    from auditdash.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    # Prometheus metrics (internal endpoint)
    try:
        from prometheus_fastapi_instrumentator import Instrumentator
        Instrumentator(
            should_group_status_codes=True,
            should_respect_env_var=False,
            excluded_handlers=["/health", "/metrics"],
        ).instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)
    except ImportError:
        logger.debug("prometheus-fastapi-instrumentator not installed, /metrics disabled")

    # Import and mount routers
    from auditdash.api.router import api_router
    app.include_router(api_router)

    return app


app = create_app()
