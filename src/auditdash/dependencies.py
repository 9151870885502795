"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from auditdash.repositories.report_store import ReportStore


def get_store(request: Request) -> ReportStore:
    """Return the report store attached to the app at startup."""
    return request.app.state.store


def get_trace_id(request: Request) -> str:
    """Extract trace_id from request state (set by middleware)."""
    return getattr(request.state, "trace_id", "unknown")


# Type aliases for dependency injection
Store = Annotated[ReportStore, Depends(get_store)]
TraceId = Annotated[str, Depends(get_trace_id)]
