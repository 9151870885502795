"""Dashboard summary endpoint."""

from fastapi import APIRouter

from auditdash.dependencies import Store
from auditdash.errors.exceptions import NotFoundError
from auditdash.services.summary import build_summary

router = APIRouter(prefix="/api", tags=["Summary"])


@router.get("/summary")
def get_summary(store: Store) -> dict:
    """Latest health score, delta vs. the previous day, per-agent status and priorities."""
    summary = build_summary(store.list_dates(), store.load_reports)
    if summary is None:
        raise NotFoundError("Report date", "latest", message="No data")
    return summary
