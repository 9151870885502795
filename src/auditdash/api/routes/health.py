"""Health and version endpoints."""

from fastapi import APIRouter

from auditdash import __version__
from auditdash.config import settings
from auditdash.dependencies import Store
from auditdash.services.summary import build_health

router = APIRouter()


@router.get("/health")
def health_check(store: Store) -> dict:
    """Liveness plus a snapshot of the latest audit day."""
    return build_health(store.list_dates(), store.load_reports, __version__, settings.build_date)


@router.get("/api/version")
def version() -> dict:
    return {"version": __version__, "buildDate": settings.build_date}
