"""Audit dates and per-day report endpoints."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from auditdash.dependencies import Store
from auditdash.errors.exceptions import NotFoundError

router = APIRouter(prefix="/api", tags=["Reports"])


@router.get("/dates")
def list_dates(store: Store) -> list[str]:
    """Every audit day, newest first."""
    return list(reversed(store.list_dates()))


@router.get("/report/{date}")
def get_reports_for_date(date: str, store: Store) -> list[dict]:
    """All normalized reports for one day."""
    reports = store.load_reports(date)
    if not reports:
        raise NotFoundError("Report date", date)
    return [r.to_response() for r in reports]


@router.get("/report/{date}/{agent}")
def get_agent_report(date: str, agent: str, store: Store) -> dict:
    return store.load_report(date, agent).to_response()


@router.get("/report/{date}/{agent}/md", response_class=PlainTextResponse)
def get_agent_markdown(date: str, agent: str, store: Store) -> str:
    return store.read_markdown(date, agent)
