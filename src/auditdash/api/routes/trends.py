"""Score trend endpoint."""

import logging

from fastapi import APIRouter, Query

from auditdash.dependencies import Store
from auditdash.models.trend import TrendSeries
from auditdash.services.trends import parse_agent_filter, trends

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Trends"])


@router.get("/trends")
def get_trends(
    store: Store,
    days: int | None = Query(None, description="Restrict to the most recent N audit days"),
    agent: str | None = Query(None),
    agents: str | None = Query(None, description="Comma-separated agent names"),
) -> dict:
    """Per-agent ``{date, score, status}`` series, oldest first.

    Partial data beats a hard failure here: on any unexpected error the
    endpoint answers with an empty series.
    """
    try:
        series = trends(
            store.list_dates(),
            store.load_raw,
            agent_filter=parse_agent_filter(agent, agents),
            days=days,
        )
    except Exception:
        logger.exception("Trend extraction failed")
        series = TrendSeries()
    return series.to_response()
