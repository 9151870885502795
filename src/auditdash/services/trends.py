"""Per-agent score trends across audit days."""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any

from auditdash.models.enums import AgentKind
from auditdash.models.trend import TrendPoint, TrendSeries
from auditdash.services.normalizer import normalize

logger = logging.getLogger(__name__)


def window(dates: Sequence[str], days: int | None) -> list[str]:
    """Keep the most recent ``days`` dates, oldest first."""
    ordered = sorted(dates)
    if days is not None and days > 0 and len(ordered) > days:
        return ordered[-days:]
    return ordered


def parse_agent_filter(agent: str | None = None, agents: str | None = None) -> list[str] | None:
    if agent:
        return [agent]
    if agents:
        return [a.strip() for a in agents.split(",") if a.strip()]
    return None


def trends(
    dates: Sequence[str],
    raw_loader: Callable[[str], dict[str, Any]],
    agent_filter: Iterable[str] | None = None,
    days: int | None = None,
) -> TrendSeries:
    """Build one ascending ``{date, score, status}`` series per agent.

    ``raw_loader`` returns ``{agent: raw_json}`` for a date and leaves out
    files it could not read or parse, so those days are simply missing from
    that agent's series. Digest is kept; meta carries no score and is skipped.
    """
    wanted = set(agent_filter) if agent_filter is not None else None
    series = TrendSeries()

    for date in window(dates, days):
        series.dates.append(date)
        try:
            raw_reports = raw_loader(date)
        except OSError as exc:
            logger.warning("Skipping trend date %s: %s", date, exc)
            continue
        for agent, raw in raw_reports.items():
            if agent == AgentKind.META:
                continue
            if wanted is not None and agent not in wanted:
                continue
            report = normalize(agent, raw)
            series.data.setdefault(agent, []).append(
                TrendPoint(date=date, score=report.score, status=report.status)
            )
    return series
