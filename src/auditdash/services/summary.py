"""Dashboard summary and enriched health payloads for the latest audit day."""

from collections.abc import Callable, Sequence

from auditdash.models.enums import UNSCORED_AGENTS, AgentKind
from auditdash.models.report import NormalizedReport
from auditdash.services.health import grade_from_score, health_delta, health_score

TOP_PRIORITY_LIMIT = 5
_COUNTED_SEVERITIES = ("critical", "high", "medium", "low")


def _find(reports: Sequence[NormalizedReport], agent: str) -> NormalizedReport | None:
    return next((r for r in reports if r.agent == agent), None)


def meta_info(reports: Sequence[NormalizedReport]) -> dict:
    """Run timing recorded by the audit job in ``meta.json``."""
    meta = _find(reports, AgentKind.META)
    raw = meta.raw if meta is not None and isinstance(meta.raw, dict) else {}
    return {
        "lastRunTime": raw.get("endTime") or None,
        "lastRunDuration": raw.get("durationSeconds") or None,
    }


def finding_counts(reports: Sequence[NormalizedReport]) -> dict[str, int]:
    security = _find(reports, AgentKind.SECURITY)
    counts = security.field("findingCounts") if security is not None else None
    if not isinstance(counts, dict):
        counts = {}
    return {severity: counts.get(severity) or 0 for severity in _COUNTED_SEVERITIES}


def top_priorities(reports: Sequence[NormalizedReport]) -> list:
    """Digest priorities when present, otherwise the first roadmap priority titles."""
    digest = _find(reports, AgentKind.DIGEST)
    if digest is not None and digest.field("topPriorities"):
        return digest.field("topPriorities")
    roadmap = _find(reports, AgentKind.ROADMAP)
    priorities = roadmap.field("priorities") if roadmap is not None else None
    if isinstance(priorities, list):
        return [
            p.get("title") for p in priorities[:TOP_PRIORITY_LIMIT] if isinstance(p, dict)
        ]
    return []


def scored_agents(reports: Sequence[NormalizedReport]) -> list[NormalizedReport]:
    return [r for r in reports if r.agent not in UNSCORED_AGENTS]


def build_summary(
    dates: Sequence[str],
    loader: Callable[[str], list[NormalizedReport]],
) -> dict | None:
    """Summary of the latest audit day, or None when there is no data at all."""
    if not dates:
        return None
    ordered = sorted(dates)
    latest_date = ordered[-1]
    reports = loader(latest_date)
    score = health_score(reports)

    delta = None
    if len(ordered) >= 2:
        delta = health_delta(score, health_score(loader(ordered[-2])))

    return {
        "date": latest_date,
        "healthScore": score,
        "delta": delta,
        "agents": [
            {
                "name": r.agent,
                "score": r.score,
                "grade": r.field("grade") or grade_from_score(r.score),
                "status": r.status.value,
            }
            for r in scored_agents(reports)
        ],
        "findingCounts": finding_counts(reports),
        "topPriorities": top_priorities(reports),
        **meta_info(reports),
    }


def build_health(
    dates: Sequence[str],
    loader: Callable[[str], list[NormalizedReport]],
    version: str,
    build_date: str | None,
) -> dict:
    latest_date = max(dates) if dates else None
    reports = loader(latest_date) if latest_date else []
    return {
        "status": "ok",
        "version": version,
        "buildDate": build_date,
        "lastAuditDate": latest_date,
        **meta_info(reports),
        "healthScore": health_score(reports),
        "agentCount": len(scored_agents(reports)),
        "findingCounts": finding_counts(reports),
    }
