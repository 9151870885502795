"""Score normalizer: turns each agent's raw JSON into a ``NormalizedReport``.

Every audit agent writes its own schema. Each known agent kind has one
normalizer function registered in ``NORMALIZERS``; kinds not in the table fall
through to ``_normalize_passthrough``. ``normalize`` never raises: an error
inside a kind's function degrades the report to ``status=unknown`` with the
raw payload preserved.
"""

import json
import logging
import math
from collections.abc import Callable, Iterable
from typing import Any

from auditdash.models.enums import AgentKind, ReportStatus
from auditdash.models.report import NormalizedReport

logger = logging.getLogger(__name__)

NORMALIZE_ERROR_SUMMARY = "Error normalizing"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp_score(value: float) -> int:
    """Clamp to [0, 100] and round to an integer score."""
    return max(0, min(100, round_half_up(value)))


def _number(value: Any) -> float:
    """Coerce a missing/null count to 0; anything non-numeric is an error."""
    if value is None:
        return 0
    if isinstance(value, (int, float)):
        return value
    raise TypeError(f"expected a number, got {type(value).__name__}")


def _count(mapping: dict, key: str) -> float:
    return _number(mapping.get(key))


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value)


def _section(raw: dict, key: str) -> dict:
    value = raw.get(key)
    return value if isinstance(value, dict) else {}


def _list(raw: dict, key: str) -> list:
    value = raw.get(key)
    return value if isinstance(value, list) else []


def _entries(value: Any) -> Iterable:
    """Values of a mapping, or the items of a list."""
    if isinstance(value, dict):
        return value.values()
    if isinstance(value, list):
        return value
    return ()


def _threshold_status(score: float, ok: float, warning: float) -> ReportStatus:
    if score >= ok:
        return ReportStatus.OK
    if score >= warning:
        return ReportStatus.WARNING
    return ReportStatus.CRITICAL


def _count_status(critical: int, high: int) -> ReportStatus:
    if critical > 0:
        return ReportStatus.CRITICAL
    if high > 0:
        return ReportStatus.WARNING
    return ReportStatus.OK


# ---------------------------------------------------------------------------
# Per-kind normalizers
# ---------------------------------------------------------------------------


def _normalize_security(agent: str, raw: dict) -> NormalizedReport:
    counts = _section(raw, "summary")
    critical = _count(counts, "critical")
    high = _count(counts, "high")
    medium = _count(counts, "medium")
    low = _count(counts, "low")
    total = _count(counts, "total")
    score = clamp_score(100 - critical * 25 - high * 10 - medium * 5 - low * 2)
    return NormalizedReport(
        agent=agent,
        raw=raw,
        status=_count_status(critical, high),
        score=score,
        summary=f"{total} findings: {critical}C / {high}H / {medium}M / {low}L",
        findings=raw.get("findings") or [],
        findingCounts=counts,
    )


def _normalize_quality(agent: str, raw: dict) -> NormalizedReport:
    score = _number(raw.get("score"))
    return NormalizedReport(
        agent=agent,
        raw=raw,
        status=_threshold_status(score, ok=85, warning=70),
        score=clamp_score(score),
        summary=_text(raw.get("summary")),
        grade=raw.get("grade"),
        repos=raw.get("repos") or [],
    )


def _normalize_infra(agent: str, raw: dict) -> NormalizedReport:
    pipelines = [p for p in _entries(raw.get("ci")) if isinstance(p, dict)]
    avg_ci = (
        sum(_number(p.get("successRate")) for p in pipelines) / len(pipelines)
        if pipelines
        else 0
    )
    containers = _list(raw, "containers")
    running = sum(1 for c in containers if isinstance(c, dict) and c.get("state") == "running")
    all_running_bonus = 30 if containers and running == len(containers) else 0
    alerts = _list(raw, "alerts")
    has_critical_alert = any(isinstance(a, dict) and a.get("severity") == "critical" for a in alerts)

    if has_critical_alert:
        status = ReportStatus.CRITICAL
    elif avg_ci < 0.7:
        status = ReportStatus.WARNING
    else:
        status = ReportStatus.OK

    return NormalizedReport(
        agent=agent,
        raw=raw,
        status=status,
        score=clamp_score(avg_ci * 70 + all_running_bonus),
        summary=f"{running}/{len(containers)} containers · CI avg {round_half_up(avg_ci * 100)}%",
        ci=raw.get("ci"),
        containers=containers,
        alerts=alerts,
        disk=raw.get("disk"),
    )


def _normalize_dependencies(agent: str, raw: dict) -> NormalizedReport:
    counts = _section(raw, "summary")
    critical = _count(counts, "critical")
    high = _count(counts, "high")
    moderate = _count(counts, "moderate")
    total = _count(counts, "totalVulnerabilities")
    return NormalizedReport(
        agent=agent,
        raw=raw,
        status=_count_status(critical, high),
        score=clamp_score(100 - critical * 25 - high * 2 - moderate),
        summary=f"{total} vulns: {critical}C / {high}H / {moderate}M",
        repos=raw.get("repos") or {},
        depSummary=counts,
    )


def _normalize_lighthouse(agent: str, raw: dict) -> NormalizedReport:
    sites = raw.get("sites") or {}
    scored = [
        site["scores"]
        for site in _entries(sites)
        if isinstance(site, dict) and isinstance(site.get("scores"), dict)
    ]
    avg = round_half_up(sum(_number(s.get("performance")) for s in scored) / len(scored)) if scored else 0
    return NormalizedReport(
        agent=agent,
        raw=raw,
        status=_threshold_status(avg, ok=80, warning=50),
        score=clamp_score(avg),
        summary=f"Avg perf: {avg}",
        sites=sites,
    )


def _normalize_consistency(agent: str, raw: dict) -> NormalizedReport:
    score = _number(raw.get("consistencyScore"))
    return NormalizedReport(
        agent=agent,
        raw=raw,
        status=_threshold_status(score, ok=70, warning=50),
        score=clamp_score(score),
        summary=_text(raw.get("summary")),
        findings=raw.get("findings") or {},
        recommendations=raw.get("recommendations") or [],
    )


def _normalize_roadmap(agent: str, raw: dict) -> NormalizedReport:
    health = _number(raw.get("portfolioHealth"))
    return NormalizedReport(
        agent=agent,
        raw=raw,
        status=_threshold_status(health, ok=70, warning=50),
        score=clamp_score(health),
        summary=f"Portfolio health: {raw.get('portfolioHealth') or 0}%",
        healthScores=raw.get("healthScores") or {},
        priorities=raw.get("priorities") or [],
        quickWins=raw.get("quickWins") or [],
    )


def _normalize_digest(agent: str, raw: dict) -> NormalizedReport:
    # Cross-repo roll-up: carries other repos' scores but is never scored itself
    return NormalizedReport(
        agent=agent,
        raw=raw,
        status=ReportStatus.OK,
        score=None,
        summary="",
        healthScores=raw.get("healthScores") or {},
        topPriorities=raw.get("topPriorities") or [],
    )


def _normalize_meta(agent: str, raw: Any) -> NormalizedReport:
    return NormalizedReport(agent=agent, raw=raw, status=ReportStatus.OK)


def _normalize_passthrough(agent: str, raw: Any) -> NormalizedReport:
    return NormalizedReport(agent=agent, raw=raw)


NORMALIZERS: dict[str, Callable[[str, Any], NormalizedReport]] = {
    AgentKind.SECURITY: _normalize_security,
    AgentKind.QUALITY: _normalize_quality,
    AgentKind.INFRA: _normalize_infra,
    AgentKind.DEPENDENCIES: _normalize_dependencies,
    AgentKind.LIGHTHOUSE: _normalize_lighthouse,
    AgentKind.CONSISTENCY: _normalize_consistency,
    AgentKind.ROADMAP: _normalize_roadmap,
    AgentKind.DIGEST: _normalize_digest,
    AgentKind.META: _normalize_meta,
}


def normalize(agent: str, raw: Any) -> NormalizedReport:
    """Normalize one agent's raw report. Never raises."""
    normalizer = NORMALIZERS.get(agent, _normalize_passthrough)
    try:
        return normalizer(agent, raw)
    except Exception as exc:
        logger.warning("normalize error for %s: %s", agent, exc)
        return NormalizedReport(
            agent=agent,
            raw=raw,
            status=ReportStatus.UNKNOWN,
            score=None,
            summary=NORMALIZE_ERROR_SUMMARY,
        )
