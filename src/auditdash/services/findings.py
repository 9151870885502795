"""Findings collection and the cross-day findings timeline.

Findings are deduplicated by their lower-cased, trimmed title. This is a text
heuristic: two unrelated findings with identical wording merge, and a finding
whose wording changes shows up as one resolved plus one new entry.
"""

import logging
from collections.abc import Callable, Iterable, Sequence

from auditdash.models.enums import (
    SEVERITY_RANK,
    TIMELINE_STATUS_RANK,
    AgentKind,
    Severity,
    TimelineStatus,
)
from auditdash.models.finding import TimelineFinding
from auditdash.models.report import NormalizedReport

logger = logging.getLogger(__name__)

UNKNOWN_TITLE = "Unknown"
_UNRANKED = len(SEVERITY_RANK)


def _report_value(report: NormalizedReport, name: str):
    """Read a field from the normalized report, falling back to the raw payload."""
    if report.has_field(name):
        return report.field(name)
    if isinstance(report.raw, dict):
        return report.raw.get(name)
    return None


def _tagged(items: Iterable, agent: str, **overrides) -> list[dict]:
    return [{**item, **overrides, "agent": agent} for item in items if isinstance(item, dict)]


def collect_findings(reports: Iterable[NormalizedReport], include_repos: bool = False) -> list[dict]:
    """Flatten every report's findings into one list tagged with the source agent.

    Handles a plain ``findings`` list, ``findings`` keyed by category and
    roadmap ``priorities``. Per-repo ``repos[].findings`` are read only when
    ``include_repos`` is set; the timeline does, the diff does not. Shapes may
    coexist on one report; nothing is deduplicated here.
    """
    collected: list[dict] = []
    for report in reports:
        agent = report.agent

        findings = _report_value(report, "findings")
        if isinstance(findings, list):
            collected.extend(_tagged(findings, agent))
        elif isinstance(findings, dict):
            for group in findings.values():
                if isinstance(group, list):
                    collected.extend(_tagged(group, agent))

        repos = _report_value(report, "repos") if include_repos else None
        if isinstance(repos, list):
            for repo in repos:
                if not isinstance(repo, dict) or not isinstance(repo.get("findings"), list):
                    continue
                collected.extend(
                    _tagged(repo["findings"], agent, repo=repo.get("name") or repo.get("repo"))
                )

        priorities = _report_value(report, "priorities")
        if isinstance(priorities, list):
            for priority in priorities:
                if not isinstance(priority, dict):
                    continue
                collected.append({
                    "severity": priority.get("severity") or Severity.MEDIUM,
                    "title": priority.get("title"),
                    "repo": priority.get("repo"),
                    "agent": agent,
                })
    return collected


def finding_title(finding: dict) -> str:
    title = finding.get("title") or finding.get("id") or UNKNOWN_TITLE
    return str(title)


def dedup_key(finding: dict) -> str:
    return finding_title(finding).lower().strip()


def _optional_text(value) -> str | None:
    return str(value) if value else None


def severity_of(finding: dict) -> str:
    return str(finding.get("severity") or Severity.INFO).lower()


def severity_rank(severity: str | None) -> int:
    return SEVERITY_RANK.get((severity or "").lower(), _UNRANKED)


def timeline_status(first_seen: str, last_seen: str, latest_date: str) -> TimelineStatus:
    if last_seen != latest_date:
        return TimelineStatus.RESOLVED
    if first_seen == latest_date:
        return TimelineStatus.NEW
    return TimelineStatus.RECURRING


def build_timeline(
    dates: Sequence[str],
    loader: Callable[[str], list[NormalizedReport]],
) -> list[TimelineFinding]:
    """Fold every day's findings into one deduplicated timeline.

    Days are visited in ascending order. Severity and agent are fixed at first
    sight; later sightings only move ``last_seen``, bump ``occurrences`` and
    fill in a missing repo. Status is derived against the latest date.
    """
    if not dates:
        return []
    ordered = sorted(dates)
    latest_date = ordered[-1]
    timeline: dict[str, TimelineFinding] = {}

    for date in ordered:
        reports = [r for r in loader(date) if r.agent != AgentKind.META]
        for finding in collect_findings(reports, include_repos=True):
            key = dedup_key(finding)
            entry = timeline.get(key)
            if entry is None:
                timeline[key] = TimelineFinding(
                    id=str(finding.get("id") or key[:8]),
                    title=finding_title(finding),
                    severity=severity_of(finding),
                    repo=_optional_text(finding.get("repo")),
                    agent=finding["agent"],
                    first_seen=date,
                    last_seen=date,
                )
                continue
            entry.last_seen = date
            entry.occurrences += 1
            if not entry.repo and finding.get("repo"):
                entry.repo = _optional_text(finding["repo"])

    for entry in timeline.values():
        entry.status = timeline_status(entry.first_seen, entry.last_seen, latest_date)

    logger.debug("Built findings timeline: %d findings over %d days", len(timeline), len(ordered))
    # sorted() is stable: ties keep first-seen order
    return sorted(timeline.values(), key=lambda f: severity_rank(f.severity))


def query_timeline(
    findings: list[TimelineFinding],
    status: str | None = None,
    severity: str | None = None,
    repo: str | None = None,
    agent: str | None = None,
    sort: str | None = None,
    limit: int | None = None,
) -> list[TimelineFinding]:
    """Filter, sort and truncate a timeline the way the findings endpoint exposes it."""
    result = list(findings)
    if status:
        result = [f for f in result if f.status == status]
    if severity:
        result = [f for f in result if f.severity == severity.lower()]
    if repo:
        needle = repo.lower()
        result = [f for f in result if f.repo and needle in str(f.repo).lower()]
    if agent:
        result = [f for f in result if f.agent.lower() == agent.lower()]

    if sort == "firstSeen":
        result.sort(key=lambda f: f.first_seen)
    elif sort == "status":
        result.sort(key=lambda f: TIMELINE_STATUS_RANK.get(f.status, len(TIMELINE_STATUS_RANK)))
    else:
        result.sort(key=lambda f: severity_rank(f.severity))

    if limit is not None:
        result = result[:limit]
    return result
