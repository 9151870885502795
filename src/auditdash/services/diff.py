"""Day-over-day diff of agent scores and findings."""

from collections.abc import Iterable, Sequence

from auditdash.models.diff import DiffResult, ScoreChange
from auditdash.models.enums import SCORED_AGENTS
from auditdash.models.report import NormalizedReport
from auditdash.services.findings import collect_findings


def previous_date(dates: Sequence[str], date: str) -> str | None:
    """Return the audit day immediately before ``date``, or None."""
    ordered = sorted(dates)
    if date not in ordered:
        return None
    idx = ordered.index(date)
    return ordered[idx - 1] if idx > 0 else None


def _title_key(finding: dict) -> str:
    return str(finding.get("title") or "").lower()


def _scores_by_agent(reports: Iterable[NormalizedReport]) -> dict[str, int | None]:
    return {r.agent: r.score for r in reports}


def score_changes(
    current: list[NormalizedReport],
    baseline: list[NormalizedReport],
) -> list[ScoreChange]:
    after_scores = _scores_by_agent(current)
    before_scores = _scores_by_agent(baseline)
    changes = []
    for agent in SCORED_AGENTS:
        before = before_scores.get(agent)
        after = after_scores.get(agent)
        delta = after - before if before is not None and after is not None else None
        changes.append(ScoreChange(agent=agent, before=before, after=after, delta=delta))
    return changes


def diff(
    current: list[NormalizedReport],
    baseline: list[NormalizedReport],
    current_date: str | None = None,
    baseline_date: str | None = None,
) -> DiffResult:
    """Compare ``current`` (later day) against ``baseline`` (earlier day).

    Every scored agent kind gets a score change even when absent on both days.
    Findings match on lower-cased title only; agent and repo are not compared.
    """
    current_findings = collect_findings(current)
    baseline_findings = collect_findings(baseline)
    current_titles = {_title_key(f) for f in current_findings}
    baseline_titles = {_title_key(f) for f in baseline_findings}

    return DiffResult(
        date1=current_date,
        date2=baseline_date,
        score_changes=score_changes(current, baseline),
        new_findings=[f for f in current_findings if _title_key(f) not in baseline_titles],
        resolved_findings=[f for f in baseline_findings if _title_key(f) not in current_titles],
    )
