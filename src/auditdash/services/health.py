"""Portfolio health score across one day's normalized reports."""

from collections.abc import Iterable

from auditdash.models.enums import UNSCORED_AGENTS
from auditdash.models.report import NormalizedReport
from auditdash.services.normalizer import round_half_up

_GRADE_FLOORS = ((90, "A"), (80, "B"), (70, "C"), (60, "D"))


def health_score(reports: Iterable[NormalizedReport]) -> int | None:
    """Rounded mean of every scored agent, excluding meta and digest.

    Returns None when no report carries a score.
    """
    scores = [
        r.score
        for r in reports
        if r.agent not in UNSCORED_AGENTS and r.score is not None
    ]
    if not scores:
        return None
    return round_half_up(sum(scores) / len(scores))


def health_delta(today: int | None, yesterday: int | None) -> int | None:
    if today is None or yesterday is None:
        return None
    return today - yesterday


def grade_from_score(score: int | None) -> str | None:
    """Letter grade for agents whose report does not carry one."""
    if score is None:
        return None
    for floor, grade in _GRADE_FLOORS:
        if score >= floor:
            return grade
    return "F"
