"""Day-over-day diff endpoint."""

from fastapi import APIRouter

from auditdash.dependencies import Store
from auditdash.errors.exceptions import AuditDashError, NotFoundError, ValidationError
from auditdash.services.diff import diff, previous_date

router = APIRouter(prefix="/api", tags=["Diff"])


@router.get("/diff/{date1}")
@router.get("/diff/{date1}/{date2}")
def diff_dates(date1: str, store: Store, date2: str | None = None) -> dict:
    """Compare ``date1`` against ``date2`` (default: the audit day before ``date1``)."""
    if not store.has_date(date1):
        raise NotFoundError("Report date", date1)
    if date2 is None:
        date2 = previous_date(store.list_dates(), date1)
        if date2 is None:
            raise ValidationError("No previous date available")
    elif not store.has_date(date2):
        raise NotFoundError("Report date", date2)

    try:
        result = diff(
            store.load_reports(date1),
            store.load_reports(date2),
            current_date=date1,
            baseline_date=date2,
        )
    except Exception as exc:
        raise AuditDashError("DIFF_ERROR", str(exc)) from exc
    return result.to_response()
