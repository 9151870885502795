"""Findings timeline endpoint."""

from fastapi import APIRouter, Query

from auditdash.dependencies import Store
from auditdash.errors.exceptions import AuditDashError
from auditdash.services.findings import build_timeline, query_timeline

router = APIRouter(prefix="/api", tags=["Findings"])


@router.get("/findings")
def list_findings(
    store: Store,
    status: str | None = Query(None, description="new, recurring or resolved"),
    severity: str | None = Query(None),
    repo: str | None = Query(None, description="Case-insensitive substring match"),
    agent: str | None = Query(None),
    limit: int | None = Query(None),
    sort: str | None = Query(None, description="severity (default), firstSeen or status"),
) -> list[dict]:
    """Every finding ever reported, deduplicated by title and tagged new / recurring / resolved."""
    try:
        timeline = build_timeline(store.list_dates(), store.load_reports)
        findings = query_timeline(
            timeline,
            status=status,
            severity=severity,
            repo=repo,
            agent=agent,
            sort=sort,
            limit=limit,
        )
    except AuditDashError:
        raise
    except Exception as exc:
        raise AuditDashError("FINDINGS_ERROR", str(exc)) from exc
    return [f.to_response() for f in findings]
