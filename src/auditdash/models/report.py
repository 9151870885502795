"""Normalized per-agent report model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from auditdash.models.enums import ReportStatus


class NormalizedReport(BaseModel):
    """Common shape produced for every agent report.

    Kind-specific fields (``findings``, ``findingCounts``, ``repos``,
    ``healthScores``, ``priorities`` ...) are carried as pydantic extras so
    they serialize alongside the core fields under the names the dashboard
    reads.
    """

    model_config = ConfigDict(extra="allow")

    agent: str
    status: ReportStatus = ReportStatus.UNKNOWN
    score: int | None = Field(None, ge=0, le=100)
    summary: str = ""
    raw: Any = None

    def field(self, name: str, default: Any = None) -> Any:
        """Return a kind-specific field, or ``default`` if this kind does not expose it."""
        return (self.model_extra or {}).get(name, default)

    def has_field(self, name: str) -> bool:
        return name in (self.model_extra or {})

    def to_response(self) -> dict:
        return self.model_dump(mode="json")
