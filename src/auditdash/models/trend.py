"""Per-agent score time series."""

from pydantic import BaseModel, Field

from auditdash.models.enums import ReportStatus


class TrendPoint(BaseModel):
    date: str
    score: int | None = None
    status: ReportStatus


class TrendSeries(BaseModel):
    """``dates`` lists every day in the window; ``data`` holds one ascending series per agent."""

    dates: list[str] = Field(default_factory=list)
    data: dict[str, list[TrendPoint]] = Field(default_factory=dict)

    def to_response(self) -> dict:
        return self.model_dump(mode="json")
