"""Day-over-day diff models."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ScoreChange(BaseModel):
    agent: str
    before: int | None = None
    after: int | None = None
    delta: int | None = None  # None unless both sides are scored


class DiffResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    date1: str | None = None
    date2: str | None = None
    score_changes: list[ScoreChange] = Field(default_factory=list)
    new_findings: list[dict] = Field(default_factory=list)
    resolved_findings: list[dict] = Field(default_factory=list)

    def to_response(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
