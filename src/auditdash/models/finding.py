"""Findings timeline model."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from auditdash.models.enums import TimelineStatus


class TimelineFinding(BaseModel):
    """One deduplicated finding folded across every audit day it appeared in."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    severity: str
    repo: str | None = None
    agent: str
    first_seen: str
    last_seen: str
    occurrences: int = 1
    status: TimelineStatus = TimelineStatus.NEW

    def to_response(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
