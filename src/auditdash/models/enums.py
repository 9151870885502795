"""String enums for agent kinds, report statuses and finding classifications."""

from enum import StrEnum


class AgentKind(StrEnum):
    SECURITY = "security"
    QUALITY = "quality"
    INFRA = "infra"
    DEPENDENCIES = "dependencies"
    LIGHTHOUSE = "lighthouse"
    CONSISTENCY = "consistency"
    ROADMAP = "roadmap"
    DIGEST = "digest"
    META = "meta"


class ReportStatus(StrEnum):
    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"
    UNKNOWN = "unknown"


class Severity(StrEnum):
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    INFO = "info"


class TimelineStatus(StrEnum):
    NEW = "new"
    RECURRING = "recurring"
    RESOLVED = "resolved"


# Fixed comparison order for day-over-day score changes
SCORED_AGENTS: tuple[AgentKind, ...] = (
    AgentKind.SECURITY,
    AgentKind.QUALITY,
    AgentKind.INFRA,
    AgentKind.DEPENDENCIES,
    AgentKind.LIGHTHOUSE,
    AgentKind.CONSISTENCY,
    AgentKind.ROADMAP,
)

# Agents that never contribute to the portfolio health score
UNSCORED_AGENTS: frozenset[str] = frozenset({AgentKind.META, AgentKind.DIGEST})

SEVERITY_RANK: dict[str, int] = {
    Severity.CRITICAL: 0,
    Severity.HIGH: 1,
    Severity.MEDIUM: 2,
    Severity.LOW: 3,
    Severity.INFO: 4,
}

TIMELINE_STATUS_RANK: dict[str, int] = {
    TimelineStatus.NEW: 0,
    TimelineStatus.RECURRING: 1,
    TimelineStatus.RESOLVED: 2,
}
