"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient


def write_day(data_dir: Path, date: str, reports: dict, markdown: dict | None = None) -> Path:
    """Write one audit day: ``reports`` maps agent -> JSON payload (str payloads are written verbatim)."""
    day = data_dir / date
    day.mkdir(parents=True, exist_ok=True)
    for agent, payload in reports.items():
        text = payload if isinstance(payload, str) else json.dumps(payload)
        (day / f"{agent}.json").write_text(text, encoding="utf-8")
    for agent, text in (markdown or {}).items():
        (day / f"{agent}.md").write_text(text, encoding="utf-8")
    return day


SAMPLE_DAYS: dict[str, dict] = {
    "2025-12-30": {
        "security": {
            "summary": {"total": 1, "critical": 0, "high": 1, "medium": 0, "low": 0},
            "findings": [{"title": "Outdated TLS config", "severity": "high", "repo": "api"}],
        },
        "quality": {
            "score": 88,
            "grade": "B+",
            "summary": "Good",
            "repos": [{"name": "web", "findings": [{"title": "Long function", "severity": "low"}]}],
        },
        "meta": {"endTime": "2025-12-30T03:00:00Z", "durationSeconds": 100},
    },
    "2025-12-31": {
        "security": {
            "summary": {"total": 3, "critical": 1, "high": 0, "medium": 2, "low": 0},
            "findings": [
                {"title": "SQL injection in login", "severity": "critical", "repo": "api", "cwe": "CWE-89"},
                {"title": "Missing CSP header", "severity": "medium"},
                {"title": "Weak hash", "severity": "medium"},
            ],
        },
        "quality": {"score": 72, "grade": "C"},
        "roadmap": {
            "portfolioHealth": 64,
            "priorities": [{"title": "Upgrade Node", "severity": "high", "repo": "web"}],
        },
        "broken": "{not json",
    },
    "2026-01-01": {
        "security": {
            "summary": {"total": 2, "critical": 1, "high": 0, "medium": 1, "low": 0},
            "findings": [
                {"title": "SQL Injection in login", "severity": "CRITICAL"},
                {"title": "Open redirect", "severity": "medium", "repo": "web"},
            ],
        },
        "quality": {"score": 90, "grade": "A-"},
        "infra": {
            "ci": {"main": {"successRate": 0.9}, "deploy": {"successRate": 0.7}},
            "containers": [{"name": "api", "state": "running"}, {"name": "web", "state": "running"}],
            "alerts": [],
            "disk": {"usedPct": 41},
        },
        "lighthouse": {
            "sites": {
                "example.com": {"scores": {"performance": 82, "accessibility": 97}},
                "docs.example.com": {"scores": {"performance": 67}},
                "down.example.com": {"error": "timeout"},
            }
        },
        "digest": {
            "healthScores": {"api": 81, "web": 77},
            "topPriorities": ["Fix SQL injection", "Upgrade Node"],
        },
        "meta": {"endTime": "2026-01-01T03:12:00Z", "durationSeconds": 754},
    },
}

SAMPLE_MARKDOWN = {"2026-01-01": {"security": "# Security Report\n\n1 critical finding.\n"}}


@pytest.fixture
def data_dir(tmp_path) -> Path:
    """A report tree with three audit days, a malformed file and some noise."""
    root = tmp_path / "reports"
    for date, reports in SAMPLE_DAYS.items():
        write_day(root, date, reports, SAMPLE_MARKDOWN.get(date))
    (root / "notes").mkdir()
    (root / "2026-1-2").mkdir()
    (root / "README.md").write_text("not a date", encoding="utf-8")
    return root


@pytest.fixture
def app(data_dir):
    """Create a test application instance reading from the sample report tree."""
    from auditdash.main import create_app

    return create_app(data_dir=data_dir)


@pytest.fixture
async def client(app):
    """Async HTTP test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def make_day():
    """Expose ``write_day`` to tests that build their own report tree."""
    return write_day
