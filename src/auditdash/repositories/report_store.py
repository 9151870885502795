"""Read-only access to the on-disk report layout.

    <data_dir>/<YYYY-MM-DD>/<agent>.json   one per agent
    <data_dir>/<YYYY-MM-DD>/<agent>.md     optional rendering

Files are written once by the external audit job and never modified here.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any

from auditdash.errors.exceptions import NotFoundError, ReportParseError
from auditdash.models.report import NormalizedReport
from auditdash.services.normalizer import normalize

logger = logging.getLogger(__name__)

DATE_DIR_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_AGENT_NAME_RE = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.-]*$")


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _parse_json(text: str) -> Any:
    """Strict JSON: ``NaN`` and ``Infinity`` make the file malformed."""
    return json.loads(text, parse_constant=_reject_constant)


class ReportStore:
    def __init__(self, data_dir: Path | str):
        self.data_dir = Path(data_dir)

    # ------------------------------------------------------------------
    # Paths
    # ------------------------------------------------------------------

    def _date_dir(self, date: str) -> Path | None:
        if not DATE_DIR_RE.match(date):
            return None
        return self.data_dir / date

    def _agent_file(self, date: str, agent: str, suffix: str) -> Path | None:
        date_dir = self._date_dir(date)
        if date_dir is None or not _AGENT_NAME_RE.match(agent) or ".." in agent:
            return None
        return date_dir / f"{agent}{suffix}"

    # ------------------------------------------------------------------
    # Dates
    # ------------------------------------------------------------------

    def list_dates(self) -> list[str]:
        """Ascending names of every valid date directory."""
        try:
            entries = list(self.data_dir.iterdir())
        except OSError:
            logger.warning("Data directory %s is not readable", self.data_dir)
            return []
        return sorted(e.name for e in entries if e.is_dir() and DATE_DIR_RE.match(e.name))

    def has_date(self, date: str) -> bool:
        date_dir = self._date_dir(date)
        return date_dir is not None and date_dir.is_dir()

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    def load_raw(self, date: str) -> dict[str, Any]:
        """Return ``{agent: raw_json}`` for a date.

        Unreadable or malformed files are logged and left out; a missing date
        directory yields an empty mapping.
        """
        date_dir = self._date_dir(date)
        if date_dir is None or not date_dir.is_dir():
            return {}
        raw_reports: dict[str, Any] = {}
        for path in sorted(date_dir.glob("*.json")):
            try:
                raw_reports[path.stem] = _parse_json(path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                logger.warning("Skipping unreadable report %s: %s", path, exc)
        return raw_reports

    def load_reports(self, date: str) -> list[NormalizedReport]:
        return [normalize(agent, raw) for agent, raw in self.load_raw(date).items()]

    def load_report(self, date: str, agent: str) -> NormalizedReport:
        path = self._agent_file(date, agent, ".json")
        if path is None or not path.is_file():
            raise NotFoundError("Report", f"{date}/{agent}")
        try:
            raw = _parse_json(path.read_text(encoding="utf-8"))
        except ValueError as exc:
            raise ReportParseError(str(path), str(exc)) from exc
        return normalize(agent, raw)

    def read_markdown(self, date: str, agent: str) -> str:
        path = self._agent_file(date, agent, ".md")
        if path is None or not path.is_file():
            raise NotFoundError("Markdown report", f"{date}/{agent}")
        return path.read_text(encoding="utf-8")
