# niveau_lacs/models.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone
from typing import Any, Optional

from .errors import LakeLevelError


@dataclass(frozen=True)
class LevelRecord:
    """
    Current state of one lake, as read from the source table.

    `date` is the later of the two header dates; `today` is the level on
    that date and `yesterday` the level in the other date column.
    """
    name: str
    max_level: float
    date: date
    today: float
    yesterday: float

    def to_store_dict(self) -> dict[str, Any]:
        """
        Field names and encoding used on the wire.

        The date goes out as an RFC 3339 UTC timestamp at midnight.
        """
        ts = datetime(self.date.year, self.date.month, self.date.day, tzinfo=timezone.utc)
        return {
            "name": self.name,
            "max_level": self.max_level,
            "date": ts.strftime("%Y-%m-%dT%H:%M:%SZ"),
            "today": self.today,
            "yesterday": self.yesterday,
        }

    @classmethod
    def from_store_dict(cls, data: dict[str, Any]) -> "LevelRecord":
        raw = str(data.get("date") or "").strip()
        dt = datetime.fromisoformat(raw.replace("Z", "+00:00"))
        return cls(
            name=str(data.get("name") or ""),
            max_level=float(data.get("max_level") or 0.0),
            date=dt.date(),
            today=float(data.get("today") or 0.0),
            yesterday=float(data.get("yesterday") or 0.0),
        )


@dataclass(frozen=True)
class SyncOutcome:
    """
    Result of one sync run.

    `written` counts records stored before the run finished or aborted.
    """
    ok: bool
    error: Optional[LakeLevelError] = None
    written: int = 0

    @classmethod
    def success(cls, written: int) -> "SyncOutcome":
        return cls(ok=True, written=written)

    @classmethod
    def failure(cls, error: LakeLevelError, written: int = 0) -> "SyncOutcome":
        return cls(ok=False, error=error, written=written)
