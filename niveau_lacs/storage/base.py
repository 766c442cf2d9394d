# niveau_lacs/storage/base.py
from __future__ import annotations

from pathlib import Path
from typing import Protocol

from ..config import DATABASE_URL, DEFAULT_CSV_FILE, DEFAULT_STORE
from ..models import LevelRecord


class RecordStore(Protocol):
    """
    Key-value store holding the latest record per path.

    set_record overwrites whatever is stored at `path` and raises
    StoreError on failure.
    """

    def set_record(self, path: str, record: LevelRecord) -> None: ...


STORE_KINDS = ("firebase", "csv")


def open_store(
    kind: str = DEFAULT_STORE,
    *,
    database_url: str = DATABASE_URL,
    csv_file: Path = DEFAULT_CSV_FILE,
) -> RecordStore:
    if kind == "firebase":
        from .firebase import FirebaseStore

        return FirebaseStore(database_url)
    if kind == "csv":
        from .csv_cache import CsvStore

        return CsvStore(Path(csv_file).expanduser().resolve())
    raise ValueError(f"unknown store {kind!r} (expected one of {', '.join(STORE_KINDS)})")
