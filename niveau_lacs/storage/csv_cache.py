# niveau_lacs/storage/csv_cache.py
from __future__ import annotations

from pathlib import Path
from typing import Dict

import pandas as pd

from ..config import CSV_COLUMNS
from ..errors import StoreError
from ..models import LevelRecord


def load_snapshot(cache_file: Path) -> Dict[str, LevelRecord]:
    """
    Load the snapshot CSV and index by store path.

    Returns:
      { path -> LevelRecord }
    """
    if not cache_file.exists():
        return {}

    try:
        df = pd.read_csv(cache_file, dtype={"key": str, "name": str}, keep_default_na=False)
    except (OSError, ValueError, pd.errors.EmptyDataError) as exc:
        raise StoreError(f"cannot read {cache_file}: {exc}") from exc

    out: Dict[str, LevelRecord] = {}
    for i, row in df.iterrows():
        key = str(row.get("key", ""))
        try:
            out[key] = LevelRecord.from_store_dict(row.to_dict())
        except (TypeError, ValueError) as exc:
            raise StoreError(f"bad row {i} ({key!r}) in {cache_file}: {exc}") from exc
    return out


def write_snapshot(cache_file: Path, records: Dict[str, LevelRecord]) -> None:
    """
    Write the snapshot in a stable column order.
    """
    rows = []
    for key, record in records.items():
        rows.append({"key": key, **record.to_store_dict()})

    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    try:
        df.to_csv(cache_file, index=False)
    except OSError as exc:
        raise StoreError(f"cannot write {cache_file}: {exc}") from exc


class CsvStore:
    """
    Local stand-in for the database: one CSV row per path, latest value only.
    """

    def __init__(self, cache_file: Path):
        self.cache_file = Path(cache_file)

    def set_record(self, path: str, record: LevelRecord) -> None:
        records = load_snapshot(self.cache_file)
        records[path] = record
        write_snapshot(self.cache_file, records)

    def records(self) -> Dict[str, LevelRecord]:
        return load_snapshot(self.cache_file)
