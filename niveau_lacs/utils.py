# niveau_lacs/utils.py
from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional
from urllib.parse import quote

from .config import HEADER_DATE_FORMAT, MSM_PATTERN

_MSM_RE = re.compile(MSM_PATTERN, re.ASCII)


def clean_text(s: Optional[str]) -> str:
    return (s or "").strip()


def parse_msm(text: Optional[str]) -> Optional[float]:
    """
    "675.20 msm" -> 675.2

    Returns None when the cell carries no msm reading, so the caller
    decides what an absent level is stored as.
    """
    m = _MSM_RE.search(text or "")
    if not m:
        return None
    try:
        return float(m.group(1))
    except ValueError:
        return None


def parse_header_date(text: Optional[str]) -> Optional[date]:
    """
    "2.1.2024" -> date(2024, 1, 2)

    Only day.month.4-digit-year is accepted.
    """
    s = clean_text(text)
    if not re.fullmatch(r"\d{1,2}\.\d{1,2}\.\d{4}", s):
        return None
    try:
        return datetime.strptime(s, HEADER_DATE_FORMAT).date()
    except ValueError:
        return None


def store_path(root: str, name: str) -> str:
    """
    Path of a lake's record below the store root.
    """
    return f"{root.strip('/')}/{name}"


def quote_path(path: str) -> str:
    """Quote each path segment for use in a REST URL."""
    return "/".join(quote(seg, safe="") for seg in path.split("/"))
