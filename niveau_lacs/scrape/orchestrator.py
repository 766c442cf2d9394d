# niveau_lacs/scrape/orchestrator.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from ..config import PAGE_URL, STORE_ROOT
from ..errors import ExtractError, FetchError, StoreError
from ..models import SyncOutcome
from ..storage.base import RecordStore
from ..utils import store_path
from .http import Fetcher
from .lakes import Lakes, extract

logger = logging.getLogger(__name__)

ProgressCB = Callable[[int, int, str], None]


def scrape(fetcher: Fetcher, url: str = PAGE_URL) -> Lakes:
    """
    Fetch the page and extract it. Raises FetchError / ExtractError.
    """
    html = fetcher.fetch(url)
    return extract(html)


def sync(
    *,
    fetcher: Fetcher,
    store: RecordStore,
    url: str = PAGE_URL,
    root: str = STORE_ROOT,
    progress_cb: Optional[ProgressCB] = None,
) -> SyncOutcome:
    """
    One run: fetch, extract, then write every lake at <root>/<name>.

    The first failing write aborts the rest; records already written
    stay written.
    """
    try:
        html = fetcher.fetch(url)
    except FetchError as exc:
        logger.error("Error fetching URL %s: %s", url, exc)
        return SyncOutcome.failure(exc)

    try:
        lakes = extract(html)
    except ExtractError as exc:
        logger.error("Error scraping data: %s", exc)
        return SyncOutcome.failure(exc)

    logger.info("Lakes: %s", lakes)

    total = len(lakes)
    written = 0
    for name, record in lakes.items():
        path = store_path(root, name)
        try:
            store.set_record(path, record)
        except StoreError as exc:
            logger.error("Error writing %s (%d/%d written): %s", path, written, total, exc)
            return SyncOutcome.failure(exc, written=written)

        written += 1
        if progress_cb:
            progress_cb(written, total, f"Stored ({written}/{total})\n{path}")

    return SyncOutcome.success(written)
