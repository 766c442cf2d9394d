# niveau_lacs/storage/firebase.py
from __future__ import annotations

import logging
from typing import Optional

import requests

from ..config import DATABASE_URL, HTTP_TIMEOUT, UA
from ..errors import StoreError
from ..models import LevelRecord
from ..utils import quote_path

logger = logging.getLogger(__name__)


class FirebaseStore:
    """
    Firebase Realtime Database over its REST API.

    PUT <database_url>/<path>.json replaces the node at `path`.
    """

    def __init__(
        self,
        database_url: str = DATABASE_URL,
        *,
        session: Optional[requests.Session] = None,
        timeout: int = HTTP_TIMEOUT,
    ):
        self.database_url = database_url.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": UA, "Content-Type": "application/json"})
        self.timeout = timeout

    def url_for(self, path: str) -> str:
        return f"{self.database_url}/{quote_path(path.strip('/'))}.json"

    def set_record(self, path: str, record: LevelRecord) -> None:
        # An empty key would address the parent node and replace all of it
        if not path.rsplit("/", 1)[-1]:
            raise StoreError(f"refusing to write {path!r}: empty key")

        url = self.url_for(path)
        try:
            resp = self.session.put(url, json=record.to_store_dict(), timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise StoreError(f"PUT {path} failed: {exc}") from exc
        logger.debug("Stored %s", path)

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "FirebaseStore":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
