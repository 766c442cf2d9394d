# niveau_lacs/scrape/http.py
from __future__ import annotations

from typing import Protocol

import cloudscraper
import requests
from cloudscraper.exceptions import CloudflareException

from ..config import HTTP_TIMEOUT, UA
from ..errors import FetchError


class Fetcher(Protocol):
    def fetch(self, url: str) -> str: ...


class CloudscraperFetcher:
    """
    Fetch a page with cloudscraper and return its text.

    Single attempt, no retry. Any transport or HTTP status error is
    raised as FetchError.
    """

    def __init__(self, *, cookie: str = "", timeout: int = HTTP_TIMEOUT):
        self.cookie = cookie
        self.timeout = timeout

    def fetch(self, url: str) -> str:
        headers = {
            "User-Agent": UA,
        }
        if self.cookie:
            headers["Cookie"] = self.cookie

        scraper = cloudscraper.create_scraper(
            browser={"browser": "chrome", "platform": "linux", "mobile": False}
        )
        try:
            resp = scraper.get(url, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            return resp.text
        except (requests.RequestException, CloudflareException) as exc:
            raise FetchError(f"GET {url} failed: {exc}") from exc
        finally:
            scraper.close()
