# niveau_lacs/web/views.py
from __future__ import annotations

import logging

from django.http import HttpResponse, HttpResponseServerError
from django.views.decorators.http import require_GET

from niveau_lacs.config import PAGE_URL
from niveau_lacs.scrape.http import CloudscraperFetcher
from niveau_lacs.scrape.orchestrator import sync
from niveau_lacs.storage.base import open_store

logger = logging.getLogger(__name__)

ERROR_BODY = "Application Server Error"


def build_fetcher():
    return CloudscraperFetcher()


def build_store():
    return open_store()


@require_GET
def update_levels(request):
    """
    Called by the scheduler. Runs one sync.

    The response never says which step failed; that only goes to the log.
    """
    try:
        store = build_store()
    except Exception:
        logger.exception("Error opening store")
        return HttpResponseServerError(ERROR_BODY, content_type="text/plain")

    try:
        outcome = sync(fetcher=build_fetcher(), store=store, url=PAGE_URL)
    except Exception:
        logger.exception("Unexpected error during sync")
        return HttpResponseServerError(ERROR_BODY, content_type="text/plain")
    finally:
        close = getattr(store, "close", None)
        if close:
            close()

    if not outcome.ok:
        logger.error("Sync failed after %d writes: %s", outcome.written, type(outcome.error).__name__)
        return HttpResponseServerError(ERROR_BODY, content_type="text/plain")

    return HttpResponse("Done\n", content_type="text/plain")
