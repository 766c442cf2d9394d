# niveau_lacs/errors.py
from __future__ import annotations


class LakeLevelError(Exception):
    """Base class for everything that can end a sync run."""


class FetchError(LakeLevelError):
    """The source page could not be retrieved."""


class ExtractError(LakeLevelError):
    """The page was retrieved but the lake table could not be read."""


class ParseFailure(ExtractError):
    """Content is not HTML we can build a document tree from."""


class HeaderParseFailure(ExtractError):
    """Header date cells are missing or not in day.month.year form."""


class StoreError(LakeLevelError):
    """Writing a record to the store failed."""
