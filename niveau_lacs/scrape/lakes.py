# niveau_lacs/scrape/lakes.py
from __future__ import annotations

import logging
from typing import Dict, Union

from bs4 import BeautifulSoup, ParserRejectedMarkup

from ..config import MISSING_LEVEL
from ..errors import ParseFailure
from ..models import LevelRecord
from ..utils import parse_msm
from .table import LakeTable

logger = logging.getLogger(__name__)

Lakes = Dict[str, LevelRecord]


def parse_document(html_content: Union[str, bytes]) -> BeautifulSoup:
    """
    Build the document tree, or raise ParseFailure.

    html.parser tolerates broken markup; content with no element at all
    is rejected since there is nothing to look a table up in.
    """
    if not isinstance(html_content, (str, bytes)):
        raise ParseFailure(f"expected str or bytes, got {type(html_content).__name__}")

    try:
        soup = BeautifulSoup(html_content, "html.parser")
    except ParserRejectedMarkup as exc:
        raise ParseFailure(f"markup rejected by parser: {exc}") from exc

    if soup.find() is None:
        raise ParseFailure("content contains no HTML elements")
    return soup


def _level(text: str, missing_level: float) -> float:
    v = parse_msm(text)
    return missing_level if v is None else v


def extract(
    html_content: Union[str, bytes],
    *,
    missing_level: float = MISSING_LEVEL,
) -> Lakes:
    """
    Read the lake table of the Groupe E page.

    Returns:
      { lake name -> LevelRecord }

    Raises:
      ParseFailure        content is not HTML
      HeaderParseFailure  header date cells missing or malformed
    """
    soup = parse_document(html_content)
    table = LakeTable.locate(soup)

    date1, date2 = table.header_dates()
    logger.debug("Header dates %s / %s (table found: %s)", date1, date2, table.found)

    result: Lakes = {}
    for row in table.rows():
        l1 = _level(row.level_1, missing_level)
        l2 = _level(row.level_2, missing_level)

        if date1 > date2:
            day, today, yesterday = date1, l1, l2
        else:
            day, today, yesterday = date2, l2, l1

        if not row.name:
            logger.warning("Lake row without a name (date=%s, today=%s)", day, today)

        result[row.name] = LevelRecord(
            name=row.name,
            max_level=_level(row.max_level, missing_level),
            date=day,
            today=today,
            yesterday=yesterday,
        )
        logger.debug("Lake %r: today=%s yesterday=%s", row.name, today, yesterday)

    return result
