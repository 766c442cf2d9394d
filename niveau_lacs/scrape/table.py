# niveau_lacs/scrape/table.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterator, List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from ..errors import HeaderParseFailure
from ..utils import clean_text, parse_header_date


# Positions inside the Groupe E lake table. Layout changes upstream
# should only ever need edits in this module.
TABLE_SELECTOR = "table"
HEADER_CELL_SELECTOR = "thead tr th"
# html.parser does not insert the implied <tbody>, so bare rows count too
BODY_ROW_SELECTOR = ":scope > tbody > tr, :scope > tr"
BODY_CELL_SELECTOR = "td"

DATE_COLUMNS = (2, 3)

NAME_COL = 0
MAX_LEVEL_COL = 1


@dataclass(frozen=True)
class LakeRow:
    name: str
    max_level: str
    level_1: str  # column under header date 1
    level_2: str  # column under header date 2


class LakeTable:
    """
    Positional view over the lake table.

    A missing table behaves like an empty one: no header cells, no rows.
    """

    def __init__(self, table: Optional[Tag]):
        self.table = table

    @classmethod
    def locate(cls, soup: BeautifulSoup) -> "LakeTable":
        return cls(soup.select_one(TABLE_SELECTOR))

    @property
    def found(self) -> bool:
        return self.table is not None

    def header_cells(self) -> List[str]:
        if self.table is None:
            return []
        return [clean_text(th.get_text()) for th in self.table.select(HEADER_CELL_SELECTOR)]

    def header_dates(self) -> Tuple[date, date]:
        """
        Returns (date of column 2, date of column 3).

        Raises HeaderParseFailure when either cell is absent or malformed.
        """
        cells = self.header_cells()
        out: list[date] = []
        for col in DATE_COLUMNS:
            if col >= len(cells):
                raise HeaderParseFailure(
                    f"header cell {col} not found ({len(cells)} header cells, table found: {self.found})"
                )
            d = parse_header_date(cells[col])
            if d is None:
                raise HeaderParseFailure(f"header cell {col} is not a day.month.year date: {cells[col]!r}")
            out.append(d)
        return out[0], out[1]

    def rows(self) -> Iterator[LakeRow]:
        if self.table is None:
            return
        for tr in self.table.select(BODY_ROW_SELECTOR):
            cells = [clean_text(td.get_text()) for td in tr.select(BODY_CELL_SELECTOR)]

            def cell(i: int) -> str:
                return cells[i] if i < len(cells) else ""

            yield LakeRow(
                name=cell(NAME_COL),
                max_level=cell(MAX_LEVEL_COL),
                level_1=cell(DATE_COLUMNS[0]),
                level_2=cell(DATE_COLUMNS[1]),
            )
