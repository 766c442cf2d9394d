from datetime import date

import pytest
from bs4 import BeautifulSoup

from conftest import GRUYERE, lake_page
from niveau_lacs.errors import HeaderParseFailure
from niveau_lacs.scrape.table import LakeRow, LakeTable


def locate(html):
    return LakeTable.locate(BeautifulSoup(html, "html.parser"))


def test_header_dates_in_column_order():
    table = locate(lake_page(("1.1.2024", "2.1.2024")))

    assert table.found
    assert table.header_dates() == (date(2024, 1, 1), date(2024, 1, 2))


def test_rows():
    rows = list(locate(lake_page(rows=[GRUYERE])).rows())

    assert rows == [LakeRow("Lac de la Gruyère", "680.50 msm", "675.20 msm", "674.80 msm")]


def test_rows_without_tbody():
    html = (
        "<table><thead><tr><th>Lac</th><th>Max</th><th>2.1.2024</th><th>1.1.2024</th></tr></thead>"
        "<tr><td>Lac de la Gruyère</td><td>680.50 msm</td><td>675.20 msm</td><td>674.80 msm</td></tr>"
        "<tr><td>Lac Noir</td><td>-</td><td>1046.12 msm</td><td>1046.10 msm</td></tr>"
        "</table>"
    )
    rows = list(locate(html).rows())

    assert [r.name for r in rows] == ["Lac de la Gruyère", "Lac Noir"]


def test_header_row_is_not_a_body_row():
    names = [r.name for r in locate(lake_page(rows=[GRUYERE])).rows()]
    assert names == ["Lac de la Gruyère"]


def test_missing_table_is_empty():
    table = locate(lake_page(with_table=False))

    assert not table.found
    assert table.header_cells() == []
    assert list(table.rows()) == []
    with pytest.raises(HeaderParseFailure, match="table found: False"):
        table.header_dates()


def test_error_names_the_bad_cell():
    with pytest.raises(HeaderParseFailure, match="'invalid'"):
        locate(lake_page(("2.1.2024", "invalid"))).header_dates()
