from datetime import date
from unittest.mock import Mock

import pytest
import requests

from conftest import GRUYERE as GRUYERE_ROW, FakeFetcher, lake_page
from niveau_lacs.errors import StoreError
from niveau_lacs.models import LevelRecord
from niveau_lacs.scrape.orchestrator import sync
from niveau_lacs.storage.base import open_store
from niveau_lacs.storage.csv_cache import CsvStore, load_snapshot
from niveau_lacs.storage.firebase import FirebaseStore
from niveau_lacs.utils import store_path

GRUYERE = LevelRecord("Lac de la Gruyère", 680.5, date(2024, 1, 2), 675.2, 674.8)
NOIR = LevelRecord("Lac Noir", 0.0, date(2024, 1, 2), 1046.12, 1046.1)


def test_firebase_put():
    session = Mock(spec=requests.Session)
    session.headers = {}
    store = FirebaseStore("https://example.firebaseio.com/", session=session, timeout=5)

    store.set_record("current/Lac de la Gruyère", GRUYERE)

    session.put.assert_called_once_with(
        "https://example.firebaseio.com/current/Lac%20de%20la%20Gruy%C3%A8re.json",
        json=GRUYERE.to_store_dict(),
        timeout=5,
    )
    session.put.return_value.raise_for_status.assert_called_once()


def test_firebase_error_becomes_store_error():
    session = Mock(spec=requests.Session)
    session.headers = {}
    session.put.side_effect = requests.ConnectionError("unreachable")
    store = FirebaseStore("https://example.firebaseio.com", session=session)

    with pytest.raises(StoreError, match="current/Lac Noir"):
        store.set_record("current/Lac Noir", NOIR)


def test_firebase_http_status_becomes_store_error():
    session = Mock(spec=requests.Session)
    session.headers = {}
    session.put.return_value.raise_for_status.side_effect = requests.HTTPError("401 Unauthorized")
    store = FirebaseStore("https://example.firebaseio.com", session=session)

    with pytest.raises(StoreError):
        store.set_record("current/Lac Noir", NOIR)


def test_firebase_refuses_empty_key():
    session = Mock(spec=requests.Session)
    session.headers = {}
    store = FirebaseStore("https://example.firebaseio.com", session=session)
    nameless = LevelRecord("", 680.5, date(2024, 1, 2), 675.2, 674.8)

    with pytest.raises(StoreError, match="empty key"):
        store.set_record(store_path("current", ""), nameless)

    session.put.assert_not_called()


def test_sync_stops_at_nameless_lake():
    html = lake_page(rows=[GRUYERE_ROW, ("", "680.50 msm", "675.20 msm", "674.80 msm")])
    session = Mock(spec=requests.Session)
    session.headers = {}
    store = FirebaseStore("https://example.firebaseio.com", session=session)

    outcome = sync(fetcher=FakeFetcher(html), store=store)

    assert not outcome.ok
    assert isinstance(outcome.error, StoreError)
    assert outcome.written == 1
    assert session.put.call_count == 1
    assert session.put.call_args[0][0].endswith("/current/Lac%20de%20la%20Gruy%C3%A8re.json")


def test_firebase_context_closes_session():
    session = Mock(spec=requests.Session)
    session.headers = {}
    with FirebaseStore(session=session):
        pass
    session.close.assert_called_once()


def test_csv_store_upserts_by_path(tmp_path):
    store = CsvStore(tmp_path / "lakes.csv")

    store.set_record("current/Lac de la Gruyère", GRUYERE)
    store.set_record("current/Lac Noir", NOIR)
    newer = LevelRecord("Lac Noir", 0.0, date(2024, 1, 3), 1046.2, 1046.12)
    store.set_record("current/Lac Noir", newer)

    assert store.records() == {
        "current/Lac de la Gruyère": GRUYERE,
        "current/Lac Noir": newer,
    }


def test_csv_store_bad_row_is_store_error(tmp_path):
    cache = tmp_path / "lakes.csv"
    cache.write_text(
        "key,name,max_level,date,today,yesterday\n"
        "current/Lac Noir,Lac Noir,0.0,,1046.12,1046.1\n",
        encoding="utf-8",
    )
    store = CsvStore(cache)

    with pytest.raises(StoreError, match="bad row 0"):
        store.set_record("current/Lac de la Gruyère", GRUYERE)


def test_sync_reports_corrupt_snapshot(tmp_path, page):
    cache = tmp_path / "lakes.csv"
    cache.write_text(
        "key,name,max_level,date,today,yesterday\n"
        "current/Lac Noir,Lac Noir,0.0,yesterday,1046.12,1046.1\n",
        encoding="utf-8",
    )

    outcome = sync(fetcher=FakeFetcher(page), store=CsvStore(cache))

    assert not outcome.ok
    assert isinstance(outcome.error, StoreError)
    assert outcome.written == 0


def test_csv_snapshot_missing_file(tmp_path):
    assert load_snapshot(tmp_path / "nope.csv") == {}


def test_open_store(tmp_path):
    assert isinstance(open_store("csv", csv_file=tmp_path / "x.csv"), CsvStore)
    assert isinstance(open_store("firebase"), FirebaseStore)
    with pytest.raises(ValueError):
        open_store("sqlite")
