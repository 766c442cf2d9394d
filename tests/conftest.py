import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "niveau_lacs.web.settings")
django.setup()


def lake_page(dates=("2.1.2024", "1.1.2024"), rows=(), *, with_table=True):
    """Build a page shaped like the Groupe E lake level table."""
    head = "".join(
        f"<th>{h}</th>" for h in ("Lac", "Niveau max", *dates)
    )
    body = "".join(
        "<tr>" + "".join(f"<td>{c}</td>" for c in row) + "</tr>"
        for row in rows
    )
    table = (
        f"<table class='lakes'><thead><tr>{head}</tr></thead><tbody>{body}</tbody></table>"
        if with_table
        else "<p>Aucune donnée</p>"
    )
    return f"<html><head><title>Niveau des lacs</title></head><body><h1>Niveau des lacs</h1>{table}</body></html>"


GRUYERE = ("Lac de la Gruyère", "680.50 msm", "675.20 msm", "674.80 msm")
SCHIFFENEN = ("Lac de Schiffenen", "532.00 msm", "531.10 msm", "531.35 msm")


class FakeFetcher:
    def __init__(self, html="", error=None):
        self.html = html
        self.error = error
        self.calls = []

    def fetch(self, url):
        self.calls.append(url)
        if self.error:
            raise self.error
        return self.html


class FakeStore:
    def __init__(self, fail_on=None, error=None):
        self.records = {}
        self.calls = []
        self.fail_on = fail_on
        self.error = error

    def set_record(self, path, record):
        self.calls.append(path)
        if self.fail_on is not None and len(self.calls) == self.fail_on:
            raise self.error
        self.records[path] = record


@pytest.fixture
def page():
    return lake_page(rows=[GRUYERE, SCHIFFENEN])
