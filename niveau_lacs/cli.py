# niveau_lacs/cli.py
from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path

from niveau_lacs.config import DEFAULT_CSV_FILE, DEFAULT_STORE, PAGE_URL
from niveau_lacs.errors import LakeLevelError
from niveau_lacs.log import setup_logging
from niveau_lacs.scrape.http import CloudscraperFetcher
from niveau_lacs.scrape.lakes import Lakes
from niveau_lacs.scrape.orchestrator import scrape, sync
from niveau_lacs.storage.base import STORE_KINDS, open_store


def format_lakes(lakes: Lakes) -> str:
    """
    One line per lake:
      Lac de la Gruyère   2024-01-02  today 675.20  yesterday 674.80  max 680.50
    """
    if not lakes:
        return "No lakes found."
    width = max(len(name) for name in lakes)
    lines = []
    for name in sorted(lakes):
        r = lakes[name]
        lines.append(
            f"{name:<{width}}  {r.date.isoformat()}  today {r.today:.2f}  "
            f"yesterday {r.yesterday:.2f}  max {r.max_level:.2f}"
        )
    return "\n".join(lines)


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch Fribourg lake levels and store the latest readings.")
    p.add_argument("--url", default=PAGE_URL, help="Lake level page (default: Groupe E)")
    p.add_argument("--cookie", default=os.environ.get("NIVEAU_LACS_COOKIE", ""), help="Cookie header for the page")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = p.add_subparsers(dest="command")

    s = sub.add_parser("sync", help="Fetch, extract and write every lake (default)")
    s.add_argument("--store", choices=STORE_KINDS, default=DEFAULT_STORE, help="Where records go")
    s.add_argument("--csv", default=str(DEFAULT_CSV_FILE), help="Snapshot file for --store csv")

    sub.add_parser("show", help="Fetch and print the current readings without storing them")

    sv = sub.add_parser("serve", help="Run the HTTP trigger (GET /)")
    sv.add_argument("--addr", default="127.0.0.1:8000", help="host:port to bind")

    sub.add_parser("ui", help="Launch Textual UI")

    # bare `niveau-lacs` behaves like `niveau-lacs sync`
    p.set_defaults(command="sync", store=DEFAULT_STORE, csv=str(DEFAULT_CSV_FILE))
    return p.parse_args(argv)


def cmd_sync(args: argparse.Namespace) -> int:
    store = open_store(args.store, csv_file=Path(args.csv))
    try:
        outcome = sync(fetcher=CloudscraperFetcher(cookie=args.cookie), store=store, url=args.url)
    finally:
        close = getattr(store, "close", None)
        if close:
            close()

    if not outcome.ok:
        print(f"Failed ({type(outcome.error).__name__}): {outcome.error}", file=sys.stderr)
        return 1
    print(f"Done ({outcome.written} lakes)")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    try:
        lakes = scrape(CloudscraperFetcher(cookie=args.cookie), args.url)
    except LakeLevelError as exc:
        print(f"Failed ({type(exc).__name__}): {exc}", file=sys.stderr)
        return 1
    print(format_lakes(lakes))
    return 0


def cmd_serve(args: argparse.Namespace) -> int:
    from django.core.management import execute_from_command_line

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "niveau_lacs.web.settings")
    execute_from_command_line(["niveau-lacs", "runserver", args.addr, "--noreload"])
    return 0


def cmd_ui(args: argparse.Namespace) -> int:
    from niveau_lacs.ui.app import LakeLevelsApp

    app = LakeLevelsApp(url=args.url, cookie=args.cookie)
    app.run()
    return 0


COMMANDS = {
    "sync": cmd_sync,
    "show": cmd_show,
    "serve": cmd_serve,
    "ui": cmd_ui,
}


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging("DEBUG" if args.verbose else "INFO")
    return COMMANDS[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
