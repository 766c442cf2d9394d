# niveau_lacs/ui/app.py
from __future__ import annotations

from typing import Any, Optional
import asyncio

from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal
from textual.reactive import reactive
from textual.widgets import Header, Footer, DataTable, Static
from textual.binding import Binding

from niveau_lacs.config import PAGE_URL
from niveau_lacs.errors import LakeLevelError
from niveau_lacs.models import LevelRecord
from niveau_lacs.scrape.http import CloudscraperFetcher, Fetcher
from niveau_lacs.scrape.orchestrator import scrape


# ----------------------------
# Small UI widgets
# ----------------------------

class StatCard(Static):
    def __init__(self, label: str, icon: str = ""):
        super().__init__()
        self.label = label
        self.icon = icon
        self.value = "-"

    def update_value(self, v: str) -> None:
        self.value = v
        self.update(f"{self.icon} {self.label}\n[b]{v}[/b]")


def trend_icon(record: LevelRecord) -> str:
    if record.today > record.yesterday:
        return "▲"
    if record.today < record.yesterday:
        return "▼"
    return "="


class Details(Static):
    can_focus = True

    def show_lake(self, record: Optional[LevelRecord]) -> None:
        if record is None:
            self.update("Select a lake…")
            return

        delta = record.today - record.yesterday
        margin = record.max_level - record.today if record.max_level else None

        lines = [
            f"[b]{record.name or 'N/A'}[/b]",
            "",
            f"Date: {record.date.isoformat()}",
            f"Today: {record.today:.2f} msm",
            f"Yesterday: {record.yesterday:.2f} msm",
            f"Change: {delta:+.2f} m {trend_icon(record)}",
            f"Max level: {record.max_level:.2f} msm" if record.max_level else "Max level: N/A",
        ]
        if margin is not None:
            lines.append(f"Below max: {margin:.2f} m")

        self.update("\n".join(lines))
        self.scroll_home()


# ----------------------------
# Main App
# ----------------------------

class LakeLevelsApp(App):
    CSS = """
    Screen {
        background: #101417;
        color: #e8eef2;
    }

    #stats_row {
        height: 4;
        margin: 1 1 1 1;
    }

    StatCard {
        width: 1fr;
        border: tall #2d3a45;
        padding: 0 2;
        background: #0b0f12;
    }

    #left_pane {
        width: 2fr;
        margin-right: 1;
    }

    #top_details {
        height: 4;
        border: tall #2d3a45;
        padding: 0 1;
        margin-bottom: 1;
        background: #0b0f12;
    }

    #list_box {
        height: 1fr;
        border: tall #2d3a45;
    }

    #details_box {
        width: 1fr;
        border: tall #2d3a45;
        padding: 0 1;
        background: #0b0f12;
    }

    DataTable {
        height: 100%;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("r", "refresh", "Refresh"),
        Binding("s", "toggle_sort", "Sort"),
        Binding("enter", "focus_details", "Details"),
        Binding("escape", "focus_list", "List"),
    ]

    sort_mode = reactive("name")

    def __init__(
        self,
        *,
        url: str = PAGE_URL,
        cookie: str = "",
        fetcher: Optional[Fetcher] = None,
    ):
        super().__init__()
        self.url = url
        self.fetcher = fetcher or CloudscraperFetcher(cookie=cookie)

        self.lakes: dict[str, LevelRecord] = {}
        self.last_error: str = ""

    # ----------------------------

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Horizontal(id="stats_row"):
            self.card_total = StatCard("Lakes", "🌊")
            self.card_date = StatCard("Date", "📅")
            self.card_rising = StatCard("Rising", "▲")
            self.card_falling = StatCard("Falling", "▼")
            yield self.card_total
            yield self.card_date
            yield self.card_rising
            yield self.card_falling

        with Horizontal():
            with Container(id="left_pane"):
                self.top_details = Details("Ready.", id="top_details")
                yield self.top_details

                self.table = DataTable(zebra_stripes=True, id="list_box")
                yield self.table

            with Container(id="details_box"):
                self.side_details = Details("Select a lake…", id="side_details")
                yield self.side_details

        yield Footer()

    # ----------------------------

    def on_mount(self) -> None:
        self.table.add_column("", width=2)
        self.table.add_column("Lake")
        self.table.add_column("Today")
        self.table.add_column("Yesterday")
        self.table.add_column("Max")

        self.table.cursor_type = "row"
        self.table.focus()

        self.call_after_refresh(self.start_scrape)

    # ----------------------------

    def sorted_records(self) -> list[LevelRecord]:
        records = list(self.lakes.values())
        if self.sort_mode == "level":
            records.sort(key=lambda r: r.today, reverse=True)
        else:
            records.sort(key=lambda r: r.name.lower())
        return records

    def apply_view(self) -> None:
        self.table.clear()

        for r in self.sorted_records():
            self.table.add_row(
                trend_icon(r),
                r.name or "N/A",
                f"{r.today:.2f}",
                f"{r.yesterday:.2f}",
                f"{r.max_level:.2f}" if r.max_level else "-",
                key=r.name,
            )

        if self.table.row_count:
            self.table.cursor_coordinate = (0, 0)

        dates = sorted({r.date for r in self.lakes.values()})
        self.card_total.update_value(str(len(self.lakes)))
        self.card_date.update_value(dates[-1].isoformat() if dates else "-")
        self.card_rising.update_value(str(sum(1 for r in self.lakes.values() if r.today > r.yesterday)))
        self.card_falling.update_value(str(sum(1 for r in self.lakes.values() if r.today < r.yesterday)))

    # ----------------------------
    # Actions
    # ----------------------------

    def action_focus_details(self) -> None:
        self.side_details.focus()

    def action_focus_list(self) -> None:
        self.table.focus()

    async def action_refresh(self) -> None:
        self.start_scrape()

    def action_toggle_sort(self) -> None:
        self.sort_mode = "level" if self.sort_mode == "name" else "name"
        self.apply_view()

    def start_scrape(self) -> None:
        self.run_worker(self._scrape_worker(), exclusive=True)

    async def _scrape_worker(self) -> None:
        loop = asyncio.get_running_loop()
        self.top_details.update(f"[b]Fetching…[/b]\n{self.url}")

        try:
            lakes = await loop.run_in_executor(None, scrape, self.fetcher, self.url)
        except LakeLevelError as exc:
            self.last_error = f"{type(exc).__name__}: {exc}"
            self.top_details.update(f"❌ {self.last_error}")
            return

        self.last_error = ""
        self.lakes = lakes
        self.apply_view()
        self.top_details.update(f"✅ {len(lakes)} lakes loaded.")

    # ----------------------------

    def on_data_table_row_highlighted(self, event: Any) -> None:
        key = event.row_key.value if event.row_key else None
        self.side_details.show_lake(self.lakes.get(key) if key is not None else None)
