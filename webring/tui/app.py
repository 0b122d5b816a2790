#!/usr/bin/env python3
# SPDX-License-Identifier: MIT
"""
Main TUI application for the webring browser.

Split view of the member sites:
- Header with the program tabs (GCS shows everyone)
- Sidebar with a search box and a sortable table
- Draggable divider that resizes the sidebar (width is remembered)
- Ring view of the same filtered, sorted list
"""

import webbrowser
from typing import List, Optional

from rich.text import Text
from textual import events, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.message import Message
from textual.screen import ModalScreen, Screen
from textual.widget import Widget
from textual.widgets import DataTable, Footer, Input, LoadingIndicator, Static

from webring.config import PreferenceStore
from webring.logger import get_logger, setup_logging
from webring.models import CATEGORIES, Entry, LoadError, LoadState, SortKey
from webring.pipeline import is_highlighted
from webring.resolver import EntryResolver
from webring.tui.app_state import AppState
from webring.tui.formatting import (
    ACCENT,
    COLUMNS,
    SEARCH_PLACEHOLDER,
    SORTABLE_COLUMNS,
    TITLE,
    column_label,
    format_count_title,
    format_header_markup,
    format_tab_label,
)
from webring.tui.resize import ResizeController, WidthStore
from webring.tui.ring import RingView

logger = get_logger(__name__)

RESIZE_STEP = 5  # cells per [ / ] keypress


class LoadingScreen(ModalScreen):
    """Full-screen loading modal shown while the catalog loads."""

    BINDINGS = [
        # No escape binding - must wait for loading
    ]

    def compose(self) -> ComposeResult:
        with Vertical(id="loading-modal"):
            yield Static(f"[bold]{TITLE}[/bold]", classes="modal-title")
            yield LoadingIndicator()
            yield Static("Loading ...", id="loading-status")


class ErrorScreen(Screen):
    """Terminal error state: the catalog could not be loaded."""

    BINDINGS = [
        Binding("q", "app.quit", "Quit"),
        Binding("escape", "app.quit", "Quit", show=False),
    ]

    def __init__(self, message: str) -> None:
        super().__init__()
        self.message = message

    def compose(self) -> ComposeResult:
        with Vertical(id="error-panel"):
            yield Static("[bold red]Error[/bold red]", id="error-title")
            yield Static(Text(self.message), id="error-message")
        yield Footer()


class CategoryTab(Static):
    """One program tab. Reports hover and click to the app."""

    class Hovered(Message):
        def __init__(self, tag: Optional[str]) -> None:
            super().__init__()
            self.tag = tag

    class Selected(Message):
        def __init__(self, tag: str) -> None:
            super().__init__()
            self.tag = tag

    def __init__(self, tag: str, active: bool = False) -> None:
        classes = "category-tab -active" if active else "category-tab"
        super().__init__(format_tab_label(tag, active), id=f"tab-{tag.lower()}", classes=classes)
        self.tag = tag

    def set_active(self, active: bool) -> None:
        self.update(format_tab_label(self.tag, active))
        self.set_class(active, "-active")

    def on_enter(self, event: events.Enter) -> None:
        self.post_message(self.Hovered(self.tag))

    def on_leave(self, event: events.Leave) -> None:
        self.post_message(self.Hovered(None))

    def on_click(self, event: events.Click) -> None:
        self.post_message(self.Selected(self.tag))


class Divider(Widget):
    """Vertical drag handle between the sidebar and the ring.

    Captures the mouse while dragging so moves outside the handle still arrive.
    """

    class DragStarted(Message):
        pass

    class DragMoved(Message):
        def __init__(self, screen_x: int) -> None:
            super().__init__()
            self.screen_x = screen_x

    class DragEnded(Message):
        pass

    def __init__(self, *, id: Optional[str] = None) -> None:
        super().__init__(id=id)
        self.dragging = False

    def render(self) -> str:
        return "\n".join("┃" for _ in range(max(1, self.size.height)))

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self.dragging = True
        self.capture_mouse()
        self.add_class("-dragging")
        self.post_message(self.DragStarted())
        event.stop()

    def on_mouse_move(self, event: events.MouseMove) -> None:
        if self.dragging:
            self.post_message(self.DragMoved(event.screen_x))
            event.stop()

    def on_mouse_up(self, event: events.MouseUp) -> None:
        if self.dragging:
            self.dragging = False
            self.release_mouse()
            self.remove_class("-dragging")
            self.post_message(self.DragEnded())
            event.stop()


class WebringApp(App):
    """
    Main Textual application for browsing the webring.

    All view state lives in AppState; handlers apply a transition and then
    re-render the views from state.derived().
    """

    TITLE = TITLE
    CSS_PATH = "styles/app.tcss"
    AUTO_FOCUS = "#site-list"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("f1", "select_category('GCS')", "GCS"),
        Binding("f2", "select_category('COMP')", "COMP"),
        Binding("f3", "select_category('COEN')", "COEN"),
        Binding("f4", "select_category('SOEN')", "SOEN"),
        Binding("f5", "select_category('MECH')", "MECH"),
        Binding("f6", "select_category('ELEC')", "ELEC"),
        Binding("slash", "focus_search", "Search"),
        Binding("n", "sort('name')", "Sort name", show=False),
        Binding("p", "sort('program')", "Sort program", show=False),
        Binding("y", "sort('year')", "Sort year", show=False),
        Binding("left_square_bracket", "resize(-1)", "Narrower"),
        Binding("right_square_bracket", "resize(1)", "Wider"),
    ]

    def __init__(
        self,
        base: Optional[str] = None,
        resolver: Optional[EntryResolver] = None,
        store: Optional[WidthStore] = None,
        state: Optional[AppState] = None,
    ) -> None:
        """
        Initialize the app.

        Args:
            base: URL or directory holding webring.json (optional)
            resolver: Preconfigured resolver; overrides base (optional)
            store: Width preference store (default: PreferenceStore())
            state: Initial state, e.g. with a tab preselected (optional)
        """
        super().__init__()
        setup_logging()
        self.state = state or AppState()
        self.resolver = resolver or EntryResolver(base)
        self.resizer = ResizeController(
            self.state.layout,
            store if store is not None else PreferenceStore(),
        )

    def compose(self) -> ComposeResult:
        """Compose the app layout."""
        with Vertical(id="page-header"):
            yield Static(format_header_markup(), id="header-text")
            with Horizontal(id="category-tabs"):
                for tag in CATEGORIES:
                    yield CategoryTab(tag, active=tag == self.state.active_category)

        with Horizontal(id="split"):
            with Vertical(id="sidebar"):
                with Horizontal(classes="filter-row"):
                    yield Static(format_count_title(0), id="site-count")
                    yield Input(
                        value=self.state.search_text,
                        placeholder=SEARCH_PLACEHOLDER,
                        id="site-search",
                    )
                yield DataTable(id="site-list", cursor_type="row", zebra_stripes=True)
            yield Divider(id="divider")
            yield RingView(id="ring")

        yield Footer()

    def on_mount(self) -> None:
        """Restore the sidebar width and start loading the catalog."""
        try:
            self.resizer.load_initial()
        except OSError as e:
            logger.warning("Could not read sidebar width preference: %s", e)
        self._apply_sidebar_width()
        self._setup_columns()
        self.push_screen(LoadingScreen())
        self._load_catalog()

    @work(exclusive=True)
    async def _load_catalog(self) -> None:
        """Load the catalog once; success and failure are each final."""
        try:
            catalog = await self.resolver.load_async()
        except LoadError as e:
            logger.error("Error fetching webring data: %s", e)
            self.state.fail_load(str(e))
        else:
            self.state.finish_load(catalog)
        finally:
            if isinstance(self.screen, LoadingScreen):
                self.pop_screen()

        if self.state.load_state is LoadState.FAILED:
            self.push_screen(ErrorScreen(self.state.error or "An error occurred"))
            return
        self._refresh_views()
        self.query_one("#site-list", DataTable).focus()

    # -- rendering ----------------------------------------------------------

    def _apply_sidebar_width(self) -> None:
        try:
            sidebar = self.query_one("#sidebar", Vertical)
        except NoMatches:
            return
        sidebar.styles.width = self.state.layout.sidebar_width

    def _setup_columns(self) -> None:
        table = self.query_one("#site-list", DataTable)
        for key, label in COLUMNS:
            table.add_column(self._column_label(key, label), key=key)

    def _column_label(self, key: str, label: str) -> str:
        return column_label(key, label, self.state.sort.column, self.state.sort.direction)

    def _refresh_views(self) -> None:
        """Re-derive the list and redraw the tabs, the table and the ring."""
        if self.state.load_state is not LoadState.READY:
            return
        entries = self.state.derived()
        self._update_tabs()
        self._update_count()
        self._populate_table(entries)
        self._update_ring(entries)

    def _update_tabs(self) -> None:
        for tab in self.query(CategoryTab):
            tab.set_active(tab.tag == self.state.active_category)

    def _update_count(self) -> None:
        self.query_one("#site-count", Static).update(format_count_title(self.state.category_count()))

    def _populate_table(self, entries: List[Entry]) -> None:
        """Rebuild the rows in derived order, keeping the cursor on the same site."""
        table = self.query_one("#site-list", DataTable)
        keep_name = self.state.hover.entry_name

        table.clear(columns=True)
        self._setup_columns()

        seen = set()
        cursor_row = None
        for entry in entries:
            if entry.name in seen:
                logger.warning("Skipping duplicate site name in table: %s", entry.name)
                continue
            seen.add(entry.name)
            if entry.name == keep_name:
                cursor_row = len(seen) - 1
            table.add_row(*self._row_cells(entry), key=entry.name)

        if cursor_row is not None:
            table.move_cursor(row=cursor_row)

    def _row_cells(self, entry: Entry) -> List[Text]:
        lit = is_highlighted(entry, None, self.state.hover.category)
        style = f"bold {ACCENT}" if lit else ""
        return [
            Text(entry.name, style=style),
            Text(entry.program, style=style),
            Text(str(entry.year), style=style),
            Text(entry.website, style=f"underline {style}".strip()),
        ]

    def _update_ring(self, entries: Optional[List[Entry]] = None) -> None:
        if entries is None:
            entries = self.state.derived()
        ring = self.query_one("#ring", RingView)
        sort = self.state.sort
        caption = f"{len(entries)} sites · {sort.column.value} {sort.direction.value}"
        ring.show(entries, self.state.hover.entry_name, self.state.hover.category, caption)

    def _entry_by_name(self, name: str) -> Optional[Entry]:
        for entry in self.state.catalog or ():
            if entry.name == name:
                return entry
        return None

    # -- actions --------------------------------------------------------------

    def action_select_category(self, tag: str) -> None:
        self.state.set_category(tag)
        self._refresh_views()

    def action_sort(self, column: str) -> None:
        self.state.request_sort(SortKey(column))
        self._refresh_views()

    def action_focus_search(self) -> None:
        self.query_one("#site-search", Input).focus()

    def action_resize(self, direction: int) -> None:
        try:
            self.resizer.nudge(direction * RESIZE_STEP)
        except OSError as e:
            logger.error("Could not save sidebar width: %s", e)
            self.notify(f"Could not save sidebar width: {e}", severity="error")
        self._apply_sidebar_width()

    # -- event handlers -------------------------------------------------------

    def on_category_tab_selected(self, event: CategoryTab.Selected) -> None:
        self.action_select_category(event.tag)

    def on_category_tab_hovered(self, event: CategoryTab.Hovered) -> None:
        self.state.set_hovered_category(event.tag)
        self._refresh_views()

    def on_data_table_header_selected(self, event: DataTable.HeaderSelected) -> None:
        """Handle column header click to sort the list."""
        if event.column_key is None:
            return
        column_key = event.column_key.value
        if column_key not in SORTABLE_COLUMNS:
            return
        self.action_sort(column_key)

    def on_data_table_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        """The table cursor is the hover pointer for the ring."""
        if event.row_key is None or not event.row_key.value:
            return
        self.state.set_hovered_entry(event.row_key.value)
        self._update_ring()

    def on_data_table_row_selected(self, event: DataTable.RowSelected) -> None:
        """Enter on a row opens the site, like following the website link."""
        if event.row_key is None:
            return
        entry = self._entry_by_name(event.row_key.value)
        if entry is not None:
            webbrowser.open(entry.website)

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "site-search":
            self.state.set_search_text(event.value)
            self._refresh_views()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key in the search box - move focus to the table."""
        if event.input.id == "site-search":
            self.query_one("#site-list", DataTable).focus()

    def on_key(self, event: events.Key) -> None:
        """Escape in the search box clears it."""
        if event.key != "escape":
            return
        try:
            search = self.query_one("#site-search", Input)
        except NoMatches:
            return
        if search.has_focus and self.state.search_text:
            search.value = ""
            self.state.set_search_text("")
            self._refresh_views()
            event.prevent_default()
            event.stop()

    def on_divider_drag_started(self, event: Divider.DragStarted) -> None:
        self.resizer.press()

    def on_divider_drag_moved(self, event: Divider.DragMoved) -> None:
        container_left = self.query_one("#split", Horizontal).region.x
        before = self.state.layout.sidebar_width
        if self.resizer.move(event.screen_x, container_left) != before:
            self._apply_sidebar_width()

    def on_divider_drag_ended(self, event: Divider.DragEnded) -> None:
        try:
            self.resizer.release()
        except OSError as e:
            logger.error("Could not save sidebar width: %s", e)
            self.notify(f"Could not save sidebar width: {e}", severity="error")
