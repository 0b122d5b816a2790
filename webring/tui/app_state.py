# SPDX-License-Identifier: MIT
"""State management dataclasses for the TUI app.

All view state lives here and is changed only through the named transition
methods below; widgets read it and re-render. Related state is grouped:

- SortState: Column and direction for the list and the ring
- HoverState: Hovered entry (list row) and hovered category (tab)
- LayoutState: Sidebar width and the transient resize flag
- AppState: Top-level container, plus tab, search text and catalog load state
"""
from dataclasses import dataclass, field
from typing import List, Optional

from webring.models import (
    ALL_CATEGORY,
    CATEGORIES,
    DEFAULT_SIDEBAR_WIDTH,
    Catalog,
    Entry,
    LoadState,
    SortDirection,
    SortKey,
)
from webring.pipeline import count_in_category, derive


@dataclass
class SortState:
    """Sorting state for the list. Defaults to year, ascending."""

    column: SortKey = SortKey.YEAR
    direction: SortDirection = SortDirection.ASC

    def request(self, column: SortKey) -> None:
        """Same column flips the direction; a new column starts ascending."""
        column = SortKey(column)
        if column is self.column:
            self.direction = self.direction.flipped()
        else:
            self.column = column
            self.direction = SortDirection.ASC


@dataclass
class HoverState:
    """What the pointer (or the table cursor) is over. Both fields are independent."""

    entry_name: Optional[str] = None
    category: Optional[str] = None


@dataclass
class LayoutState:
    """Split-view layout. Width is kept in range by ResizeController."""

    sidebar_width: int = DEFAULT_SIDEBAR_WIDTH
    is_resizing: bool = False


@dataclass
class AppState:
    """Top-level app state container.

    The catalog is set exactly once, by finish_load(); until then (and forever
    after fail_load()) it is None.
    """

    active_category: str = ALL_CATEGORY
    search_text: str = ""
    sort: SortState = field(default_factory=SortState)
    hover: HoverState = field(default_factory=HoverState)
    layout: LayoutState = field(default_factory=LayoutState)
    load_state: LoadState = LoadState.LOADING
    error: Optional[str] = None
    catalog: Optional[Catalog] = None

    # -- selection transitions -------------------------------------------------

    def set_category(self, tag: str) -> None:
        """Switch tabs. Search text and sort are kept; unknown tags are ignored."""
        if tag in CATEGORIES:
            self.active_category = tag

    def request_sort(self, column: SortKey) -> None:
        self.sort.request(column)

    def set_search_text(self, text: str) -> None:
        self.search_text = text

    def set_hovered_entry(self, name: Optional[str]) -> None:
        self.hover.entry_name = name

    def set_hovered_category(self, tag: Optional[str]) -> None:
        self.hover.category = tag

    # -- load transitions ------------------------------------------------------

    def finish_load(self, catalog: Catalog) -> bool:
        """Record a successful load. Returns False if the load already completed."""
        if self.load_state is not LoadState.LOADING:
            return False
        self.catalog = tuple(catalog)
        self.load_state = LoadState.READY
        return True

    def fail_load(self, message: str) -> bool:
        """Record a failed load. Returns False if the load already completed."""
        if self.load_state is not LoadState.LOADING:
            return False
        self.error = message or "An error occurred"
        self.load_state = LoadState.FAILED
        return True

    # -- projections -----------------------------------------------------------

    def derived(self) -> List[Entry]:
        """The list both views display for the current state."""
        if self.catalog is None:
            return []
        return derive(
            self.catalog,
            self.active_category,
            self.search_text,
            self.sort.column,
            self.sort.direction,
        )

    def category_count(self) -> int:
        """Entries on the active tab before search filtering."""
        if self.catalog is None:
            return 0
        return count_in_category(self.catalog, self.active_category)
