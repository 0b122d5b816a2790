# SPDX-License-Identifier: MIT
"""Sidebar resize controller.

Drives LayoutState from divider drag events:

    press()  -> move(x, left) ... move(x, left) -> release()

Widths outside [min_width, max_width] are ignored during a drag (the width
stays where it was) rather than clamped. The final width is persisted on
release when it differs from the default. A persisted width is clamped into
range when loaded at startup.
"""
from typing import Optional, Protocol

from webring.logger import get_logger
from webring.models import DEFAULT_SIDEBAR_WIDTH, MAX_SIDEBAR_WIDTH, MIN_SIDEBAR_WIDTH
from webring.tui.app_state import LayoutState

logger = get_logger(__name__)


class WidthStore(Protocol):
    """Where the width preference is kept (see webring.config.PreferenceStore)."""

    def read_int(self) -> Optional[int]: ...

    def write_int(self, value: int) -> None: ...


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class ResizeController:
    """Pointer-drag state machine for the sidebar divider.

    Args:
        layout: The LayoutState to mutate
        store: Preference store for the width, or None to skip persistence
        min_width: Smallest accepted width
        max_width: Largest accepted width
        default_width: Width used when nothing is persisted; not persisted itself
    """

    def __init__(
        self,
        layout: LayoutState,
        store: Optional[WidthStore] = None,
        min_width: int = MIN_SIDEBAR_WIDTH,
        max_width: int = MAX_SIDEBAR_WIDTH,
        default_width: int = DEFAULT_SIDEBAR_WIDTH,
    ) -> None:
        self.layout = layout
        self.store = store
        self.min_width = min_width
        self.max_width = max_width
        self.default_width = default_width

    @property
    def width(self) -> int:
        return self.layout.sidebar_width

    @property
    def is_resizing(self) -> bool:
        return self.layout.is_resizing

    def load_initial(self) -> int:
        """Apply the persisted width, clamped into range. Absent -> default."""
        saved = self.store.read_int() if self.store is not None else None
        if saved is None:
            self.layout.sidebar_width = self.default_width
        else:
            self.layout.sidebar_width = clamp(saved, self.min_width, self.max_width)
            logger.info("Restored sidebar width %d (saved %d)", self.layout.sidebar_width, saved)
        return self.layout.sidebar_width

    def in_range(self, width: int) -> bool:
        return self.min_width <= width <= self.max_width

    def press(self) -> None:
        self.layout.is_resizing = True

    def move(self, pointer_x: int, container_left: int = 0) -> int:
        """Track the pointer. Returns the (possibly unchanged) width."""
        if not self.layout.is_resizing:
            return self.layout.sidebar_width
        new_width = pointer_x - container_left
        if self.in_range(new_width):
            self.layout.sidebar_width = new_width
        return self.layout.sidebar_width

    def release(self) -> bool:
        """End the drag. Returns True when the width was persisted.

        Raises:
            OSError: If the store can't write the preference.
        """
        if not self.layout.is_resizing:
            return False
        self.layout.is_resizing = False
        return self._persist()

    def nudge(self, delta: int) -> bool:
        """Keyboard resize: one whole drag moving the edge by delta cells."""
        self.press()
        target = self.layout.sidebar_width + delta
        self.move(target)
        return self.release()

    def _persist(self) -> bool:
        width = self.layout.sidebar_width
        if width == self.default_width or self.store is None:
            return False
        self.store.write_int(width)
        return True
