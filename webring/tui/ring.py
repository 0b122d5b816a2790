# SPDX-License-Identifier: MIT
"""
Ring view: the derived list laid out around an ellipse.

Entries are placed clockwise from twelve o'clock in list order, so the ring
follows the same filter and sort as the table. Highlighted entries (hovered
row or hovered program tab) are drawn bold in the accent colour, and the
hovered entry's name and website are shown in the middle.
"""

import math
from typing import Dict, List, Optional, Sequence, Tuple

from rich.style import Style
from rich.text import Text
from textual.widget import Widget

from webring.models import Entry
from webring.pipeline import is_highlighted

MARKER = "○"
MARKER_HIGHLIGHT = "●"
LABEL_MAX = 12

STYLE_MARKER = Style(color="cyan")
STYLE_LABEL = Style(dim=True)
STYLE_HIGHLIGHT = Style(color="magenta", bold=True)
STYLE_CENTER = Style(bold=True)


def ring_positions(count: int, width: int, height: int) -> List[Tuple[int, int]]:
    """Cell coordinates of `count` points on an ellipse filling width x height.

    The first point is at the top centre and points go clockwise. Terminal
    cells are about twice as tall as wide, so the horizontal radius is kept
    close to twice the vertical one when space allows.
    """
    if count <= 0 or width <= 0 or height <= 0:
        return []
    cx = (width - 1) / 2
    cy = (height - 1) / 2
    ry = max(0.0, cy - 1)
    rx = max(0.0, min(cx - LABEL_MAX, ry * 2.2))
    positions = []
    for i in range(count):
        theta = -math.pi / 2 + 2 * math.pi * i / count
        x = int(round(cx + rx * math.cos(theta)))
        y = int(round(cy + ry * math.sin(theta)))
        positions.append((x, y))
    return positions


def _short(name: str) -> str:
    return name if len(name) <= LABEL_MAX else name[: LABEL_MAX - 1] + "…"


def render_ring(
    entries: Sequence[Entry],
    width: int,
    height: int,
    hovered_entry_name: Optional[str] = None,
    hovered_category: Optional[str] = None,
    caption: str = "",
) -> Text:
    """Draw the ring into a Text of `height` lines of `width` cells."""
    if width <= 0 or height <= 0:
        return Text()

    chars: List[List[str]] = [[" "] * width for _ in range(height)]
    styles: Dict[Tuple[int, int], Style] = {}

    def put(x: int, y: int, text: str, style: Style) -> None:
        if not 0 <= y < height:
            return
        for offset, ch in enumerate(text):
            col = x + offset
            if 0 <= col < width:
                chars[y][col] = ch
                styles[(col, y)] = style

    hovered: Optional[Entry] = None
    for entry, (x, y) in zip(entries, ring_positions(len(entries), width, height)):
        lit = is_highlighted(entry, hovered_entry_name, hovered_category)
        if entry.name == hovered_entry_name:
            hovered = entry
        label = _short(entry.name)
        put(x, y, MARKER_HIGHLIGHT if lit else MARKER, STYLE_HIGHLIGHT if lit else STYLE_MARKER)
        # Labels go outward: right of the marker on the right half, left of it otherwise
        if x >= width / 2:
            put(x + 2, y, label, STYLE_HIGHLIGHT if lit else STYLE_LABEL)
        else:
            put(x - len(label) - 1, y, label, STYLE_HIGHLIGHT if lit else STYLE_LABEL)

    center_lines = [hovered.name, hovered.website] if hovered else [caption] if caption else []
    top = height // 2 - len(center_lines) // 2
    for i, line in enumerate(center_lines):
        line = line[: max(0, width - 2)]
        put((width - len(line)) // 2, top + i, line, STYLE_CENTER)

    text = Text()
    for y in range(height):
        for x in range(width):
            text.append(chars[y][x], styles.get((x, y)))
        if y < height - 1:
            text.append("\n")
    return text


class RingView(Widget):
    """Widget drawing the ring for the current derived list."""

    DEFAULT_CSS = """
    RingView {
        width: 1fr;
        height: 1fr;
    }
    """

    def __init__(self, *, id: Optional[str] = None) -> None:
        super().__init__(id=id)
        self.entries: List[Entry] = []
        self.hovered_entry_name: Optional[str] = None
        self.hovered_category: Optional[str] = None
        self.caption = ""

    def show(
        self,
        entries: Sequence[Entry],
        hovered_entry_name: Optional[str],
        hovered_category: Optional[str],
        caption: str = "",
    ) -> None:
        self.entries = list(entries)
        self.hovered_entry_name = hovered_entry_name
        self.hovered_category = hovered_category
        self.caption = caption
        self.refresh()

    def render(self) -> Text:
        return render_ring(
            self.entries,
            self.size.width,
            self.size.height,
            self.hovered_entry_name,
            self.hovered_category,
            self.caption,
        )
