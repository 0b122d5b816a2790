# SPDX-License-Identifier: MIT
"""
Shared text and colour definitions for the TUI and the plain-text listing.
"""

from typing import List, Sequence, Tuple

from rich.markup import escape

from webring.models import Entry, SortDirection, SortKey
from webring.pipeline import sort_indicator

TITLE = "Concordia Webring"
DESCRIPTION = (
    "A collection of personal websites from students and alumni of Concordia "
    "University's Gina Cody School of Engineering and Computer Science."
)
OTHER_WEBRINGS: Tuple[Tuple[str, str], ...] = (
    ("McGill CS Webring", "https://mcgillcswebring.pages.dev/"),
    ("UBC Webring", "https://webring.michaeldemar.co/"),
    ("Waterloo Software Engineering Webring", "https://se-webring.xyz/"),
    ("Waterloo Computer Science Webring", "https://cs.uwatering.com/"),
)
REPO_URL = "https://github.com/rvdeguzman/concordia-webring/"
SEARCH_PLACEHOLDER = "Search by name, website, program, or year..."

# Semantic colour names for Textual/Rich markup
ACCENT = "magenta"
COMMENT = "bright_black"
LINK = "cyan"

# (column key, header label); website is the only unsortable column
COLUMNS: Tuple[Tuple[str, str], ...] = (
    (SortKey.NAME.value, "Name"),
    (SortKey.PROGRAM.value, "Program"),
    (SortKey.YEAR.value, "Year"),
    ("website", "Website"),
)
SORTABLE_COLUMNS = frozenset(k.value for k in SortKey)


def column_label(column: str, label: str, sort_key: SortKey, direction: SortDirection) -> str:
    """Header label with the sort arrow on the active column."""
    if column not in SORTABLE_COLUMNS:
        return label
    arrow = sort_indicator(column, sort_key, direction)
    return f"{label} {arrow}" if arrow else label


def format_count_title(count: int) -> str:
    return f"Students ({count})"


def format_header_markup() -> str:
    """Rich markup for the page header text above the tab strip."""
    lines = [
        f"[bold]{TITLE}[/bold]",
        f"[{COMMENT}]{escape(DESCRIPTION)}[/{COMMENT}]",
        "",
        f"[{COMMENT}]Other webrings:[/{COMMENT}]",
    ]
    for name, url in OTHER_WEBRINGS:
        lines.append(f"  [{LINK}][link='{url}']{escape(name)}[/link][/{LINK}]")
    lines.append("")
    lines.append(
        f"[{COMMENT}]Want to add your website? Submit your information by creating a "
        f"[{LINK}][link='{REPO_URL}']pull request[/link][/{LINK}] that updates the "
        f"[{ACCENT}]webring.json[/{ACCENT}] file with your site details.[/{COMMENT}]"
    )
    return "\n".join(lines)


def format_tab_label(tag: str, active: bool) -> str:
    if active:
        return f"[bold {ACCENT} underline]{tag}[/]"
    return f"[{COMMENT}]{tag}[/{COMMENT}]"


def format_listing(entries: Sequence[Entry], total: int) -> str:
    """Plain-text table for `webring --list`."""
    lines: List[str] = [format_count_title(total)]
    if not entries:
        lines.append("(no matching sites)")
        return "\n".join(lines)

    name_w = max(len("Name"), *(len(e.name) for e in entries))
    prog_w = max(len("Program"), *(len(e.program) for e in entries))
    lines.append(f"{'Name'.ljust(name_w)}  {'Program'.ljust(prog_w)}  Year  Website")
    for e in entries:
        lines.append(f"{e.name.ljust(name_w)}  {e.program.ljust(prog_w)}  {str(e.year).ljust(4)}  {e.website}")
    return "\n".join(lines)
