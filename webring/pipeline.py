# SPDX-License-Identifier: MIT
"""
Derivation pipeline: catalog + view state -> the list shown by both views.

Three pure steps run in order: category filter, search filter, stable sort.
Each returns a new list and leaves its input untouched.
"""

import unicodedata
from typing import Iterable, List, Optional, Tuple, Union

from webring.models import ALL_CATEGORY, Entry, SortDirection, SortKey


def filter_by_category(entries: Iterable[Entry], category: str) -> List[Entry]:
    """Keep entries whose program is the category. ALL_CATEGORY keeps everything."""
    if category == ALL_CATEGORY:
        return list(entries)
    return [e for e in entries if e.program == category]


def matches_search(entry: Entry, query: str) -> bool:
    """Substring match of an already lowercased, trimmed query.

    Year is matched on its decimal string, so "202" matches 2021 and 2023.
    """
    return (
        query in entry.name.lower()
        or query in entry.website.lower()
        or query in entry.program.lower()
        or query in str(entry.year)
    )


def filter_by_search(entries: Iterable[Entry], search_text: str) -> List[Entry]:
    """Keep entries containing the trimmed, case-folded search text in any field."""
    query = search_text.strip().lower()
    if not query:
        return list(entries)
    return [e for e in entries if matches_search(e, query)]


def collation_key(value: str) -> Tuple[str, str]:
    """Case-insensitive collation key.

    Primary level ignores accents and case ("Élise" sorts with "elise"),
    the secondary level breaks ties between accented and plain forms.
    Punctuation is compared by code point, so "O'Neil" sorts before "O-Neil"
    where ICU-based collation puts it after.
    """
    folded = value.casefold()
    decomposed = unicodedata.normalize("NFKD", folded)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base, folded


def _sort_value(entry: Entry, key: SortKey) -> Union[int, Tuple[str, str]]:
    if key is SortKey.YEAR:
        return entry.year
    if key is SortKey.PROGRAM:
        return collation_key(entry.program)
    return collation_key(entry.name)


def sort_entries(
    entries: Iterable[Entry],
    key: Union[SortKey, str],
    direction: Union[SortDirection, str] = SortDirection.ASC,
) -> List[Entry]:
    """Stable sort by one field.

    Descending uses reverse=True, which keeps entries that compare equal in
    their incoming order.
    """
    key = SortKey(key)
    direction = SortDirection(direction)
    return sorted(
        entries,
        key=lambda e: _sort_value(e, key),
        reverse=direction is SortDirection.DESC,
    )


def derive(
    catalog: Iterable[Entry],
    active_category: str = ALL_CATEGORY,
    search_text: str = "",
    sort_key: Union[SortKey, str] = SortKey.YEAR,
    sort_direction: Union[SortDirection, str] = SortDirection.ASC,
) -> List[Entry]:
    """Derive the displayed list from the catalog and the current selection."""
    in_category = filter_by_category(catalog, active_category)
    matching = filter_by_search(in_category, search_text)
    return sort_entries(matching, sort_key, sort_direction)


def count_in_category(catalog: Iterable[Entry], category: str) -> int:
    """Number of entries on a tab before search filtering."""
    return len(filter_by_category(catalog, category))


def is_highlighted(
    entry: Entry,
    hovered_entry_name: Optional[str],
    hovered_category: Optional[str],
) -> bool:
    """True when the entry itself or its program tab is hovered."""
    return entry.name == hovered_entry_name or (
        hovered_category is not None and entry.program == hovered_category
    )


def sort_indicator(
    column: Union[SortKey, str],
    sort_key: Union[SortKey, str],
    direction: Union[SortDirection, str],
) -> str:
    """Arrow shown next to the active column header, empty elsewhere."""
    if SortKey(column) is not SortKey(sort_key):
        return ""
    return "▲" if SortDirection(direction) is SortDirection.ASC else "▼"
