# SPDX-License-Identifier: MIT
"""
Data models for the webring browser.

Contains the entry dataclass, the category/sort enums, and the constants
shared by the pipeline, the state container and the views.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple


# =============================================================================
# Constants
# =============================================================================

ALL_CATEGORY = "GCS"  # Gina Cody School: the whole faculty, no filtering
CATEGORIES = (ALL_CATEGORY, "COMP", "COEN", "SOEN", "MECH", "ELEC")

# Sidebar width in terminal cells (default == max, so the list starts wide)
DEFAULT_SIDEBAR_WIDTH = 80
MIN_SIDEBAR_WIDTH = 25
MAX_SIDEBAR_WIDTH = 80

ENTRY_FIELDS = ("name", "website", "year", "program")


# =============================================================================
# Enums
# =============================================================================


class SortKey(str, Enum):
    """Sortable list columns."""
    NAME = "name"
    PROGRAM = "program"
    YEAR = "year"


class SortDirection(str, Enum):
    """Sort direction for the list and the ring."""
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


class LoadState(str, Enum):
    """Catalog load lifecycle. READY and FAILED are terminal."""
    LOADING = "loading"
    READY = "ready"
    FAILED = "failed"


# =============================================================================
# Errors
# =============================================================================


class LoadError(Exception):
    """The catalog couldn't be fetched or didn't parse into entries."""


# =============================================================================
# Entries
# =============================================================================


@dataclass(frozen=True)
class Entry:
    """One member site of the webring.

    Attributes:
        name: Member name, unique within a catalog (used as the row key)
        website: Site URL
        year: Graduation/cohort year
        program: Program tag, e.g. "COMP" or "SOEN"
    """

    name: str
    website: str
    year: int
    program: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        """Build an entry from one element of the ``sites`` array.

        Raises:
            LoadError: If a field is missing or has the wrong type.
        """
        if not isinstance(data, dict):
            raise LoadError(f"Expected an object for each site, got {type(data).__name__}")
        missing = [f for f in ENTRY_FIELDS if f not in data]
        if missing:
            raise LoadError(f"Site entry is missing field(s): {', '.join(missing)}")

        for text_field in ("name", "website", "program"):
            if not isinstance(data[text_field], str):
                raise LoadError(f"Site field '{text_field}' must be a string")
        year = data["year"]
        # bool is an int subclass; reject it explicitly
        if isinstance(year, bool) or not isinstance(year, int):
            raise LoadError(f"Site field 'year' must be an integer, got {year!r}")

        return cls(
            name=data["name"],
            website=data["website"],
            year=year,
            program=data["program"],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "website": self.website,
            "year": self.year,
            "program": self.program,
        }


Catalog = Tuple[Entry, ...]
