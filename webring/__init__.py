# SPDX-License-Identifier: MIT
"""Concordia Webring browser: filter, sort and browse member sites in the terminal."""

from webring._version import __version__

__all__ = ["__version__"]
