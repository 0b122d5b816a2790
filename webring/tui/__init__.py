# SPDX-License-Identifier: MIT
"""Textual interface for the webring browser."""
