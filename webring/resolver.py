# SPDX-License-Identifier: MIT
"""
Entry resolver: loads the webring catalog once at startup.

The catalog is a JSON document ``{"sites": [...]}`` named webring.json under a
base location, which is either an http(s) URL (fetched with httpx) or a local
directory. Every failure surfaces as a single LoadError; nothing is retried
and no partial catalog is ever returned.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Optional, Union

import httpx

from webring.logger import get_logger
from webring.models import Catalog, Entry, LoadError
from webring.paths import PathResolver, data_location, is_remote

logger = get_logger(__name__)

FETCH_TIMEOUT = 10  # seconds
FETCH_FAILED_MESSAGE = "Failed to fetch webring data"


def parse_catalog(document: Any) -> Catalog:
    """Turn a decoded JSON document into a catalog.

    Args:
        document: The decoded JSON value

    Returns:
        Tuple of entries in document order

    Raises:
        LoadError: If the document doesn't have the expected shape.
    """
    if not isinstance(document, dict) or "sites" not in document:
        raise LoadError("Webring data must be an object with a 'sites' array")
    sites = document["sites"]
    if not isinstance(sites, list):
        raise LoadError("Webring 'sites' must be an array")
    return tuple(Entry.from_dict(site) for site in sites)


def parse_catalog_text(text: str) -> Catalog:
    """Decode and parse the raw webring.json text."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise LoadError(f"Webring data is not valid JSON: {e}") from e
    return parse_catalog(document)


def _check_response(response: httpx.Response) -> str:
    if not response.is_success:
        logger.warning("Catalog fetch returned HTTP %d for %s", response.status_code, response.url)
        raise LoadError(FETCH_FAILED_MESSAGE)
    return response.text


def _read_local(location: str) -> str:
    try:
        return Path(location).read_text(encoding="utf-8")
    except OSError as e:
        logger.warning("Catalog read failed for %s: %s", location, e)
        raise LoadError(f"{FETCH_FAILED_MESSAGE}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        logger.warning("Catalog at %s is not UTF-8: %s", location, e)
        raise LoadError(f"Webring data is not valid UTF-8: {e}") from e


class EntryResolver:
    """Loads the catalog from a base location.

    Args:
        base: URL or directory holding webring.json (default: PathResolver.base_path())
        client: Optional httpx.Client reused for remote fetches
        async_client: Optional httpx.AsyncClient reused by load_async()
    """

    def __init__(
        self,
        base: Optional[Union[str, Path]] = None,
        client: Optional[httpx.Client] = None,
        async_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base = str(base) if base is not None else PathResolver.base_path()
        self.location = data_location(self.base)
        self._client = client
        self._async_client = async_client

    def load(self) -> Catalog:
        """Fetch and parse the catalog.

        Raises:
            LoadError: On a failed fetch or a malformed document.
        """
        logger.info("Loading catalog from %s", self.location)
        if is_remote(self.base):
            try:
                if self._client is not None:
                    response = self._client.get(self.location, timeout=FETCH_TIMEOUT, follow_redirects=True)
                else:
                    with httpx.Client() as client:
                        response = client.get(self.location, timeout=FETCH_TIMEOUT, follow_redirects=True)
            except httpx.HTTPError as e:
                logger.warning("Catalog fetch failed for %s: %s", self.location, e)
                raise LoadError(f"{FETCH_FAILED_MESSAGE}: {e}") from e
            text = _check_response(response)
        else:
            text = _read_local(self.location)
        return self._parse(text)

    async def load_async(self) -> Catalog:
        """Async variant of load() for use inside a Textual worker."""
        logger.info("Loading catalog from %s", self.location)
        if is_remote(self.base):
            try:
                if self._async_client is not None:
                    response = await self._async_client.get(
                        self.location, timeout=FETCH_TIMEOUT, follow_redirects=True
                    )
                else:
                    async with httpx.AsyncClient() as client:
                        response = await client.get(self.location, timeout=FETCH_TIMEOUT, follow_redirects=True)
            except httpx.HTTPError as e:
                logger.warning("Catalog fetch failed for %s: %s", self.location, e)
                raise LoadError(f"{FETCH_FAILED_MESSAGE}: {e}") from e
            text = _check_response(response)
        else:
            text = await asyncio.to_thread(_read_local, self.location)
        return self._parse(text)

    def _parse(self, text: str) -> Catalog:
        try:
            catalog = parse_catalog_text(text)
        except LoadError as e:
            logger.error("Malformed catalog at %s: %s", self.location, e)
            raise
        logger.info("Loaded %d sites from %s", len(catalog), self.location)
        return catalog
