"""Tests for the entry resolver (local file and HTTP sources)."""
import json

import httpx
import pytest

from webring.models import Entry, LoadError
from webring.resolver import (
    FETCH_FAILED_MESSAGE,
    EntryResolver,
    parse_catalog,
    parse_catalog_text,
)

SITES = {"sites": [{"name": "Amy", "website": "https://a.com", "year": 2022, "program": "COEN"}]}


def _mock_client(status: int = 200, body: str = json.dumps(SITES), seen: list = None) -> httpx.Client:
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(str(request.url))
        return httpx.Response(status, text=body)

    return httpx.Client(transport=httpx.MockTransport(handler))


def _mock_async_client(status: int = 200, body: str = json.dumps(SITES)) -> httpx.AsyncClient:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, text=body)

    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


class TestParseCatalog:
    def test_parses_sites_in_order(self):
        doc = {"sites": [
            {"name": "B", "website": "b", "year": 1, "program": "COMP"},
            {"name": "A", "website": "a", "year": 2, "program": "COEN"},
        ]}
        catalog = parse_catalog(doc)
        assert isinstance(catalog, tuple)
        assert [e.name for e in catalog] == ["B", "A"]

    def test_empty_sites(self):
        assert parse_catalog({"sites": []}) == ()

    @pytest.mark.parametrize("doc", [[], {}, {"sites": {}}, {"sites": "x"}, None])
    def test_wrong_shape(self, doc):
        with pytest.raises(LoadError):
            parse_catalog(doc)

    def test_bad_entry_fails_whole_catalog(self):
        doc = {"sites": [SITES["sites"][0], {"name": "Bob"}]}
        with pytest.raises(LoadError):
            parse_catalog(doc)

    def test_invalid_json(self):
        with pytest.raises(LoadError, match="not valid JSON"):
            parse_catalog_text("{sites: ")


class TestLocalSource:
    def test_loads_from_directory(self, site_dir):
        catalog = EntryResolver(site_dir).load()
        assert len(catalog) == 5
        assert catalog[0] == Entry("Bob", "https://b.com", 2023, "COMP")

    def test_missing_file(self, tmp_path):
        with pytest.raises(LoadError) as exc_info:
            EntryResolver(tmp_path).load()
        assert str(exc_info.value).startswith(FETCH_FAILED_MESSAGE)

    def test_non_utf8_file(self, tmp_path):
        (tmp_path / "webring.json").write_bytes(b'{"sites": [{"name": "\xe9"}]}')
        with pytest.raises(LoadError, match="not valid UTF-8"):
            EntryResolver(tmp_path).load()

    def test_base_from_env(self, site_dir, monkeypatch):
        monkeypatch.setenv("WEBRING_BASE_PATH", str(site_dir))
        resolver = EntryResolver()
        assert resolver.location == str(site_dir / "webring.json")

    @pytest.mark.asyncio
    async def test_load_async_from_directory(self, site_dir):
        catalog = await EntryResolver(site_dir).load_async()
        assert len(catalog) == 5


class TestRemoteSource:
    def test_fetches_joined_url(self):
        seen = []
        resolver = EntryResolver("https://ring.example/base/", client=_mock_client(seen=seen))
        catalog = resolver.load()
        assert seen == ["https://ring.example/base/webring.json"]
        assert catalog[0].name == "Amy"

    def test_non_success_status(self):
        resolver = EntryResolver("https://ring.example", client=_mock_client(status=404))
        with pytest.raises(LoadError, match=FETCH_FAILED_MESSAGE):
            resolver.load()

    def test_malformed_body(self):
        resolver = EntryResolver("https://ring.example", client=_mock_client(body="<html>"))
        with pytest.raises(LoadError):
            resolver.load()

    def test_transport_error_wrapped(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = httpx.Client(transport=httpx.MockTransport(handler))
        with pytest.raises(LoadError, match="connection refused"):
            EntryResolver("http://ring.example", client=client).load()

    @pytest.mark.asyncio
    async def test_load_async_success(self):
        resolver = EntryResolver("https://ring.example", async_client=_mock_async_client())
        catalog = await resolver.load_async()
        assert [e.name for e in catalog] == ["Amy"]

    @pytest.mark.asyncio
    async def test_load_async_server_error(self):
        resolver = EntryResolver("https://ring.example", async_client=_mock_async_client(status=500))
        with pytest.raises(LoadError, match=FETCH_FAILED_MESSAGE):
            await resolver.load_async()
