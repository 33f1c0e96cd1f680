"""Tests for the cached, deduplicating JSON data loader.

Remote fetches use a fake ``requests`` session so no network access happens;
local fetches read the fixture data directory written by ``conftest``.
"""

from __future__ import annotations

import asyncio
import json
import threading
import typing as typ

import pytest
import requests

from dmlab_pages.content import DataLoader, DataLoadError

if typ.TYPE_CHECKING:
    from pathlib import Path


class FakeResponse:
    def __init__(self, text: str, status: int = 200) -> None:
        self.text = text
        self.status_code = status

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            msg = f"{self.status_code} Server Error"
            raise requests.HTTPError(msg)


class FakeSession:
    """Record requested URLs and answer from a mapping of payloads."""

    def __init__(self, payloads: dict[str, object], *, status: int = 200) -> None:
        self.payloads = payloads
        self.status = status
        self.urls: list[str] = []
        self._lock = threading.Lock()

    def get(self, url: str, *, timeout: float) -> FakeResponse:
        with self._lock:
            self.urls.append(url)
        name = url.rsplit("/", 1)[-1].removesuffix(".json")
        return FakeResponse(json.dumps(self.payloads.get(name)), self.status)


def test_local_files_are_loaded_and_cached(site_paths: dict[str, Path]) -> None:
    loader = DataLoader(site_paths["data"])
    data = asyncio.run(loader.load_multiple(["team", "research", "team"]))
    assert sorted(data) == ["research", "team"]
    assert data["team"]["members"][0]["id"] == "maria"
    assert loader.is_cached("team")
    (site_paths["data"] / "team.json").unlink()
    cached = asyncio.run(loader.load("team"))
    assert cached is data["team"], "Cached payload is returned without re-reading"


def test_concurrent_loads_share_one_request() -> None:
    session = FakeSession({"news": {"news": []}})
    loader = DataLoader("https://data.example.org/dmlab/", session=session)

    async def _load_three() -> list[object]:
        return await asyncio.gather(*(loader.load("news") for _ in range(3)))

    results = asyncio.run(_load_three())
    assert session.urls == ["https://data.example.org/dmlab/news.json"]
    assert results[0] is results[1] is results[2]


def test_clear_cache_forces_refetch() -> None:
    session = FakeSession({"team": {"members": []}, "news": {}})
    loader = DataLoader("https://data.example.org", session=session)
    asyncio.run(loader.preload(["team", "news"]))
    loader.clear_cache("team")
    assert not loader.is_cached("team")
    assert loader.is_cached("news")
    asyncio.run(loader.load("team"))
    loader.clear_cache()
    assert not loader.is_cached("news")
    assert len(session.urls) == 3


def test_http_errors_are_wrapped_and_not_cached() -> None:
    session = FakeSession({"team": {"members": []}}, status=503)
    loader = DataLoader("https://data.example.org", session=session)
    with pytest.raises(DataLoadError, match="Failed to load https://data.example.org/team.json"):
        asyncio.run(loader.load("team"))
    assert not loader.is_cached("team")
    session.status = 200
    assert asyncio.run(loader.load("team")) == {"members": []}


def test_missing_local_file_raises(tmp_path: Path) -> None:
    loader = DataLoader(tmp_path)
    with pytest.raises(DataLoadError, match="Failed to load team"):
        asyncio.run(loader.load("team"))


def test_invalid_json_raises(tmp_path: Path) -> None:
    (tmp_path / "news.json").write_text("{not json", encoding="utf-8")
    loader = DataLoader(tmp_path)
    with pytest.raises(DataLoadError, match="Failed to decode news"):
        asyncio.run(loader.load("news"))


def test_undecodable_file_raises_data_load_error(tmp_path: Path) -> None:
    (tmp_path / "team.json").write_bytes(b"\xff\xfe")
    loader = DataLoader(tmp_path)
    with pytest.raises(DataLoadError, match="Failed to load team") as excinfo:
        asyncio.run(loader.load("team"))
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)
    assert not loader.is_cached("team")
