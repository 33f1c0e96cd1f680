"""Load and cache the lab's JSON data files.

:class:`DataLoader` reads ``<source>/<name>.json`` from a local directory or an
HTTP(S) base URL. Results are cached per name, and concurrent loads of the same
name share a single in-flight :class:`asyncio.Task`, so callers can fan out
``load`` calls from several page builders without duplicating work.

Example
-------
>>> import asyncio
>>> from pathlib import Path
>>> from dmlab_pages.content.loader import DataLoader
>>> loader = DataLoader(Path("data"))
>>> data = asyncio.run(loader.load_multiple(["team", "news"]))  # doctest: +SKIP
>>> sorted(data)  # doctest: +SKIP
['news', 'team']
"""

from __future__ import annotations

import asyncio
import json
import typing as typ
from pathlib import Path

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .._constants import DATA_FILE_TEMPLATE

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class DataLoadError(RuntimeError):
    """Raised when a data file cannot be fetched or decoded."""


class DataLoader:
    """Fetch JSON data files with per-name caching and in-flight deduplication."""

    def __init__(
        self,
        source: Path | str,
        *,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the loader.

        Parameters
        ----------
        source : Path or str
            Directory holding the data files, or an ``http(s)://`` base URL.
        session : requests.Session, optional
            Session used for remote fetches; a retrying session is created on
            first use when omitted.
        timeout : float, optional
            Per-request timeout in seconds for remote fetches.
        """
        self.source = source
        self.timeout = timeout
        self._session = session
        self._cache: dict[str, typ.Any] = {}
        self._loading: dict[str, asyncio.Task[typ.Any]] = {}

    @property
    def is_remote(self) -> bool:
        return isinstance(self.source, str) and self.source.startswith(
            ("http://", "https://")
        )

    async def load(self, name: str) -> typ.Any:
        """Return the decoded JSON document for ``name``.

        Raises
        ------
        DataLoadError
            If the file is missing, the request fails, or the payload is not
            valid JSON. Failed loads are not cached.
        """
        if name in self._cache:
            return self._cache[name]
        pending = self._loading.get(name)
        if pending is None:
            pending = asyncio.ensure_future(self._fetch(name))
            self._loading[name] = pending
        try:
            data = await asyncio.shield(pending)
        finally:
            if pending.done() and self._loading.get(name) is pending:
                del self._loading[name]
        self._cache[name] = data
        return data

    async def load_multiple(self, names: cabc.Iterable[str]) -> dict[str, typ.Any]:
        """Load several data files in parallel, keyed by name."""
        ordered = list(dict.fromkeys(names))
        results = await asyncio.gather(*(self.load(name) for name in ordered))
        return dict(zip(ordered, results, strict=True))

    async def preload(self, names: cabc.Iterable[str]) -> None:
        await self.load_multiple(names)

    def clear_cache(self, name: str | None = None) -> None:
        """Forget the cached payload for ``name``, or every payload when None."""
        if name is None:
            self._cache.clear()
        else:
            self._cache.pop(name, None)

    def is_cached(self, name: str) -> bool:
        return name in self._cache

    async def _fetch(self, name: str) -> typ.Any:
        filename = DATA_FILE_TEMPLATE.format(name=name)
        if self.is_remote:
            url = f"{typ.cast('str', self.source).rstrip('/')}/{filename}"
            text = await asyncio.to_thread(self._fetch_remote, url)
            origin = url
        else:
            path = Path(self.source) / filename
            text = await asyncio.to_thread(self._read_local, path)
            origin = str(path)
        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"Failed to decode {name} from {origin}: {exc}"
            raise DataLoadError(msg) from exc

    def _read_local(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Failed to load {path.stem}: {exc}"
            raise DataLoadError(msg) from exc

    def _fetch_remote(self, url: str) -> str:
        session = self._session or self._build_session()
        try:
            resp = session.get(url, timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            msg = f"Failed to load {url}: {exc}"
            raise DataLoadError(msg) from exc
        return resp.text

    def _build_session(self) -> requests.Session:
        session = requests.Session()
        retry = Retry(
            total=5,
            read=5,
            connect=3,
            backoff_factor=0.5,
            status_forcelist=(500, 502, 503, 504),
            allowed_methods=("GET", "HEAD"),
        )
        adapter = HTTPAdapter(max_retries=retry)
        session.mount("https://", adapter)
        session.mount("http://", adapter)
        self._session = session
        return session


__all__ = ["DataLoadError", "DataLoader"]
