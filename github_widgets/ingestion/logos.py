"""
Logo Resolver

Turns each record's logo reference into an embeddable data URI.

PRINCIPLES:
===========
1. Local paths (./, ../, /, C:\\, file://) are read from disk only when
   `allow_local_files` is on; otherwise they resolve to None
2. Anything else is fetched over HTTP with a bounded timeout
3. A failed or slow fetch resolves to None ("no logo"), never an error
4. Everything is resolved before layout starts
"""

from __future__ import annotations
import asyncio
import base64
import logging
from pathlib import Path
import re
from typing import Dict, Iterable, Optional

import httpx

from ..contracts.layout import Interval

logger = logging.getLogger(__name__)

LOCAL_REF_PATTERN = re.compile(r"^(?:\.{0,2}/|[a-zA-Z]:\\|file://)")

MIME_BY_SUFFIX = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
}
DEFAULT_LOCAL_MIME = "image/svg+xml"
DEFAULT_REMOTE_MIME = "image/png"


def to_data_uri(content: bytes, mime: str) -> str:
    return f"data:{mime};base64,{base64.b64encode(content).decode('ascii')}"


class LogoResolver:
    """
    Resolves logo references concurrently.

    GUARANTEES:
    ===========
    1. resolve_all never raises for fetch/read failures
    2. Each HTTP request is bounded by `timeout` seconds
    3. Server files are never read unless `allow_local_files` is set
    """

    def __init__(
        self,
        timeout: float = 5.0,
        user_agent: str = "GitHubWidgets/1.0",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        allow_local_files: bool = False,
    ):
        self._timeout = timeout
        self._allow_local_files = allow_local_files
        self._user_agent = user_agent
        self._transport = transport

    async def resolve_all(self, intervals: Iterable[Interval]) -> Dict[int, Optional[str]]:
        """interval id -> data URI or None."""
        intervals = [it for it in intervals if it.decoration_ref]
        if not intervals:
            return {}

        async with httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
            follow_redirects=True,
            headers={"User-Agent": self._user_agent},
        ) as client:
            results = await asyncio.gather(
                *(self.resolve(it.decoration_ref, client) for it in intervals)
            )

        return {it.id: data for it, data in zip(intervals, results)}

    async def resolve(self, ref: str, client: httpx.AsyncClient) -> Optional[str]:
        if not ref:
            return None
        if LOCAL_REF_PATTERN.match(ref):
            if not self._allow_local_files:
                logger.warning("Local logo path ignored (local files disabled): %s", ref)
                return None
            return await self._read_local(ref)
        return await self._fetch_remote(ref, client)

    async def _read_local(self, ref: str) -> Optional[str]:
        path = Path(ref[len("file://"):] if ref.startswith("file://") else ref)
        try:
            content = await asyncio.to_thread(path.read_bytes)
        except OSError as e:
            logger.warning("Logo read failed for %s: %s", path, e)
            return None
        mime = MIME_BY_SUFFIX.get(path.suffix.lstrip(".").lower(), DEFAULT_LOCAL_MIME)
        return to_data_uri(content, mime)

    async def _fetch_remote(self, url: str, client: httpx.AsyncClient) -> Optional[str]:
        try:
            response = await client.get(url)
        except httpx.HTTPError as e:
            logger.warning("Logo fetch failed for %s: %s", url, e)
            return None

        if response.status_code != 200:
            logger.warning("Logo fetch for %s returned HTTP %d", url, response.status_code)
            return None

        mime = response.headers.get("content-type", DEFAULT_REMOTE_MIME).split(";")[0].strip()
        return to_data_uri(response.content, mime or DEFAULT_REMOTE_MIME)
