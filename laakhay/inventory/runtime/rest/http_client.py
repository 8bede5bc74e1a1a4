"""HTTP client helper."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Sequence
from typing import Any

import aiohttp

from ...core.exceptions import ResponseTooLargeError, TransportError, UnexpectedStatusError

logger = logging.getLogger(__name__)

QueryPairs = Sequence[tuple[str, str]]


class HTTPClient:
    """Async HTTP client wrapper.

    One session is kept per client so consecutive page requests can reuse
    the same connection.
    """

    _CHUNK_SIZE = 64 * 1024

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = 30.0,
        auth: aiohttp.BasicAuth | None = None,
        max_body_bytes: int | None = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.auth = auth
        self.max_body_bytes = max_body_bytes
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get_bytes(
        self,
        url: str,
        params: QueryPairs | dict[str, Any] | None = None,
    ) -> bytes:
        """GET request returning the complete response body.

        Raises:
            UnexpectedStatusError: If the status code is 300 or above
            ResponseTooLargeError: If the body exceeds max_body_bytes
            TransportError: If the request fails at the network level
        """
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        logger.debug("GET %s params=%s", url, params)
        try:
            async with self.session.get(
                url,
                params=params,
                auth=self.auth,
                allow_redirects=False,
            ) as response:
                if response.status >= 300:
                    # Drain the body so the connection can go back to the pool.
                    with contextlib.suppress(aiohttp.ClientError, asyncio.TimeoutError):
                        await response.read()
                    raise UnexpectedStatusError(
                        f'unexpected response code "{response.status}"',
                        status_code=response.status,
                    )
                return await self._read_body(response)
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise TransportError(f"request to {url} failed: {exc!r}") from exc

    async def _read_body(self, response: aiohttp.ClientResponse) -> bytes:
        body = bytearray()
        while True:
            chunk = await response.content.read(self._CHUNK_SIZE)
            if not chunk:
                break
            body.extend(chunk)
            if self.max_body_bytes is not None and len(body) > self.max_body_bytes:
                raise ResponseTooLargeError(
                    f"response body exceeded {self.max_body_bytes} bytes",
                    max_bytes=self.max_body_bytes,
                )
        return bytes(body)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
