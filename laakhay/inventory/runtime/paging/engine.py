"""Offset/limit pagination engine.

The engine drives an injected page fetcher one page at a time and exposes
the whole listing as an async iterator of records. A page is only requested
once every record of the previous page has been pulled by the consumer, so
at most one page is held in memory and at most one request is in flight.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from time import perf_counter
from typing import Any

from .definitions import PageFetchFn, PageWindow
from .telemetry import log_page_completed, log_page_error, log_pagination_complete


async def paginate(
    fetch_page: PageFetchFn,
    *,
    limit: int,
    endpoint_id: str = "unknown",
) -> AsyncIterator[Any]:
    """Yield every record of an offset-paginated listing.

    Args:
        fetch_page: Async function taking (offset, limit) and returning a PageResult
        limit: Page size used for every request
        endpoint_id: Identifier used in telemetry

    Yields:
        Records in page order, then response order within a page

    Raises:
        ValueError: If limit is not a positive integer
        Exception: Whatever fetch_page raises; the sequence ends there
    """
    sequence = PagedSequence(fetch_page, limit=limit, endpoint_id=endpoint_id)
    async for record in sequence:
        yield record


class PagedSequence:
    """Single-use async iterable over an offset-paginated listing.

    Tracks progress so callers can inspect how far a run got, including
    after a failure.
    """

    def __init__(
        self,
        fetch_page: PageFetchFn,
        *,
        limit: int,
        endpoint_id: str = "unknown",
    ) -> None:
        """Initialize paged sequence.

        Args:
            fetch_page: Async function taking (offset, limit) and returning a PageResult
            limit: Page size used for every request
            endpoint_id: Identifier used in telemetry
        """
        self._fetch_page = fetch_page
        self._limit = limit
        self._endpoint_id = endpoint_id
        self._started = False
        self.pages_fetched = 0
        self.records_emitted = 0
        self.offset = 0
        self.completed = False

    def __aiter__(self) -> AsyncIterator[Any]:
        if self._started:
            raise RuntimeError("PagedSequence can only be iterated once")
        self._started = True
        return self._run()

    async def _run(self) -> AsyncIterator[Any]:
        if isinstance(self._limit, bool) or not isinstance(self._limit, int) or self._limit <= 0:
            raise ValueError(f"Page limit must be a positive integer, got {self._limit!r}")

        window = PageWindow(offset=0, limit=self._limit)
        while True:
            self.offset = window.offset
            page_start = perf_counter()
            try:
                result = await self._fetch_page(window.offset, window.limit)
            except Exception as e:
                log_page_error(
                    endpoint_id=self._endpoint_id,
                    offset=window.offset,
                    error_type=type(e).__name__,
                    error_message=str(e),
                )
                raise
            self.pages_fetched += 1

            log_page_completed(
                endpoint_id=self._endpoint_id,
                offset=window.offset,
                limit=window.limit,
                records=len(result.records),
                done=result.done,
                latency_ms=(perf_counter() - page_start) * 1000.0,
            )

            for record in result.records:
                self.records_emitted += 1
                yield record

            if result.done:
                break
            window = window.advance()

        self.completed = True
        log_pagination_complete(
            endpoint_id=self._endpoint_id,
            pages_fetched=self.pages_fetched,
            records_emitted=self.records_emitted,
        )
