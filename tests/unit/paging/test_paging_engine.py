"""Unit tests for the pagination engine."""

from __future__ import annotations

import logging

import pytest

from laakhay.inventory.core import MalformedResponseError, TransportError
from laakhay.inventory.runtime.paging import PagedSequence, PageResult, PageWindow, paginate


def make_pages(total: int, limit: int):
    """Fake fetcher serving `total` integer records, reporting done like the API does."""
    calls: list[tuple[int, int]] = []

    async def fetch_page(offset: int, limit_: int) -> PageResult:
        calls.append((offset, limit_))
        records = tuple(range(offset, min(offset + limit_, total)))
        return PageResult(done=offset + limit_ >= total, records=records)

    return fetch_page, calls


async def collect(iterator) -> list:
    return [item async for item in iterator]


class TestPageWindow:
    """Test PageWindow invariants."""

    def test_advance(self):
        window = PageWindow(offset=0, limit=100)
        assert window.advance() == PageWindow(offset=100, limit=100)
        assert window.advance().advance().offset == 200

    def test_negative_offset_rejected(self):
        with pytest.raises(ValueError):
            PageWindow(offset=-1, limit=10)

    def test_zero_limit_rejected(self):
        with pytest.raises(ValueError):
            PageWindow(offset=0, limit=0)


class TestPaginate:
    """Test paginate record delivery and termination."""

    @pytest.mark.asyncio
    async def test_partial_last_page(self):
        """total=250, limit=100 -> offsets 0, 100, 200 with a final page of 50."""
        fetch_page, calls = make_pages(total=250, limit=100)

        records = await collect(paginate(fetch_page, limit=100))

        assert calls == [(0, 100), (100, 100), (200, 100)]
        assert records == list(range(250))

    @pytest.mark.asyncio
    async def test_exact_multiple_stops_without_extra_request(self):
        fetch_page, calls = make_pages(total=200, limit=100)

        records = await collect(paginate(fetch_page, limit=100))

        assert calls == [(0, 100), (100, 100)]
        assert len(records) == 200

    @pytest.mark.asyncio
    async def test_empty_terminal_page(self):
        async def fetch_page(offset: int, limit: int) -> PageResult:
            return PageResult.empty()

        assert await collect(paginate(fetch_page, limit=10)) == []

    @pytest.mark.asyncio
    async def test_records_of_done_page_are_emitted(self):
        async def fetch_page(offset: int, limit: int) -> PageResult:
            return PageResult(done=True, records=("a", "b"))

        assert await collect(paginate(fetch_page, limit=10)) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_empty_page_not_done_keeps_going(self):
        """Termination comes from the done flag only, not from page size."""
        pages = [PageResult(done=False, records=()), PageResult(done=True, records=("x",))]
        calls = []

        async def fetch_page(offset: int, limit: int) -> PageResult:
            calls.append(offset)
            return pages[len(calls) - 1]

        assert await collect(paginate(fetch_page, limit=5)) == ["x"]
        assert calls == [0, 5]

    @pytest.mark.asyncio
    async def test_lazy_no_read_ahead(self):
        """Page N+1 is only requested after page N is fully consumed."""
        fetch_page, calls = make_pages(total=30, limit=10)
        iterator = paginate(fetch_page, limit=10)

        first = [await iterator.__anext__() for _ in range(10)]
        assert first == list(range(10))
        assert calls == [(0, 10)]

        assert await iterator.__anext__() == 10
        assert calls == [(0, 10), (10, 10)]
        await iterator.aclose()

    @pytest.mark.asyncio
    async def test_abandoned_iteration_stops_requests(self):
        fetch_page, calls = make_pages(total=1000, limit=10)
        iterator = paginate(fetch_page, limit=10)

        async for record in iterator:
            if record == 14:
                break
        await iterator.aclose()

        assert calls == [(0, 10), (10, 10)]

    @pytest.mark.asyncio
    async def test_error_is_terminal(self):
        """A failing page ends the sequence; earlier records were delivered."""
        calls = []

        async def fetch_page(offset: int, limit: int) -> PageResult:
            calls.append(offset)
            if offset == 10:
                raise TransportError("connection reset")
            return PageResult(done=False, records=tuple(range(offset, offset + limit)))

        received = []
        with pytest.raises(TransportError, match="connection reset"):
            async for record in paginate(fetch_page, limit=10):
                received.append(record)

        assert received == list(range(10))
        assert calls == [0, 10]

    @pytest.mark.asyncio
    async def test_error_is_logged(self, caplog):
        async def fetch_page(offset: int, limit: int) -> PageResult:
            raise MalformedResponseError("missing total_count", field="total_count")

        with caplog.at_level(logging.ERROR, logger="laakhay.inventory.runtime.paging.telemetry"):
            with pytest.raises(MalformedResponseError):
                await collect(paginate(fetch_page, limit=10, endpoint_id="devices"))

        record = next(r for r in caplog.records if r.getMessage() == "page_error")
        assert record.endpoint_id == "devices"
        assert record.error_type == "MalformedResponseError"

    @pytest.mark.asyncio
    @pytest.mark.parametrize("limit", [0, -1, True])
    async def test_invalid_limit(self, limit):
        fetch_page, calls = make_pages(total=10, limit=10)
        with pytest.raises(ValueError):
            await collect(paginate(fetch_page, limit=limit))
        assert calls == []


class TestPagedSequence:
    """Test PagedSequence progress tracking."""

    @pytest.mark.asyncio
    async def test_progress_counters(self):
        fetch_page, _ = make_pages(total=25, limit=10)
        sequence = PagedSequence(fetch_page, limit=10)

        records = await collect(sequence)

        assert len(records) == 25
        assert sequence.pages_fetched == 3
        assert sequence.records_emitted == 25
        assert sequence.offset == 20
        assert sequence.completed is True

    @pytest.mark.asyncio
    async def test_progress_after_failure(self):
        async def fetch_page(offset: int, limit: int) -> PageResult:
            if offset >= 20:
                raise TransportError("boom")
            return PageResult(done=False, records=(offset,))

        sequence = PagedSequence(fetch_page, limit=10)
        with pytest.raises(TransportError):
            await collect(sequence)

        assert sequence.pages_fetched == 2
        assert sequence.records_emitted == 2
        assert sequence.offset == 20
        assert sequence.completed is False

    @pytest.mark.asyncio
    async def test_single_use(self):
        fetch_page, _ = make_pages(total=5, limit=10)
        sequence = PagedSequence(fetch_page, limit=10)
        await collect(sequence)

        with pytest.raises(RuntimeError):
            sequence.__aiter__()
