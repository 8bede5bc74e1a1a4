"""Paging state and per-page result structures.

This module defines the data structures passed between the pagination
engine and page fetchers.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PageWindow:
    """Offset/limit window for a single page request.

    Attributes:
        offset: Zero-based index of the first record requested
        limit: Maximum number of records requested
    """

    offset: int
    limit: int

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("PageWindow offset cannot be negative")
        if self.limit <= 0:
            raise ValueError("PageWindow limit must be positive")

    def advance(self) -> PageWindow:
        """Window for the page that follows this one."""
        return PageWindow(offset=self.offset + self.limit, limit=self.limit)


@dataclass(frozen=True)
class PageResult:
    """Outcome of one successful page fetch.

    Attributes:
        done: True when no further pages should be requested
        records: Records carried by this page, in response order
    """

    done: bool
    records: tuple[Any, ...] = ()

    @classmethod
    def empty(cls) -> PageResult:
        """Terminal page with no records."""
        return cls(done=True, records=())


PageFetchFn = Callable[[int, int], Awaitable[PageResult]]
