"""Generic offset/limit paging layer.

Architecture:
    The paging layer consists of:
    - definitions.py: Paging state structures (PageWindow, PageResult)
    - engine.py: Pagination engine (drives a page fetcher, yields records)
    - telemetry.py: Structured logging

Usage:
    Any async function with the signature ``fetch_page(offset, limit)``
    returning a PageResult can be driven by ``paginate``. The REST runtime
    builds such functions from endpoint specifications.
"""

from __future__ import annotations

from .definitions import PageFetchFn, PageResult, PageWindow
from .engine import PagedSequence, paginate

__all__ = [
    "PageFetchFn",
    "PageResult",
    "PageWindow",
    "PagedSequence",
    "paginate",
]
