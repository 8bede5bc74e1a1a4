"""Structured logging for paging operations.

This module provides telemetry hooks for the pagination engine, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_completed(
    *,
    endpoint_id: str,
    offset: int,
    limit: int,
    records: int,
    done: bool,
    latency_ms: float | None = None,
) -> None:
    """Log completion of a single page.

    Args:
        endpoint_id: Endpoint identifier
        offset: Offset the page was requested at
        limit: Page size requested
        records: Number of records the page carried
        done: Whether the page was the last one
        latency_ms: Latency in milliseconds (optional)
    """
    logger.info(
        "page_completed",
        extra={
            "endpoint_id": endpoint_id,
            "offset": offset,
            "limit": limit,
            "records": records,
            "done": done,
            "latency_ms": latency_ms,
        },
    )


def log_pagination_complete(
    *,
    endpoint_id: str,
    pages_fetched: int,
    records_emitted: int,
) -> None:
    """Log successful completion of a paged sequence.

    Args:
        endpoint_id: Endpoint identifier
        pages_fetched: Number of pages requested
        records_emitted: Total records delivered to the consumer
    """
    logger.info(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_fetched": pages_fetched,
            "records_emitted": records_emitted,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    offset: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a page fetch failure.

    Args:
        endpoint_id: Endpoint identifier
        offset: Offset of the page that failed
        error_type: Type of error (e.g., "TransportError", "MalformedResponseError")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "endpoint_id": endpoint_id,
            "offset": offset,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
