"""Decoding of paged JSON list responses."""

from __future__ import annotations

import json
from typing import Any

from ...core.exceptions import MalformedResponseError
from ..paging import PageResult


def _require_int(payload: dict[str, Any], field: str) -> int:
    value = payload.get(field)
    # bool is an int subclass but never a valid count
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedResponseError(
            f"response field {field!r} missing or not an integer", field=field
        )
    return value


def decode_page(body: str | bytes, *, collection_field: str) -> PageResult:
    """Parse one complete page body into a PageResult.

    Expected shape::

        {
            "total_count": 250,
            "limit": 100,
            "offset": 200,
            "Devices": [{...}, {...}]
        }

    A ``total_count`` of 0 is a terminal empty page and may omit every other
    field.

    Args:
        body: Full response body
        collection_field: Name of the field holding the record list

    Returns:
        PageResult with ``done = offset + limit >= total_count``

    Raises:
        MalformedResponseError: If the body is not JSON or a field is missing/invalid
    """
    try:
        payload = json.loads(body)
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedResponseError(f"failed to parse response: {exc}") from exc

    if not isinstance(payload, dict):
        raise MalformedResponseError("response body is not a JSON object")

    reported_total = payload.get("total_count")
    if reported_total == 0 and not isinstance(reported_total, bool):
        return PageResult.empty()

    # TODO: validate records against a JSON schema once one is published for the API
    total_count = _require_int(payload, "total_count")
    limit = _require_int(payload, "limit")
    offset = _require_int(payload, "offset")

    records = payload.get(collection_field)
    if not isinstance(records, list):
        raise MalformedResponseError(
            f"response field {collection_field!r} missing or not a list", field=collection_field
        )
    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise MalformedResponseError(
                f"response field {collection_field!r} item {index} is not an object",
                field=collection_field,
            )

    return PageResult(done=offset + limit >= total_count, records=tuple(records))
