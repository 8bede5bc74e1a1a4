"""REST page runner using endpoint specs and response adapters."""

from __future__ import annotations

import copy
from collections.abc import AsyncIterator, Callable, Mapping
from dataclasses import dataclass
from typing import Any

from ..paging import PageFetchFn, PageResult, paginate
from .decoder import decode_page
from .http_client import HTTPClient


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], Mapping[str, Any]] | None = None


class ResponseAdapter:
    """Turns one raw page body into a PageResult.

    Subclasses override ``adapt_record`` to map raw records into models.
    Every record of a page is adapted before the page is handed to the
    engine, so a bad record fails its whole page.
    """

    def parse(self, response: bytes, params: dict[str, Any]) -> PageResult:
        page = decode_page(response, collection_field=params["collection_field"])
        if not page.records:
            return page
        return PageResult(
            done=page.done,
            records=tuple(self.adapt_record(raw, params) for raw in page.records),
        )

    def adapt_record(self, raw: dict[str, Any], params: dict[str, Any]) -> Any:
        return raw


def _format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def build_page_query(
    fixed: Mapping[str, Any], offset: int, limit: int
) -> list[tuple[str, str]]:
    """Fixed query parameters plus offset/limit, as ordered pairs.

    List values become repeated keys. ``offset`` and ``limit`` override any
    fixed parameter of the same name.
    """
    query = copy.deepcopy(dict(fixed))
    query["offset"] = offset
    query["limit"] = limit

    pairs: list[tuple[str, str]] = []
    for name, value in query.items():
        values = value if isinstance(value, (list, tuple)) else [value]
        pairs.extend((name, _format_query_value(item)) for item in values)
    return pairs


class RestRunner:
    def __init__(self, transport: HTTPClient) -> None:
        self._t = transport

    async def fetch_page(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        offset: int,
        limit: int,
    ) -> PageResult:
        path = spec.build_path(params)
        fixed = spec.build_query(params) if spec.build_query else {}
        body = await self._t.get_bytes(path, params=build_page_query(fixed, offset, limit))
        return adapter.parse(body, params)

    def page_fetcher(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> PageFetchFn:
        """Bind spec, adapter and params into a ``fetch_page(offset, limit)`` callable."""

        async def fetch_page(offset: int, limit: int) -> PageResult:
            return await self.fetch_page(
                spec=spec, adapter=adapter, params=params, offset=offset, limit=limit
            )

        return fetch_page

    def stream(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any],
        limit: int,
    ) -> AsyncIterator[Any]:
        """Lazily yield every record of a paged listing."""
        fetch_page = self.page_fetcher(spec=spec, adapter=adapter, params=params)
        return paginate(fetch_page, limit=limit, endpoint_id=spec.id)
