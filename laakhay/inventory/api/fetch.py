"""Function-style entry point for paged listings.

Architecture:
    ``fetch_stream`` validates a FetchRequest, binds a generic listing
    endpoint spec to an HTTP client and hands the resulting page fetcher to
    the pagination engine. Precondition failures are raised on the first
    pull of the returned iterator, before any request is made.

Design Decisions:
    - Client injection lets connectors share one session across listings
    - When no client is injected, the stream owns one and closes it when
      iteration ends (completion, failure, or aclose())
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any

import aiohttp

from ..core.request import FetchRequest
from ..runtime.rest import HTTPClient, ResponseAdapter, RestEndpointSpec, RestRunner

logger = logging.getLogger(__name__)


def _build_path(params: dict[str, Any]) -> str:
    return params["resource"]


def _build_query(params: dict[str, Any]) -> dict[str, Any]:
    return dict(params["query_params"])


def listing_spec(request: FetchRequest) -> RestEndpointSpec:
    """Endpoint spec for an arbitrary listing resource."""
    return RestEndpointSpec(id=request.resource, build_path=_build_path, build_query=_build_query)


def client_for(request: FetchRequest) -> HTTPClient:
    """HTTP client configured with the request's endpoint, credentials and limits."""
    return HTTPClient(
        base_url=request.base_url,
        timeout=request.timeout,
        auth=aiohttp.BasicAuth(request.username, request.password),
        max_body_bytes=request.max_body_bytes,
    )


async def fetch_stream(
    request: FetchRequest,
    *,
    adapter: ResponseAdapter | None = None,
    spec: RestEndpointSpec | None = None,
    client: HTTPClient | None = None,
) -> AsyncIterator[Any]:
    """Yield every record of a paged listing.

    Args:
        request: Listing to fetch
        adapter: Response adapter (default: raw records)
        spec: Endpoint spec (default: generic listing of ``request.resource``)
        client: HTTP client to use; one is created and closed here if omitted

    Raises:
        ConfigurationError: If the request fails precondition checks
        TransportError: On network failures
        UnexpectedStatusError: On status codes of 300 or above
        MalformedResponseError: On unparseable or incomplete pages
        InvalidRecordError: When the adapter rejects a record
    """
    request.validate()
    logger.debug(
        "Listing %s%s (limit=%s, params=%s)",
        request.base_url,
        request.resource,
        request.limit,
        dict(request.query_params),
    )

    owned = client is None
    if client is None:
        client = client_for(request)
    runner = RestRunner(client)
    try:
        async for record in runner.stream(
            spec=spec or listing_spec(request),
            adapter=adapter or ResponseAdapter(),
            params=request.to_params(),
            limit=request.limit,
        ):
            yield record
    finally:
        if owned:
            await client.close()
