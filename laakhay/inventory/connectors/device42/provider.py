"""Device42 REST connector.

This connector provides direct access to Device42 listing endpoints. It
owns one HTTP session, shared by every listing it streams, so consecutive
page requests can reuse connections.

Architecture:
    This connector uses the endpoint registry to look up specs and adapters,
    then streams pages through ``fetch_stream`` and the pagination engine.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping
from typing import Any

from laakhay.inventory.api.fetch import client_for, fetch_stream
from laakhay.inventory.connectors.device42.config import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_TIMEOUT,
    DEVICES_COLLECTION_FIELD,
    DEVICES_RESOURCE,
)
from laakhay.inventory.core.request import FetchRequest, QueryValue
from laakhay.inventory.models import Device
from laakhay.inventory.runtime.rest import HTTPClient

from .endpoints import get_endpoint_adapter, get_endpoint_spec


class Device42RESTConnector:
    """Device42 REST connector.

    Example:
        >>> async with Device42RESTConnector(
        ...     url="https://d42.example.com",
        ...     username="reader",
        ...     password="secret",
        ... ) as d42:
        ...     async for device in d42.fetch_devices():
        ...         print(device.name, device.ram_gb)
    """

    def __init__(
        self,
        *,
        url: str,
        username: str,
        password: str,
        page_size: int = DEFAULT_PAGE_SIZE,
        timeout: float = DEFAULT_TIMEOUT,
        max_body_bytes: int | None = None,
    ) -> None:
        """Initialize Device42 REST connector.

        Configuration is validated when a listing is first pulled, not here.

        Args:
            url: HTTPS URL of the Device42 instance, without a path
            username: Username for HTTP basic authentication
            password: Password for HTTP basic authentication
            page_size: Number of records requested per page
            timeout: Total timeout for each page request, in seconds
            max_body_bytes: Optional cap on the size of one page body
        """
        self._url = url
        self._username = username
        self._password = password
        self._page_size = page_size
        self._timeout = timeout
        self._max_body_bytes = max_body_bytes
        self._client: HTTPClient | None = None

    def _request(
        self,
        resource: str,
        query_params: Mapping[str, QueryValue] | None,
        collection_field: str,
    ) -> FetchRequest:
        return FetchRequest(
            url=self._url,
            username=self._username,
            password=self._password,
            resource=resource,
            query_params=query_params or {},
            limit=self._page_size,
            collection_field=collection_field,
            timeout=self._timeout,
            max_body_bytes=self._max_body_bytes,
        )

    def _client_for(self, request: FetchRequest) -> HTTPClient:
        if self._client is None:
            self._client = client_for(request)
        return self._client

    async def stream(
        self,
        endpoint_id: str,
        *,
        query_params: Mapping[str, QueryValue] | None = None,
        resource: str = DEVICES_RESOURCE,
        collection_field: str = DEVICES_COLLECTION_FIELD,
    ) -> AsyncIterator[Any]:
        """Stream every record of a registered endpoint.

        Args:
            endpoint_id: Endpoint identifier (e.g., "devices", "raw_devices")
            query_params: Fixed query parameters sent with every page
            resource: API resource to list
            collection_field: Response field holding each page's records

        Raises:
            ValueError: If endpoint_id is not found in registry
        """
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown REST endpoint: {endpoint_id}")

        adapter_cls = get_endpoint_adapter(endpoint_id)
        if adapter_cls is None:
            raise ValueError(f"No adapter found for endpoint: {endpoint_id}")

        request = self._request(resource, query_params, collection_field)
        # Validate before building the client: BasicAuth rejects bad usernames itself.
        request.validate()
        async for record in fetch_stream(
            request,
            adapter=adapter_cls(),
            spec=spec,
            client=self._client_for(request),
        ):
            yield record

    def fetch_raw_device_details(
        self, query_params: Mapping[str, QueryValue] | None = None
    ) -> AsyncIterator[dict[str, Any]]:
        """Stream detailed device records as decoded JSON objects."""
        return self.stream("raw_devices", query_params=query_params)

    def fetch_devices(
        self, query_params: Mapping[str, QueryValue] | None = None
    ) -> AsyncIterator[Device]:
        """Stream detailed device records as Device models."""
        return self.stream("devices", query_params=query_params)

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self._client is not None:
            await self._client.close()

    async def __aenter__(self) -> Device42RESTConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


async def fetch_raw_device_details(
    *,
    url: str,
    username: str,
    password: str,
    query_params: Mapping[str, QueryValue] | None = None,
) -> AsyncIterator[dict[str, Any]]:
    """Convenience stream of detailed device records from a Device42 instance.

    Fetches ``/api/1.0/devices/all/`` in pages of 100.
    """
    request = FetchRequest(
        url=url,
        username=username,
        password=password,
        resource=DEVICES_RESOURCE,
        query_params=query_params or {},
        limit=DEFAULT_PAGE_SIZE,
        collection_field=DEVICES_COLLECTION_FIELD,
    )
    async for record in fetch_stream(request):
        yield record
