"""Fetch request definition and precondition checks."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import SplitResult, urlsplit

from .exceptions import ConfigurationError

QueryValue = str | int | float | list[str | int | float]


@dataclass(frozen=True)
class FetchRequest:
    """Immutable description of one paged listing.

    Attributes:
        url: HTTPS URL of the endpoint. Must not carry a path (other than "/")
            or embedded credentials.
        username: Username for HTTP basic authentication
        password: Password for HTTP basic authentication
        resource: API resource to list (e.g. "/api/1.0/devices/all/")
        query_params: Fixed query parameters sent with every page
        limit: Number of records requested per page
        collection_field: Response field holding the page's records
        timeout: Total timeout for one page request, in seconds
        max_body_bytes: Optional cap on the size of one page body
    """

    url: str
    username: str
    password: str
    resource: str
    query_params: Mapping[str, QueryValue] = field(default_factory=dict)
    limit: int = 100
    collection_field: str = "Devices"
    timeout: float = 30.0
    max_body_bytes: int | None = None

    def __post_init__(self) -> None:
        # Deep snapshot of the caller's mapping, nested lists included.
        object.__setattr__(
            self, "query_params", MappingProxyType(copy.deepcopy(dict(self.query_params)))
        )

    @property
    def base_url(self) -> str:
        """Scheme and network location, without trailing slash."""
        parts = urlsplit(self.url)
        return f"{parts.scheme}://{parts.netloc}"

    def validate(self) -> None:
        """Check every precondition that must hold before the first request.

        Raises:
            ConfigurationError: If the URL, credentials or page size are invalid
        """
        validate_endpoint_url(self.url)
        validate_username(self.username)
        if isinstance(self.limit, bool) or not isinstance(self.limit, int) or self.limit <= 0:
            raise ConfigurationError(f"page limit must be a positive integer, got {self.limit!r}")
        if self.max_body_bytes is not None and self.max_body_bytes <= 0:
            raise ConfigurationError("max_body_bytes must be positive when set")
        if not self.resource.startswith("/"):
            raise ConfigurationError(f"resource must be an absolute path, got {self.resource!r}")

    def to_params(self) -> dict[str, Any]:
        """Request parameters as consumed by endpoint specs."""
        return {
            "resource": self.resource,
            "query_params": self.query_params,
            "collection_field": self.collection_field,
        }


def validate_endpoint_url(url: str) -> SplitResult:
    """Validate an endpoint URL and return its parsed form."""
    try:
        parts = urlsplit(url)
        # Accessing .port validates the port component.
        parts.port
    except ValueError as exc:
        raise ConfigurationError(f"endpoint URL is malformed: {url!r}") from exc

    if parts.scheme != "https":
        raise ConfigurationError('endpoint URL: only "https" URLs are supported')
    if not parts.hostname:
        raise ConfigurationError("endpoint URL: missing host")
    if parts.path not in ("", "/") or parts.query or parts.fragment:
        raise ConfigurationError("endpoint URL: trailing characters")
    if parts.username is not None or parts.password is not None:
        raise ConfigurationError(
            "endpoint URL: username and password may not be specified directly in the URL"
        )
    return parts


def validate_username(username: str) -> None:
    """Basic auth cannot represent a username containing a colon."""
    if ":" in username:
        raise ConfigurationError("username may not contain a colon")
