"""REST runtime abstractions."""

from .decoder import decode_page
from .http_client import HTTPClient
from .runner import ResponseAdapter, RestEndpointSpec, RestRunner, build_page_query

__all__ = [
    "HTTPClient",
    "RestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "build_page_query",
    "decode_page",
]
