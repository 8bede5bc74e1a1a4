"""High-level fetch entry points."""

from .fetch import client_for, fetch_stream, listing_spec

__all__ = [
    "client_for",
    "fetch_stream",
    "listing_spec",
]
