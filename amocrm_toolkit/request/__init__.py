"""HTTP request layer for the amoCRM API."""

from .request import Request, parse_modified, format_rfc1123, flatten_query

__all__ = [
    "Request",
    "parse_modified",
    "format_rfc1123",
    "flatten_query",
]
