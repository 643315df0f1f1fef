"""
Core modules for funder_client.
"""
from .base_client import AsyncFunderClient, SyncFunderClient
from .request_builder import (
    build_headers,
    build_request,
    build_url,
    encode_params,
    format_scalar,
    merge_params,
    uses_body,
)
from .response import normalize_error, parse_response, unavailable_result

__all__ = [
    "AsyncFunderClient",
    "SyncFunderClient",
    "build_headers",
    "build_request",
    "build_url",
    "encode_params",
    "format_scalar",
    "merge_params",
    "uses_body",
    "normalize_error",
    "parse_response",
    "unavailable_result",
]
