"""
Request builder utilities for funder_client.

Params are sent form-url-encoded, either as the query string (GET, HEAD,
OPTIONS) or as the body (everything else).
"""
import logging
from typing import Dict, List, Optional, Tuple, Union
from urllib.parse import quote

from ..config import ResolvedConfig
from ..types import HttpMethod, RequestContext, RequestParams, Resource, Scalar

logger = logging.getLogger("funder_client.request_builder")

# Same set encodeURIComponent leaves alone
_UNRESERVED = "-_.!~*'()"

_BODYLESS_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


def uses_body(method: str) -> bool:
    """Whether params travel in the body rather than the query string.

    Unknown methods are treated like POST.
    """
    return method.upper() not in _BODYLESS_METHODS


def format_scalar(value: Scalar) -> str:
    """Render a param value the way a browser form would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def merge_params(
    params: Optional[RequestParams],
    adhoc_fields: Optional[RequestParams] = None,
) -> List[Tuple[str, Scalar]]:
    """Caller params first, then ad-hoc fields the caller did not set."""
    merged: List[Tuple[str, Scalar]] = list((params or {}).items())
    seen = {key for key, _ in merged}
    for key, value in (adhoc_fields or {}).items():
        if key not in seen:
            merged.append((key, value))
    return merged


def encode_params(pairs: Union[RequestParams, List[Tuple[str, Scalar]]]) -> str:
    """Form-url-encode key/value pairs, percent-encoding keys and values."""
    items = pairs.items() if hasattr(pairs, "items") else pairs
    return "&".join(
        f"{quote(str(key), safe=_UNRESERVED)}={quote(format_scalar(value), safe=_UNRESERVED)}"
        for key, value in items
    )


def build_url(base_url: str, path: str, query: str = "") -> str:
    """Concatenate base URL, path and an optional encoded query string."""
    url = f"{base_url}{path}"
    if query:
        separator = "&" if "?" in url else "?"
        url = f"{url}{separator}{query}"
    return url


def build_headers(config: ResolvedConfig) -> Dict[str, str]:
    """Ad-hoc headers, plus content-type and accept when not overridden."""
    headers = dict(config.adhoc_headers)

    # Ad-hoc headers replace the defaults whatever their case
    if "content-type" not in {k.lower() for k in headers}:
        headers["Content-Type"] = config.content_type
    if "accept" not in {k.lower() for k in headers}:
        headers["Accept"] = "application/json"
    return headers


def build_request(
    config: ResolvedConfig,
    method: HttpMethod,
    resource: Union[Resource, str],
    params: Optional[RequestParams] = None,
) -> RequestContext:
    """Build a complete request from a config snapshot."""
    method = method.upper()
    encoded = encode_params(merge_params(params, config.adhoc_fields))
    base = config.url_for(resource)

    if uses_body(method):
        url = base
        content: Optional[str] = encoded
    else:
        url = build_url(base, "", encoded)
        content = None

    logger.debug(f"build_request: method={method}, url={url}, has_body={content is not None}")

    return RequestContext(
        method=method,
        url=url,
        headers=build_headers(config),
        content=content,
    )
