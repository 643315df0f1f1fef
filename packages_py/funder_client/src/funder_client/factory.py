"""
Factory functions for creating Funder clients.
"""
from typing import Mapping, Optional, Union

import httpx

from .adapters.funder_adapter import AsyncFunder, Funder
from .config import FunderConfig, TimeoutConfig
from .core.base_client import AsyncFunderClient, SyncFunderClient
from .types import Resource, Scalar


def _build_config(
    base_url: str,
    paths: Optional[Mapping[Union[Resource, str], str]],
    adhoc_fields: Optional[Mapping[str, Scalar]],
    adhoc_headers: Optional[Mapping[str, str]],
    timeout: Optional[Union[float, TimeoutConfig]],
    verify: bool,
    verbose: bool,
) -> FunderConfig:
    return FunderConfig(
        base_url=base_url,
        paths=dict(paths or {}),
        adhoc_fields=dict(adhoc_fields or {}),
        adhoc_headers=dict(adhoc_headers or {}),
        timeout=timeout,
        verify=verify,
        verbose=verbose,
    )


def create_funder(
    base_url: str = "",
    httpx_client: Optional[httpx.Client] = None,
    paths: Optional[Mapping[Union[Resource, str], str]] = None,
    adhoc_fields: Optional[Mapping[str, Scalar]] = None,
    adhoc_headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[Union[float, TimeoutConfig]] = None,
    verify: bool = True,
    verbose: bool = False,
) -> Funder:
    """
    Create a blocking Funder.

    Args:
        base_url: Backend root, e.g. "http://localhost:3000". May be set later
            with ``set_base_url`` but must be present before the first call.
        httpx_client: Pre-configured httpx.Client.
        paths: Overrides for resource paths, keyed by Resource or its name.
        adhoc_fields: Fields merged into every request's query or body.
        adhoc_headers: Headers added to every request.
        timeout: Request timeout (seconds or TimeoutConfig). None never times out.
        verify: TLS certificate verification.
        verbose: Print request/response panels to the console.

    Example:
        funder = create_funder("http://localhost:3000", adhoc_fields={"currency": "USD"})
        campaign = funder.get_campaign({"name": "alpha"}).body
    """
    config = _build_config(base_url, paths, adhoc_fields, adhoc_headers, timeout, verify, verbose)
    return Funder(SyncFunderClient(config, httpx_client=httpx_client))


def create_async_funder(
    base_url: str = "",
    httpx_client: Optional[httpx.AsyncClient] = None,
    paths: Optional[Mapping[Union[Resource, str], str]] = None,
    adhoc_fields: Optional[Mapping[str, Scalar]] = None,
    adhoc_headers: Optional[Mapping[str, str]] = None,
    timeout: Optional[Union[float, TimeoutConfig]] = None,
    verify: bool = True,
    verbose: bool = False,
) -> AsyncFunder:
    """
    Create a non-blocking Funder.

    Takes the same arguments as ``create_funder`` with an httpx.AsyncClient.

    Example:
        async with create_async_funder("http://localhost:3000") as funder:
            await funder.make_payment(params, on_success=show, on_error=complain)
    """
    config = _build_config(base_url, paths, adhoc_fields, adhoc_headers, timeout, verify, verbose)
    return AsyncFunder(AsyncFunderClient(config, httpx_client=httpx_client))


def create_adapter(
    client: Union[AsyncFunderClient, SyncFunderClient],
) -> Union[AsyncFunder, Funder]:
    """
    Wrap an existing request engine with the named Funder operations.
    """
    if isinstance(client, AsyncFunderClient):
        return AsyncFunder(client)
    return Funder(client)

