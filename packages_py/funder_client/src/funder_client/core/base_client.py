"""
Base HTTP client using httpx.

One call builds one request from a fresh configuration snapshot, sends it,
and folds whatever happened into a FunderResult. Nothing is retried.
"""
import logging
from typing import Optional, Union

import httpx

from .. import console
from ..config import FunderConfig, normalize_timeout, resolve_config
from ..types import FunderResult, HttpMethod, RequestContext, RequestParams, Resource
from .request_builder import build_request
from .response import parse_response, unavailable_result

logger = logging.getLogger("funder_client.base_client")


def _httpx_timeout(config: FunderConfig) -> httpx.Timeout:
    timeout = normalize_timeout(config.timeout)
    return httpx.Timeout(
        connect=timeout.connect,
        read=timeout.read,
        write=timeout.write,
        pool=timeout.connect,
    )


def _prepare(
    config: FunderConfig,
    method: HttpMethod,
    resource: Union[Resource, str],
    params: Optional[RequestParams],
) -> RequestContext:
    context = build_request(resolve_config(config), method, resource, params)
    if config.verbose:
        console.print_request(context.method, context.url, context.headers, context.content)
    return context


def _received(config: FunderConfig, response: httpx.Response, context: RequestContext) -> FunderResult:
    result = parse_response(response.status_code, response.text, dict(response.headers), context)
    logger.debug(f"{context.method} {context.url} -> HTTP {result.status} ({result.kind})")
    if config.verbose:
        console.print_response(context.url, result.status, result.headers, result.body)
    return result


def _failed(config: FunderConfig, error: httpx.RequestError, context: RequestContext) -> FunderResult:
    result = unavailable_result(error, context)
    logger.debug(f"{context.method} {context.url} -> transport failure: {type(error).__name__}")
    if config.verbose:
        console.print_unavailable(context.url, result.envelope.message)
    return result


class AsyncFunderClient:
    """Asynchronous request engine."""

    def __init__(
        self,
        config: FunderConfig,
        httpx_client: Optional[httpx.AsyncClient] = None,
    ):
        self.config = config
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.AsyncClient(
                timeout=_httpx_timeout(config),
                verify=config.verify,
            )
        self._closed = False

    async def request(
        self,
        method: HttpMethod,
        resource: Union[Resource, str],
        params: Optional[RequestParams] = None,
    ) -> FunderResult:
        """Issue one request against a configured resource."""
        if self._closed:
            raise RuntimeError("Client has been closed")

        context = _prepare(self.config, method, resource, params)

        try:
            response = await self._client.request(
                method=context.method,
                url=context.url,
                headers=context.headers,
                content=context.content,
            )
        except (httpx.TransportError, httpx.DecodingError) as e:
            return _failed(self.config, e, context)

        return _received(self.config, response, context)

    async def close(self) -> None:
        """Close the client."""
        self._closed = True
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncFunderClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


class SyncFunderClient:
    """Blocking request engine."""

    def __init__(
        self,
        config: FunderConfig,
        httpx_client: Optional[httpx.Client] = None,
    ):
        self.config = config
        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.Client(
                timeout=_httpx_timeout(config),
                verify=config.verify,
            )
        self._closed = False

    def request(
        self,
        method: HttpMethod,
        resource: Union[Resource, str],
        params: Optional[RequestParams] = None,
    ) -> FunderResult:
        """Issue one request against a configured resource."""
        if self._closed:
            raise RuntimeError("Client has been closed")

        context = _prepare(self.config, method, resource, params)

        try:
            response = self._client.request(
                method=context.method,
                url=context.url,
                headers=context.headers,
                content=context.content,
            )
        except (httpx.TransportError, httpx.DecodingError) as e:
            return _failed(self.config, e, context)

        return _received(self.config, response, context)

    def close(self) -> None:
        """Close the client."""
        self._closed = True
        self._client.close()

    def __enter__(self) -> "SyncFunderClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
