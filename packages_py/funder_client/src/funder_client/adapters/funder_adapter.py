"""
Funder resource adapters.

Named crowdfunding operations on top of the request engine. ``Funder``
blocks and returns a FunderResult; ``AsyncFunder`` is awaited and can also
dispatch success/error callbacks by status class.
"""
import inspect
import logging
from typing import Dict, Optional, Union

from ..config import FunderConfig
from ..core.base_client import AsyncFunderClient, SyncFunderClient
from ..status import is_error, is_success
from ..types import FunderResult, RequestParams, Resource, ResultCallback, Scalar

logger = logging.getLogger("funder_client.adapters")


def _require_id(params: Optional[RequestParams]) -> None:
    if not params or "id" not in params:
        raise ValueError("update_payment requires an 'id' param")


class _ConfigSurface:
    """Configuration accessors shared by both adapters."""

    config: FunderConfig

    def set_base_url(self, url: str) -> None:
        self.config.set_base_url(url)

    def get_base_url(self) -> str:
        return self.config.get_base_url()

    def set_resource_path(self, resource: Union[Resource, str], path: str) -> None:
        self.config.set_resource_path(resource, path)

    def get_resource_path(self, resource: Union[Resource, str]) -> str:
        return self.config.get_resource_path(resource)

    def set_campaigns_path(self, path: str) -> None:
        self.config.set_resource_path(Resource.CAMPAIGNS, path)

    def get_campaigns_path(self) -> str:
        return self.config.get_resource_path(Resource.CAMPAIGNS)

    def set_projects_path(self, path: str) -> None:
        self.config.set_resource_path(Resource.PROJECTS, path)

    def get_projects_path(self) -> str:
        return self.config.get_resource_path(Resource.PROJECTS)

    def set_perks_path(self, path: str) -> None:
        self.config.set_resource_path(Resource.PERKS, path)

    def get_perks_path(self) -> str:
        return self.config.get_resource_path(Resource.PERKS)

    def set_payments_path(self, path: str) -> None:
        self.config.set_resource_path(Resource.PAYMENTS, path)

    def get_payments_path(self) -> str:
        return self.config.get_resource_path(Resource.PAYMENTS)

    def set_pledges_path(self, path: str) -> None:
        self.config.set_resource_path(Resource.PLEDGES, path)

    def get_pledges_path(self) -> str:
        return self.config.get_resource_path(Resource.PLEDGES)

    def set_advertisements_path(self, path: str) -> None:
        self.config.set_resource_path(Resource.ADVERTISEMENTS, path)

    def get_advertisements_path(self) -> str:
        return self.config.get_resource_path(Resource.ADVERTISEMENTS)

    def add_adhoc_field(self, name: str, value: Scalar) -> None:
        self.config.add_adhoc_field(name, value)

    def remove_adhoc_field(self, name: str) -> None:
        self.config.remove_adhoc_field(name)

    def get_adhoc_fields(self) -> Dict[str, Scalar]:
        return self.config.get_adhoc_fields()

    def add_adhoc_header(self, name: str, value: str) -> None:
        self.config.add_adhoc_header(name, value)

    def remove_adhoc_header(self, name: str) -> None:
        self.config.remove_adhoc_header(name)

    def get_adhoc_headers(self) -> Dict[str, str]:
        return self.config.get_adhoc_headers()


class Funder(_ConfigSurface):
    """Blocking Funder client.

    Every operation returns a FunderResult without branching on status: a
    404 from the backend comes back as a ``json`` result carrying the
    backend's body, and a refused connection comes back as an
    ``unavailable`` result carrying the 503 ErrorEnvelope.
    """

    def __init__(self, client: SyncFunderClient):
        self._client = client

    @property
    def config(self) -> FunderConfig:
        return self._client.config

    def get_campaign(self, params: Optional[RequestParams] = None) -> FunderResult:
        return self._client.request("GET", Resource.CAMPAIGNS, params)

    def get_project(self, params: Optional[RequestParams] = None) -> FunderResult:
        return self._client.request("GET", Resource.PROJECTS, params)

    def get_perks(self, params: Optional[RequestParams] = None) -> FunderResult:
        return self._client.request("GET", Resource.PERKS, params)

    def make_payment(self, params: Optional[RequestParams] = None) -> FunderResult:
        return self._client.request("POST", Resource.PAYMENTS, params)

    def update_payment(self, params: RequestParams) -> FunderResult:
        _require_id(params)
        return self._client.request("PUT", Resource.PAYMENTS, params)

    def get_payment(self, params: Optional[RequestParams] = None) -> FunderResult:
        return self._client.request("GET", Resource.PAYMENTS, params)

    def get_advertisements(self, params: Optional[RequestParams] = None) -> FunderResult:
        return self._client.request("GET", Resource.ADVERTISEMENTS, params)

    def make_pledge(self, params: Optional[RequestParams] = None) -> FunderResult:
        return self._client.request("POST", Resource.PLEDGES, params)

    def close(self) -> None:
        """Close the client."""
        self._client.close()

    def __enter__(self) -> "Funder":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class AsyncFunder(_ConfigSurface):
    """Non-blocking Funder client.

    Operations are coroutines resolving to a FunderResult. When callbacks
    are given they are invoked as ``callback(body, status, funder)``:

    - 2xx with a JSON body: ``on_success``
    - 4xx/5xx with a JSON body: ``on_error``
    - no response, or a body that is not JSON: ``on_error`` with the
      ErrorEnvelope
    - 1xx/3xx: neither

    Callbacks may be plain functions or coroutine functions.
    """

    def __init__(self, client: AsyncFunderClient):
        self._client = client

    @property
    def config(self) -> FunderConfig:
        return self._client.config

    async def _call(
        self,
        method: str,
        resource: Resource,
        params: Optional[RequestParams],
        on_success: Optional[ResultCallback],
        on_error: Optional[ResultCallback],
    ) -> FunderResult:
        result = await self._client.request(method, resource, params)
        await self._dispatch(result, on_success, on_error)
        return result

    async def _dispatch(
        self,
        result: FunderResult,
        on_success: Optional[ResultCallback],
        on_error: Optional[ResultCallback],
    ) -> None:
        if result.kind != "json":
            callback = on_error
        elif is_success(result.status):
            callback = on_success
        elif is_error(result.status):
            callback = on_error
        else:
            logger.debug(f"_dispatch: HTTP {result.status} from {result.url} has no callback")
            return

        if callback is None:
            return
        outcome = callback(result.body, result.status, self)
        if inspect.isawaitable(outcome):
            await outcome

    async def get_campaign(
        self,
        params: Optional[RequestParams] = None,
        on_success: Optional[ResultCallback] = None,
        on_error: Optional[ResultCallback] = None,
    ) -> FunderResult:
        return await self._call("GET", Resource.CAMPAIGNS, params, on_success, on_error)

    async def get_project(
        self,
        params: Optional[RequestParams] = None,
        on_success: Optional[ResultCallback] = None,
        on_error: Optional[ResultCallback] = None,
    ) -> FunderResult:
        return await self._call("GET", Resource.PROJECTS, params, on_success, on_error)

    async def get_perks(
        self,
        params: Optional[RequestParams] = None,
        on_success: Optional[ResultCallback] = None,
        on_error: Optional[ResultCallback] = None,
    ) -> FunderResult:
        return await self._call("GET", Resource.PERKS, params, on_success, on_error)

    async def make_payment(
        self,
        params: Optional[RequestParams] = None,
        on_success: Optional[ResultCallback] = None,
        on_error: Optional[ResultCallback] = None,
    ) -> FunderResult:
        return await self._call("POST", Resource.PAYMENTS, params, on_success, on_error)

    async def update_payment(
        self,
        params: RequestParams,
        on_success: Optional[ResultCallback] = None,
        on_error: Optional[ResultCallback] = None,
    ) -> FunderResult:
        _require_id(params)
        return await self._call("PUT", Resource.PAYMENTS, params, on_success, on_error)

    async def get_payment(
        self,
        params: Optional[RequestParams] = None,
        on_success: Optional[ResultCallback] = None,
        on_error: Optional[ResultCallback] = None,
    ) -> FunderResult:
        return await self._call("GET", Resource.PAYMENTS, params, on_success, on_error)

    async def get_advertisements(
        self,
        params: Optional[RequestParams] = None,
        on_success: Optional[ResultCallback] = None,
        on_error: Optional[ResultCallback] = None,
    ) -> FunderResult:
        return await self._call("GET", Resource.ADVERTISEMENTS, params, on_success, on_error)

    async def make_pledge(
        self,
        params: Optional[RequestParams] = None,
        on_success: Optional[ResultCallback] = None,
        on_error: Optional[ResultCallback] = None,
    ) -> FunderResult:
        return await self._call("POST", Resource.PLEDGES, params, on_success, on_error)

    async def close(self) -> None:
        """Close the client."""
        await self._client.close()

    async def __aenter__(self) -> "AsyncFunder":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
