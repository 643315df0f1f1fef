"""
HTTP client for the Funders crowdfunding backend.

Reads campaigns, projects, perks, payments and advertisements, and creates
payments and pledges, over form-url-encoded requests with JSON responses.
Blocking and asyncio flavours share one request engine built on httpx.
"""
from .types import (
    ErrorEnvelope,
    FunderResult,
    HttpMethod,
    RequestContext,
    RequestParams,
    Resource,
    StatusClass,
)
from .errors import (
    ConfigurationError,
    FunderError,
    FunderHTTPError,
    MalformedResponseError,
    TransportUnavailableError,
)
from .config import (
    FunderConfig,
    ResolvedConfig,
    TimeoutConfig,
    resolve_config,
)
from .status import (
    classify_status,
    is_client_error,
    is_error,
    is_informational,
    is_redirection,
    is_server_error,
    is_success,
)
from .core.base_client import AsyncFunderClient, SyncFunderClient
from .core.request_builder import encode_params, uses_body
from .adapters.funder_adapter import AsyncFunder, Funder
from .factory import create_adapter, create_async_funder, create_funder

__all__ = [
    # Types
    "ErrorEnvelope",
    "FunderResult",
    "HttpMethod",
    "RequestContext",
    "RequestParams",
    "Resource",
    "StatusClass",
    # Errors
    "ConfigurationError",
    "FunderError",
    "FunderHTTPError",
    "MalformedResponseError",
    "TransportUnavailableError",
    # Config
    "FunderConfig",
    "ResolvedConfig",
    "TimeoutConfig",
    "resolve_config",
    # Status
    "classify_status",
    "is_client_error",
    "is_error",
    "is_informational",
    "is_redirection",
    "is_server_error",
    "is_success",
    # Engine
    "AsyncFunderClient",
    "SyncFunderClient",
    "encode_params",
    "uses_body",
    # Adapters
    "AsyncFunder",
    "Funder",
    # Factory
    "create_adapter",
    "create_async_funder",
    "create_funder",
]

__version__ = "0.1.0"
