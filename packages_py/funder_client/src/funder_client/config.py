"""
Configuration for funder_client.
"""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union
from urllib.parse import urlparse

from .errors import ConfigurationError
from .types import Resource, Scalar

logger = logging.getLogger("funder_client.config")

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _default_paths() -> Dict[Resource, str]:
    return {resource: resource.default_path for resource in Resource}


def coerce_resource(resource: Union[Resource, str]) -> Resource:
    """Accept a Resource or its string name ("perks", "payments", ...)."""
    if isinstance(resource, Resource):
        return resource
    try:
        return Resource(str(resource).lower())
    except ValueError as e:
        valid = sorted(r.value for r in Resource)
        raise ConfigurationError(
            f"Unknown resource: {resource!r}. Must be one of: {valid}"
        ) from e


@dataclass
class TimeoutConfig:
    """Timeout configuration in seconds. ``None`` waits forever."""

    connect: Optional[float] = None
    read: Optional[float] = None
    write: Optional[float] = None


@dataclass
class FunderConfig:
    """Mutable client configuration.

    Everything except ``base_url`` has a default. The base URL may be left
    empty at construction and set later, but must be present by the time a
    request is issued.
    """

    base_url: str = ""
    paths: Dict[Resource, str] = field(default_factory=_default_paths)
    adhoc_fields: Dict[str, Scalar] = field(default_factory=dict)
    adhoc_headers: Dict[str, str] = field(default_factory=dict)
    timeout: Union[TimeoutConfig, float, None] = None
    verify: bool = True
    verbose: bool = False

    def __post_init__(self):
        # Callers may pass a partial {"perks": "/v2/perks"} mapping
        merged = _default_paths()
        for resource, path in self.paths.items():
            merged[coerce_resource(resource)] = path
        self.paths = merged

    # Base URL

    def set_base_url(self, url: str) -> None:
        self.base_url = url

    def get_base_url(self) -> str:
        return self.base_url

    # Resource paths

    def set_resource_path(self, resource: Union[Resource, str], path: str) -> None:
        self.paths[coerce_resource(resource)] = path

    def get_resource_path(self, resource: Union[Resource, str]) -> str:
        return self.paths[coerce_resource(resource)]

    # Ad-hoc fields and headers. Later writes with the same name win.

    def add_adhoc_field(self, name: str, value: Scalar) -> None:
        self.adhoc_fields[name] = value

    def remove_adhoc_field(self, name: str) -> None:
        self.adhoc_fields.pop(name, None)

    def get_adhoc_fields(self) -> Dict[str, Scalar]:
        return dict(self.adhoc_fields)

    def add_adhoc_header(self, name: str, value: str) -> None:
        self.adhoc_headers[name] = value

    def remove_adhoc_header(self, name: str) -> None:
        self.adhoc_headers.pop(name, None)

    def get_adhoc_headers(self) -> Dict[str, str]:
        return dict(self.adhoc_headers)


@dataclass(frozen=True)
class ResolvedConfig:
    """Immutable snapshot of a FunderConfig taken at call time."""

    base_url: str
    paths: Mapping[Resource, str]
    adhoc_fields: Mapping[str, Scalar]
    adhoc_headers: Mapping[str, str]
    content_type: str = FORM_CONTENT_TYPE

    def url_for(self, resource: Union[Resource, str]) -> str:
        # Plain concatenation: slashes are the caller's business
        return self.base_url + self.paths[coerce_resource(resource)]


def normalize_timeout(timeout: Union[TimeoutConfig, float, None]) -> TimeoutConfig:
    """Normalize timeout config."""
    if timeout is None:
        return TimeoutConfig()
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=timeout, read=timeout, write=timeout)
    return timeout


def validate_config(config: FunderConfig) -> None:
    """Validate client configuration."""
    if not config.base_url:
        raise ConfigurationError("base_url is required")

    parsed = urlparse(config.base_url)
    if not parsed.scheme or not parsed.netloc:
        raise ConfigurationError(f"Invalid base_url: {config.base_url}")

    for resource, path in config.paths.items():
        if not isinstance(path, str):
            raise ConfigurationError(
                f"Path for {resource.value} must be a string, got {type(path).__name__}"
            )


def resolve_config(config: FunderConfig) -> ResolvedConfig:
    """Validate and snapshot the configuration for one request."""
    validate_config(config)

    logger.debug(
        f"resolve_config: base_url={config.base_url}, "
        f"adhoc_fields={sorted(config.adhoc_fields)}, "
        f"adhoc_headers={sorted(config.adhoc_headers)}"
    )

    return ResolvedConfig(
        base_url=config.base_url,
        paths=MappingProxyType(dict(config.paths)),
        adhoc_fields=MappingProxyType(dict(config.adhoc_fields)),
        adhoc_headers=MappingProxyType(dict(config.adhoc_headers)),
    )
