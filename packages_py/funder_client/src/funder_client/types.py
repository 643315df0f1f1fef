"""
Type definitions for funder_client.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Literal,
    Mapping,
    Optional,
    Union,
)


# HTTP methods
HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"]

# Values accepted in request params and ad-hoc fields
Scalar = Union[str, int, float, bool, None]

# Caller-supplied request parameters (insertion order is preserved on the wire)
RequestParams = Mapping[str, Scalar]

# Result kinds
#
# - json:        a response arrived and its body decoded as JSON
# - malformed:   a response arrived but its body is not JSON (or is empty)
# - unavailable: no response at all (refused, DNS failure, reset, timeout)
ResultKind = Literal["json", "malformed", "unavailable"]


class Resource(str, Enum):
    """Backend collections the client knows how to address."""

    CAMPAIGNS = "campaigns"
    PROJECTS = "projects"
    PERKS = "perks"
    PAYMENTS = "payments"
    PLEDGES = "pledges"
    ADVERTISEMENTS = "advertisements"

    @property
    def default_path(self) -> str:
        return f"/{self.value}"


class StatusClass(str, Enum):
    """HTTP status code classes."""

    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ErrorEnvelope:
    """Normalized failure shape synthesized by the client.

    Only built when the backend did not give us a usable JSON body; real
    HTTP error responses are passed through as-is.
    """

    code: int
    code_message: str
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.code,
            "code_message": self.code_message,
            "message": self.message,
        }


@dataclass(frozen=True)
class RequestContext:
    """Everything needed to put one request on the wire."""

    method: HttpMethod
    url: str
    headers: Dict[str, str]
    content: Optional[str] = None


@dataclass
class FunderResult:
    """Outcome of a single call.

    ``body`` is the decoded JSON for ``json`` results and the ErrorEnvelope
    (as a plain dict) for ``malformed`` and ``unavailable`` results, so the
    caller always has something to inspect.
    """

    kind: ResultKind
    status: int
    body: Any
    headers: Dict[str, str] = field(default_factory=dict)
    envelope: Optional[ErrorEnvelope] = None
    url: str = ""
    method: str = ""

    @property
    def ok(self) -> bool:
        return self.kind == "json" and 200 <= self.status <= 299

    def unwrap(self) -> Any:
        """Return the decoded body, raising for any kind of failure."""
        from .errors import (
            FunderHTTPError,
            MalformedResponseError,
            TransportUnavailableError,
        )

        if self.kind == "unavailable":
            raise TransportUnavailableError(self.envelope, url=self.url)
        if self.kind == "malformed":
            raise MalformedResponseError(self.envelope, url=self.url)
        if 400 <= self.status <= 599:
            raise FunderHTTPError(self.status, self.body, url=self.url)
        return self.body


# Completion callbacks: (body, status, funder). Either plain or coroutine functions.
ResultCallback = Callable[[Any, int, Any], Union[None, Awaitable[None]]]
