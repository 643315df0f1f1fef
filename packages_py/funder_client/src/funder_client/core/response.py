"""
Turning transport outcomes into FunderResult values.
"""
import json
import logging
from typing import Dict, Optional

from ..types import ErrorEnvelope, FunderResult, RequestContext

logger = logging.getLogger("funder_client.response")

SERVICE_UNAVAILABLE = 503
SERVICE_UNAVAILABLE_MESSAGE = "Service unavailable"
MALFORMED_RESPONSE_MESSAGE = "Malformed response"


def normalize_error(code: int, code_message: str, error: object) -> ErrorEnvelope:
    """Build the client-side ErrorEnvelope.

    ``error`` is an exception or a plain message. Exceptions with no text fall
    back to their class name.
    """
    if isinstance(error, BaseException):
        message = str(error) or type(error).__name__
    else:
        message = str(error)
    return ErrorEnvelope(code=code, code_message=code_message, message=message)


def unavailable_result(error: BaseException, context: RequestContext) -> FunderResult:
    """Result for a request that never got a response."""
    envelope = normalize_error(SERVICE_UNAVAILABLE, SERVICE_UNAVAILABLE_MESSAGE, error)
    logger.debug(f"unavailable_result: {context.method} {context.url}: {envelope.message}")
    return FunderResult(
        kind="unavailable",
        status=envelope.code,
        body=envelope.to_dict(),
        envelope=envelope,
        url=context.url,
        method=context.method,
    )


def parse_response(
    status: int,
    text: str,
    headers: Optional[Dict[str, str]],
    context: RequestContext,
) -> FunderResult:
    """Decode a response body as JSON, whatever the status."""
    try:
        data = json.loads(text)
    except ValueError as e:
        envelope = normalize_error(status, MALFORMED_RESPONSE_MESSAGE, e)
        logger.debug(f"parse_response: {context.method} {context.url} HTTP {status} body is not JSON")
        return FunderResult(
            kind="malformed",
            status=status,
            body=envelope.to_dict(),
            headers=dict(headers or {}),
            envelope=envelope,
            url=context.url,
            method=context.method,
        )

    return FunderResult(
        kind="json",
        status=status,
        body=data,
        headers=dict(headers or {}),
        url=context.url,
        method=context.method,
    )
