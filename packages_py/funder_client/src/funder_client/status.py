"""
HTTP status code classification.

All ranges are inclusive. The four non-informational predicates plus
``is_informational`` partition [100, 599]; anything outside is ``UNKNOWN``.
"""
from .types import StatusClass


def _is_between(value: int, low: int, high: int) -> bool:
    return low <= value <= high


def is_informational(code: int) -> bool:
    return _is_between(code, 100, 199)


def is_success(code: int) -> bool:
    return _is_between(code, 200, 299)


def is_redirection(code: int) -> bool:
    return _is_between(code, 300, 399)


def is_client_error(code: int) -> bool:
    return _is_between(code, 400, 499)


def is_server_error(code: int) -> bool:
    return _is_between(code, 500, 599)


def is_error(code: int) -> bool:
    return is_client_error(code) or is_server_error(code)


def classify_status(code: int) -> StatusClass:
    """Map a status code to its class."""
    if is_informational(code):
        return StatusClass.INFORMATIONAL
    if is_success(code):
        return StatusClass.SUCCESS
    if is_redirection(code):
        return StatusClass.REDIRECTION
    if is_client_error(code):
        return StatusClass.CLIENT_ERROR
    if is_server_error(code):
        return StatusClass.SERVER_ERROR
    return StatusClass.UNKNOWN
