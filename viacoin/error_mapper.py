"""Classify one HTTP outcome into a response or a client error.

Order of checks for a received response:

1. body decodes to an object with a non-null ``error``: DaemonError, any status
2. non-2xx status otherwise: TransportError(body text or "n/a", status)
3. 2xx but not a JSON object: TransportError(status)
4. otherwise: success

With no response at all the error is TransportError(str(exc), 0).
"""

import json
import logging
from typing import Any

import httpx

from .exceptions import TransportError, ViacoinError
from .responses import ViacoindResponse

logger = logging.getLogger(__name__)

EMPTY_BODY_MESSAGE = "n/a"


def _decode(response: httpx.Response) -> Any:
    try:
        return response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


def map_response(response: httpx.Response) -> ViacoindResponse:
    """Turn a received HTTP response into a ViacoindResponse.

    Raises:
        DaemonError: If the body carries a JSON-RPC error.
        TransportError: If the status is not 2xx or the body is not JSON.
    """
    body = _decode(response)

    if isinstance(body, dict) and body.get("error") is not None:
        wrapped = ViacoindResponse(body, response)
        error = wrapped.error()
        logger.warning(
            "Daemon error %s: %s (HTTP %d)", error.code, error.message, response.status_code
        )
        wrapped.raise_for_error()

    if not response.is_success:
        message = response.text.strip() or EMPTY_BODY_MESSAGE
        logger.warning("HTTP error %d: %s", response.status_code, message)
        raise TransportError(message, response.status_code)

    if not isinstance(body, dict):
        logger.warning("Undecodable response body (HTTP %d)", response.status_code)
        raise TransportError(
            f"Invalid JSON response: {response.text[:200]!r}", response.status_code
        )

    return ViacoindResponse(body, response)


def map_exception(exc: BaseException) -> ViacoinError:
    """Map an exception raised while exchanging a request.

    Client errors pass through untouched and an httpx.HTTPStatusError is
    classified from its response. Anything else (connection failure, bad
    CA file) means no response arrived.
    """
    if isinstance(exc, ViacoinError):
        return exc

    if isinstance(exc, httpx.HTTPStatusError):
        try:
            map_response(exc.response)
        except ViacoinError as mapped:
            mapped.__cause__ = exc
            return mapped
        mapped = TransportError(str(exc), exc.response.status_code)
        mapped.__cause__ = exc
        return mapped

    logger.warning("Transport failure: %s", exc)
    mapped = TransportError(str(exc), 0)
    mapped.__cause__ = exc
    return mapped
