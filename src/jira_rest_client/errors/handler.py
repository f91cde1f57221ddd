"""Error classification for Jira HTTP responses."""

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from jira_rest_client.errors.exceptions import (
    DecodeError,
    FaultError,
    MethodNotAllowedError,
    NotFoundError,
    UnauthorizedError,
)
from jira_rest_client.errors.models import ServiceErrors

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Substituted for an empty success body so it decodes as JSON null.
EMPTY_BODY = "null"

DECODE_FAILURES = (ValueError, TypeError, KeyError)


def raise_for_status(response: httpx.Response) -> None:
    """Raise the matching exception for an error response.

    Precedence: 401, 405, 404, then any other 4xx as a ``FaultError``
    carrying the parsed error body. Anything else returns normally and is
    left to :func:`decode_body`.

    Args:
        response: HTTP response whose body has already been read

    Raises:
        UnauthorizedError: 401, whatever the body holds
        MethodNotAllowedError: 405
        NotFoundError: 404
        FaultError: any other 4xx
        DecodeError: a 4xx body that is not a Jira error object
    """
    status_code = response.status_code

    if status_code == httpx.codes.UNAUTHORIZED:
        raise UnauthorizedError("Unauthorized", status_code=status_code, response=response)

    if status_code == httpx.codes.METHOD_NOT_ALLOWED:
        raise MethodNotAllowedError("MethodNotAllowed", status_code=status_code, response=response)

    if status_code == httpx.codes.NOT_FOUND:
        raise NotFoundError("NotFound", status_code=status_code, response=response)

    if httpx.codes.is_client_error(status_code):
        try:
            errors = ServiceErrors.from_response(response)
        except DECODE_FAILURES as e:
            raise DecodeError.from_exception(e, status_code=status_code, response=response) from e
        raise FaultError(status_code, errors, response=response)


def decode_body(response: httpx.Response, decoder: Callable[[Any], T]) -> T:
    """Decode a successful response body with ``decoder``.

    An empty body is treated as JSON ``null`` so endpoints that answer with
    no content decode into an empty result instead of failing.

    Raises:
        DecodeError: The body is not JSON or ``decoder`` rejects its shape.
    """
    text = response.text or EMPTY_BODY
    try:
        return decoder(json.loads(text))
    except DECODE_FAILURES as e:
        logger.debug(f"Could not decode {response.status_code} response body: {text[:200]!r}")
        raise DecodeError.from_exception(e, status_code=response.status_code, response=response) from e
