"""Error taxonomy and response classification for the Jira client."""

from jira_rest_client.errors.exceptions import (
    DecodeError,
    FaultError,
    JiraError,
    MethodNotAllowedError,
    NotFoundError,
    ResponseIOError,
    TransportError,
    UnauthorizedError,
    UrlError,
)
from jira_rest_client.errors.handler import decode_body, raise_for_status
from jira_rest_client.errors.models import ServiceErrors

__all__ = [
    "DecodeError",
    "FaultError",
    "JiraError",
    "MethodNotAllowedError",
    "NotFoundError",
    "ResponseIOError",
    "ServiceErrors",
    "TransportError",
    "UnauthorizedError",
    "UrlError",
    "decode_body",
    "raise_for_status",
]
