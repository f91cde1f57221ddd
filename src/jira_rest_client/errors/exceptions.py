"""Structured exceptions for Jira API errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx

    from jira_rest_client.errors.models import ServiceErrors


class JiraError(Exception):
    """Base exception for every failure raised by the client."""

    description = "Jira client error"

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: "httpx.Response | None" = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response

    @classmethod
    def from_exception(cls, error: BaseException, **kwargs) -> "JiraError":
        """Wrap a lower-level failure, keeping it as ``__cause__``."""
        wrapped = cls(f"{cls.description}: {error}", **kwargs)
        wrapped.__cause__ = error
        return wrapped


class TransportError(JiraError):
    """Network or transport-layer failure (connect, TLS, timeout)."""

    description = "Http Error"


class ResponseIOError(JiraError):
    """Local I/O failure while reading a response body."""

    description = "IO Error"


class DecodeError(JiraError):
    """A response or request body could not be (de)serialized."""

    description = "Serialization Error"


class UrlError(JiraError):
    """Malformed host or an endpoint that cannot be joined onto it."""

    description = "Url Error"


class FaultError(JiraError):
    """4xx rejection carrying the service's structured error body."""

    description = "Jira client error"

    def __init__(
        self,
        status_code: int,
        errors: "ServiceErrors",
        response: "httpx.Response | None" = None,
    ):
        super().__init__(
            f"Jira Client Error ({status_code}):\n{errors.to_exception_message()}",
            status_code=status_code,
            response=response,
        )
        self.errors = errors


class UnauthorizedError(JiraError):
    """401 Unauthorized."""

    description = "Unauthorized"


class MethodNotAllowedError(JiraError):
    """405 Method Not Allowed."""

    description = "MethodNotAllowed"


class NotFoundError(JiraError):
    """404 Not Found."""

    description = "NotFound"
