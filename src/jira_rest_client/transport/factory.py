"""Factory for the ``httpx.Client`` shared by a JiraClient."""

import logging
import ssl

import httpx

from jira_rest_client import __version__

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0

USER_AGENT = f"jira-rest-client/{__version__}"


def create_http_client(
    *,
    timeout: float | httpx.Timeout | None = DEFAULT_TIMEOUT,
    verify: bool | str | ssl.SSLContext = True,
    proxy: str | None = None,
    transport: httpx.BaseTransport | None = None,
    headers: dict[str, str] | None = None,
) -> httpx.Client:
    """Create the synchronous HTTP client used for Jira requests.

    No retry or rate-limit handling is layered on; a request either
    completes or fails once.

    Args:
        timeout: Seconds (or an ``httpx.Timeout``) before a request is
            abandoned. None disables timeouts.
        verify: TLS verification: a flag, a CA bundle path, or an SSL context.
        proxy: Proxy URL for all requests.
        transport: Transport to send through (e.g. ``httpx.MockTransport``).
            ``verify`` and ``proxy`` do not apply when a transport is given.
        headers: Extra default headers.

    Returns:
        A configured ``httpx.Client``.
    """
    default_headers = {"User-Agent": USER_AGENT, "Accept": "application/json"}
    if headers:
        default_headers.update(headers)

    if transport is not None:
        logger.debug(f"Creating HTTP client with custom transport {type(transport).__name__}")
        return httpx.Client(transport=transport, timeout=timeout, headers=default_headers)

    if verify is False:
        logger.warning("TLS certificate verification is disabled")

    return httpx.Client(timeout=timeout, verify=verify, proxy=proxy, headers=default_headers)
