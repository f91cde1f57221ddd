"""Jira client handle and request pipeline."""

import json
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

import httpx

from jira_rest_client.api import ApiFamily
from jira_rest_client.auth.credentials import Anonymous, Credentials
from jira_rest_client.errors.exceptions import DecodeError, ResponseIOError, TransportError, UrlError
from jira_rest_client.errors.handler import decode_body, raise_for_status
from jira_rest_client.resources import (
    Attachments,
    Backlog,
    Boards,
    Components,
    Issues,
    Resolution,
    Search,
    Sprints,
    Transitions,
    Versions,
    Worklogs,
)
from jira_rest_client.transport import DEFAULT_TIMEOUT, create_http_client

if TYPE_CHECKING:
    from jira_rest_client.config import JiraConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")

JSON_CONTENT_TYPE = "application/json"


class JiraClient:
    """Handle for one Jira instance.

    Holds the base URL, the credentials and the ``httpx.Client`` used for
    every request. Nothing on the handle changes after construction, so one
    instance may be shared by any number of callers.

    Args:
        host: Absolute base URL, e.g. ``https://jira.example.com`` or
            ``https://example.com/jira`` for instances under a context path.
        credentials: How to authenticate; anonymous by default.
        http_client: Client to send requests through. When omitted one is
            created (and owned, so :meth:`close` releases it).
        timeout: Timeout for the created client; ignored with ``http_client``.
        transport: Transport for the created client (e.g. a mock transport in
            tests); ignored with ``http_client``.

    Raises:
        UrlError: If ``host`` is not an absolute URL.

    Example:
        ```python
        from jira_rest_client import Basic, JiraClient, SearchOptions

        with JiraClient("https://jira.example.com", Basic("me", "token")) as jira:
            for issue in jira.search.iter("project = DEMO", SearchOptions.builder().max_results(50).build()):
                print(issue.key)
        ```
    """

    def __init__(
        self,
        host: str,
        credentials: Credentials | None = None,
        *,
        http_client: httpx.Client | None = None,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._host = _parse_host(host)
        self._credentials = credentials or Anonymous()
        self._owns_http_client = http_client is None
        if http_client is None:
            http_client = create_http_client(
                timeout=DEFAULT_TIMEOUT if timeout is None else timeout,
                transport=transport,
            )
        self._http_client = http_client

    @classmethod
    def from_config(cls, config: "JiraConfig", *, http_client: httpx.Client | None = None) -> "JiraClient":
        """Build a client from a :class:`~jira_rest_client.config.JiraConfig`."""
        owns_http_client = http_client is None
        if http_client is None:
            http_client = create_http_client(timeout=config.timeout, verify=config.verify_ssl, proxy=config.proxy)
        client = cls(config.host, config.credentials, http_client=http_client)
        client._owns_http_client = owns_http_client
        return client

    @classmethod
    def from_env(cls, *, http_client: httpx.Client | None = None) -> "JiraClient":
        """Build a client from ``JIRA_*`` environment variables (and .env)."""
        from jira_rest_client.config import JiraConfig

        return cls.from_config(JiraConfig.from_env(), http_client=http_client)

    @property
    def host(self) -> httpx.URL:
        return self._host

    @property
    def browse_url(self) -> str:
        """Base URL without trailing slash, for building browser links."""
        return str(self._host).rstrip("/")

    @property
    def credentials(self) -> Credentials:
        return self._credentials

    def close(self) -> None:
        """Release pooled connections if this client created its HTTP client."""
        if self._owns_http_client:
            self._http_client.close()

    def __enter__(self) -> "JiraClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"JiraClient(host={str(self._host)!r}, credentials={self._credentials!r})"

    # Request pipeline

    def url(self, api: ApiFamily, endpoint: str) -> httpx.URL:
        """Join ``rest/<api>/latest<endpoint>`` onto the host.

        Raises:
            UrlError: If the endpoint cannot be joined.
        """
        try:
            return self._host.join(f"rest/{ApiFamily(api).value}/latest{endpoint}")
        except (httpx.InvalidURL, ValueError) as e:
            raise UrlError.from_exception(e) from e

    def request(
        self,
        method: str,
        api: ApiFamily,
        endpoint: str,
        decoder: Callable[[Any], T],
        body: Any = None,
    ) -> T:
        """Send one request and decode the response.

        Args:
            method: HTTP verb.
            api: API family the endpoint belongs to.
            endpoint: Path below ``rest/<api>/latest``, already escaped; may
                carry a query string.
            decoder: Turns the decoded JSON into the result type. Empty
                bodies reach it as None.
            body: Request payload; objects with ``to_dict`` are converted
                first. None sends no body.

        Returns:
            Whatever ``decoder`` returns.

        Raises:
            UrlError: The URL cannot be built.
            DecodeError: The body cannot be serialized or the response decoded.
            TransportError: The request could not be sent.
            ResponseIOError: The response body could not be read.
            UnauthorizedError, MethodNotAllowedError, NotFoundError, FaultError:
                The service rejected the request.
        """
        url = self.url(api, endpoint)

        content = None
        headers = {}
        if body is not None:
            try:
                payload = body.to_dict() if hasattr(body, "to_dict") else body
                content = json.dumps(payload)
            except (TypeError, ValueError) as e:
                raise DecodeError.from_exception(e) from e
            headers["Content-Type"] = JSON_CONTENT_TYPE

        request = self._http_client.build_request(method, url, content=content, headers=headers)

        logger.debug(f"{method} {url}")
        if content is not None:
            logger.debug(f"request body: {content[:500]}")

        try:
            response = self._http_client.send(request, auth=self._credentials, stream=True)
        except httpx.TransportError as e:
            raise TransportError.from_exception(e) from e

        try:
            response.read()
        except (httpx.HTTPError, httpx.StreamError, OSError) as e:
            raise ResponseIOError.from_exception(e, status_code=response.status_code, response=response) from e
        finally:
            response.close()

        logger.debug(f"status {response.status_code} body {response.text[:500]!r}")

        raise_for_status(response)
        return decode_body(response, decoder)

    def get(self, api: ApiFamily, endpoint: str, decoder: Callable[[Any], T]) -> T:
        return self.request("GET", api, endpoint, decoder)

    def post(self, api: ApiFamily, endpoint: str, body: Any, decoder: Callable[[Any], T]) -> T:
        return self.request("POST", api, endpoint, decoder, body)

    def put(self, api: ApiFamily, endpoint: str, body: Any, decoder: Callable[[Any], T]) -> T:
        return self.request("PUT", api, endpoint, decoder, body)

    def delete(self, api: ApiFamily, endpoint: str, decoder: Callable[[Any], T]) -> T:
        return self.request("DELETE", api, endpoint, decoder)

    # Resource collections

    @property
    def attachments(self) -> Attachments:
        return Attachments(self)

    @property
    def backlog(self) -> Backlog:
        return Backlog(self)

    @property
    def boards(self) -> Boards:
        return Boards(self)

    @property
    def components(self) -> Components:
        return Components(self)

    @property
    def issues(self) -> Issues:
        return Issues(self)

    @property
    def resolution(self) -> Resolution:
        return Resolution(self)

    @property
    def search(self) -> Search:
        return Search(self)

    @property
    def sprints(self) -> Sprints:
        return Sprints(self)

    def transitions(self, issue_key: str) -> Transitions:
        return Transitions(self, issue_key)

    @property
    def versions(self) -> Versions:
        return Versions(self)

    @property
    def worklogs(self) -> Worklogs:
        return Worklogs(self)


def _parse_host(host: str) -> httpx.URL:
    """Parse and validate the base URL, normalising the path to end in '/'."""
    try:
        url = httpx.URL(host)
    except (httpx.InvalidURL, TypeError) as e:
        raise UrlError.from_exception(e) from e

    if not url.is_absolute_url or url.scheme not in ("http", "https"):
        raise UrlError(f"Url Error: host must be an absolute http(s) URL, got {host!r}")

    path = url.path if url.path.endswith("/") else f"{url.path}/"
    return url.copy_with(path=path)
