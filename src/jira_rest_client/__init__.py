"""jira-rest-client - typed, synchronous client for the Jira REST API.

- One request pipeline for the core (``rest/api``) and agile (``rest/agile``)
  APIs, with Anonymous, Basic and Bearer authentication
- A closed error taxonomy rooted at :class:`JiraError`
- Lazy iteration over paginated listings (search, boards, sprints, ...)

Example:
    ```python
    from jira_rest_client import Basic, JiraClient, SearchOptions

    jira = JiraClient("https://jira.example.com", Basic("me", "api-token"))

    options = SearchOptions.builder().fields(["summary", "status"]).max_results(50).build()
    for issue in jira.search.iter("project = DEMO ORDER BY created", options):
        print(issue.key, issue.summary)
    ```
"""

__version__ = "0.1.0"

from jira_rest_client.api import ApiFamily  # noqa: E402
from jira_rest_client.auth import Anonymous, Basic, Bearer, Credentials  # noqa: E402
from jira_rest_client.client import JiraClient  # noqa: E402
from jira_rest_client.config import JiraConfig  # noqa: E402
from jira_rest_client.errors import (  # noqa: E402
    DecodeError,
    FaultError,
    JiraError,
    MethodNotAllowedError,
    NotFoundError,
    ResponseIOError,
    ServiceErrors,
    TransportError,
    UnauthorizedError,
    UrlError,
)
from jira_rest_client.options import SearchOptions, SearchOptionsBuilder  # noqa: E402
from jira_rest_client.pagination import (  # noqa: E402
    DEFAULT_PAGINATION_ERROR_POLICY,
    Page,
    PageIterator,
    PaginationErrorPolicy,
)

__all__ = [
    "DEFAULT_PAGINATION_ERROR_POLICY",
    "Anonymous",
    "ApiFamily",
    "Basic",
    "Bearer",
    "Credentials",
    "DecodeError",
    "FaultError",
    "JiraClient",
    "JiraConfig",
    "JiraError",
    "MethodNotAllowedError",
    "NotFoundError",
    "Page",
    "PageIterator",
    "PaginationErrorPolicy",
    "ResponseIOError",
    "SearchOptions",
    "SearchOptionsBuilder",
    "ServiceErrors",
    "TransportError",
    "UnauthorizedError",
    "UrlError",
    "__version__",
]
