"""HTTP transport construction for the Jira client.

The client sends every request through one ``httpx.Client``. Callers who
need custom TLS, proxies or a mock transport pass their own; otherwise
:func:`create_http_client` builds one with the configured timeout.

Example:
    ```python
    from jira_rest_client import JiraClient
    from jira_rest_client.transport import create_http_client

    http_client = create_http_client(timeout=10.0, verify="/etc/ssl/corp-ca.pem")
    client = JiraClient("https://jira.example.com", http_client=http_client)
    ```
"""

from jira_rest_client.transport.factory import DEFAULT_TIMEOUT, USER_AGENT, create_http_client

__all__ = ["DEFAULT_TIMEOUT", "USER_AGENT", "create_http_client"]
