"""Authentication components for the Jira client.

Example:
    ```python
    from jira_rest_client.auth import Bearer

    credentials = Bearer("my-personal-access-token")
    ```
"""

from jira_rest_client.auth.credentials import (
    Anonymous,
    Basic,
    Bearer,
    CredentialResolver,
    Credentials,
)
from jira_rest_client.auth.exceptions import (
    ConfigurationError,
    CredentialError,
    CredentialFileError,
    CredentialNotFoundError,
)

__all__ = [
    "Anonymous",
    "Basic",
    "Bearer",
    "ConfigurationError",
    "CredentialError",
    "CredentialFileError",
    "CredentialNotFoundError",
    "CredentialResolver",
    "Credentials",
]
