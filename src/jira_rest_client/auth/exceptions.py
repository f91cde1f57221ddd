"""Exceptions raised while locating credentials and configuration.

These are raised before any request is made, so they sit outside the
:mod:`jira_rest_client.errors` taxonomy.
"""


class CredentialError(Exception):
    """Base exception for credential and configuration problems."""

    pass


class CredentialNotFoundError(CredentialError):
    """A required value could not be found in any source.

    Attributes:
        env_var_name: The environment variable that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class CredentialFileError(CredentialError):
    """A credential file could not be read."""

    pass


class ConfigurationError(CredentialError):
    """A configuration value is present but malformed.

    Attributes:
        env_var_name: The environment variable holding the bad value.
        value: The rejected value.
    """

    def __init__(self, message: str, env_var_name: str | None = None, value: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name
        self.value = value
