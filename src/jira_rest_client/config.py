"""Configuration for connecting to a Jira instance.

Environment variables (a .env file is honoured through python-dotenv):

| Variable | Meaning |
|----------|---------|
| ``JIRA_HOST`` | Base URL (required) |
| ``JIRA_USER`` / ``JIRA_PASS`` | Basic authentication |
| ``JIRA_TOKEN`` | Bearer token; wins over Basic |
| ``JIRA_TOKEN_FILE`` | File holding the bearer token |
| ``JIRA_TIMEOUT`` | Request timeout in seconds (default 30) |
| ``JIRA_SSL_VERIFY`` | ``false``/``0``/``no`` disables TLS verification |
| ``JIRA_PROXY`` | Proxy URL |
"""

import logging
from dataclasses import dataclass, field

from jira_rest_client.auth.credentials import Anonymous, Basic, Bearer, CredentialResolver, Credentials
from jira_rest_client.auth.exceptions import ConfigurationError
from jira_rest_client.transport import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

FALSE_VALUES = ("false", "0", "no", "off")
TRUE_VALUES = ("true", "1", "yes", "on")


@dataclass(frozen=True)
class JiraConfig:
    """Connection settings for :class:`~jira_rest_client.client.JiraClient`."""

    host: str
    credentials: Credentials = field(default_factory=Anonymous)
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True
    proxy: str | None = None

    @classmethod
    def from_env(cls, resolver: CredentialResolver | None = None) -> "JiraConfig":
        """Create configuration from ``JIRA_*`` environment variables.

        Raises:
            CredentialNotFoundError: If ``JIRA_HOST`` is not set.
            ConfigurationError: If a timeout or flag cannot be parsed.
        """
        resolver = resolver or CredentialResolver()

        host = resolver.resolve(env_var_name="JIRA_HOST", required=True, mask_in_logs=False)

        token = resolver.resolve(env_var_name="JIRA_TOKEN") or resolver.resolve_from_file(
            env_var_name="JIRA_TOKEN_FILE"
        )
        username = resolver.resolve(env_var_name="JIRA_USER", mask_in_logs=False)
        password = resolver.resolve(env_var_name="JIRA_PASS")

        credentials: Credentials
        if token:
            credentials = Bearer(token)
        elif username and password:
            credentials = Basic(username, password)
        else:
            if username or password:
                logger.warning("JIRA_USER and JIRA_PASS must both be set for basic auth; connecting anonymously")
            credentials = Anonymous()

        timeout = _parse_timeout(resolver.resolve(env_var_name="JIRA_TIMEOUT", mask_in_logs=False))
        verify_ssl = _parse_flag("JIRA_SSL_VERIFY", resolver.resolve(env_var_name="JIRA_SSL_VERIFY", default="true"))
        proxy = resolver.resolve(env_var_name="JIRA_PROXY", mask_in_logs=False)

        logger.debug(f"Jira config for {host}: auth={type(credentials).__name__}, timeout={timeout}")
        return cls(host=host, credentials=credentials, timeout=timeout, verify_ssl=verify_ssl, proxy=proxy)


def _parse_timeout(value: str | None) -> float:
    if value is None:
        return DEFAULT_TIMEOUT
    try:
        timeout = float(value)
    except ValueError:
        raise ConfigurationError(f"JIRA_TIMEOUT must be a number, got {value!r}", "JIRA_TIMEOUT", value) from None
    if timeout <= 0:
        raise ConfigurationError(f"JIRA_TIMEOUT must be positive, got {value!r}", "JIRA_TIMEOUT", value)
    return timeout


def _parse_flag(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be true or false, got {value!r}", name, value)
