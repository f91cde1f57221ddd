"""Credentials for Jira requests and the resolver that locates them.

Three authentication schemes are supported:

- :class:`Anonymous` sends no ``Authorization`` header
- :class:`Basic` sends HTTP Basic (username plus password or API token)
- :class:`Bearer` sends a personal access token

Secrets are looked up by :class:`CredentialResolver`, in priority order:

1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv)
4. Default value

Example:
    ```python
    from jira_rest_client.auth import Basic, CredentialResolver

    resolver = CredentialResolver()
    credentials = Basic(
        resolver.resolve(env_var_name="JIRA_USER", required=True),
        resolver.resolve(env_var_name="JIRA_PASS", required=True),
    )
    ```

Security Considerations:
    - Credentials are never logged in full (masked with ***)
    - ``repr()`` of a credential never includes its secret
    - File-based credentials have whitespace stripped
"""

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Generator
from dataclasses import dataclass, field
from pathlib import Path
from threading import Lock

import httpx
from dotenv import load_dotenv

from jira_rest_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)


class Credentials(httpx.Auth, ABC):
    """How a request is authenticated. Immutable once constructed.

    Every variant is an ``httpx.Auth``, so it is handed to httpx with
    ``send(request, auth=credentials)``.
    """

    @abstractmethod
    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]: ...


@dataclass(frozen=True)
class Anonymous(Credentials):
    """No authentication; requests go out untouched."""

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield request


@dataclass(frozen=True)
class Basic(Credentials):
    """HTTP Basic authentication with a username and password or API token."""

    username: str
    password: str = field(repr=False)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        yield from httpx.BasicAuth(self.username, self.password).auth_flow(request)


@dataclass(frozen=True)
class Bearer(Credentials):
    """Bearer token authentication (Jira personal access tokens)."""

    token: str = field(repr=False)

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"Bearer {self.token}"
        yield request


class CredentialResolver:
    """Look up connection settings and secrets for the client.

    A value given to :meth:`resolve` directly wins; otherwise the process
    environment is consulted (a .env file is merged into it once, without
    overriding variables that are already set); otherwise the default.

    Args:
        dotenv_path: .env file to load. None lets python-dotenv search for one.
        load_dotenv: Set to False to ignore .env files entirely.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        self._dotenv_path = dotenv_path
        self._dotenv_lock = Lock()
        self._dotenv_loaded = False

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            try:
                found = load_dotenv(dotenv_path=self._dotenv_path)
            except OSError as e:
                logger.warning(f"Could not read .env file {self._dotenv_path or ''}: {e}")
            else:
                logger.debug(f"Loaded .env file: {found}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Return the first available of ``value``, ``$env_var_name`` and ``default``.

        Args:
            value: Explicit value.
            env_var_name: Environment variable to read.
            default: Fallback.
            required: Raise instead of returning None when nothing is set.
            mask_in_logs: Log ``***`` in place of the value. Turn off for
                non-secrets such as the host.

        Raises:
            CredentialNotFoundError: ``required`` and nothing was found.
        """
        if value is not None:
            origin = "explicit value"
        elif env_var_name and env_var_name in os.environ:
            value = os.environ[env_var_name]
            origin = f"${env_var_name}"
        elif default is not None:
            value = default
            origin = "default"
        elif required:
            checked = f" (checked env var: {env_var_name})" if env_var_name else ""
            raise CredentialNotFoundError(f"Required credential not found{checked}", env_var_name=env_var_name)
        else:
            return None

        logger.debug(f"Using {origin}: {'***' if mask_in_logs else value}")
        return value

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a secret from a file, such as a mounted token.

        The path comes from ``file_path`` or from ``$env_var_name``; ``~``
        and ``$VARS`` in it are expanded. Surrounding whitespace is stripped
        from the contents.

        Returns:
            The file contents, or None when there is no readable file and
            ``required`` is False.

        Raises:
            CredentialFileError: ``required`` and no readable file was found.
        """
        if file_path is None and env_var_name:
            file_path = self.resolve(env_var_name=env_var_name, mask_in_logs=False) or None

        if file_path is None:
            if required:
                unset = f" (env var '{env_var_name}' not set)" if env_var_name else ""
                raise CredentialFileError(f"No file path provided for credential resolution{unset}")
            return None

        path = Path(os.path.expandvars(os.path.expanduser(str(file_path))))
        try:
            secret = path.read_text().strip()
        except OSError as e:
            if isinstance(e, FileNotFoundError):
                message = f"Credential file not found: {path}"
            elif isinstance(e, PermissionError):
                message = f"Permission denied reading credential file: {path}"
            else:
                message = f"Error reading credential file {path}: {e}"
            if required:
                raise CredentialFileError(message) from e
            logger.warning(message)
            return None

        logger.debug(f"Read credential from {path}: ***")
        return secret
