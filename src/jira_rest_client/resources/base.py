"""Shared plumbing for resource collections."""

from typing import TYPE_CHECKING
from urllib.parse import quote

if TYPE_CHECKING:
    from jira_rest_client.client import JiraClient


class Resource:
    """Endpoint bindings for one kind of Jira entity.

    Collections hold nothing but the client handle, so creating one per
    call is free.
    """

    def __init__(self, client: "JiraClient"):
        self._client = client

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._client!r})"


def segment(value: object) -> str:
    """Percent-escape one caller-supplied path segment (issue key, id, ...)."""
    return quote(str(value), safe="")
