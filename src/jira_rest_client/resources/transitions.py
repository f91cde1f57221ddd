"""Workflow transitions of one issue."""

import logging
from typing import TYPE_CHECKING

from jira_rest_client.api import ApiFamily
from jira_rest_client.errors.exceptions import DecodeError
from jira_rest_client.models import EmptyResponse, TransitionOption, TransitionTriggerOptions, transition_options
from jira_rest_client.resources.base import Resource, segment

if TYPE_CHECKING:
    from jira_rest_client.client import JiraClient

logger = logging.getLogger(__name__)


class Transitions(Resource):
    def __init__(self, client: "JiraClient", issue_key: str):
        super().__init__(client)
        self._key = issue_key

    @property
    def path(self) -> str:
        return f"/issue/{segment(self._key)}/transitions"

    def trigger(self, options: TransitionTriggerOptions | str) -> None:
        """Move the issue through a transition.

        Pass a transition id, or build options with
        ``TransitionTriggerOptions.builder(id).resolution("Done").build()``
        to set fields on the way.
        """
        if isinstance(options, str):
            options = TransitionTriggerOptions(options)
        try:
            self._client.post(ApiFamily.API, self.path, options, EmptyResponse.from_dict)
        except DecodeError as e:
            # Some Jira versions answer a successful transition with a non-JSON body
            logger.debug(f"Ignoring undecodable body from successful transition of {self._key}: {e}")

    def list(self) -> list[TransitionOption]:
        """Transitions currently available, with the fields each one accepts."""
        return self._client.get(ApiFamily.API, f"{self.path}?expand=transitions.fields", transition_options)
