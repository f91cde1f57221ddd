"""Agile backlog."""

from jira_rest_client.api import ApiFamily
from jira_rest_client.models import EmptyResponse, IssueKeys
from jira_rest_client.resources.base import Resource


class Backlog(Resource):
    def put(self, issues: list[str]) -> EmptyResponse:
        """Move issues (keys or ids) to the backlog, out of any sprint."""
        return self._client.post(ApiFamily.AGILE, "/backlog/issue", IssueKeys(list(issues)), EmptyResponse.from_dict)
