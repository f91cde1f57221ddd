"""Issue worklogs."""

from jira_rest_client.api import ApiFamily
from jira_rest_client.models import Worklog
from jira_rest_client.options import SearchOptions, with_query
from jira_rest_client.pagination import COUNT_BASED, PageIterator, WorklogResults
from jira_rest_client.resources.base import Resource, segment


class Worklogs(Resource):
    def list(self, issue_id: str, options: SearchOptions | None = None) -> WorklogResults:
        """Fetch one page of an issue's worklogs."""
        path = with_query(f"/issue/{segment(issue_id)}/worklog", options or SearchOptions())
        return self._client.get(ApiFamily.API, path, WorklogResults.from_dict)

    def iter(self, issue_id: str, options: SearchOptions | None = None) -> PageIterator[Worklog]:
        return PageIterator(lambda opts: self.list(issue_id, opts), options or SearchOptions(), COUNT_BASED)
