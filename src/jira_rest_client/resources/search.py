"""JQL search."""

from jira_rest_client.api import ApiFamily
from jira_rest_client.models import Issue
from jira_rest_client.options import SearchOptions, with_query
from jira_rest_client.pagination import COUNT_BASED, PageIterator, SearchResults
from jira_rest_client.resources.base import Resource


class Search(Resource):
    def list(self, jql: str, options: SearchOptions | None = None) -> SearchResults:
        """Fetch one page of issues matching ``jql``.

        ``jql`` replaces any ``jql`` already set on ``options``.
        """
        options = (options or SearchOptions()).as_builder().jql(jql).build()
        return self._client.get(ApiFamily.API, with_query("/search", options), SearchResults.from_dict)

    def iter(self, jql: str, options: SearchOptions | None = None) -> PageIterator[Issue]:
        """Iterate over every issue matching ``jql``."""
        return PageIterator(lambda opts: self.list(jql, opts), options or SearchOptions(), COUNT_BASED)
