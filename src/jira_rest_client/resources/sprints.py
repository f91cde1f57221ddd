"""Agile sprints."""

from jira_rest_client.api import ApiFamily
from jira_rest_client.models import Board, EmptyResponse, IssueKeys, Sprint
from jira_rest_client.options import SearchOptions, with_query
from jira_rest_client.pagination import FLAG_BASED, PageIterator, SprintResults
from jira_rest_client.resources.base import Resource, segment


class Sprints(Resource):
    def get(self, sprint_id: int | str) -> Sprint:
        """Fetch a single sprint."""
        return self._client.get(ApiFamily.AGILE, f"/sprint/{segment(sprint_id)}", Sprint.from_dict)

    def move_issues(self, sprint_id: int | str, issues: list[str]) -> EmptyResponse:
        """Move issues (keys or ids) into a sprint."""
        return self._client.post(
            ApiFamily.AGILE,
            f"/sprint/{segment(sprint_id)}/issue",
            IssueKeys(list(issues)),
            EmptyResponse.from_dict,
        )

    def list(self, board: Board | int, options: SearchOptions | None = None) -> SprintResults:
        """Fetch one page of a board's sprints. Filter with ``state``."""
        board_id = board.id if isinstance(board, Board) else board
        path = with_query(f"/board/{segment(board_id)}/sprint", options or SearchOptions())
        return self._client.get(ApiFamily.AGILE, path, SprintResults.from_dict)

    def iter(self, board: Board | int, options: SearchOptions | None = None) -> PageIterator[Sprint]:
        """Iterate over every sprint of a board."""
        return PageIterator(lambda opts: self.list(board, opts), options or SearchOptions(), FLAG_BASED)
