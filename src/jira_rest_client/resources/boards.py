"""Agile boards."""

from jira_rest_client.api import ApiFamily
from jira_rest_client.models import Board
from jira_rest_client.options import SearchOptions, with_query
from jira_rest_client.pagination import FLAG_BASED, BoardResults, PageIterator
from jira_rest_client.resources.base import Resource, segment


class Boards(Resource):
    def get(self, board_id: int | str) -> Board:
        """Fetch a single board."""
        return self._client.get(ApiFamily.AGILE, f"/board/{segment(board_id)}", Board.from_dict)

    def list(self, options: SearchOptions | None = None) -> BoardResults:
        """Fetch one page of boards.

        Filters: ``type_name``, ``name``, ``project_key_or_id``.
        """
        path = with_query("/board", options or SearchOptions())
        return self._client.get(ApiFamily.AGILE, path, BoardResults.from_dict)

    def iter(self, options: SearchOptions | None = None) -> PageIterator[Board]:
        """Iterate over every board, fetching pages until one is flagged ``isLast``."""
        return PageIterator(self.list, options or SearchOptions(), FLAG_BASED)
