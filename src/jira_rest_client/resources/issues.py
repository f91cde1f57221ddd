"""Issues: fetch, create, edit, comment, and list a board's issues."""

import logging
from collections.abc import Mapping
from typing import Any

from jira_rest_client.api import ApiFamily
from jira_rest_client.models import (
    AddComment,
    Board,
    Comment,
    CreateIssue,
    CreateResponse,
    EditIssue,
    EmptyResponse,
    Issue,
)
from jira_rest_client.options import SearchOptions, with_query
from jira_rest_client.pagination import COUNT_BASED, IssueResults, PageIterator
from jira_rest_client.resources.base import Resource, segment

logger = logging.getLogger(__name__)


class Issues(Resource):
    def get(self, issue_id: str) -> Issue:
        """Fetch an issue by key or id."""
        return self._client.get(ApiFamily.API, f"/issue/{segment(issue_id)}", Issue.from_dict)

    def create(self, data: CreateIssue | Mapping[str, Any]) -> CreateResponse:
        """Create an issue.

        ``data`` is a :class:`CreateIssue` or, for projects with custom
        fields, any mapping shaped like ``{"fields": {...}}``.
        """
        response = self._client.post(ApiFamily.API, "/issue", data, CreateResponse.from_dict)
        logger.info(f"Created issue {response.key}")
        return response

    def edit(self, issue_id: str, data: EditIssue | Mapping[str, Any]) -> None:
        """Update fields of an issue."""
        self._client.put(ApiFamily.API, f"/issue/{segment(issue_id)}", data, EmptyResponse.from_dict)

    def comment(self, issue_key: str, data: AddComment | str) -> Comment:
        """Add a comment to an issue."""
        if isinstance(data, str):
            data = AddComment(data)
        return self._client.post(ApiFamily.API, f"/issue/{segment(issue_key)}/comment", data, Comment.from_dict)

    def list(self, board: Board | int, options: SearchOptions | None = None) -> IssueResults:
        """Fetch one page of the issues on a board."""
        board_id = board.id if isinstance(board, Board) else board
        path = with_query(f"/board/{segment(board_id)}/issue", options or SearchOptions())
        return self._client.get(ApiFamily.AGILE, path, IssueResults.from_dict)

    def iter(self, board: Board | int, options: SearchOptions | None = None) -> PageIterator[Issue]:
        """Iterate over every issue on a board."""
        return PageIterator(lambda opts: self.list(board, opts), options or SearchOptions(), COUNT_BASED)
