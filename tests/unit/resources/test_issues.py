"""Tests for the issues collection."""

import json
import logging

import pytest

from jira_rest_client import SearchOptions
from jira_rest_client.errors.exceptions import FaultError
from jira_rest_client.models import AddComment, CreateIssue, EditIssue, IssueFields
from jira_rest_client.testing import create_error_response, create_mock_response, page_payload


def issue(key, **fields):
    number = key.split("-")[1]
    return {
        "self": f"https://jira.example.com/rest/api/2/issue/{number}",
        "key": key,
        "id": number,
        "fields": fields,
    }


class TestIssues:
    """Test issue endpoints."""

    def test_get(self, jira, transport):
        """Test fetching an issue by key."""
        transport.queue(create_mock_response(issue("DEMO-1", summary="Fix login")))

        result = jira.issues.get("DEMO-1")

        assert result.key == "DEMO-1"
        assert result.summary == "Fix login"
        assert transport.last_request.url.path == "/rest/api/latest/issue/DEMO-1"

    def test_get_escapes_key(self, jira, transport):
        """Test that caller-supplied path segments are escaped."""
        transport.queue(create_mock_response(issue("DEMO-1")))

        jira.issues.get("DEMO-1/../../admin")

        assert transport.last_request.url.raw_path == b"/rest/api/latest/issue/DEMO-1%2F..%2F..%2Fadmin"

    def test_create(self, jira, transport, caplog):
        """Test creating an issue."""
        transport.queue(
            create_mock_response(
                {"id": "10002", "key": "DEMO-2", "self": "https://jira.example.com/rest/api/2/issue/10002"},
                status_code=201,
            )
        )
        body = CreateIssue(IssueFields(project_key="DEMO", issue_type_id="10004", summary="New"))

        with caplog.at_level(logging.INFO):
            created = jira.issues.create(body)

        request = transport.last_request
        assert request.method == "POST"
        assert request.url.path == "/rest/api/latest/issue"
        assert json.loads(request.content)["fields"]["summary"] == "New"
        assert created.key == "DEMO-2"
        assert created.url.endswith("/issue/10002")
        assert "DEMO-2" in caplog.text

    def test_create_with_custom_fields(self, jira, transport):
        """Test creating an issue from a plain mapping."""
        transport.queue(create_mock_response({"id": "1", "key": "DEMO-3", "self": "x"}, status_code=201))

        jira.issues.create({"fields": {"project": {"key": "DEMO"}, "customfield_10010": 5}})

        assert json.loads(transport.last_request.content) == {
            "fields": {"project": {"key": "DEMO"}, "customfield_10010": 5}
        }

    def test_create_rejected(self, jira, transport):
        """Test that field errors are reported."""
        transport.queue(create_error_response(400, errors={"summary": "You must specify a summary of the issue."}))

        with pytest.raises(FaultError) as exc_info:
            jira.issues.create(CreateIssue({"project": {"key": "DEMO"}}))

        assert exc_info.value.errors.errors["summary"].startswith("You must specify")

    def test_edit(self, jira, transport):
        """Test editing an issue; Jira answers 204."""
        transport.queue(create_mock_response(None, status_code=204))

        assert jira.issues.edit("DEMO-1", EditIssue({"summary": "Renamed"})) is None

        request = transport.last_request
        assert request.method == "PUT"
        assert json.loads(request.content) == {"fields": {"summary": "Renamed"}}

    def test_comment(self, jira, transport):
        """Test adding a comment."""
        transport.queue(
            create_mock_response(
                {
                    "self": "https://jira.example.com/rest/api/2/issue/10001/comment/1",
                    "id": "1",
                    "body": "Done",
                    "created": "2024-01-02T10:00:00.000+0000",
                    "updated": "2024-01-02T10:00:00.000+0000",
                },
                status_code=201,
            )
        )

        comment = jira.issues.comment("DEMO-1", "Done")

        assert comment.body == "Done"
        assert transport.last_request.url.path == "/rest/api/latest/issue/DEMO-1/comment"
        assert json.loads(transport.last_request.content) == {"body": "Done"}

    def test_comment_with_body_object(self, jira, transport):
        transport.queue(
            create_mock_response({"self": "x", "body": "Hi", "created": "c", "updated": "u"}, status_code=201)
        )

        jira.issues.comment("DEMO-1", AddComment("Hi"))

        assert json.loads(transport.last_request.content) == {"body": "Hi"}


class TestBoardIssues:
    """Test listing the issues on a board."""

    def test_list_uses_agile_api(self, jira, transport):
        """Test that board issues come from the agile API."""
        transport.queue(create_mock_response(page_payload([issue("DEMO-1")], total=1, items_key="issues")))

        page = jira.issues.list(7, SearchOptions.builder().fields(["summary"]).build())

        assert transport.last_request.url.path == "/rest/agile/latest/board/7/issue"
        assert transport.last_request.url.params["fields"] == "summary"
        assert page.issues[0].key == "DEMO-1"

    def test_iter(self, jira, transport):
        """Test iterating a board's issues across pages."""
        transport.queue(
            create_mock_response(
                page_payload([issue("DEMO-1"), issue("DEMO-2")], max_results=2, total=3, items_key="issues")
            ),
            create_mock_response(page_payload([issue("DEMO-3")], start_at=2, max_results=2, total=3, items_key="issues")),
        )

        keys = [i.key for i in jira.issues.iter(7)]

        assert keys == ["DEMO-1", "DEMO-2", "DEMO-3"]
        assert transport.requests[1].url.path == "/rest/agile/latest/board/7/issue"
        assert transport.requests[1].url.params["startAt"] == "2"
