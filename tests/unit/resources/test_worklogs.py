"""Tests for issue worklogs."""

from jira_rest_client import SearchOptions
from jira_rest_client.testing import create_mock_response, page_payload


def worklog(n):
    return {
        "id": str(n),
        "self": f"https://jira.example.com/rest/api/2/issue/10001/worklog/{n}",
        "issueId": "10001",
        "started": "2024-01-02T09:00:00.000+0000",
        "updated": "2024-01-02T10:00:00.000+0000",
        "timeSpent": "1h",
        "timeSpentSeconds": 3600,
        "comment": f"log {n}",
    }


class TestWorklogs:
    """Test worklog pages and iteration."""

    def test_list(self, jira, transport):
        """Test fetching one page of worklogs."""
        transport.queue(create_mock_response(page_payload([worklog(1)], total=1, items_key="worklogs")))

        page = jira.worklogs.list("DEMO-1")

        assert transport.last_request.url.path == "/rest/api/latest/issue/DEMO-1/worklog"
        assert page.worklogs[0].time_spent_seconds == 3600
        assert page.total == 1

    def test_iter(self, jira, transport):
        """Test iterating over worklogs on several pages."""
        transport.queue(
            create_mock_response(page_payload([worklog(1), worklog(2)], max_results=2, total=3, items_key="worklogs")),
            create_mock_response(page_payload([worklog(3)], start_at=2, max_results=2, total=3, items_key="worklogs")),
        )

        logs = list(jira.worklogs.iter("DEMO-1", SearchOptions.builder().max_results(2).build()))

        assert [w.comment for w in logs] == ["log 1", "log 2", "log 3"]
        assert transport.requests[1].url.path == "/rest/api/latest/issue/DEMO-1/worklog"
        assert transport.requests[1].url.params["startAt"] == "2"
