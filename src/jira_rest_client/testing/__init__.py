"""Testing utilities for code built on the Jira client.

Modules:
    factories: Mock responses, a recording mock transport and a client factory

Example:
    ```python
    from jira_rest_client.testing import RecordingTransport, create_mock_response, mock_jira_client


    def test_lists_boards():
        transport = RecordingTransport([create_mock_response({"maxResults": 50, "startAt": 0, "isLast": True, "values": []})])
        jira = mock_jira_client(transport)
        assert list(jira.boards.iter()) == []
        assert transport.requests[0].url.path == "/rest/agile/latest/board"
    ```
"""

from jira_rest_client.testing.factories import (
    TEST_HOST,
    RecordingTransport,
    create_error_response,
    create_mock_response,
    mock_jira_client,
    page_payload,
)

__all__ = [
    "TEST_HOST",
    "RecordingTransport",
    "create_error_response",
    "create_mock_response",
    "mock_jira_client",
    "page_payload",
]
