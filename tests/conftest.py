"""Pytest configuration and shared fixtures for jira-rest-client tests."""

import pytest

from jira_rest_client.testing import RecordingTransport, mock_jira_client


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear Jira and test environment variables before each test.

    This prevents a developer's own JIRA_* settings from leaking into
    configuration tests.
    """
    import os

    test_prefixes = ("TEST_", "JIRA_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def transport():
    """Recording mock transport with an empty response queue."""
    return RecordingTransport()


@pytest.fixture
def jira(transport):
    """Anonymous JiraClient that sends through the ``transport`` fixture."""
    client = mock_jira_client(transport)
    yield client
    client.close()
