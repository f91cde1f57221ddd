"""Tests for the request pipeline."""

import json

import httpx
import pytest

from jira_rest_client import ApiFamily, Basic, Bearer
from jira_rest_client.errors.exceptions import (
    DecodeError,
    FaultError,
    NotFoundError,
    ResponseIOError,
    TransportError,
    UnauthorizedError,
)
from jira_rest_client.models import EmptyResponse, json_object
from jira_rest_client.testing import create_error_response, create_mock_response, mock_jira_client
from jira_rest_client.transport import USER_AGENT


class BrokenStream(httpx.SyncByteStream):
    """Response body that fails part way through."""

    def __iter__(self):
        yield b'{"id": '
        raise httpx.ReadError("connection reset by peer")


class TestRequestBuilding:
    """Test what goes out on the wire."""

    def test_get_url_and_default_headers(self, jira, transport):
        """Test the URL layout and the headers every request carries."""
        transport.queue(create_mock_response({"id": "1"}))

        jira.get(ApiFamily.API, "/issue/DEMO-1", json_object)

        request = transport.last_request
        assert request.method == "GET"
        assert str(request.url) == "https://jira.example.com/rest/api/latest/issue/DEMO-1"
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"] == USER_AGENT
        assert "Content-Type" not in request.headers
        assert request.content == b""

    def test_body_serialized_as_json(self, jira, transport):
        """Test that bodies are sent as JSON with a content type."""
        transport.queue(create_mock_response({"ok": True}))

        jira.post(ApiFamily.AGILE, "/backlog/issue", {"issues": ["DEMO-1"]}, json_object)

        request = transport.last_request
        assert request.url.path == "/rest/agile/latest/backlog/issue"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"issues": ["DEMO-1"]}

    def test_body_with_to_dict(self, jira, transport):
        """Test that payload objects render themselves."""
        transport.queue(create_mock_response(None, status_code=204))

        class Payload:
            def to_dict(self):
                return {"fields": {"summary": "x"}}

        jira.put(ApiFamily.API, "/issue/DEMO-1", Payload(), EmptyResponse.from_dict)

        assert json.loads(transport.last_request.content) == {"fields": {"summary": "x"}}

    def test_unserializable_body_sends_nothing(self, jira, transport):
        """Test that a body json cannot encode raises DecodeError before sending."""
        with pytest.raises(DecodeError):
            jira.post(ApiFamily.API, "/issue", {"when": object()}, json_object)

        assert transport.requests == []

    def test_delete(self, jira, transport):
        """Test DELETE requests."""
        transport.queue(create_mock_response(None, status_code=204))

        result = jira.delete(ApiFamily.API, "/attachment/10", EmptyResponse.from_dict)

        assert result == EmptyResponse()
        assert transport.last_request.method == "DELETE"


class TestAuthentication:
    """Test credentials on outgoing requests."""

    def test_anonymous_sends_no_authorization(self, jira, transport):
        """Test that anonymous requests carry no Authorization header."""
        transport.queue(create_mock_response({}))

        jira.get(ApiFamily.API, "/serverInfo", json_object)

        assert "Authorization" not in transport.last_request.headers

    def test_basic(self, transport):
        """Test Basic credentials."""
        transport.queue(create_mock_response({}))
        jira = mock_jira_client(transport, Basic("alice", "s3cret"))

        jira.get(ApiFamily.API, "/myself", json_object)

        header = transport.last_request.headers["Authorization"]
        assert header == "Basic YWxpY2U6czNjcmV0"

    def test_bearer(self, transport):
        """Test Bearer credentials."""
        transport.queue(create_mock_response({}))
        jira = mock_jira_client(transport, Bearer("pat-123"))

        jira.get(ApiFamily.AGILE, "/board", json_object)

        assert transport.last_request.headers.get_list("Authorization") == ["Bearer pat-123"]


class TestFailures:
    """Test how failures surface."""

    def test_connection_failure(self, jira, transport):
        """Test that a network failure raises TransportError."""
        cause = httpx.ConnectError("connection refused")
        transport.queue(cause)

        with pytest.raises(TransportError) as exc_info:
            jira.get(ApiFamily.API, "/issue/DEMO-1", json_object)

        assert exc_info.value.__cause__ is cause
        assert exc_info.value.status_code is None

    def test_timeout(self, jira, transport):
        """Test that timeouts are transport failures."""
        transport.queue(httpx.ReadTimeout("timed out"))

        with pytest.raises(TransportError):
            jira.get(ApiFamily.API, "/issue/DEMO-1", json_object)

    def test_body_read_failure(self, jira, transport):
        """Test that a failure reading the body raises ResponseIOError."""
        transport.queue(httpx.Response(200, stream=BrokenStream()))

        with pytest.raises(ResponseIOError) as exc_info:
            jira.get(ApiFamily.API, "/issue/DEMO-1", json_object)

        assert exc_info.value.status_code == 200

    def test_unauthorized(self, jira, transport):
        """Test 401 classification through the pipeline."""
        transport.queue(create_mock_response(text="<html>log in</html>", status_code=401))

        with pytest.raises(UnauthorizedError):
            jira.get(ApiFamily.API, "/myself", json_object)

    def test_not_found(self, jira, transport):
        """Test 404 classification through the pipeline."""
        transport.queue(create_error_response(404, ["Issue Does Not Exist"]))

        with pytest.raises(NotFoundError):
            jira.get(ApiFamily.API, "/issue/NOPE-1", json_object)

    def test_fault(self, jira, transport):
        """Test that other 4xx statuses carry the service's messages."""
        transport.queue(create_error_response(400, ["bad query"]))

        with pytest.raises(FaultError) as exc_info:
            jira.get(ApiFamily.API, "/search?jql=%3D", json_object)

        assert exc_info.value.errors.error_messages == ["bad query"]

    def test_server_error_page_is_decode_error(self, jira, transport):
        """Test that a 5xx HTML page fails in decoding."""
        transport.queue(create_mock_response(text="<html>Service Unavailable</html>", status_code=503))

        with pytest.raises(DecodeError) as exc_info:
            jira.get(ApiFamily.API, "/issue/DEMO-1", json_object)

        assert exc_info.value.status_code == 503

    def test_server_error_with_decodable_body(self, jira, transport):
        """Test that a 5xx with a body the decoder accepts succeeds."""
        transport.queue(create_mock_response({"id": "1"}, status_code=500))

        assert jira.get(ApiFamily.API, "/issue/DEMO-1", json_object) == {"id": "1"}

    def test_empty_success_decodes_as_null(self, jira, transport):
        """Test that an empty 2xx body reaches the decoder as None."""
        transport.queue(create_mock_response(None, status_code=204))

        assert jira.get(ApiFamily.API, "/anything", lambda data: data) is None

    def test_wrong_shape_is_decode_error(self, jira, transport):
        """Test that a JSON body of the wrong shape raises DecodeError."""
        transport.queue(create_mock_response([1, 2]))

        with pytest.raises(DecodeError):
            jira.get(ApiFamily.API, "/issue/DEMO-1", json_object)
