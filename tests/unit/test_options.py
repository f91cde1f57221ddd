"""Tests for search options and their builder."""

from urllib.parse import parse_qs

import pytest

from jira_rest_client.options import RECOGNIZED_PARAMETERS, SearchOptions, with_query


def _query(options: SearchOptions) -> dict[str, list[str]]:
    return parse_qs(options.serialize() or "")


class TestSearchOptions:
    """Test the immutable option set."""

    def test_empty_options_serialize_to_none(self):
        """Test that no parameters means no query string at all."""
        assert SearchOptions().serialize() is None
        assert SearchOptions.builder().build().serialize() is None

    def test_unrecognized_key_rejected(self):
        """Test that only recognized parameter names are accepted."""
        with pytest.raises(ValueError, match="orderBy"):
            SearchOptions({"orderBy": "created"})

    def test_recognized_keys(self):
        """Test the set of recognized parameter names."""
        assert RECOGNIZED_PARAMETERS == {
            "jql",
            "maxResults",
            "startAt",
            "fields",
            "expand",
            "validateQuery",
            "state",
            "type",
            "name",
            "projectKeyOrId",
        }

    def test_params_are_read_only(self):
        """Test that the parameter map cannot be modified."""
        options = SearchOptions({"startAt": "0"})

        with pytest.raises(TypeError):
            options.params["startAt"] = "50"

    def test_equality_and_hash(self):
        """Test value semantics."""
        a = SearchOptions.builder().max_results(10).jql("x").build()
        b = SearchOptions.builder().jql("x").max_results(10).build()

        assert a == b
        assert hash(a) == hash(b)
        assert len(a) == 2

    def test_serialize_escapes_values(self):
        """Test that values are form-encoded."""
        options = SearchOptions.builder().jql("project = DEMO AND status = 'In Progress'").build()

        assert "=" not in options.serialize().split("=", 1)[1]
        assert _query(options) == {"jql": ["project = DEMO AND status = 'In Progress'"]}

    def test_as_builder_copies(self):
        """Test that deriving new options leaves the original untouched."""
        original = SearchOptions.builder().jql("project = DEMO").max_results(25).build()

        derived = original.as_builder().start_at(25).build()

        assert original.get("startAt") is None
        assert derived.get("startAt") == "25"
        assert derived.get("jql") == "project = DEMO"
        assert derived.get("maxResults") == "25"


class TestSearchOptionsBuilder:
    """Test the builder setters."""

    def test_each_setter(self):
        """Test the wire name and rendering of every setter."""
        options = (
            SearchOptions.builder()
            .fields(["summary", "status"])
            .validate_query(False)
            .max_results(50)
            .start_at(100)
            .type_name("scrum")
            .name("Team")
            .project_key_or_id("DEMO")
            .expand(["changelog", "renderedFields"])
            .state("active")
            .jql("assignee = currentUser()")
            .build()
        )

        assert dict(options.params) == {
            "fields": "summary,status",
            "validateQuery": "false",
            "maxResults": "50",
            "startAt": "100",
            "type": "scrum",
            "name": "Team",
            "projectKeyOrId": "DEMO",
            "expand": "changelog,renderedFields",
            "state": "active",
            "jql": "assignee = currentUser()",
        }

    def test_validate_alias(self):
        """Test that validate() sets validateQuery."""
        assert SearchOptions.builder().validate(True).build().get("validateQuery") == "true"

    def test_last_write_wins(self):
        """Test that a repeated setter overwrites the earlier value."""
        options = SearchOptions.builder().max_results(10).max_results(20).build()

        assert options.get("maxResults") == "20"

    def test_builder_reusable_after_build(self):
        """Test that building does not tie the options to the builder."""
        builder = SearchOptions.builder().max_results(10)
        first = builder.build()

        builder.start_at(10)

        assert first.get("startAt") is None


class TestWithQuery:
    """Test appending options to endpoint paths."""

    def test_no_options_leaves_path(self):
        """Test that empty options add no '?'."""
        assert with_query("/board", SearchOptions()) == "/board"

    def test_options_appended(self):
        """Test that options become the query string."""
        options = SearchOptions.builder().state("active").build()

        assert with_query("/board/1/sprint", options) == "/board/1/sprint?state=active"
