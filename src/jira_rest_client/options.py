"""Query options for listing and search endpoints.

Example:
    ```python
    options = SearchOptions.builder().jql("project = DEMO").max_results(25).build()
    options.serialize()  # 'jql=project+%3D+DEMO&maxResults=25'

    # Next page: same filters, new offset
    next_page = options.as_builder().start_at(25).build()
    ```
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType

import httpx

RECOGNIZED_PARAMETERS: frozenset[str] = frozenset(
    [
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
    ]
)


class SearchOptions:
    """Immutable set of query parameters restricted to the recognized names."""

    __slots__ = ("_params",)

    def __init__(self, params: Mapping[str, str] | None = None):
        params = dict(params or {})
        unknown = set(params) - RECOGNIZED_PARAMETERS
        if unknown:
            raise ValueError(f"Unrecognized query parameters: {', '.join(sorted(unknown))}")
        self._params = MappingProxyType(params)

    @classmethod
    def builder(cls) -> "SearchOptionsBuilder":
        return SearchOptionsBuilder()

    @property
    def params(self) -> Mapping[str, str]:
        return self._params

    def get(self, name: str) -> str | None:
        return self._params.get(name)

    def serialize(self) -> str | None:
        """Form-encode the parameters; None when there are none."""
        if not self._params:
            return None
        return str(httpx.QueryParams(dict(self._params)))

    def as_builder(self) -> "SearchOptionsBuilder":
        """Start a builder seeded with a copy of these parameters."""
        return SearchOptionsBuilder(self._params)

    def __len__(self) -> int:
        return len(self._params)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchOptions):
            return NotImplemented
        return dict(self._params) == dict(other._params)

    def __hash__(self) -> int:
        return hash(frozenset(self._params.items()))

    def __repr__(self) -> str:
        return f"SearchOptions({dict(self._params)!r})"


class SearchOptionsBuilder:
    """Accumulates query parameters; each setter overwrites its previous value."""

    def __init__(self, params: Mapping[str, str] | None = None):
        self._params: dict[str, str] = dict(params or {})

    def _set(self, name: str, value: str) -> "SearchOptionsBuilder":
        self._params[name] = value
        return self

    def fields(self, fields: Iterable[str]) -> "SearchOptionsBuilder":
        return self._set("fields", ",".join(fields))

    def validate(self, validate: bool) -> "SearchOptionsBuilder":
        return self._set("validateQuery", _bool(validate))

    def validate_query(self, validate: bool) -> "SearchOptionsBuilder":
        return self._set("validateQuery", _bool(validate))

    def max_results(self, max_results: int) -> "SearchOptionsBuilder":
        return self._set("maxResults", str(max_results))

    def start_at(self, start_at: int) -> "SearchOptionsBuilder":
        return self._set("startAt", str(start_at))

    def type_name(self, type_name: str) -> "SearchOptionsBuilder":
        return self._set("type", type_name)

    def name(self, name: str) -> "SearchOptionsBuilder":
        return self._set("name", name)

    def project_key_or_id(self, project: str) -> "SearchOptionsBuilder":
        return self._set("projectKeyOrId", project)

    def expand(self, expand: Iterable[str]) -> "SearchOptionsBuilder":
        return self._set("expand", ",".join(expand))

    def state(self, state: str) -> "SearchOptionsBuilder":
        return self._set("state", state)

    def jql(self, jql: str) -> "SearchOptionsBuilder":
        return self._set("jql", jql)

    def build(self) -> SearchOptions:
        return SearchOptions(self._params)


def _bool(value: bool) -> str:
    return "true" if value else "false"


def with_query(path: str, options: SearchOptions) -> str:
    """Append the serialized options to an endpoint path, if there are any."""
    query = options.serialize()
    return f"{path}?{query}" if query else path
