"""Lazy iteration over paginated Jira listings.

Jira pages its listings with ``startAt``/``maxResults``. Two families of
endpoints report the end of a listing differently:

- the core API returns a ``total`` count (search, board issues, worklogs)
- the agile API returns an ``isLast`` flag (boards, sprints)

:class:`PageIterator` runs one algorithm over either, with the termination
check supplied as a :class:`PageStrategy`.

Example:
    ```python
    for issue in client.search.iter("assignee = currentUser()"):
        print(issue.key, issue.summary)
    ```
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

from jira_rest_client.errors.exceptions import JiraError
from jira_rest_client.models import Board, Issue, Sprint, Worklog, json_object, list_of
from jira_rest_client.options import SearchOptions

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Page(Generic[T]):
    """One fetched page of a listing.

    Only ``PageIterator`` mutates ``items``, by removing consumed entries.
    """

    start_at: int
    max_results: int
    items: list[T] = field(default_factory=list)
    total: int | None = None
    is_last: bool | None = None
    expand: str | None = None

    # JSON member that holds the items; set by subclasses
    items_key = "values"

    @classmethod
    def _decode(cls, data: Any, item: Callable[[Any], T], **extra: Any):
        data = json_object(data)
        return cls(
            start_at=int(data["startAt"]),
            max_results=int(data["maxResults"]),
            items=list_of(item)(data[cls.items_key]),
            **extra,
        )


class CountedPage(Page[T]):
    """Page from an endpoint that reports a ``total``."""

    @classmethod
    def _decode(cls, data: Any, item: Callable[[Any], T], **extra: Any):
        data = json_object(data)
        return super()._decode(data, item, total=int(data["total"]), expand=data.get("expand"), **extra)


class FlaggedPage(Page[T]):
    """Page from an endpoint that reports ``isLast``."""

    @classmethod
    def _decode(cls, data: Any, item: Callable[[Any], T], **extra: Any):
        data = json_object(data)
        return super()._decode(data, item, is_last=bool(data["isLast"]), **extra)


class SearchResults(CountedPage[Issue]):
    items_key = "issues"

    @classmethod
    def from_dict(cls, data: Any) -> "SearchResults":
        return cls._decode(data, Issue.from_dict)

    @property
    def issues(self) -> list[Issue]:
        return self.items


class IssueResults(CountedPage[Issue]):
    items_key = "issues"

    @classmethod
    def from_dict(cls, data: Any) -> "IssueResults":
        return cls._decode(data, Issue.from_dict)

    @property
    def issues(self) -> list[Issue]:
        return self.items


class WorklogResults(CountedPage[Worklog]):
    items_key = "worklogs"

    @classmethod
    def from_dict(cls, data: Any) -> "WorklogResults":
        return cls._decode(data, Worklog.from_dict)

    @property
    def worklogs(self) -> list[Worklog]:
        return self.items


class BoardResults(FlaggedPage[Board]):
    @classmethod
    def from_dict(cls, data: Any) -> "BoardResults":
        return cls._decode(data, Board.from_dict)

    @property
    def values(self) -> list[Board]:
        return self.items


class SprintResults(FlaggedPage[Sprint]):
    @classmethod
    def from_dict(cls, data: Any) -> "SprintResults":
        return cls._decode(data, Sprint.from_dict)

    @property
    def values(self) -> list[Sprint]:
        return self.items


class PageStrategy(Protocol):
    """Decides whether another page follows ``page``."""

    def has_more(self, page: Page[Any]) -> bool: ...


class CountBased:
    """More pages remain while ``startAt + maxResults < total``."""

    def has_more(self, page: Page[Any]) -> bool:
        if page.total is None:
            return False
        return page.start_at + page.max_results < page.total

    def __repr__(self) -> str:
        return "COUNT_BASED"


class FlagBased:
    """More pages remain while the page is not flagged ``isLast``."""

    def has_more(self, page: Page[Any]) -> bool:
        return page.is_last is False

    def __repr__(self) -> str:
        return "FLAG_BASED"


COUNT_BASED = CountBased()
FLAG_BASED = FlagBased()


class PaginationErrorPolicy(Enum):
    """What a failed fetch after the first page does to the iteration."""

    # Stop quietly, as if the listing were complete. Errors are logged only.
    END_OF_SEQUENCE = "end_of_sequence"
    # Re-raise the JiraError from next()
    RAISE = "raise"


# Product owner review pending: END_OF_SEQUENCE hides errors from callers.
DEFAULT_PAGINATION_ERROR_POLICY = PaginationErrorPolicy.END_OF_SEQUENCE


class PageIterator(Generic[T]):
    """Forward-only, single-use iterator over every item of a listing.

    The first page is fetched on construction, so a failing first request
    raises here instead of producing an empty iterator. Later pages are
    fetched one at a time once the buffered page is used up. Items are
    yielded in the order the server returned them.

    Args:
        fetch: Fetches one page for the given options. Fixed filters (JQL,
            board, issue) are bound into it by the resource collection.
        options: Options for the first page.
        strategy: Termination check for this kind of listing.
        error_policy: Behaviour when a later page fails to load.

    Raises:
        JiraError: From the first page fetch.
    """

    def __init__(
        self,
        fetch: Callable[[SearchOptions], Page[T]],
        options: SearchOptions,
        strategy: PageStrategy,
        *,
        error_policy: PaginationErrorPolicy = DEFAULT_PAGINATION_ERROR_POLICY,
    ):
        self._fetch = fetch
        self._strategy = strategy
        self._error_policy = error_policy
        self._options = options
        self._page = fetch(options)
        self._done = False

    @property
    def page(self) -> Page[T]:
        """The currently buffered page."""
        return self._page

    @property
    def options(self) -> SearchOptions:
        """The options the buffered page was fetched with."""
        return self._options

    def __iter__(self) -> "PageIterator[T]":
        return self

    def __next__(self) -> T:
        if self._page.items:
            return self._page.items.pop(0)

        if self._done or not self._strategy.has_more(self._page):
            self._done = True
            raise StopIteration

        next_options = self._next_options()
        try:
            page = self._fetch(next_options)
        except JiraError as e:
            self._done = True
            if self._error_policy is PaginationErrorPolicy.RAISE:
                raise
            logger.warning(f"Stopping pagination at startAt={next_options.get('startAt')}: {e}")
            raise StopIteration from e

        self._page = page
        self._options = next_options
        if not page.items:
            self._done = True
            raise StopIteration
        return page.items.pop(0)

    def _next_options(self) -> SearchOptions:
        page = self._page
        return (
            self._options.as_builder()
            .max_results(page.max_results)
            .start_at(page.start_at + page.max_results)
            .build()
        )
