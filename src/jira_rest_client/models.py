"""Jira payload models.

Response models are built with ``from_dict`` from decoded JSON; request
bodies render themselves with ``to_dict``. ``from_dict`` raises ``KeyError``
or ``TypeError`` on payloads missing required members; the request pipeline
turns those into :class:`~jira_rest_client.errors.DecodeError`.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING, Any, TypeVar

from jira_rest_client.errors.exceptions import DecodeError

if TYPE_CHECKING:
    from jira_rest_client.client import JiraClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


def list_of(decoder: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    """Lift an item decoder to a decoder for a JSON array of items."""

    def decode(data: Any) -> list[T]:
        if not isinstance(data, list):
            raise TypeError(f"expected a JSON array, got {type(data).__name__}")
        return [decoder(item) for item in data]

    return decode


def json_object(data: Any) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _optional(decoder: Callable[[Any], T], value: Any) -> T | None:
    return None if value is None else decoder(value)


def _parse_datetime(value: str | None) -> datetime | None:
    """Parse Jira's ISO 8601 timestamps (``2015-04-11T15:22:00.000+10:00``)."""
    if value is None:
        return None
    # Server responses may use +1000 instead of +10:00
    if len(value) > 5 and value[-5] in "+-" and value[-3] != ":":
        value = f"{value[:-2]}:{value[-2:]}"
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@dataclass
class EmptyResponse:
    """Result of endpoints that answer with no content."""

    @classmethod
    def from_dict(cls, data: Any) -> "EmptyResponse":
        return cls()


@dataclass
class User:
    display_name: str
    self_link: str
    name: str | None = None
    key: str | None = None
    account_id: str | None = None
    email_address: str | None = None
    active: bool = True
    avatar_urls: dict[str, str] = field(default_factory=dict)
    timezone: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "User":
        data = json_object(data)
        return cls(
            display_name=data["displayName"],
            self_link=data["self"],
            name=data.get("name"),
            key=data.get("key"),
            account_id=data.get("accountId"),
            email_address=data.get("emailAddress"),
            active=bool(data.get("active", True)),
            avatar_urls=dict(data.get("avatarUrls") or {}),
            timezone=data.get("timeZone"),
        )


@dataclass
class Status:
    id: str
    name: str
    self_link: str
    description: str = ""
    icon_url: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Status":
        data = json_object(data)
        return cls(
            id=data["id"],
            name=data["name"],
            self_link=data["self"],
            description=data.get("description", ""),
            icon_url=data.get("iconUrl"),
        )


@dataclass
class Priority:
    id: str
    name: str
    self_link: str
    icon_url: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Priority":
        data = json_object(data)
        return cls(id=data["id"], name=data["name"], self_link=data["self"], icon_url=data.get("iconUrl"))


@dataclass
class IssueType:
    id: str
    name: str
    self_link: str
    description: str = ""
    icon_url: str | None = None
    subtask: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "IssueType":
        data = json_object(data)
        return cls(
            id=data["id"],
            name=data["name"],
            self_link=data["self"],
            description=data.get("description", ""),
            icon_url=data.get("iconUrl"),
            subtask=bool(data.get("subtask", False)),
        )


@dataclass
class Project:
    id: str
    key: str
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> "Project":
        data = json_object(data)
        return cls(id=data["id"], key=data["key"], name=data["name"])


@dataclass
class Resolution:
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> "Resolution":
        return cls(name=json_object(data)["name"])

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass
class Version:
    id: str
    name: str
    project_id: int
    self_link: str
    released: bool = False
    archived: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Version":
        data = json_object(data)
        return cls(
            id=data["id"],
            name=data["name"],
            project_id=int(data["projectId"]),
            self_link=data["self"],
            released=bool(data.get("released", False)),
            archived=bool(data.get("archived", False)),
        )


@dataclass
class Component:
    id: str
    name: str
    self_link: str | None = None
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Component":
        data = json_object(data)
        return cls(
            id=data["id"],
            name=data["name"],
            self_link=data.get("self"),
            description=data.get("description"),
        )


@dataclass
class Visibility:
    type: str
    value: str

    @classmethod
    def from_dict(cls, data: Any) -> "Visibility":
        data = json_object(data)
        return cls(type=data["type"], value=data["value"])


@dataclass
class Comment:
    self_link: str
    body: str
    created: str
    updated: str
    id: str | None = None
    author: User | None = None
    update_author: User | None = None
    visibility: Visibility | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Comment":
        data = json_object(data)
        return cls(
            self_link=data["self"],
            body=data["body"],
            created=data["created"],
            updated=data["updated"],
            id=data.get("id"),
            author=_optional(User.from_dict, data.get("author")),
            update_author=_optional(User.from_dict, data.get("updateAuthor")),
            visibility=_optional(Visibility.from_dict, data.get("visibility")),
        )


@dataclass
class Comments:
    comments: list[Comment]

    @classmethod
    def from_dict(cls, data: Any) -> "Comments":
        return cls(comments=list_of(Comment.from_dict)(json_object(data)["comments"]))


@dataclass
class Attachment:
    id: str
    self_link: str
    filename: str
    created: str
    size: int
    mime_type: str
    content: str
    author: User | None = None
    thumbnail: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Attachment":
        data = json_object(data)
        return cls(
            id=data["id"],
            self_link=data["self"],
            filename=data["filename"],
            created=data["created"],
            size=int(data["size"]),
            mime_type=data["mimeType"],
            content=data["content"],
            author=_optional(User.from_dict, data.get("author")),
            thumbnail=data.get("thumbnail"),
        )


@dataclass
class HistoryItem:
    field: str
    from_value: str | None = None
    from_string: str | None = None
    to_value: str | None = None
    to_string: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "HistoryItem":
        data = json_object(data)
        return cls(
            field=data["field"],
            from_value=data.get("from"),
            from_string=data.get("fromString"),
            to_value=data.get("to"),
            to_string=data.get("toString"),
        )


@dataclass
class History:
    created: str
    items: list[HistoryItem]
    author: User | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "History":
        data = json_object(data)
        return cls(
            created=data["created"],
            items=list_of(HistoryItem.from_dict)(data["items"]),
            author=_optional(User.from_dict, data.get("author")),
        )


@dataclass
class Changelog:
    histories: list[History]

    @classmethod
    def from_dict(cls, data: Any) -> "Changelog":
        return cls(histories=list_of(History.from_dict)(json_object(data)["histories"]))


@dataclass
class LinkType:
    id: str
    name: str
    inward: str
    outward: str
    self_link: str

    @classmethod
    def from_dict(cls, data: Any) -> "LinkType":
        data = json_object(data)
        return cls(
            id=data["id"],
            name=data["name"],
            inward=data["inward"],
            outward=data["outward"],
            self_link=data["self"],
        )


@dataclass
class IssueLink:
    id: str
    self_link: str
    link_type: LinkType
    outward_issue: "Issue | None" = None
    inward_issue: "Issue | None" = None

    @classmethod
    def from_dict(cls, data: Any) -> "IssueLink":
        data = json_object(data)
        return cls(
            id=data["id"],
            self_link=data["self"],
            link_type=LinkType.from_dict(data["type"]),
            outward_issue=_optional(Issue.from_dict, data.get("outwardIssue")),
            inward_issue=_optional(Issue.from_dict, data.get("inwardIssue")),
        )


@dataclass
class Issue:
    """A single Jira issue.

    ``fields`` holds the raw field map since its contents depend on the
    project configuration and the ``fields`` query option. The properties
    below read the standard fields and return None (or an empty list) when a
    field is absent or does not have the expected shape.
    """

    self_link: str
    key: str
    id: str
    fields: dict[str, Any] = field(default_factory=dict)
    changelog: Changelog | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Issue":
        data = json_object(data)
        return cls(
            self_link=data["self"],
            key=data["key"],
            id=data["id"],
            fields=dict(data.get("fields") or {}),
            changelog=_optional(Changelog.from_dict, data.get("changelog")),
        )

    def field(self, name: str, decode: Callable[[Any], T] | None = None) -> Any:
        """Read a field, optionally decoding it.

        Returns:
            None if the field is absent, otherwise the raw or decoded value.

        Raises:
            DecodeError: If ``decode`` rejects the field value.
        """
        if name not in self.fields:
            return None
        value = self.fields[name]
        if decode is None:
            return value
        try:
            return decode(value)
        except (ValueError, TypeError, KeyError) as e:
            raise DecodeError.from_exception(e) from e

    def _lenient(self, name: str, decode: Callable[[Any], T]) -> T | None:
        try:
            return self.field(name, decode)
        except DecodeError as e:
            logger.debug(f"Ignoring malformed field {name!r} on {self.key}: {e}")
            return None

    def _string(self, name: str) -> str | None:
        value = self.fields.get(name)
        return value if isinstance(value, str) else None

    @property
    def assignee(self) -> User | None:
        return self._lenient("assignee", User.from_dict)

    @property
    def creator(self) -> User | None:
        return self._lenient("creator", User.from_dict)

    @property
    def reporter(self) -> User | None:
        return self._lenient("reporter", User.from_dict)

    @property
    def status(self) -> Status | None:
        return self._lenient("status", Status.from_dict)

    @property
    def summary(self) -> str | None:
        return self._string("summary")

    @property
    def description(self) -> str | None:
        return self._string("description")

    @property
    def updated(self) -> str | None:
        return self._string("updated")

    @property
    def created(self) -> str | None:
        return self._string("created")

    @property
    def resolution_date(self) -> str | None:
        return self._string("resolutiondate")

    @property
    def issue_type(self) -> IssueType | None:
        return self._lenient("issuetype", IssueType.from_dict)

    @property
    def labels(self) -> list[str]:
        return self._lenient("labels", list_of(str)) or []

    @property
    def fix_versions(self) -> list[Version]:
        return self._lenient("fixVersions", list_of(Version.from_dict)) or []

    @property
    def priority(self) -> Priority | None:
        return self._lenient("priority", Priority.from_dict)

    @property
    def project(self) -> Project | None:
        return self._lenient("project", Project.from_dict)

    @property
    def resolution(self) -> Resolution | None:
        return self._lenient("resolution", Resolution.from_dict)

    @property
    def attachments(self) -> list[Attachment]:
        return self._lenient("attachment", list_of(Attachment.from_dict)) or []

    @property
    def comments(self) -> list[Comment]:
        comments = self._lenient("comment", Comments.from_dict)
        return comments.comments if comments else []

    def links(self) -> list[IssueLink] | None:
        """Links to other issues; unlike the properties, malformed links raise DecodeError."""
        return self.field("issuelinks", list_of(IssueLink.from_dict))

    def permalink(self, client: "JiraClient") -> str:
        return f"{client.browse_url}/browse/{self.key}"


@dataclass
class Board:
    id: int
    self_link: str
    name: str
    type_name: str

    @classmethod
    def from_dict(cls, data: Any) -> "Board":
        data = json_object(data)
        return cls(id=int(data["id"]), self_link=data["self"], name=data["name"], type_name=data["type"])


@dataclass
class Sprint:
    id: int
    self_link: str
    name: str
    state: str | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    complete_date: datetime | None = None
    origin_board_id: int | None = None
    goal: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Sprint":
        data = json_object(data)
        return cls(
            id=int(data["id"]),
            self_link=data["self"],
            name=data["name"],
            state=data.get("state"),
            start_date=_parse_datetime(data.get("startDate")),
            end_date=_parse_datetime(data.get("endDate")),
            complete_date=_parse_datetime(data.get("completeDate")),
            origin_board_id=_optional(int, data.get("originBoardId")),
            goal=data.get("goal"),
        )


@dataclass
class Worklog:
    id: str
    self_link: str
    issue_id: str
    started: str
    updated: str
    time_spent: str
    time_spent_seconds: int
    author: User | None = None
    update_author: User | None = None
    comment: str | None = None
    visibility: Visibility | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Worklog":
        data = json_object(data)
        return cls(
            id=data["id"],
            self_link=data["self"],
            issue_id=data["issueId"],
            started=data["started"],
            updated=data["updated"],
            time_spent=data["timeSpent"],
            time_spent_seconds=int(data["timeSpentSeconds"]),
            author=_optional(User.from_dict, data.get("author")),
            update_author=_optional(User.from_dict, data.get("updateAuthor")),
            comment=data.get("comment"),
            visibility=_optional(Visibility.from_dict, data.get("visibility")),
        )


@dataclass
class TransitionTo:
    id: str
    name: str

    @classmethod
    def from_dict(cls, data: Any) -> "TransitionTo":
        data = json_object(data)
        return cls(id=data["id"], name=data["name"])


@dataclass
class TransitionOption:
    id: str
    name: str
    to: TransitionTo
    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "TransitionOption":
        data = json_object(data)
        return cls(
            id=data["id"],
            name=data["name"],
            to=TransitionTo.from_dict(data["to"]),
            fields=dict(data.get("fields") or {}),
        )


def transition_options(data: Any) -> list[TransitionOption]:
    """Unwrap ``{"transitions": [...]}``."""
    return list_of(TransitionOption.from_dict)(json_object(data)["transitions"])


@dataclass
class TransitionTriggerOptions:
    """Body of a transition request: the transition id plus fields to set."""

    transition_id: str
    fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def builder(cls, transition_id: str) -> "TransitionTriggerOptionsBuilder":
        return TransitionTriggerOptionsBuilder(transition_id)

    def to_dict(self) -> dict[str, Any]:
        return {"transition": {"id": self.transition_id}, "fields": dict(self.fields)}


class TransitionTriggerOptionsBuilder:
    def __init__(self, transition_id: str):
        self._transition_id = transition_id
        self._fields: dict[str, Any] = {}

    def field(self, name: str, value: Any) -> "TransitionTriggerOptionsBuilder":
        """Set a field as part of the transition."""
        self._fields[name] = value.to_dict() if hasattr(value, "to_dict") else value
        return self

    def resolution(self, name: str) -> "TransitionTriggerOptionsBuilder":
        return self.field("resolution", Resolution(name))

    def build(self) -> TransitionTriggerOptions:
        return TransitionTriggerOptions(self._transition_id, dict(self._fields))


@dataclass
class Resolved:
    id: str
    title: str
    resolution_type: str
    properties: dict[str, Any] = field(default_factory=dict)
    additional_properties: bool = False

    @classmethod
    def from_dict(cls, data: Any) -> "Resolved":
        data = json_object(data)
        return cls(
            id=data["id"],
            title=data["title"],
            resolution_type=data["type"],
            properties=dict(data.get("properties") or {}),
            additional_properties=bool(data.get("additionalProperties", False)),
        )


@dataclass
class IssueFields:
    """Fields of a standard issue creation request."""

    project_key: str
    issue_type_id: str
    summary: str
    description: str | None = None
    environment: str | None = None
    assignee: str | None = None
    reporter: str | None = None
    priority_id: str | None = None
    components: list[Component] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "project": {"key": self.project_key},
            "issuetype": {"id": self.issue_type_id},
            "summary": self.summary,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.environment is not None:
            data["environment"] = self.environment
        if self.assignee is not None:
            data["assignee"] = {"name": self.assignee}
        if self.reporter is not None:
            data["reporter"] = {"name": self.reporter}
        if self.priority_id is not None:
            data["priority"] = {"id": self.priority_id}
        if self.components:
            data["components"] = [{"id": c.id, "name": c.name} for c in self.components]
        return data


@dataclass
class CreateIssue:
    """Issue creation body; ``fields`` may be :class:`IssueFields` or a custom mapping."""

    fields: IssueFields | dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        fields = self.fields.to_dict() if isinstance(self.fields, IssueFields) else dict(self.fields)
        return {"fields": fields}


@dataclass
class EditIssue:
    fields: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {"fields": dict(self.fields)}


@dataclass
class CreateResponse:
    id: str
    key: str
    url: str

    @classmethod
    def from_dict(cls, data: Any) -> "CreateResponse":
        data = json_object(data)
        return cls(id=data["id"], key=data["key"], url=data["self"])


@dataclass
class AddComment:
    body: str

    def to_dict(self) -> dict[str, Any]:
        return {"body": self.body}


@dataclass
class CreateComponent:
    name: str
    project: str
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description, "project": self.project}


@dataclass
class CreateComponentResponse:
    id: str
    name: str
    project: str
    url: str
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "CreateComponentResponse":
        data = json_object(data)
        return cls(
            id=data["id"],
            name=data["name"],
            project=data["project"],
            url=data["self"],
            description=data.get("description"),
        )


@dataclass
class VersionCreationBody:
    name: str
    project_id: int

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "projectId": self.project_id}


@dataclass
class VersionMoveAfterBody:
    after: str

    def to_dict(self) -> dict[str, Any]:
        return {"after": self.after}


@dataclass
class VersionUpdateBody:
    released: bool
    archived: bool
    move_unfixed_issues_to: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "released": self.released,
            "archived": self.archived,
            "moveUnfixedIssuesTo": self.move_unfixed_issues_to,
        }


@dataclass
class IssueKeys:
    """``{"issues": [...]}`` body shared by the sprint and backlog move endpoints."""

    issues: list[str]

    def to_dict(self) -> dict[str, Any]:
        return {"issues": list(self.issues)}
