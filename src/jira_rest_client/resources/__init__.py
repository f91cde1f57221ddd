"""Endpoint bindings, one collection per Jira entity."""

from jira_rest_client.resources.attachments import Attachments
from jira_rest_client.resources.backlog import Backlog
from jira_rest_client.resources.boards import Boards
from jira_rest_client.resources.components import Components
from jira_rest_client.resources.issues import Issues
from jira_rest_client.resources.resolution import Resolution
from jira_rest_client.resources.search import Search
from jira_rest_client.resources.sprints import Sprints
from jira_rest_client.resources.transitions import Transitions
from jira_rest_client.resources.versions import Versions
from jira_rest_client.resources.worklogs import Worklogs

__all__ = [
    "Attachments",
    "Backlog",
    "Boards",
    "Components",
    "Issues",
    "Resolution",
    "Search",
    "Sprints",
    "Transitions",
    "Versions",
    "Worklogs",
]
