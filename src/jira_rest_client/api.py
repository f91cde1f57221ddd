"""REST API families exposed by a Jira instance."""

from enum import Enum


class ApiFamily(str, Enum):
    """REST namespace an endpoint lives under (``rest/<family>/latest``)."""

    # Core platform API: issues, search, worklogs, components, versions
    API = "api"
    # Jira Software API: boards, sprints, backlog
    AGILE = "agile"
