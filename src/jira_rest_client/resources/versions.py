"""Project versions (releases)."""

import logging

from jira_rest_client.api import ApiFamily
from jira_rest_client.models import (
    Version,
    VersionCreationBody,
    VersionMoveAfterBody,
    VersionUpdateBody,
    list_of,
)
from jira_rest_client.resources.base import Resource, segment

logger = logging.getLogger(__name__)


class Versions(Resource):
    def project_versions(self, project_id_or_key: str) -> list[Version]:
        """All versions of a project."""
        path = f"/project/{segment(project_id_or_key)}/versions"
        return self._client.get(ApiFamily.API, path, list_of(Version.from_dict))

    def create(self, project_id: int, name: str) -> Version:
        return self._client.post(ApiFamily.API, "/version", VersionCreationBody(name, project_id), Version.from_dict)

    def move_after(self, version: Version, after: str) -> Version:
        """Reorder ``version`` to follow the version at URL ``after``."""
        path = f"/version/{segment(version.id)}/move"
        return self._client.post(ApiFamily.API, path, VersionMoveAfterBody(after), Version.from_dict)

    def release(self, version: Version, move_unfixed_issues_to: Version | None = None) -> None:
        """Mark a version released, optionally moving its open issues on.

        Already released versions are left alone and no request is sent.
        """
        if version.released:
            logger.debug(f"Version {version.name} is already released")
            return

        body = VersionUpdateBody(
            released=True,
            archived=False,
            move_unfixed_issues_to=move_unfixed_issues_to.self_link if move_unfixed_issues_to else None,
        )
        self._client.put(ApiFamily.API, f"/version/{segment(version.id)}", body, Version.from_dict)
