"""Issue resolutions."""

from jira_rest_client.api import ApiFamily
from jira_rest_client.models import Resolved
from jira_rest_client.resources.base import Resource, segment


class Resolution(Resource):
    def get(self, resolution_id: str) -> Resolved:
        return self._client.get(ApiFamily.API, f"/resolution/{segment(resolution_id)}", Resolved.from_dict)
