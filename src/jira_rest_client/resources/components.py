"""Project components."""

from jira_rest_client.api import ApiFamily
from jira_rest_client.models import Component, CreateComponent, CreateComponentResponse, list_of
from jira_rest_client.resources.base import Resource, segment


class Components(Resource):
    def get(self, component_id: str) -> Component:
        return self._client.get(ApiFamily.API, f"/component/{segment(component_id)}", Component.from_dict)

    def create(self, data: CreateComponent) -> CreateComponentResponse:
        return self._client.post(ApiFamily.API, "/component", data, CreateComponentResponse.from_dict)

    def list(self, project_id_or_key: str) -> list[Component]:
        """All components of a project. Not paginated by Jira."""
        path = f"/project/{segment(project_id_or_key)}/components"
        return self._client.get(ApiFamily.API, path, list_of(Component.from_dict))
