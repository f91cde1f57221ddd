"""Attachment metadata."""

from jira_rest_client.api import ApiFamily
from jira_rest_client.models import Attachment, EmptyResponse
from jira_rest_client.resources.base import Resource, segment


class Attachments(Resource):
    def get(self, attachment_id: str) -> Attachment:
        """Fetch the metadata of an attachment."""
        return self._client.get(ApiFamily.API, f"/attachment/{segment(attachment_id)}", Attachment.from_dict)

    def delete(self, attachment_id: str) -> EmptyResponse:
        """Remove an attachment. Jira answers with 204 No Content."""
        return self._client.delete(ApiFamily.API, f"/attachment/{segment(attachment_id)}", EmptyResponse.from_dict)
