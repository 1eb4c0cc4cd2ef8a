"""Applications endpoint (`groups/{groupId}/apps`)."""

from __future__ import annotations

from appservices.adapters.query import set_query_params
from appservices.adapters.services.base import Service, require
from appservices.core.domain.models import (
    Application,
    ApplicationListOptions,
    Response,
)

APPS_BASE_PATH = "groups/{group_id}/apps"


class AppsService(Service):
    """Applications of a project (group)."""

    async def list(
        self,
        group_id: str,
        options: ApplicationListOptions | None = None,
    ) -> tuple[list[Application], Response]:
        """List the applications of `group_id`, one page as served by the API."""

        require(groupId=group_id)

        path = set_query_params(APPS_BASE_PATH.format(group_id=group_id), options)
        request = self.client.new_request("GET", path)

        apps, response = await self.client.do(request, list[Application])
        return apps or [], response
