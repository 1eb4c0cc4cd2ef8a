"""Event triggers endpoint (`groups/{groupId}/apps/{appId}/triggers`)."""

from __future__ import annotations

from appservices.adapters.services.apps import APPS_BASE_PATH
from appservices.adapters.services.base import Service, require
from appservices.core.domain.models import EventTrigger, EventTriggerRequest, Response

TRIGGERS_BASE_PATH = APPS_BASE_PATH + "/{app_id}/triggers"


class EventTriggersService(Service):
    """Create, read, update and delete the event triggers of an application."""

    def _path(self, group_id: str, app_id: str, trigger_id: str | None = None) -> str:
        path = TRIGGERS_BASE_PATH.format(group_id=group_id, app_id=app_id)
        if trigger_id is None:
            return path
        return f"{path}/{trigger_id}"

    async def create(
        self,
        group_id: str,
        app_id: str,
        create_request: EventTriggerRequest,
    ) -> tuple[EventTrigger, Response]:
        require(groupId=group_id, appID=app_id)

        request = self.client.new_request("POST", self._path(group_id, app_id), create_request)
        trigger, response = await self.client.do(request, EventTrigger)
        return trigger or EventTrigger(), response

    async def get(
        self,
        group_id: str,
        app_id: str,
        trigger_id: str,
    ) -> tuple[EventTrigger, Response]:
        require(groupId=group_id, appID=app_id, triggerID=trigger_id)

        request = self.client.new_request("GET", self._path(group_id, app_id, trigger_id))
        trigger, response = await self.client.do(request, EventTrigger)
        return trigger or EventTrigger(), response

    async def list(self, group_id: str, app_id: str) -> tuple[list[EventTrigger], Response]:
        require(groupId=group_id, appID=app_id)

        request = self.client.new_request("GET", self._path(group_id, app_id))
        triggers, response = await self.client.do(request, list[EventTrigger])
        return triggers or [], response

    async def update(
        self,
        group_id: str,
        app_id: str,
        trigger_id: str,
        update_request: EventTriggerRequest,
    ) -> tuple[EventTrigger, Response]:
        require(groupId=group_id, appID=app_id, triggerID=trigger_id)

        request = self.client.new_request(
            "PUT", self._path(group_id, app_id, trigger_id), update_request
        )
        trigger, response = await self.client.do(request, EventTrigger)
        return trigger or EventTrigger(), response

    async def delete(self, group_id: str, app_id: str, trigger_id: str) -> Response:
        require(groupId=group_id, appID=app_id, triggerID=trigger_id)

        request = self.client.new_request("DELETE", self._path(group_id, app_id, trigger_id))
        _, response = await self.client.do(request)
        return response
