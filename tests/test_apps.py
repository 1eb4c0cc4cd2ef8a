"""Tests for AppsService."""

import pytest

from appservices.adapters.client import Client
from appservices.core.domain.models import Application, ApplicationListOptions
from appservices.core.errors import ArgError, ErrorResponse
from tests.conftest import MockAPI


async def test_list_apps(api: MockAPI, client: Client) -> None:
    """Listing apps for a group decodes every application."""
    api.reply("GET", "groups/g1/apps", body=[{"_id": "1", "name": "n"}])

    apps, response = await client.apps.list("g1")

    assert apps == [Application(id="1", name="n")]
    app = apps[0]
    assert app.client_app_id is None
    assert app.location is None
    assert app.deployment_model is None
    assert app.domain_id is None
    assert app.group_id is None
    assert response.status_code == 200
    assert api.last_request.method == "GET"


async def test_list_apps_full_payload(api: MockAPI, client: Client) -> None:
    api.reply(
        "GET",
        "groups/6c7498dg87d9e6526801572b/apps",
        body=[
            {
                "_id": "5c7498dg87d9e6526801572b",
                "client_app_id": "app-abcde",
                "name": "app",
                "location": "US-VA",
                "deployment_model": "GLOBAL",
                "domain_id": "5c7498dg87d9e6526801572c",
                "group_id": "6c7498dg87d9e6526801572b",
                "product": "atlas",
            }
        ],
    )

    apps, _ = await client.apps.list("6c7498dg87d9e6526801572b")

    assert apps[0].client_app_id == "app-abcde"
    assert apps[0].deployment_model == "GLOBAL"
    assert apps[0].group_id == "6c7498dg87d9e6526801572b"


async def test_list_apps_with_options(api: MockAPI, client: Client) -> None:
    api.reply("GET", "groups/g1/apps", body=[])

    apps, _ = await client.apps.list("g1", ApplicationListOptions(product="atlas"))

    assert apps == []
    assert api.last_request.url.params["product"] == "atlas"


async def test_list_apps_empty_body(api: MockAPI, client: Client) -> None:
    api.reply("GET", "groups/g1/apps")

    apps, _ = await client.apps.list("g1")

    assert apps == []


async def test_list_apps_requires_group(api: MockAPI, client: Client) -> None:
    with pytest.raises(ArgError) as excinfo:
        await client.apps.list("")

    assert excinfo.value.arg == "groupId"
    assert str(excinfo.value) == "groupId is invalid because must be set"
    assert api.requests == []


async def test_list_apps_api_error(api: MockAPI, client: Client) -> None:
    api.reply(
        "GET",
        "groups/g1/apps",
        status=401,
        body={"error_code": "Unauthorized", "reason": "Unauthorized", "error": "invalid session"},
    )

    with pytest.raises(ErrorResponse) as excinfo:
        await client.apps.list("g1")

    assert excinfo.value.status_code == 401
    assert excinfo.value.detail == "invalid session"
