"""Tests for the Typer CLI, run against the mock API."""

import functools
import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from appservices.cli import common
from appservices.cli.main import app
from tests.conftest import MockAPI

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, api: MockAPI, transport: httpx.MockTransport) -> None:
    """Credentials in the environment; every CLI call goes to the mock API."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("APPSERVICES_BASE_URL", raising=False)
    monkeypatch.delenv("APPSERVICES_AUTH_URL", raising=False)
    monkeypatch.setenv("APPSERVICES_PUBLIC_API_KEY", "public")
    monkeypatch.setenv("APPSERVICES_PRIVATE_API_KEY", "private")
    monkeypatch.setattr(common, "open_client", functools.partial(common.open_client, transport=transport))
    api.reply("POST", "auth/providers/mongodb-cloud/login", body={"access_token": "tok", "user_id": "u1"})


def test_apps_list_json(api: MockAPI) -> None:
    api.reply("GET", "groups/g1/apps", body=[{"_id": "1", "name": "n"}])

    result = runner.invoke(app, ["apps", "list", "g1", "--json"])

    assert result.exit_code == 0, result.output
    assert '"_id": "1"' in result.output
    assert api.last_request.headers["Authorization"] == "Bearer tok"
    assert json.loads(api.requests[0].content) == {"username": "public", "apiKey": "private"}


def test_apps_list_table(api: MockAPI) -> None:
    api.reply("GET", "groups/g1/apps", body=[{"_id": "1", "name": "myapp"}])

    result = runner.invoke(app, ["apps", "list", "g1", "--product", "atlas"])

    assert result.exit_code == 0, result.output
    assert "myapp" in result.output
    assert api.last_request.url.params["product"] == "atlas"


def test_api_error_exits_with_code_1(api: MockAPI) -> None:
    api.reply(
        "GET",
        "groups/g1/apps/a1/triggers",
        status=403,
        body={"error_code": "Forbidden", "reason": "Forbidden", "error": "no access"},
    )

    result = runner.invoke(app, ["triggers", "list", "g1", "a1"])

    assert result.exit_code == 1
    assert "no access" in result.output


def test_triggers_create_from_file(api: MockAPI, tmp_path: Path) -> None:
    api.echo("POST", "groups/g1/apps/a1/triggers", extra={"_id": "t1"})
    request_file = tmp_path / "trigger.json"
    request_file.write_text(
        json.dumps({"name": "nightly", "type": "SCHEDULED", "function_id": "f1", "config": {"schedule": "0 3 * * *"}}),
        encoding="utf-8",
    )

    result = runner.invoke(app, ["triggers", "create", "g1", "a1", "--file", str(request_file), "--json"])

    assert result.exit_code == 0, result.output
    assert api.last_json() == {
        "name": "nightly",
        "type": "SCHEDULED",
        "function_id": "f1",
        "config": {"schedule": "0 3 * * *"},
    }
    assert '"_id": "t1"' in result.output


def test_triggers_get_panel(api: MockAPI) -> None:
    api.reply(
        "GET",
        "groups/g1/apps/a1/triggers/t1",
        body={"_id": "t1", "name": "watch", "type": "DATABASE", "config": {"database": "db"}},
    )

    result = runner.invoke(app, ["triggers", "get", "g1", "a1", "t1"])

    assert result.exit_code == 0, result.output
    assert "watch" in result.output
    assert "database: db" in result.output


def test_triggers_delete(api: MockAPI) -> None:
    api.reply("DELETE", "groups/g1/apps/a1/triggers/t1", status=204)

    result = runner.invoke(app, ["triggers", "delete", "g1", "a1", "t1", "--yes"])

    assert result.exit_code == 0, result.output
    assert "Deleted" in result.output
    assert api.last_request.method == "DELETE"


def test_login_failure(api: MockAPI) -> None:
    api.reply("POST", "auth/providers/mongodb-cloud/login", status=401, body={"error": "invalid"})

    result = runner.invoke(app, ["apps", "list", "g1"])

    assert result.exit_code == 1
    assert "cannot fetch token" in result.output
    assert len(api.requests) == 1
