"""Tests for the wire models (aliases, omitted fields, token helpers)."""

from appservices.core.domain.models import (
    Application,
    EventTrigger,
    EventTriggerConfig,
    EventTriggerRequest,
    Token,
    TriggerType,
)


def test_application_uses_wire_id() -> None:
    app = Application.model_validate({"_id": "1", "name": "n", "unknown": "ignored"})
    assert app.id == "1"
    assert app.to_wire() == {"_id": "1", "name": "n"}


def test_request_omits_unset_fields() -> None:
    request = EventTriggerRequest(name="t", type=TriggerType.SCHEDULED, config=EventTriggerConfig(schedule="0 * * * *"))
    assert request.to_wire() == {"name": "t", "type": "SCHEDULED", "config": {"schedule": "0 * * * *"}}


def test_false_flags_are_kept() -> None:
    request = EventTriggerRequest(disabled=False, config=EventTriggerConfig(full_document=False))
    assert request.to_wire() == {"disabled": False, "config": {"full_document": False}}


def test_config_cluster_name_alias() -> None:
    config = EventTriggerConfig.model_validate({"clusterName": "Cluster0", "match": "opaque"})
    assert config.cluster_name == "Cluster0"
    assert config.match == "opaque"
    assert config.to_wire() == {"clusterName": "Cluster0", "match": "opaque"}


def test_trigger_accepts_unknown_type() -> None:
    trigger = EventTrigger.model_validate({"type": "SDK", "last_modified": 1624379410})
    assert trigger.type == "SDK"
    assert trigger.last_modified == 1624379410


def test_trigger_type_matches_enum() -> None:
    trigger = EventTrigger.model_validate_json('{"type": "DATABASE"}')
    assert trigger.type == TriggerType.DATABASE


def test_token_authorization_header() -> None:
    token = Token.model_validate({"access_token": "abc", "refresh_token": "r"})
    assert token.token_type == "Bearer"
    assert token.authorization_header() == "Bearer abc"
    assert token.valid()
    assert not Token().valid()
