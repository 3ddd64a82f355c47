import json

import pytest
import responses

from zendesk_client.base import APIError, OptionsError, add_options
from zendesk_client.trigger import (
    Trigger,
    TriggerAction,
    TriggerCondition,
    TriggerConditions,
    TriggerAPI,
    TriggerListOptions,
)

BASE = "https://example.com/api/v2"

TRIGGER = {
    "id": 360056295714,
    "title": "Notify requester",
    "active": True,
    "position": 3,
    "conditions": {
        "all": [{"field": "update_type", "operator": "is", "value": "Create"}],
        "any": [],
    },
    "actions": [{"field": "notification_user", "value": ["requester_id", "Hi", "Body"]}],
    "description": "",
    "category_id": "1",
    "created_at": "2020-01-02T03:04:05Z",
    "updated_at": "2020-01-02T03:04:05Z",
}


def _triggers(count):
    return [dict(TRIGGER, id=TRIGGER["id"] + n) for n in range(count)]


@pytest.fixture
def mock_api():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    return TriggerAPI(endpoint_url=BASE)


def test_get_triggers(mock_api, client):
    mock_api.add(
        responses.GET,
        f"{BASE}/triggers.json",
        json={"triggers": _triggers(8), "count": 8, "next_page": None},
    )
    triggers, page = client.get_triggers(TriggerListOptions())
    assert len(triggers) == 8
    assert page["count"] == 8
    assert triggers[0].conditions.all_[0].value == "Create"


def test_get_triggers_with_none(client):
    with pytest.raises(OptionsError):
        client.get_triggers(None)


def test_get_triggers_sends_options(mock_api, client):
    mock_api.add(
        responses.GET, f"{BASE}/triggers.json", json={"triggers": _triggers(1)}
    )
    triggers, _ = client.get_triggers(TriggerListOptions(page=2, active=True))
    assert [t.id for t in triggers] == [360056295714]
    assert mock_api.calls[0].request.url == f"{BASE}/triggers.json?active=true&page=2"


def test_create_trigger(mock_api, client):
    mock_api.add(
        responses.POST, f"{BASE}/triggers.json", json={"trigger": TRIGGER}, status=201
    )
    trigger = Trigger(
        title="Notify requester",
        conditions=TriggerConditions(
            all_=[TriggerCondition(field="status", operator="is", value="new")]
        ),
        actions=[TriggerAction(field="status", value="open")],
    )
    created = client.create_trigger(trigger)
    assert created.id == 360056295714
    sent = json.loads(mock_api.calls[0].request.body)["trigger"]
    assert sent["title"] == "Notify requester"
    assert sent["conditions"]["all"] == [
        {"field": "status", "operator": "is", "value": "new"}
    ]
    assert sent["conditions"]["any"] == []
    assert "id" not in sent


def test_get_trigger(mock_api, client):
    mock_api.add(responses.GET, f"{BASE}/triggers/123.json", json={"trigger": TRIGGER})
    trigger = client.get_trigger(123)
    assert trigger.id == 360056295714
    assert trigger.category_id == "1"
    assert trigger.created_at.year == 2020


def test_get_trigger_failure(mock_api, client):
    mock_api.add(responses.GET, f"{BASE}/triggers/1234.json", status=500)
    with pytest.raises(APIError) as excinfo:
        client.get_trigger(1234)
    assert excinfo.value.status == 500


def test_update_trigger(mock_api, client):
    mock_api.add(
        responses.PUT, f"{BASE}/triggers/123.json", json={"trigger": TRIGGER}, status=200
    )
    trigger = client.update_trigger(123, Trigger())
    assert trigger.id == 360056295714


def test_update_trigger_failure(mock_api, client):
    mock_api.add(responses.PUT, f"{BASE}/triggers/1234.json", status=500)
    with pytest.raises(APIError):
        client.update_trigger(1234, Trigger())


def test_delete_trigger(mock_api, client):
    mock_api.add(responses.DELETE, f"{BASE}/triggers/1234.json", status=204)
    assert client.delete_trigger(1234) is None
    assert mock_api.calls[0].request.method == "DELETE"


def test_delete_trigger_failure(mock_api, client):
    mock_api.add(responses.DELETE, f"{BASE}/triggers/1234.json", status=500)
    with pytest.raises(APIError):
        client.delete_trigger(1234)


def test_add_options_with_trigger_options():
    options = TriggerListOptions(per_page=10, page=2, active=True)
    assert (
        add_options("/triggers.json", options)
        == "/triggers.json?active=true&page=2&per_page=10"
    )