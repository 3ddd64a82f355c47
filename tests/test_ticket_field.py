import json

import pytest
import responses

from zendesk_client.base import APIError
from zendesk_client.ticket_field import TicketField, TicketFieldAPI

BASE = "http://localhost:3000"

FIELD = {
    "id": 360011737434,
    "url": "http://localhost:3000/ticket_fields/360011737434.json",
    "type": "priority",
    "title": "Priority",
    "active": True,
    "position": 3,
    "created_at": "2019-01-22T09:28:15Z",
    "system_field_options": [
        {
            "id": 1,
            "name": "Low",
            "position": 0,
            "raw_name": "Low",
            "url": "",
            "value": "low",
        }
    ],
    "custom_field_options": [],
    "removable": False,
}


def _fields_page():
    fields = [{"id": n + 1, "type": "text", "title": f"Field {n}"} for n in range(15)]
    return {"ticket_fields": fields, "next_page": None, "count": 15}


@pytest.fixture
def api():
    with responses.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def client():
    return TicketFieldAPI(endpoint_url=BASE)


def test_get_ticket_fields(api, client):
    api.add(responses.GET, f"{BASE}/ticket_fields.json", json=_fields_page())
    fields, page = client.get_ticket_fields()
    assert len(fields) == 15
    assert page["count"] == 15


def test_get_ticket_field(api, client):
    api.add(
        responses.GET, f"{BASE}/ticket_fields/123.json", json={"ticket_field": FIELD}
    )
    field = client.get_ticket_field(123)
    assert field.id == 360011737434
    assert field.type == "priority"
    assert field.active is True
    assert field.system_field_options[0].value == "low"
    assert field.created_at.year == 2019


def test_create_ticket_field(api, client):
    api.add(
        responses.POST,
        f"{BASE}/ticket_fields.json",
        json={"ticket_field": FIELD},
        status=201,
    )
    field = client.create_ticket_field(TicketField())
    assert field.id == 360011737434
    sent = json.loads(api.calls[0].request.body)
    assert sent == {"ticket_field": {"type": "", "title": ""}}


def test_update_ticket_field(api, client):
    api.add(
        responses.PUT,
        f"{BASE}/ticket_fields/1234.json",
        json={"ticket_field": FIELD},
        status=200,
    )
    field = client.update_ticket_field(1234, TicketField(title="Priority", active=True))
    assert field.id == 360011737434
    sent = json.loads(api.calls[0].request.body)
    assert sent["ticket_field"]["active"] is True


def test_delete_ticket_field(api, client):
    api.add(responses.DELETE, f"{BASE}/ticket_fields/1234.json", status=204)
    assert client.delete_ticket_field(1234) is None
    assert api.calls[0].request.method == "DELETE"


def test_delete_ticket_field_failure(api, client):
    api.add(responses.DELETE, f"{BASE}/ticket_fields/1234.json", status=500)
    with pytest.raises(APIError) as info:
        client.delete_ticket_field(1234)
    assert info.value.status == 500


def test_get_ticket_field_invalid_json(api, client):
    api.add(responses.GET, f"{BASE}/ticket_fields/1.json", body="not json")
    with pytest.raises(ValueError):
        client.get_ticket_field(1)