import pytest
import responses

from zendesk_client.base import APIError
from zendesk_client.payload import decode, encode
from zendesk_client.view import View, ViewAPI

BASE = "https://zendesk.example.com/api/v2"

VIEW = {
    "id": 360002440594,
    "title": "Your unsolved tickets",
    "active": True,
    "position": 0,
    "description": "Tickets assigned to you",
    "created_at": "2018-11-23T16:05:12Z",
    "updated_at": "2018-11-23T16:05:15Z",
}

VIEWS = {
    "views": [
        VIEW,
        {
            "id": 360002440614,
            "title": "Unassigned tickets",
            "active": True,
            "position": 1,
            "description": "",
            "created_at": "2018-11-23T16:05:12Z",
            "updated_at": "2018-11-23T16:05:15Z",
        },
    ],
    "next_page": None,
    "previous_page": None,
    "count": 2,
}


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


@pytest.fixture
def client():
    return ViewAPI(endpoint_url=BASE, email="", secret="")


def test_get_view(rsps, client):
    rsps.add(responses.GET, BASE + "/views/123.json", json={"view": VIEW})
    view = client.get_view(123)
    assert view.id == 360002440594
    assert view.title == "Your unsolved tickets"


def test_get_views(rsps, client):
    rsps.add(responses.GET, BASE + "/views.json", json=VIEWS)
    views, page = client.get_views()
    assert len(views) == 2
    assert page["count"] == 2
    assert [v.position for v in views] == [0, 1]


def test_get_tickets_from_view(rsps, client):
    body = {"tickets": [{"id": 2, "subject": "a"}, {"id": 3, "subject": "b"}]}
    rsps.add(responses.GET, BASE + "/views/123/tickets.json", json=body)
    tickets = client.get_tickets_from_view(123)
    assert [t.id for t in tickets] == [2, 3]
    assert tickets[1].subject == "b"


def test_get_view_failure(rsps, client):
    rsps.add(responses.GET, BASE + "/views/9.json", status=500, body=b"")
    with pytest.raises(APIError) as info:
        client.get_view(9)
    assert info.value.status == 500


def test_view_round_trip():
    view = decode(View, VIEW)
    assert decode(View, encode(view)) == view