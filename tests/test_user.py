import json

import pytest
import responses

from zendesk_client.base import APIError
from zendesk_client.user import (
    GetManyUsersOptions,
    SearchUsersOptions,
    User,
    UserAPI,
    UserListOptions,
    UserRole,
    user_role_text,
)

BASE = "https://example.com/api/v2"

USER = {
    "id": 369531345753,
    "url": "https://example.com/api/v2/users/369531345753.json",
    "email": "agent@example.com",
    "name": "Sample Agent",
    "active": True,
    "custom_role_id": None,
    "iana_time_zone": "Asia/Tokyo",
    "time_zone": "Osaka",
    "role": "admin",
    "role_type": None,
    "tags": ["vip"],
    "user_fields": {"department": "support"},
    "photo": None,
    "created_at": "2019-05-06T07:08:09Z",
    "updated_at": "2019-05-06T07:08:09Z",
}

USERS = {
    "users": [USER, dict(USER, id=369531345754, email="other@example.com")],
    "next_page": None,
    "previous_page": None,
    "count": 2,
}


@pytest.fixture
def mock_api():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as rsps:
        yield rsps


@pytest.fixture
def client():
    return UserAPI(endpoint_url=BASE)


@pytest.mark.parametrize(
    ("role", "text"),
    [(UserRole.END_USER, "end-user"), (UserRole.AGENT, "agent"), (UserRole.ADMIN, "admin")],
)
def test_user_role_text(role, text):
    assert user_role_text(role) == text
    assert user_role_text(int(role)) == text


def test_user_role_text_unknown():
    assert user_role_text(7) == ""


def test_get_users(mock_api, client):
    mock_api.add(responses.GET, f"{BASE}/users.json", json=USERS)
    users, page = client.get_users(None)
    assert len(users) == 2
    assert page["count"] == 2
    assert mock_api.calls[0].request.url == f"{BASE}/users.json"


def test_get_users_decodes_fields(mock_api, client):
    mock_api.add(responses.GET, f"{BASE}/users.json", json=USERS)
    users, _ = client.get_users()
    first = users[0]
    assert first.iana_timezone == "Asia/Tokyo"
    assert first.timezone == "Osaka"
    assert first.user_fields == {"department": "support"}
    assert first.custom_role_id == 0
    assert first.tags == ["vip"]


def test_get_many_users(mock_api, client):
    mock_api.add(responses.GET, f"{BASE}/users/show_many.json", json=USERS)
    users, _ = client.get_many_users(None)
    assert len(users) == 2


def test_get_many_users_sends_ids(mock_api, client):
    mock_api.add(responses.GET, f"{BASE}/users/show_many.json", json=USERS)
    users, page = client.get_many_users(GetManyUsersOptions(ids="1,2"))
    assert [u.id for u in users] == [369531345753, 369531345754]
    assert page["count"] == 2
    assert mock_api.calls[0].request.url == f"{BASE}/users/show_many.json?ids=1%2C2"


def test_search_users(mock_api, client):
    mock_api.add(responses.GET, f"{BASE}/users/search.json", json=USERS)
    users, _ = client.search_users(None)
    assert len(users) == 2


def test_search_users_sends_query(mock_api, client):
    mock_api.add(responses.GET, f"{BASE}/users/search.json", json=USERS)
    users, _ = client.search_users(SearchUsersOptions(query="name"))
    assert users[1].email == "other@example.com"
    assert mock_api.calls[0].request.url == f"{BASE}/users/search.json?query=name"


def test_get_user(mock_api, client):
    mock_api.add(
        responses.GET, f"{BASE}/users/369531345753.json", json={"user": USER}, status=200
    )
    user = client.get_user(369531345753)
    assert user.id == 369531345753


def test_get_user_failure(mock_api, client):
    mock_api.add(
        responses.GET, f"{BASE}/users/369531345753.json", json={"user": USER}, status=500
    )
    with pytest.raises(APIError) as excinfo:
        client.get_user(369531345753)
    assert excinfo.value.status == 500


def test_get_users_roles_encode_correctly(mock_api, client):
    mock_api.add(responses.GET, f"{BASE}/users.json", json=USERS)
    users, _ = client.get_users(UserListOptions(roles=["admin", "end-user"]))
    assert len(users) == 2
    assert (
        mock_api.calls[0].request.url
        == f"{BASE}/users.json?role%5B%5D=admin&role%5B%5D=end-user"
    )


def test_create_user(mock_api, client):
    mock_api.add(responses.POST, f"{BASE}/users.json", json={"user": USER}, status=201)
    user = client.create_user(User(email="test@example.com", name="testuser"))
    assert user.id == 369531345753
    sent = json.loads(mock_api.calls[0].request.body)["user"]
    assert sent["email"] == "test@example.com"
    assert sent["name"] == "testuser"
    assert "id" not in sent


@pytest.mark.parametrize("status", [201, 200])
def test_create_or_update_user(mock_api, client, status):
    mock_api.add(
        responses.POST,
        f"{BASE}/users/create_or_update.json",
        json={"user": USER},
        status=status,
    )
    user = client.create_or_update_user(User(email="test@example.com", name="testuser"))
    assert user.id == 369531345753


def test_create_or_update_user_failure(mock_api, client):
    mock_api.add(
        responses.POST,
        f"{BASE}/users/create_or_update.json",
        json={"user": USER},
        status=500,
    )
    with pytest.raises(APIError):
        client.create_or_update_user(User())


def test_update_user(mock_api, client):
    mock_api.add(
        responses.PUT, f"{BASE}/users/369531345753.json", json={"user": USER}, status=200
    )
    user = client.update_user(369531345753, User())
    assert user.id == 369531345753


def test_update_user_failure(mock_api, client):
    mock_api.add(
        responses.PUT, f"{BASE}/users/369531345753.json", json={"user": USER}, status=500
    )
    with pytest.raises(APIError):
        client.update_user(369531345753, User())


def test_get_user_related(mock_api, client):
    mock_api.add(
        responses.GET,
        f"{BASE}/users/369531345753/related.json",
        json={
            "user_related": {
                "assigned_tickets": 5,
                "requested_tickets": 10,
                "ccd_tickets": 3,
                "organization_subscriptions": 1,
            }
        },
    )
    related = client.get_user_related(369531345753)
    assert related.assigned_tickets == 5
    assert related.requested_tickets == 10
    assert related.ccd_tickets == 3
    assert related.organization_subscriptions == 1