import pytest

from temfy.domain.exceptions import PersistenceError
from temfy.repositories import InMemoryUserRepository
from temfy.services import UserService

USERS = "/api/v1/users"
AL = {"name": "Al", "email": "a@b.com", "password": "secret1"}


def _create(client, **overrides):
    payload = dict(AL, **overrides)
    r = client.post(USERS, json=payload)
    assert r.status_code == 201, r.get_json()
    return r.get_json()


def test_create_user_returns_201_with_entity(client):
    r = client.post(USERS, json=AL)

    assert r.status_code == 201
    body = r.get_json()
    assert body["email"] == "a@b.com"
    assert body["name"] == "Al"
    assert isinstance(body["id"], int)
    assert "password" not in body
    assert "hashed_password" not in body
    assert "password_hash" not in body


def test_duplicate_create_returns_409(client):
    _create(client)

    r = client.post(USERS, json=AL)

    assert r.status_code == 409
    body = r.get_json()
    assert body["success"] is False
    assert body["code"] == "0002"
    assert "already exists" in body["message"]


def test_create_with_malformed_body_returns_400(client):
    r = client.post(USERS, data="{not json", content_type="application/json")

    assert r.status_code == 400
    body = r.get_json()
    assert body == {"success": False, "message": "Invalid request body", "code": "0001"}


@pytest.mark.parametrize("payload, field", [
    ({"email": "a@b.com", "password": "secret1"}, "name"),
    ({"name": "A", "email": "a@b.com", "password": "secret1"}, "name"),
    ({"name": "x" * 101, "email": "a@b.com", "password": "secret1"}, "name"),
    ({"name": "Al", "email": "not-an-email", "password": "secret1"}, "email"),
    ({"name": "Al", "email": "a" * 300 + "@b.com", "password": "secret1"}, "email"),
    ({"name": "Al", "email": "a@b.com", "password": "short"}, "password"),
    ({"name": "Al", "email": "a@b.com"}, "password"),
])
def test_create_validation_failures_return_400(client, payload, field):
    r = client.post(USERS, json=payload)

    assert r.status_code == 400
    body = r.get_json()
    assert body["code"] == "0001"
    assert body["message"].startswith("Validation failed: ")
    assert field in body["errors"]


def test_get_missing_user_returns_404(client):
    r = client.get(f"{USERS}/999999")

    assert r.status_code == 404
    body = r.get_json()
    assert body["code"] == "0002"
    assert body["message"] == "User not found"


@pytest.mark.parametrize("method", ["get", "put", "delete"])
@pytest.mark.parametrize("bad_id", ["abc", "-1", "99999999999"])
def test_invalid_id_returns_400(client, method, bad_id):
    r = getattr(client, method)(f"{USERS}/{bad_id}", json=AL)

    assert r.status_code == 400
    assert r.get_json() == {"success": False, "message": "Invalid user ID", "code": "0001"}


def test_get_user_round_trip(client):
    created = _create(client)

    r = client.get(f"{USERS}/{created['id']}")

    assert r.status_code == 200
    body = r.get_json()
    assert body["name"] == "Al"
    assert body["email"] == "a@b.com"


def test_update_user(client):
    created = _create(client)

    r = client.put(f"{USERS}/{created['id']}", json={"name": "Albert", "email": "albert@b.com"})

    assert r.status_code == 200
    body = r.get_json()
    assert body["id"] == created["id"]
    assert body["name"] == "Albert"
    assert body["email"] == "albert@b.com"


def test_update_password_is_optional_but_validated(client):
    created = _create(client)
    url = f"{USERS}/{created['id']}"

    assert client.put(url, json={"name": "Al", "email": "a@b.com", "password": ""}).status_code == 200
    assert client.put(url, json={"name": "Al", "email": "a@b.com", "password": "newpass"}).status_code == 200

    r = client.put(url, json={"name": "Al", "email": "a@b.com", "password": "123"})
    assert r.status_code == 400
    assert "password" in r.get_json()["errors"]


def test_update_rejects_overlong_email(client):
    created = _create(client)

    r = client.put(f"{USERS}/{created['id']}", json={"name": "Al", "email": "a" * 300 + "@b.com"})

    assert r.status_code == 400
    assert r.get_json()["code"] == "0001"
    assert "email" in r.get_json()["errors"]
    assert client.get(f"{USERS}/{created['id']}").get_json()["email"] == "a@b.com"


def test_update_missing_user_returns_404(client):
    r = client.put(f"{USERS}/999999", json={"name": "Al", "email": "a@b.com"})

    assert r.status_code == 404
    assert r.get_json()["code"] == "0002"


def test_update_to_taken_email_returns_409(client):
    _create(client)
    bob = _create(client, name="Bob", email="bob@b.com")

    r = client.put(f"{USERS}/{bob['id']}", json={"name": "Bob", "email": "a@b.com"})

    assert r.status_code == 409
    assert r.get_json()["code"] == "0002"


def test_delete_user_then_get_returns_404(client):
    created = _create(client)

    r = client.delete(f"{USERS}/{created['id']}")

    assert r.status_code == 200
    assert r.get_json() == {"success": True, "message": "User deleted successfully"}

    assert client.get(f"{USERS}/{created['id']}").status_code == 404
    assert client.delete(f"{USERS}/{created['id']}").status_code == 404


def test_list_users_defaults_and_paging(client):
    for i in range(12):
        _create(client, name=f"User {i}", email=f"user{i}@b.com")

    r = client.get(USERS)
    assert r.status_code == 200
    assert len(r.get_json()) == 10

    page = client.get(f"{USERS}?limit=5&offset=10").get_json()
    assert [u["email"] for u in page] == ["user10@b.com", "user11@b.com"]

    assert len(client.get(f"{USERS}?limit=0&offset=-1").get_json()) == 10
    assert len(client.get(f"{USERS}?limit=abc").get_json()) == 10


def test_list_users_with_oversized_paging_values(client):
    _create(client)

    r = client.get(f"{USERS}?limit=99999999999999999999")
    assert r.status_code == 200
    assert [u["email"] for u in r.get_json()] == ["a@b.com"]

    r = client.get(f"{USERS}?offset=99999999999999999999")
    assert r.status_code == 200
    assert r.get_json() == []


def test_trailing_slash_is_accepted(client):
    r = client.post(f"{USERS}/", json=AL)
    assert r.status_code == 201

    r = client.get(f"{USERS}/")
    assert r.status_code == 200
    assert len(r.get_json()) == 1

    r = client.get(f"{USERS}/{r.get_json()[0]['id']}/")
    assert r.status_code == 200
    assert r.get_json()["email"] == "a@b.com"


def test_storage_failure_returns_500(app, client, monkeypatch):
    class BrokenRepo(InMemoryUserRepository):
        def get_all(self, limit, offset):
            raise PersistenceError("database unavailable")

        def get_by_id(self, user_id):
            raise PersistenceError("database unavailable")

    database = app.extensions["database"]
    monkeypatch.setattr(database, "user_service", lambda db: UserService(BrokenRepo()))

    r = client.get(USERS)
    assert r.status_code == 500
    assert r.get_json()["code"] == "0003"

    r = client.get(f"{USERS}/1")
    assert r.status_code == 500
    assert r.get_json() == {"success": False, "message": "Failed to get user", "code": "0003"}
