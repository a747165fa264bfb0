import logging
from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from users_api.api.deps import get_user_service
from users_api.infra.repositories.user_repository import InMemoryUserRepository
from users_api.main import create_app
from users_api.services.user_service import UserService
from users_api.settings import Settings


@pytest.fixture
def client() -> Iterator[TestClient]:
    app = create_app(Settings())
    service = UserService(repository=InMemoryUserRepository())
    app.dependency_overrides[get_user_service] = lambda: service
    with TestClient(app) as test_client:
        yield test_client


def _create(client: TestClient, username: str = "ada") -> dict:
    response = client.post(
        "/users",
        json={"username": username, "name": "Ada Lovelace", "email": f"{username}@example.com"},
    )
    assert response.status_code == 201
    return response.json()


def test_health(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_create_and_fetch_user(client: TestClient) -> None:
    created = _create(client)

    response = client.get(f"/users/{created['id']}")

    assert response.status_code == 200
    assert response.json()["username"] == "ada"
    assert [user["id"] for user in client.get("/users").json()] == [created["id"]]


def test_get_missing_user_returns_404_with_message(client: TestClient) -> None:
    response = client.get("/users/42")

    assert response.status_code == 404
    assert response.json() == {"detail": "Could not find the user with id 42"}


def test_negative_identifier_is_not_validated(client: TestClient) -> None:
    response = client.get("/users/-1")

    assert response.status_code == 404
    assert response.json() == {"detail": "Could not find the user with id -1"}


def test_update_missing_user_is_translated_by_handler(client: TestClient) -> None:
    response = client.put("/users/7", json={"name": "Nobody"})

    assert response.status_code == 404
    assert response.json() == {"detail": "Could not find the user with id 7"}


def test_delete_user(client: TestClient) -> None:
    created = _create(client)

    assert client.delete(f"/users/{created['id']}").status_code == 204
    missing = client.delete(f"/users/{created['id']}")
    assert missing.status_code == 404
    assert missing.json()["detail"] == f"Could not find the user with id {created['id']}"


def test_duplicate_username_returns_409(client: TestClient) -> None:
    _create(client)

    response = client.post(
        "/users",
        json={"username": "ada", "name": "Other", "email": "other@example.com"},
    )

    assert response.status_code == 409


def test_invalid_payload_returns_422(client: TestClient) -> None:
    response = client.post("/users", json={"username": "", "name": "X", "email": "nope"})

    assert response.status_code == 422


def test_not_found_paths_log_the_same_record(client: TestClient, caplog: pytest.LogCaptureFixture) -> None:
    caplog.set_level(logging.INFO, logger="users_api.api.errors")

    assert client.get("/users/42").status_code == 404
    assert client.put("/users/42", json={"name": "Nobody"}).status_code == 404

    records = [
        (record.levelno, record.getMessage())
        for record in caplog.records
        if record.name == "users_api.api.errors"
    ]
    assert records == [(logging.INFO, "User 42 not found")] * 2
