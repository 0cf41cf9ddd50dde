import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select

from bookmarker_api.models import User
from bookmarker_api.security.tokens import TokenService
from tests.integration.conftest import DataFactory


def test_register_returns_token_for_new_user(
    client: TestClient, token_service: TokenService
) -> None:
    response = client.post(
        "/users/register",
        json={"username": "new_user", "password": "pw1", "email": "new@x.com"},
    )

    assert response.status_code == 201
    payload = token_service.decode_token(response.json()["token"])
    assert payload is not None
    assert payload["username"] == "new_user"


def test_register_duplicate_username_returns_400(client: TestClient, library) -> None:
    response = client.post(
        "/users/register",
        json={"username": "u1", "password": "pw", "email": "other@x.com"},
    )

    assert response.status_code == 400
    assert response.json()["error"]["status"] == 400
    assert "u1" in response.json()["error"]["message"]


def test_register_missing_fields_returns_400_envelope(client: TestClient) -> None:
    response = client.post("/users/register", json={"username": "only_name"})

    assert response.status_code == 400
    body = response.json()
    assert body["error"]["status"] == 400
    assert "password" in body["error"]["message"]


@pytest.mark.parametrize("email", ["a@b..c", "a@-x-.com", "no-at-sign"])
def test_register_malformed_email_returns_400(client: TestClient, email: str) -> None:
    response = client.post(
        "/users/register", json={"username": "new_user", "password": "pw1", "email": email}
    )

    assert response.status_code == 400
    assert "email" in response.json()["error"]["message"]


def test_login_returns_token(client: TestClient, library) -> None:
    response = client.post("/users/login", json={"username": "u1", "password": "password1"})

    assert response.status_code == 200
    assert "token" in response.json()


def test_login_wrong_password_and_unknown_user_look_the_same(
    client: TestClient, library
) -> None:
    wrong_password = client.post("/users/login", json={"username": "u1", "password": "nope"})
    unknown_user = client.post("/users/login", json={"username": "ghost", "password": "nope"})

    assert wrong_password.status_code == 401
    assert unknown_user.status_code == 401
    assert wrong_password.json() == unknown_user.json()


def test_get_user_returns_profile_with_saved_volume_ids(
    client: TestClient, test_data: DataFactory, library
) -> None:
    test_data.create_saved_book(library["u1"], "12")
    test_data.commit()

    response = client.get("/users/u1", headers=test_data.auth_headers("u1"))

    assert response.status_code == 200
    assert response.json() == {
        "id": library["u1"].id,
        "username": "u1",
        "email": "u1@email.com",
        "saved_volume_ids": ["11", "12"],
    }


def test_get_user_requires_matching_user(
    client: TestClient, test_data: DataFactory, library
) -> None:
    anonymous = client.get("/users/u1")
    other_user = client.get("/users/u1", headers=test_data.auth_headers("u2"))
    bad_token = client.get("/users/u1", headers={"Authorization": "Bearer not-a-jwt"})

    assert anonymous.status_code == 401
    assert other_user.status_code == 401
    assert bad_token.status_code == 401
    # No hint about which check failed.
    assert anonymous.json() == other_user.json() == bad_token.json()


def test_token_signed_with_other_secret_is_rejected(client: TestClient, library) -> None:
    forged = TokenService(secret_key="someone-else").create_token("u1")

    response = client.get("/users/u1", headers={"Authorization": f"Bearer {forged}"})

    assert response.status_code == 401


def test_patch_user_updates_email(client: TestClient, test_data: DataFactory, library) -> None:
    response = client.patch(
        "/users/u1", json={"email": "changed@x.com"}, headers=test_data.auth_headers("u1")
    )

    assert response.status_code == 200
    assert response.json()["user"]["email"] == "changed@x.com"


@pytest.mark.parametrize("email", ["a@b..c", "a@-x-.com", "reader@"])
def test_patch_user_malformed_email_returns_400(
    client: TestClient, test_data: DataFactory, library, email: str
) -> None:
    response = client.patch(
        "/users/u1", json={"email": email}, headers=test_data.auth_headers("u1")
    )

    assert response.status_code == 400
    test_data.session.expire_all()
    assert all(u.email != email for u in test_data.session.scalars(select(User)))


def test_patch_user_rejects_unknown_fields(
    client: TestClient, test_data: DataFactory, library
) -> None:
    response = client.patch(
        "/users/u1", json={"username": "renamed"}, headers=test_data.auth_headers("u1")
    )

    assert response.status_code == 400


def test_delete_user_removes_library(client: TestClient, test_data: DataFactory, library) -> None:
    response = client.delete("/users/u1", headers=test_data.auth_headers("u1"))

    assert response.status_code == 200
    assert response.json() == {"deleted": "u1"}
    test_data.session.expire_all()
    assert [b.volume_id for b in test_data.get_saved_books()] == ["22"]
    assert test_data.get_reviews() == []
    assert test_data.get_ratings() == []


def test_deleted_user_token_gets_404(client: TestClient, test_data: DataFactory, library) -> None:
    headers = test_data.auth_headers("u1")
    client.delete("/users/u1", headers=headers)

    response = client.get("/users/u1", headers=headers)

    assert response.status_code == 404
    assert response.json() == {"error": {"message": "No user: u1", "status": 404}}


def test_unknown_route_uses_error_envelope(client: TestClient) -> None:
    response = client.get("/nowhere")

    assert response.status_code == 404
    assert response.json()["error"]["status"] == 404
