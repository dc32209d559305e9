# Tests for registration, login, tokens and ownership checks.

from fastapi.testclient import TestClient

from conftest import register


def test_register_returns_tokens_and_profile(client: TestClient):
    response = client.post(
        "/api/v1/auth/register",
        json={"firstName": "Ada", "lastName": "Lovelace", "email": "ada@example.com", "password": "s3cret!"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["access"] and data["refresh"]
    assert data["user"]["email"] == "ada@example.com"
    assert data["user"]["firstName"] == "Ada"
    # the password hash is never returned
    assert "password" not in data["user"]


def test_register_duplicate_email_fails(client: TestClient):
    register(client)
    response = client.post(
        "/api/v1/auth/register",
        json={"firstName": "Ada", "lastName": "Again", "email": "ada@example.com", "password": "other"},
    )
    assert response.status_code == 400
    assert response.json() == {"message": "Email already registered"}


def test_register_missing_fields_is_client_error(client: TestClient):
    response = client.post("/api/v1/auth/register", json={"email": "ada@example.com", "password": "x"})
    assert response.status_code == 400


def test_login_with_correct_password(client: TestClient):
    user_id, _ = register(client)
    response = client.post("/api/v1/auth/login", json={"email": "ada@example.com", "password": "s3cret!"})
    assert response.status_code == 200
    assert response.json()["user"]["id"] == user_id


def test_login_with_wrong_password(client: TestClient):
    register(client)
    response = client.post("/api/v1/auth/login", json={"email": "ada@example.com", "password": "nope"})
    assert response.status_code == 401
    assert response.json() == {"message": "Invalid email or password"}


def test_login_unknown_email(client: TestClient):
    response = client.post("/api/v1/auth/login", json={"email": "ghost@example.com", "password": "x"})
    assert response.status_code == 401


def test_refresh_issues_new_access_token(client: TestClient):
    register(client)
    login = client.post("/api/v1/auth/login", json={"email": "ada@example.com", "password": "s3cret!"}).json()

    response = client.post("/api/v1/auth/refresh", json={"refresh": login["refresh"]})
    assert response.status_code == 200
    access = response.json()["access"]

    profile = client.get(f"/api/v1/users/{login['user']['id']}", headers={"Authorization": f"Bearer {access}"})
    assert profile.status_code == 200


def test_access_token_cannot_be_used_to_refresh(client: TestClient):
    register(client)
    login = client.post("/api/v1/auth/login", json={"email": "ada@example.com", "password": "s3cret!"}).json()
    response = client.post("/api/v1/auth/refresh", json={"refresh": login["access"]})
    assert response.status_code == 401


def test_profile_requires_token(client: TestClient, user):
    user_id, _ = user
    response = client.get(f"/api/v1/users/{user_id}")
    assert response.status_code == 401
    assert response.json() == {"message": "Not authenticated"}


def test_garbage_token_is_rejected(client: TestClient, user):
    user_id, _ = user
    response = client.get(f"/api/v1/users/{user_id}", headers={"Authorization": "Bearer not-a-jwt"})
    assert response.status_code == 401


def test_profile(client: TestClient, user):
    user_id, headers = user
    response = client.get(f"/api/v1/users/{user_id}", headers=headers)
    assert response.status_code == 200
    assert response.json() == {
        "id": user_id,
        "firstName": "Ada",
        "lastName": "Lovelace",
        "email": "ada@example.com",
    }


def test_cannot_read_another_users_data(client: TestClient, user):
    _, headers = user
    other_id, _ = register(client, email="grace@example.com")
    for path in (
        f"/api/v1/users/{other_id}",
        f"/api/v1/budgets/{other_id}/details",
        f"/api/v1/transactions/balance?userId={other_id}",
    ):
        response = client.get(path, headers=headers)
        assert response.status_code == 403, path
