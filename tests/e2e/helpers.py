"""Shared request helpers for E2E tests."""

from fastapi.testclient import TestClient

PASSWORD = "correct horse"


def sign_up(client: TestClient, email: str, username: str | None = None) -> dict:
    response = client.post(
        "/sign-up",
        json={
            "credentials": {
                "email": email,
                "password": PASSWORD,
                "password_confirmation": PASSWORD,
                "username": username,
            }
        },
    )
    assert response.status_code == 201, response.text
    return response.json()["user"]


def sign_in(client: TestClient, email: str, password: str = PASSWORD) -> str:
    response = client.post(
        "/sign-in", json={"credentials": {"email": email, "password": password}}
    )
    assert response.status_code == 201, response.text
    return response.json()["user"]["token"]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def create_thread(client: TestClient, token: str, text: str = "Hello") -> dict:
    response = client.post(
        "/threads", json={"thread": {"text": text}}, headers=bearer(token)
    )
    assert response.status_code == 201, response.text
    return response.json()["thread"]
