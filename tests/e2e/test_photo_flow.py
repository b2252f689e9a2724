"""End-to-end tests for profile photos."""

from threadify.config import Settings
from tests.e2e.helpers import bearer, sign_in, sign_up
from tests.harness import create_client_fixture

# E2E client with every component mocked
client = create_client_fixture()

PNG = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


class TestProfilePhoto:
    def test_upload_fetch_delete(self, client):
        # Arrange
        alice = sign_up(client, "alice@example.com", "alice")
        sign_up(client, "bob@example.com", "bob")
        alice_token = sign_in(client, "alice@example.com")
        bob_token = sign_in(client, "bob@example.com")

        # Act
        uploaded = client.post(
            "/profile-photo",
            files={"file": ("me.png", PNG, "image/png")},
            headers=bearer(alice_token),
        )
        fetched = client.get(
            f"/users/{alice['id']}/profile-photo", headers=bearer(bob_token)
        )
        deleted = client.delete("/profile-photo", headers=bearer(alice_token))
        after = client.get(
            f"/users/{alice['id']}/profile-photo", headers=bearer(bob_token)
        )

        # Assert
        assert uploaded.status_code == 201
        assert uploaded.json()["photo"]["size"] == len(PNG)
        assert fetched.status_code == 200
        assert fetched.content == PNG
        assert fetched.headers["content-type"] == "image/png"
        assert deleted.status_code == 204
        assert after.status_code == 404

    def test_non_image_is_rejected(self, client):
        sign_up(client, "alice@example.com")
        token = sign_in(client, "alice@example.com")

        response = client.post(
            "/profile-photo",
            files={"file": ("notes.txt", b"hello", "text/plain")},
            headers=bearer(token),
        )

        assert response.status_code == 400

    def test_upload_requires_token(self, client):
        response = client.post(
            "/profile-photo", files={"file": ("me.png", PNG, "image/png")}
        )

        assert response.status_code == 401

    def test_oversized_upload_is_rejected(self, client):
        # Arrange
        sign_up(client, "alice@example.com")
        token = sign_in(client, "alice@example.com")
        limit = Settings().storage.max_photo_bytes
        oversized = PNG + b"\x00" * (limit + 1 - len(PNG))

        # Act
        response = client.post(
            "/profile-photo",
            files={"file": ("big.png", oversized, "image/png")},
            headers=bearer(token),
        )

        # Assert
        assert response.status_code == 400
        assert str(limit) in response.json()["detail"]

    def test_upload_at_limit_is_accepted(self, client):
        sign_up(client, "alice@example.com")
        token = sign_in(client, "alice@example.com")
        limit = Settings().storage.max_photo_bytes
        largest = PNG + b"\x00" * (limit - len(PNG))

        response = client.post(
            "/profile-photo",
            files={"file": ("max.png", largest, "image/png")},
            headers=bearer(token),
        )

        assert response.status_code == 201
        assert response.json()["photo"]["size"] == limit
