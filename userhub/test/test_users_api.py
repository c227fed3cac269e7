"""
API tests for user registration
"""
import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from userhub.domain.exception.user_exceptions import StoreUnavailableError
from userhub.infra.password_hashing import verify_password
from userhub.infra.rest_api.dependencies import get_user_repository_dependency
from userhub.infra.rest_api.main import app


def _payload(**overrides):
    payload = {
        "uuid": "u1",
        "name": "Alice",
        "email": "a@x.com",
        "password": "password123",
        "tag_name": "alice",
    }
    payload.update(overrides)
    return payload


class TestUsersAPI:
    """ユーザー登録APIのテスト"""

    @pytest.fixture
    def client(self):
        """Setup test client with a fresh in-memory database"""
        with TestClient(app) as client:
            yield client
        app.dependency_overrides.clear()

    def test_health_check(self, client):
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_register_user(self, client):
        response = client.post("/api/v1/users", json=_payload())

        assert response.status_code == 201
        data = response.json()
        assert data == {
            "uuid": "u1",
            "name": "Alice",
            "email": "a@x.com",
            "tag_name": "alice",
            "bio": "",
            "profile_image": "",
            "number_of_publications": 0,
            "publications": [],
        }
        assert "password" not in data
        assert "X-Request-ID" in response.headers

    def test_password_is_hashed_before_reaching_the_store(self, client):
        repo = AsyncMock()
        repo.find_by_uuid.return_value = None
        repo.find_by_email.return_value = None
        repo.find_by_tag_name.return_value = None
        app.dependency_overrides[get_user_repository_dependency] = lambda: repo

        response = client.post("/api/v1/users", json=_payload())

        assert response.status_code == 201
        stored = repo.create.await_args.args[0]
        assert stored.password.value != "password123"
        assert verify_password("password123", stored.password.value)

    def test_registrations_share_the_database_opened_at_startup(self, client):
        """起動時に初期化した ORM がリクエスト処理で利用できる"""
        first = client.post("/api/v1/users", json=_payload())
        second = client.post("/api/v1/users", json=_payload(uuid="u2", email="b@x.com", tag_name="bob"))
        again = client.post("/api/v1/users", json=_payload(uuid="u3", email="c@x.com"))

        assert first.status_code == 201
        assert second.status_code == 201
        assert again.status_code == 409
        assert again.json()["error_type"] == "duplicate_tag_name"

    def test_uuid_is_generated_when_omitted(self, client):
        payload = _payload()
        del payload["uuid"]

        response = client.post("/api/v1/users", json=payload)

        assert response.status_code == 201
        assert len(response.json()["uuid"]) == 36

    @pytest.mark.parametrize("second,error_type", [
        (_payload(email="b@x.com", tag_name="bob"), "duplicate_identifier"),
        (_payload(uuid="u2", tag_name="bob"), "duplicate_email"),
        (_payload(uuid="u2", email="b@x.com"), "duplicate_tag_name"),
    ])
    def test_duplicates_return_conflict(self, client, second, error_type):
        assert client.post("/api/v1/users", json=_payload()).status_code == 201

        response = client.post("/api/v1/users", json=second)

        assert response.status_code == 409
        body = response.json()
        assert body["error_type"] == error_type
        assert body["retry_available"] is False

    def test_invalid_field_returns_422(self, client):
        response = client.post("/api/v1/users", json=_payload(email="not-an-email"))

        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation_error"
        assert body["field"] == "email"

    def test_short_password_rejected_by_schema(self, client):
        response = client.post("/api/v1/users", json=_payload(password="short"))

        assert response.status_code == 422
        assert response.json()["error_type"] == "validation_error"
        assert '"input"' not in response.text

    def test_negative_publication_count_rejected(self, client):
        response = client.post("/api/v1/users", json=_payload(number_of_publications=-1))
        assert response.status_code == 422

    def test_store_unavailable_returns_503(self, client):
        repo = AsyncMock()
        repo.find_by_uuid.side_effect = StoreUnavailableError("connection refused")
        app.dependency_overrides[get_user_repository_dependency] = lambda: repo

        response = client.post("/api/v1/users", json=_payload())

        assert response.status_code == 503
        body = response.json()
        assert body["error_type"] == "store_unavailable"
        assert body["retry_available"] is True
