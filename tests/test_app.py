"""Tests for application wiring, configuration and error boundaries."""
import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError

from app.config.auth_config import AuthSettings
from app.main import create_app
from app.models.auth import ActorRole

from conftest import USER_SECRET, run_sql


class TestSettings:

    def test_identical_role_secrets_rejected(self):
        with pytest.raises(ValidationError):
            AuthSettings(user_jwt_secret=USER_SECRET, captain_jwt_secret=USER_SECRET)

    def test_secrets_are_required(self, monkeypatch):
        monkeypatch.delenv("AUTH_USER_JWT_SECRET", raising=False)
        monkeypatch.delenv("AUTH_CAPTAIN_JWT_SECRET", raising=False)
        with pytest.raises(ValidationError):
            AuthSettings(_env_file=None)

    def test_secrets_read_from_environment(self, monkeypatch):
        monkeypatch.setenv("AUTH_USER_JWT_SECRET", "env-user-secret")
        monkeypatch.setenv("AUTH_CAPTAIN_JWT_SECRET", "env-captain-secret")
        settings = AuthSettings(_env_file=None)
        assert settings.user_jwt_secret == "env-user-secret"
        assert settings.token_expire_days == 7
        assert settings.password_bcrypt_rounds == 10
        assert settings.cookie_name == "token"

    def test_token_max_age(self):
        settings = AuthSettings(user_jwt_secret="a-secret", captain_jwt_secret="b-secret", token_expire_days=2)
        assert settings.token_max_age == 2 * 86400


class TestWiring:

    def test_each_role_has_its_own_issuer(self, app):
        user_issuer = app.state.verifiers[ActorRole.USER].issuer
        captain_issuer = app.state.verifiers[ActorRole.CAPTAIN].issuer
        assert user_issuer is not captain_issuer
        assert user_issuer.role == ActorRole.USER
        assert captain_issuer.role == ActorRole.CAPTAIN

    def test_revocation_ledger_is_shared(self, app):
        verifiers = app.state.verifiers
        assert verifiers[ActorRole.USER].blacklist is verifiers[ActorRole.CAPTAIN].blacklist

    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.json()["status"] == "running"

    def test_health(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["services"]["database"] == "connected"


class TestErrorBoundary:

    def test_unexpected_store_error_is_500(self, settings, user_payload):
        app = create_app(settings)

        def broken(*args, **kwargs):
            raise RuntimeError("store exploded")

        app.state.auth_services[ActorRole.USER].store.email_exists = broken
        with TestClient(app, raise_server_exceptions=False) as client:
            resp = client.post("/users/register", json=user_payload)
        assert resp.status_code == 500
        assert resp.json() == {"message": "Internal server error"}

    def test_corrupted_password_hash_is_500(self, settings, user_payload):
        app = create_app(settings)
        with TestClient(app, raise_server_exceptions=False) as client:
            client.post("/users/register", json=user_payload)
            run_sql(app.state.db, "UPDATE Users SET UserPasswordHash = 'corrupted'")
            resp = client.post("/users/login", json={"email": "ann@x.com", "password": "secret123"})
        assert resp.status_code == 500
