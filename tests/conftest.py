"""Shared fixtures for the rides backend tests."""
import pytest
from fastapi.testclient import TestClient

from app.config.app_config import AppSettings, Settings
from app.config.auth_config import AuthSettings
from app.config.database_config import DatabaseSettings
from app.db.database import Database
from app.main import create_app

USER_SECRET = "test-user-secret-key-0123456789abcdef"
CAPTAIN_SECRET = "test-captain-secret-key-0123456789abcdef"
VALID_PASSWORD = "secret123"


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        app=AppSettings(log_level="DEBUG"),
        auth=AuthSettings(
            user_jwt_secret=USER_SECRET,
            captain_jwt_secret=CAPTAIN_SECRET,
            password_bcrypt_rounds=4,
        ),
        database=DatabaseSettings(path=str(tmp_path / "rides-test.db")),
    )


@pytest.fixture
def db(tmp_path) -> Database:
    database = Database(str(tmp_path / "store-test.db"))
    database.init_db()
    return database


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user_payload() -> dict:
    return {
        "fullname": {"firstname": "Ann", "lastname": "Smith"},
        "email": "ann@x.com",
        "password": VALID_PASSWORD,
    }


@pytest.fixture
def captain_payload() -> dict:
    return {
        "fullname": {"firstname": "Carl", "lastname": "Driver"},
        "email": "carl@x.com",
        "password": VALID_PASSWORD,
        "vehicle": {
            "color": "black",
            "plate": "KA-01-1234",
            "capacity": 4,
            "vehicleType": "car",
        },
    }


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


def run_sql(db: Database, query: str, params: tuple = ()) -> None:
    with db.get_db_connection() as conn:
        conn.execute(query, params)
        conn.commit()
