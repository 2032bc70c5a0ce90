import pytest

from config import Config
from jobly import create_app
from jobly.lifecycle import get_lifecycle


class TestConfig(Config):
    __test__ = False

    TESTING = True
    DEBUG = False
    SECRET_KEY = 'test-secret-key'
    JWT_SECRET_KEY = 'test-jwt-secret-key-with-enough-length'
    JWT_ACCESS_TOKEN_EXPIRES = False
    BCRYPT_LOG_ROUNDS = 4
    INSTALL_SIGNAL_HANDLERS = False


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "jobly.sqlite")


@pytest.fixture
def app(db_path):
    app = create_app(TestConfig, db_file=db_path)
    yield app
    get_lifecycle(app).shutdown()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def handle(app):
    return get_lifecycle(app).handle


def login(client, email, password="password"):
    response = client.post("/api/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.get_json()
    return response.get_json()["token"]


def bearer(token):
    return {"Authorization": f"Bearer {token}"}
