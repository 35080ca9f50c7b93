import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from app.api.deps import get_db, get_email_service, get_settings
from app.core.config import Settings
from app.core.security import PasswordHasher, TokenIssuer
from app.main import app
from app.repositories.user_repository import UserRepository
from app.services.auth_service import AuthPolicy, AuthService
from utils.constants import USERS_COLLECTION
from utils.otp_utils import OTPGenerator


class RecordingNotifier:
    """Stands in for EmailService and keeps what would have been sent."""

    def __init__(self):
        self.otps = []
        self.password_changes = []

    async def send_reset_otp(self, user, code, expire_minutes):
        self.otps.append((user["email"], code))
        return True

    async def send_password_changed(self, user):
        self.password_changes.append(user["email"])
        return True

    @property
    def last_otp(self):
        return self.otps[-1][1]


@pytest.fixture
def test_settings():
    return Settings(
        _env_file=None,
        ENVIRONMENT="test",
        SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        MAX_LOGIN_RETRY_LIMIT=3,
        LOGIN_REACTIVE_MINUTES=20,
        OTP_EXPIRE_MINUTES=10,
    )


@pytest.fixture
def db():
    return AsyncMongoMockClient()["EcomDb_test"]


@pytest.fixture
def users_collection(db):
    return db[USERS_COLLECTION]


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def token_issuer(test_settings):
    return TokenIssuer(test_settings.SECRET_KEY, test_settings.TOKEN_EXPIRE_MINUTES)


@pytest.fixture
def auth_service(users_collection, test_settings, token_issuer, notifier):
    return AuthService(
        users=UserRepository(users_collection),
        hasher=PasswordHasher(rounds=test_settings.BCRYPT_ROUNDS),
        tokens=token_issuer,
        otp=OTPGenerator(length=test_settings.OTP_LENGTH),
        notifier=notifier,
        policy=AuthPolicy.from_settings(test_settings),
    )


@pytest.fixture
def client(db, test_settings, notifier):
    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_email_service] = lambda: notifier
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def admin_login(client):
    """Registers and logs in an admin; returns the login data ({id, token})."""
    client.post("/admin/auth/register", json={
        "username": "Daija_Schuppe",
        "password": "FKwgzOBeRGxUFj1",
        "email": "Domingo.Tillman24@hotmail.com",
        "name": "Curtis Gutkowski",
        "userType": 2,
    })
    response = client.post("/admin/auth/login", json={
        "username": "Daija_Schuppe",
        "password": "FKwgzOBeRGxUFj1",
    })
    return response.json()["data"]


@pytest.fixture
def auth_headers(admin_login):
    return {"Authorization": f"Bearer {admin_login['token']}"}
