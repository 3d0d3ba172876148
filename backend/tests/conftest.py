"""
Land Records - Test Configuration and Fixtures
"""
import os
from typing import AsyncGenerator
import pytest
from httpx import AsyncClient, ASGITransport
from faker import Faker

# Set testing environment
os.environ['ENVIRONMENT'] = 'testing'
os.environ['JWT_SECRET_KEY'] = 'test-jwt-secret-key-for-testing'
os.environ['RATE_LIMIT_ENABLED'] = 'false'
os.environ['BCRYPT_ROUNDS'] = '4'
os.environ['STATUS_POLICY'] = 'open'
os.environ['LOG_FILE'] = ''

from app.main import app
from app.core.config import settings
from app.core.security import get_password_hash, create_access_token
from app.db.store import DataStore
from app.db.seed_data import seed_all
from app.models.user import User, UserRole, CallerIdentity
from app.services.notification_service import NotificationService
from app.services.workflow_service import ApplicationWorkflowService

fake = Faker()


def make_auth_headers(user: User) -> dict:
    token_data = {
        'sub': user.id,
        'email': user.email,
        'role': user.role.value
    }
    token = create_access_token(token_data)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def store() -> DataStore:
    """Fresh seeded store, attached to the app for API tests"""
    data_store = DataStore()
    seed_all(data_store)
    app.state.store = data_store
    yield data_store
    app.state.store = None


@pytest.fixture
async def client(store: DataStore) -> AsyncGenerator[AsyncClient, None]:
    """Create test client bound to the fresh store"""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac


@pytest.fixture
def citizen(store: DataStore) -> User:
    """Seeded demo citizen, owner of PLOT123"""
    return store.users.get_by_email(settings.DEMO_CITIZEN_EMAIL)


@pytest.fixture
def officer(store: DataStore) -> User:
    return store.users.get_by_email(settings.DEMO_OFFICER_EMAIL)


@pytest.fixture
def admin(store: DataStore) -> User:
    return store.users.get_by_email(settings.DEMO_ADMIN_EMAIL)


@pytest.fixture
def other_citizen(store: DataStore) -> User:
    """A registered citizen who owns no plots"""
    user = User(
        name=fake.name(),
        email=fake.unique.email(),
        hashed_password=get_password_hash('otherpassword123'),
        role=UserRole.CITIZEN,
    )
    store.users.add(user)
    return user


@pytest.fixture
def citizen_caller(citizen: User) -> CallerIdentity:
    return CallerIdentity.from_user(citizen)


@pytest.fixture
def officer_caller(officer: User) -> CallerIdentity:
    return CallerIdentity.from_user(officer)


@pytest.fixture
def admin_caller(admin: User) -> CallerIdentity:
    return CallerIdentity.from_user(admin)


@pytest.fixture
def other_citizen_caller(other_citizen: User) -> CallerIdentity:
    return CallerIdentity.from_user(other_citizen)


@pytest.fixture
def notifications(store: DataStore) -> NotificationService:
    return NotificationService(store)


@pytest.fixture
def workflow(store: DataStore, notifications: NotificationService) -> ApplicationWorkflowService:
    return ApplicationWorkflowService(store, notifications=notifications)


@pytest.fixture
def test_user_data() -> dict:
    """Registration payload for a new citizen"""
    return {
        'name': fake.name(),
        'email': fake.unique.email(),
        'password': 'testpassword123',
        'language': 'en'
    }


@pytest.fixture
def citizen_headers(citizen: User) -> dict:
    """Generate authentication headers for the demo citizen"""
    return make_auth_headers(citizen)


@pytest.fixture
def officer_headers(officer: User) -> dict:
    return make_auth_headers(officer)


@pytest.fixture
def admin_headers(admin: User) -> dict:
    return make_auth_headers(admin)


@pytest.fixture
def other_citizen_headers(other_citizen: User) -> dict:
    return make_auth_headers(other_citizen)
