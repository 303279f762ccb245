import os
import tempfile

import pytest

TEST_DB_DIR = tempfile.mkdtemp(prefix='recuerdamed-tests-')
os.environ['SQL_DATABASE_URL'] = 'sqlite:///' + os.path.join(TEST_DB_DIR, 'test.db')
os.environ['SECRET_KEY'] = 'recuerdamed-test-secret-key-0123456789abcdef'

from fastapi.testclient import TestClient  # noqa: E402

from recuerdamed.db.base import engine, SessionLocal  # noqa: E402
from recuerdamed.helpers.enums import UserRole  # noqa: E402
from recuerdamed.main import app  # noqa: E402
from recuerdamed.models import Base  # noqa: E402
from recuerdamed.schemas.sche_token import CurrentUser  # noqa: E402

DEFAULT_PASSWORD = 'secret123'


class Account:
    """A registered user as seen by the tests."""

    def __init__(self, user_id, email, role, token, profile_id=None):
        self.user_id = user_id
        self.email = email
        self.role = role
        self.token = token
        self.profile_id = profile_id

    @property
    def headers(self):
        return {'Authorization': f'Bearer {self.token}'}

    @property
    def current_user(self) -> CurrentUser:
        return CurrentUser(user_id=self.user_id, email=self.email, role=UserRole(self.role),
                           profile_id=self.profile_id)


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def register_user(client):
    def _register(email, role='PATIENT', password=DEFAULT_PASSWORD, **extra) -> Account:
        response = client.post('/api/auth/register',
                               json={'email': email, 'password': password, 'role': role, **extra})
        assert response.status_code == 201, response.text
        data = response.json()['data']
        return Account(data['user']['user_id'], email, role, data['access_token'], data['profile_id'])

    return _register


@pytest.fixture
def patient(client, register_user) -> Account:
    account = register_user('maria@example.com', 'PATIENT', full_name='Maria Lopez')
    response = client.put('/api/patient-profiles/me', json={'name': 'Maria Lopez', 'age': 78},
                          headers=account.headers)
    assert response.status_code == 200, response.text
    account.profile_id = response.json()['data']['profile_id']
    return account


@pytest.fixture
def caregiver(register_user) -> Account:
    return register_user('carlos@example.com', 'CAREGIVER', full_name='Carlos Lopez')


@pytest.fixture
def other_caregiver(register_user) -> Account:
    return register_user('lucia@example.com', 'CAREGIVER', full_name='Lucia Perez')


@pytest.fixture
def grant(client, patient):
    """Give a caregiver a permission on the patient's profile through the API."""
    def _grant(caregiver_account, level='READ'):
        response = client.post('/api/permissions',
                               json={'profile_id': patient.profile_id,
                                     'caregiver_id': caregiver_account.user_id,
                                     'level': level},
                               headers=patient.headers)
        assert response.status_code == 201, response.text
        return response.json()['data']

    return _grant
