from recuerdamed.helpers.enums import UserRole
from recuerdamed.core.security import create_access_token


class TestRegister:
    def test_register_patient_returns_token(self, client):
        response = client.post('/api/auth/register', json={
            'email': 'ana@example.com', 'password': 'secret123', 'full_name': 'Ana Ruiz'
        })

        assert response.status_code == 201
        body = response.json()
        assert body['success'] is True
        assert body['data']['access_token']
        assert body['data']['user']['role'] == 'PATIENT'
        assert body['data']['profile_id'] is None

    def test_duplicate_email_conflicts(self, client, register_user):
        register_user('ana@example.com')

        response = client.post('/api/auth/register', json={'email': 'ana@example.com', 'password': 'secret123'})

        assert response.status_code == 409
        assert response.json()['success'] is False

    def test_short_password_is_invalid(self, client):
        response = client.post('/api/auth/register', json={'email': 'ana@example.com', 'password': '123'})

        assert response.status_code == 400
        assert response.json()['code'] == '400'

    def test_unknown_field_is_invalid(self, client):
        response = client.post('/api/auth/register', json={
            'email': 'ana@example.com', 'password': 'secret123', 'is_admin': True
        })

        assert response.status_code == 400

    def test_patient_cannot_register_with_invite_code(self, client):
        response = client.post('/api/auth/register', json={
            'email': 'ana@example.com', 'password': 'secret123', 'role': 'PATIENT', 'invite_code': 'AB12CD34'
        })

        assert response.status_code == 400


class TestLogin:
    def test_login_with_valid_credentials(self, client, patient):
        response = client.post('/api/auth/login', json={'email': patient.email, 'password': 'secret123'})

        assert response.status_code == 200
        data = response.json()['data']
        assert data['token_type'] == 'bearer'
        assert data['profile_id'] == patient.profile_id
        assert data['user']['email'] == patient.email

    def test_wrong_password_is_unauthorized(self, client, patient):
        response = client.post('/api/auth/login', json={'email': patient.email, 'password': 'wrong-one'})

        assert response.status_code == 401
        assert response.json()['message'] == 'Incorrect email or password'

    def test_unknown_email_is_unauthorized(self, client):
        response = client.post('/api/auth/login', json={'email': 'nobody@example.com', 'password': 'secret123'})

        assert response.status_code == 401


class TestCurrentUser:
    def test_me_returns_identity(self, client, patient):
        response = client.get('/api/users/me', headers=patient.headers)

        assert response.status_code == 200
        data = response.json()['data']
        assert data['user_id'] == patient.user_id
        assert data['role'] == 'PATIENT'
        assert data['profile_id'] == patient.profile_id

    def test_missing_token_is_unauthorized(self, client):
        response = client.get('/api/users/me')

        assert response.status_code == 401

    def test_token_for_deleted_user_is_unauthorized(self, client):
        token = create_access_token(user_id=999, role=UserRole.PATIENT.value)

        response = client.get('/api/users/me', headers={'Authorization': f'Bearer {token}'})

        assert response.status_code == 401

    def test_token_with_wrong_role_is_unauthorized(self, client, patient):
        token = create_access_token(user_id=patient.user_id, role=UserRole.CAREGIVER.value)

        response = client.get('/api/users/me', headers={'Authorization': f'Bearer {token}'})

        assert response.status_code == 401


class TestHealthcheck:
    def test_healthcheck(self, client):
        response = client.get('/api/healthcheck')

        assert response.status_code == 200
        assert response.json()['success'] is True
