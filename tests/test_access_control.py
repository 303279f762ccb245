import pytest

from recuerdamed.helpers.enums import PermissionLevel
from recuerdamed.helpers.exception_handler import ForbiddenException
from recuerdamed.repository.repo_patient_profile import PatientProfileRepository
from recuerdamed.repository.repo_permission import PermissionRepository
from recuerdamed.services.srv_access import AccessService

MEDICATION = {
    'name': 'Donepezil', 'dosage': '5 mg', 'type': 'Tablet', 'frequency': 'DAILY',
    'start_date': '2026-03-01T08:00:00',
}


def create_medication(client, owner):
    response = client.post('/api/medications', json={'profile_id': owner.profile_id, **MEDICATION},
                           headers=owner.headers)
    assert response.status_code == 201, response.text
    return response.json()['data']


def every_verb(client, account, profile_id, medication_id):
    """Status codes for read and write calls against one profile and one of its medications."""
    headers = account.headers
    return {
        'read_profile': client.get(f'/api/patient-profiles/{profile_id}', headers=headers).status_code,
        'list': client.get('/api/medications', params={'profile_id': profile_id}, headers=headers).status_code,
        'get': client.get(f'/api/medications/{medication_id}', headers=headers).status_code,
        'calendar': client.get(f'/api/patient-profiles/{profile_id}/calendar', params={'year': 2026, 'month': 3},
                               headers=headers).status_code,
        'create': client.post('/api/medications', json={'profile_id': profile_id, **MEDICATION},
                              headers=headers).status_code,
        'update': client.patch(f'/api/medications/{medication_id}', json={'dosage': '10 mg'},
                               headers=headers).status_code,
        'update_profile': client.patch(f'/api/patient-profiles/{profile_id}', json={'allergies': 'Penicillin'},
                                       headers=headers).status_code,
        'delete': client.delete(f'/api/medications/{medication_id}', headers=headers).status_code,
    }


class TestPermissionLevelOrder:
    @pytest.mark.parametrize('held, required, allowed', [
        (PermissionLevel.READ, PermissionLevel.READ, True),
        (PermissionLevel.READ, PermissionLevel.WRITE, False),
        (PermissionLevel.READ, PermissionLevel.ADMIN, False),
        (PermissionLevel.WRITE, PermissionLevel.READ, True),
        (PermissionLevel.WRITE, PermissionLevel.ADMIN, False),
        (PermissionLevel.ADMIN, PermissionLevel.WRITE, True),
        (PermissionLevel.ADMIN, PermissionLevel.READ, True),
    ])
    def test_allows(self, held, required, allowed):
        assert held.allows(required) is allowed

    def test_allows_accepts_raw_values(self):
        assert PermissionLevel('ADMIN').allows('WRITE')


class TestAuthorize:
    def test_owner_is_always_allowed(self, db, patient):
        service = AccessService(PatientProfileRepository(db), PermissionRepository(db))

        profile = service.authorize(patient.current_user, patient.profile_id, PermissionLevel.ADMIN)

        assert profile.profile_id == patient.profile_id

    def test_missing_profile_looks_like_denied(self, db, patient, caregiver):
        service = AccessService(PatientProfileRepository(db), PermissionRepository(db))

        with pytest.raises(ForbiddenException) as missing:
            service.authorize(caregiver.current_user, patient.profile_id + 100, PermissionLevel.READ)
        with pytest.raises(ForbiddenException) as denied:
            service.authorize(caregiver.current_user, patient.profile_id, PermissionLevel.READ)

        assert missing.value.message == denied.value.message

    def test_other_patient_is_denied(self, db, patient, register_user, client):
        stranger = register_user('jorge@example.com', 'PATIENT')
        service = AccessService(PatientProfileRepository(db), PermissionRepository(db))

        with pytest.raises(ForbiddenException):
            service.authorize(stranger.current_user, patient.profile_id, PermissionLevel.READ)


class TestCaregiverAccess:
    def test_no_permission_is_denied_on_every_verb(self, client, patient, caregiver):
        medication = create_medication(client, patient)

        statuses = every_verb(client, caregiver, patient.profile_id, medication['medication_id'])

        assert set(statuses.values()) == {403}

    def test_read_can_read_but_not_mutate(self, client, patient, caregiver, grant):
        grant(caregiver, 'READ')
        medication = create_medication(client, patient)

        statuses = every_verb(client, caregiver, patient.profile_id, medication['medication_id'])

        assert statuses == {
            'read_profile': 200, 'list': 200, 'get': 200, 'calendar': 200,
            'create': 403, 'update': 403, 'update_profile': 403, 'delete': 403,
        }

    def test_write_can_read_and_mutate(self, client, patient, caregiver, grant):
        grant(caregiver, 'WRITE')
        medication = create_medication(client, patient)

        statuses = every_verb(client, caregiver, patient.profile_id, medication['medication_id'])

        assert statuses == {
            'read_profile': 200, 'list': 200, 'get': 200, 'calendar': 200,
            'create': 201, 'update': 200, 'update_profile': 200, 'delete': 200,
        }

    def test_missing_record_is_forbidden_not_found(self, client, patient, caregiver, grant):
        grant(caregiver, 'WRITE')

        response = client.get('/api/medications/9999', headers=caregiver.headers)

        assert response.status_code == 403

    def test_revocation_removes_access_immediately(self, client, patient, caregiver, grant):
        permission = grant(caregiver, 'WRITE')
        medication = create_medication(client, patient)
        assert client.get(f"/api/medications/{medication['medication_id']}",
                          headers=caregiver.headers).status_code == 200

        response = client.delete(f"/api/permissions/{permission['permission_id']}", headers=patient.headers)
        assert response.status_code == 200

        statuses = every_verb(client, caregiver, patient.profile_id, medication['medication_id'])
        assert set(statuses.values()) == {403}

    def test_access_is_scoped_to_one_profile(self, client, patient, caregiver, grant, register_user):
        grant(caregiver, 'ADMIN')
        stranger = register_user('jorge@example.com', 'PATIENT')
        client.put('/api/patient-profiles/me', json={'name': 'Jorge'}, headers=stranger.headers)
        stranger_profile = client.get('/api/patient-profiles/me', headers=stranger.headers).json()['data']

        response = client.get(f"/api/patient-profiles/{stranger_profile['profile_id']}", headers=caregiver.headers)

        assert response.status_code == 403
