class TestGrantPermission:
    def test_owner_grants_and_lists(self, client, patient, caregiver, grant):
        permission = grant(caregiver, 'WRITE')

        response = client.get('/api/permissions', params={'profile_id': patient.profile_id}, headers=patient.headers)

        assert response.status_code == 200
        assert [(item['caregiver_id'], item['level']) for item in response.json()['data']] == [
            (caregiver.user_id, 'WRITE')
        ]
        assert permission['profile_id'] == patient.profile_id

    def test_granting_again_changes_level_without_new_row(self, client, patient, caregiver, grant):
        first = grant(caregiver, 'READ')
        second = grant(caregiver, 'ADMIN')

        assert first['permission_id'] == second['permission_id']
        assert second['level'] == 'ADMIN'

    def test_level_defaults_to_read(self, client, patient, caregiver):
        response = client.post('/api/permissions',
                               json={'profile_id': patient.profile_id, 'caregiver_id': caregiver.user_id},
                               headers=patient.headers)

        assert response.json()['data']['level'] == 'READ'

    def test_unknown_level_is_invalid(self, client, patient, caregiver):
        response = client.post('/api/permissions',
                               json={'profile_id': patient.profile_id, 'caregiver_id': caregiver.user_id,
                                     'level': 'OWNER'},
                               headers=patient.headers)

        assert response.status_code == 400

    def test_grant_to_patient_account_is_not_found(self, client, patient, register_user):
        other = register_user('jorge@example.com', 'PATIENT')

        response = client.post('/api/permissions',
                               json={'profile_id': patient.profile_id, 'caregiver_id': other.user_id},
                               headers=patient.headers)

        assert response.status_code == 404

    def test_write_caregiver_cannot_grant(self, client, patient, caregiver, other_caregiver, grant):
        grant(caregiver, 'WRITE')

        response = client.post('/api/permissions',
                               json={'profile_id': patient.profile_id, 'caregiver_id': other_caregiver.user_id},
                               headers=caregiver.headers)

        assert response.status_code == 403

    def test_admin_caregiver_can_grant(self, client, patient, caregiver, other_caregiver, grant):
        grant(caregiver, 'ADMIN')

        response = client.post('/api/permissions',
                               json={'profile_id': patient.profile_id, 'caregiver_id': other_caregiver.user_id,
                                     'level': 'READ'},
                               headers=caregiver.headers)

        assert response.status_code == 201


class TestManagePermission:
    def test_caregiver_reads_own_permission(self, client, patient, caregiver, grant):
        permission = grant(caregiver, 'READ')

        response = client.get(f"/api/permissions/{permission['permission_id']}", headers=caregiver.headers)

        assert response.status_code == 200
        assert response.json()['data']['level'] == 'READ'

    def test_other_caregiver_cannot_read_permission(self, client, patient, caregiver, other_caregiver, grant):
        permission = grant(caregiver, 'READ')
        grant(other_caregiver, 'WRITE')

        response = client.get(f"/api/permissions/{permission['permission_id']}", headers=other_caregiver.headers)

        assert response.status_code == 403

    def test_owner_changes_level(self, client, patient, caregiver, grant):
        permission = grant(caregiver, 'READ')

        response = client.patch(f"/api/permissions/{permission['permission_id']}", json={'level': 'WRITE'},
                                headers=patient.headers)

        assert response.status_code == 200
        assert response.json()['data']['level'] == 'WRITE'

    def test_caregiver_cannot_raise_own_level(self, client, patient, caregiver, grant):
        permission = grant(caregiver, 'WRITE')

        response = client.patch(f"/api/permissions/{permission['permission_id']}", json={'level': 'ADMIN'},
                                headers=caregiver.headers)

        assert response.status_code == 403

    def test_caregiver_can_leave(self, client, patient, caregiver, grant):
        permission = grant(caregiver, 'READ')

        response = client.delete(f"/api/permissions/{permission['permission_id']}", headers=caregiver.headers)

        assert response.status_code == 200
        assert client.get('/api/caregivers/patients', headers=caregiver.headers).json()['data'] == []

    def test_missing_permission_is_forbidden(self, client, patient):
        response = client.delete('/api/permissions/9999', headers=patient.headers)

        assert response.status_code == 403


class TestMyPatients:
    def test_patient_cannot_list_patients(self, client, patient):
        response = client.get('/api/caregivers/patients', headers=patient.headers)

        assert response.status_code == 401

    def test_lists_every_granted_profile(self, client, patient, caregiver, grant, register_user):
        grant(caregiver, 'WRITE')
        other = register_user('jorge@example.com', 'PATIENT')
        other_profile_id = client.put('/api/patient-profiles/me', json={'name': 'Jorge Ruiz'},
                                      headers=other.headers).json()['data']['profile_id']
        client.post('/api/permissions', json={'profile_id': other_profile_id, 'caregiver_id': caregiver.user_id},
                    headers=other.headers)

        response = client.get('/api/caregivers/patients', headers=caregiver.headers)

        assert response.json()['data'] == [
            {'profile_id': patient.profile_id, 'name': 'Maria Lopez', 'level': 'WRITE'},
            {'profile_id': other_profile_id, 'name': 'Jorge Ruiz', 'level': 'READ'},
        ]
