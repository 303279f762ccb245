class TestMyProfile:
    def test_profile_is_created_on_first_save(self, client, register_user):
        account = register_user('ana@example.com', 'PATIENT')
        assert client.get('/api/patient-profiles/me', headers=account.headers).status_code == 404

        response = client.put('/api/patient-profiles/me',
                              json={'name': 'Ana Ruiz', 'blood_type': 'A+', 'gender': 'FEMALE'},
                              headers=account.headers)

        assert response.status_code == 200
        data = response.json()['data']
        assert data['patient_id'] == account.user_id
        assert data['gender'] == 'FEMALE'

    def test_second_save_updates_same_profile(self, client, patient):
        response = client.put('/api/patient-profiles/me', json={'allergies': 'Penicillin'}, headers=patient.headers)

        data = response.json()['data']
        assert data['profile_id'] == patient.profile_id
        assert data['allergies'] == 'Penicillin'
        assert data['name'] == 'Maria Lopez'

    def test_login_after_save_carries_profile_id(self, client, patient):
        response = client.post('/api/auth/login', json={'email': patient.email, 'password': 'secret123'})

        assert response.json()['data']['profile_id'] == patient.profile_id

    def test_caregiver_has_no_own_profile(self, client, caregiver):
        response = client.put('/api/patient-profiles/me', json={'name': 'Carlos'}, headers=caregiver.headers)

        assert response.status_code == 401

    def test_unknown_field_is_invalid(self, client, patient):
        response = client.put('/api/patient-profiles/me', json={'patient_id': 99}, headers=patient.headers)

        assert response.status_code == 400


class TestProfileById:
    def test_owner_reads_and_updates(self, client, patient):
        response = client.patch(f'/api/patient-profiles/{patient.profile_id}',
                                json={'doctor_name': 'Dr. Vidal'}, headers=patient.headers)
        assert response.status_code == 200

        response = client.get(f'/api/patient-profiles/{patient.profile_id}', headers=patient.headers)
        assert response.json()['data']['doctor_name'] == 'Dr. Vidal'

    def test_unknown_profile_is_forbidden(self, client, patient):
        response = client.get(f'/api/patient-profiles/{patient.profile_id + 100}', headers=patient.headers)

        assert response.status_code == 403

    def test_explicit_null_clears_field(self, client, patient):
        client.patch(f'/api/patient-profiles/{patient.profile_id}', json={'allergies': 'Penicillin'},
                     headers=patient.headers)

        response = client.patch(f'/api/patient-profiles/{patient.profile_id}', json={'allergies': None},
                                headers=patient.headers)

        assert response.status_code == 200
        assert response.json()['data']['allergies'] is None
        assert response.json()['data']['name'] == 'Maria Lopez'
