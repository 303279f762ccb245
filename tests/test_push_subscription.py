from recuerdamed.models.model_push_subscription import PushSubscription


SUBSCRIPTION = {
    'endpoint': 'https://push.example.com/send/abc123',
    'expirationTime': None,
    'keys': {'p256dh': 'BNcRdreALRFXTkOOUHK1EtK2wtaz5Ry4YfYCA', 'auth': 'tBHItJI5svbpez7KI4CCXg'},
}


class TestPushSubscription:
    def test_subscribe(self, client, patient):
        response = client.post('/api/push-subscriptions', json=SUBSCRIPTION, headers=patient.headers)

        assert response.status_code == 201
        assert response.json()['data']['user_id'] == patient.user_id
        assert response.json()['data']['endpoint'] == SUBSCRIPTION['endpoint']

    def test_same_user_refreshes_keys(self, client, db, patient):
        first = client.post('/api/push-subscriptions', json=SUBSCRIPTION, headers=patient.headers).json()['data']
        renewed = {**SUBSCRIPTION, 'keys': {'p256dh': 'BRenewedKey', 'auth': 'renewedAuth'}}

        second = client.post('/api/push-subscriptions', json=renewed, headers=patient.headers).json()['data']

        assert second['subscription_id'] == first['subscription_id']
        stored = db.query(PushSubscription).filter(PushSubscription.endpoint == SUBSCRIPTION['endpoint']).one()
        assert (stored.p256dh, stored.auth) == ('BRenewedKey', 'renewedAuth')

    def test_endpoint_of_another_user_is_not_taken_over(self, client, db, patient, caregiver):
        client.post('/api/push-subscriptions', json=SUBSCRIPTION, headers=patient.headers)

        response = client.post('/api/push-subscriptions', json=SUBSCRIPTION, headers=caregiver.headers)

        assert response.status_code == 409
        stored = db.query(PushSubscription).filter(PushSubscription.endpoint == SUBSCRIPTION['endpoint']).one()
        assert stored.user_id == patient.user_id

    def test_missing_keys_are_invalid(self, client, patient):
        response = client.post('/api/push-subscriptions', json={'endpoint': SUBSCRIPTION['endpoint']},
                               headers=patient.headers)

        assert response.status_code == 400

    def test_unsubscribe(self, client, patient):
        client.post('/api/push-subscriptions', json=SUBSCRIPTION, headers=patient.headers)

        response = client.delete('/api/push-subscriptions', params={'endpoint': SUBSCRIPTION['endpoint']},
                                 headers=patient.headers)
        assert response.status_code == 200

        response = client.delete('/api/push-subscriptions', params={'endpoint': SUBSCRIPTION['endpoint']},
                                 headers=patient.headers)
        assert response.status_code == 404

    def test_cannot_unsubscribe_someone_else(self, client, patient, caregiver):
        client.post('/api/push-subscriptions', json=SUBSCRIPTION, headers=patient.headers)

        response = client.delete('/api/push-subscriptions', params={'endpoint': SUBSCRIPTION['endpoint']},
                                 headers=caregiver.headers)

        assert response.status_code == 404

    def test_requires_login(self, client):
        response = client.post('/api/push-subscriptions', json=SUBSCRIPTION)

        assert response.status_code == 401
