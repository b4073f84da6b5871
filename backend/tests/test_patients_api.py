"""
Patient and doctor endpoints: CRUD, uniqueness conflicts, specialty search.
"""


class TestPatientCreate:
    """POST /api/patients"""

    endpoint = '/api/patients'

    def test_create_patient_success(self, client, patient_payload):
        response = client.post(self.endpoint, json=patient_payload)

        assert response.status_code == 201
        data = response.json()
        assert data['id'] is not None
        assert data['first_name'] == 'John'
        assert data['medical_id'] == 'MED001'
        assert data['created_at'] is not None

    def test_create_patient_minimal_fields(self, client):
        payload = {
            'first_name': 'Jane',
            'last_name': 'Smith',
            'email': 'jane.smith@email.com',
            'phone': '+1 (555) 987-6543',
        }

        response = client.post(self.endpoint, json=payload)

        assert response.status_code == 201
        assert response.json()['medical_id'] is None
        assert response.json()['address'] is None

    def test_missing_required_field(self, client, patient_payload):
        del patient_payload['phone']

        response = client.post(self.endpoint, json=patient_payload)

        assert response.status_code == 422

    def test_blank_name_rejected(self, client, patient_payload):
        patient_payload['first_name'] = '   '

        response = client.post(self.endpoint, json=patient_payload)

        assert response.status_code == 422

    def test_invalid_email_rejected(self, client, patient_payload):
        patient_payload['email'] = 'not-an-email'

        response = client.post(self.endpoint, json=patient_payload)

        assert response.status_code == 422

    def test_duplicate_email(self, client, patient, patient_payload):
        patient_payload['medical_id'] = 'MED002'

        response = client.post(self.endpoint, json=patient_payload)

        assert response.status_code == 409
        assert response.json()['table'] == 'patients'

    def test_duplicate_medical_id(self, client, patient, patient_payload):
        patient_payload['email'] = 'someone.else@email.com'

        response = client.post(self.endpoint, json=patient_payload)

        assert response.status_code == 409


class TestPatientReadUpdateDelete:

    def test_list_patients(self, client, patient):
        response = client.get('/api/patients')

        assert response.status_code == 200
        assert response.json()['count'] == 1
        assert response.json()['patients'][0]['id'] == patient['id']

    def test_get_patient(self, client, patient):
        response = client.get(f"/api/patients/{patient['id']}")

        assert response.status_code == 200
        assert response.json()['email'] == patient['email']

    def test_get_missing_patient(self, client):
        response = client.get('/api/patients/999')

        assert response.status_code == 404
        assert response.json()['detail'] == 'Patient not found'

    def test_update_keeps_created_at(self, client, patient):
        response = client.put(
            f"/api/patients/{patient['id']}",
            json={'address': '456 Oak Ave', 'created_at': '2000-01-01T00:00:00'},
        )

        assert response.status_code == 200
        assert response.json()['address'] == '456 Oak Ave'
        assert response.json()['created_at'] == patient['created_at']

    def test_blank_medical_id_cleared_on_two_patients(self, client, patient, patient_payload):
        patient_payload.update(email='jane.smith@email.com', medical_id='MED002')
        other = client.post('/api/patients', json=patient_payload).json()

        first = client.put(f"/api/patients/{patient['id']}", json={'medical_id': ''})
        second = client.put(f"/api/patients/{other['id']}", json={'medical_id': ' '})

        assert first.status_code == 200
        assert second.status_code == 200
        assert first.json()['medical_id'] is None
        assert second.json()['medical_id'] is None

    def test_delete_returns_record(self, client, patient):
        response = client.delete(f"/api/patients/{patient['id']}")

        assert response.status_code == 200
        assert response.json()['id'] == patient['id']
        assert client.get(f"/api/patients/{patient['id']}").status_code == 404


class TestDoctors:
    """/api/doctors"""

    def test_create_doctor(self, client, doctor):
        assert doctor['license_number'] == 'LIC001'
        assert doctor['years_of_experience'] == 12

    def test_duplicate_email(self, client, doctor, doctor_payload):
        doctor_payload['license_number'] = 'LIC002'

        response = client.post('/api/doctors', json=doctor_payload)

        assert response.status_code == 409
        assert response.json()['table'] == 'doctors'

    def test_duplicate_license_number(self, client, doctor, doctor_payload):
        doctor_payload['email'] = 'other.doctor@hospital.com'

        response = client.post('/api/doctors', json=doctor_payload)

        assert response.status_code == 409

    def test_negative_experience_rejected(self, client, doctor_payload):
        doctor_payload['years_of_experience'] = -1

        response = client.post('/api/doctors', json=doctor_payload)

        assert response.status_code == 422

    def test_specialty_search(self, client, doctor, doctor_payload):
        doctor_payload.update(
            first_name='Michael', last_name='Brown', email='michael.brown@hospital.com',
            specialty='General Practice', license_number='LIC002',
        )
        client.post('/api/doctors', json=doctor_payload)

        response = client.get('/api/doctors/specialty', params={'specialty': 'cardio'})

        assert response.status_code == 200
        assert response.json()['count'] == 1
        assert response.json()['doctors'][0]['last_name'] == 'Wilson'

    def test_specialty_in_path(self, client, doctor):
        response = client.get('/api/doctors/specialty/cardio')

        assert response.status_code == 200
        assert response.json()['count'] == 1
        assert response.json()['doctors'][0]['specialty'] == 'Cardiology'
        assert client.get('/api/doctors/specialty/neuro').json()['count'] == 0

    def test_specialty_search_without_filter(self, client, doctor):
        response = client.get('/api/doctors/specialty')

        assert response.json()['count'] == 1

    def test_update_and_delete(self, client, doctor):
        updated = client.put(f"/api/doctors/{doctor['id']}", json={'phone': '+1 (555) 000-0000'})
        deleted = client.delete(f"/api/doctors/{doctor['id']}")

        assert updated.json()['phone'] == '+1 (555) 000-0000'
        assert updated.json()['created_at'] == doctor['created_at']
        assert deleted.status_code == 200
        assert client.get('/api/doctors').json()['count'] == 0

    def test_get_missing_doctor(self, client):
        assert client.get('/api/doctors/5').status_code == 404
