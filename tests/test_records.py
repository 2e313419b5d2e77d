def add_record(client, account, **overrides):
    payload = {
        'title': 'Blood panel',
        'type': 'lab_report',
        'description': 'Annual checkup',
        'file_url': 'https://files.example.com/blood.pdf',
        'file_name': 'blood.pdf',
    }
    payload.update(overrides)
    resp = client.post('/api/records', json=payload, headers=account.headers)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()['data']


def test_owner_deletes_record_then_second_delete_is_404(client, patient):
    record = add_record(client, patient)

    resp = client.delete(f"/api/records/{record['id']}", headers=patient.headers)
    assert resp.status_code == 200

    listing = client.get('/api/records', headers=patient.headers).get_json()['data']
    assert record['id'] not in [r['id'] for r in listing]

    again = client.delete(f"/api/records/{record['id']}", headers=patient.headers)
    assert again.status_code == 404


def test_records_are_listed_for_owner_only(client, patient, other_patient):
    mine = add_record(client, patient)
    add_record(client, other_patient, title='X-ray', type='imaging')

    listing = client.get('/api/records', headers=patient.headers).get_json()['data']
    assert [r['id'] for r in listing] == [mine['id']]
    assert listing[0]['patient_id'] == patient.user['id']


def test_owner_is_injected(client, patient, other_patient):
    record = add_record(client, patient, patient_id=other_patient.user['id'])
    assert record['patient_id'] == patient.user['id']


def test_other_patient_and_admin_are_denied(client, patient, other_patient, admin):
    record = add_record(client, patient)
    url = f"/api/records/{record['id']}"

    assert client.get(url, headers=other_patient.headers).status_code == 403
    assert client.delete(url, headers=other_patient.headers).status_code == 403
    # no admin override for medical records
    assert client.delete(url, headers=admin.headers).status_code == 403
    assert client.get('/api/records', headers=admin.headers).get_json()['data'] == []

    assert client.get(url, headers=patient.headers).status_code == 200


def test_record_validation(client, patient):
    missing_title = client.post('/api/records', headers=patient.headers, json={'type': 'imaging'})
    assert missing_title.status_code == 400
    assert missing_title.get_json()['field'] == 'title'

    bad_type = client.post('/api/records', headers=patient.headers, json={'title': 'Scan', 'type': 'video'})
    assert bad_type.status_code == 400
    assert bad_type.get_json()['field'] == 'type'


def test_missing_record_is_404(client, patient):
    assert client.get('/api/records/nope', headers=patient.headers).status_code == 404
