import logging

from conftest import book, register


def test_created_appointment_is_pending_whatever_was_sent(client, patient, doctor):
    created = book(client, patient, doctor['id'], status='approved')
    assert created['status'] == 'pending'


def test_patient_identity_is_injected_server_side(client, patient, other_patient, doctor):
    created = book(
        client, patient, doctor['id'],
        patient_id=other_patient.user['id'],
        patient_name='Someone Else',
    )
    assert created['patient_id'] == patient.user['id']
    assert created['patient_name'] == 'Pat Patient'
    assert created['patient_email'] == 'p@demo.com'


def test_booking_then_listing(client, patient, doctor):
    created = book(client, patient, doctor['id'], date='2024-06-01', time='10:00 AM', reason='checkup')
    assert created['status'] == 'pending'

    resp = client.get('/api/appointments', headers=patient.headers)
    assert resp.status_code == 200
    rows = resp.get_json()['data']
    assert len(rows) == 1
    row = rows[0]
    assert row['doctor_id'] == doctor['id']
    assert row['date'] == '2024-06-01'
    assert row['time'] == '10:00 AM'
    assert row['reason'] == 'checkup'
    assert row['doctor_name'] == 'Dr. Sarah Johnson'
    assert row['doctor_specialization'] == 'Cardiology'


def test_missing_reason_is_a_validation_error(client, patient, doctor):
    resp = client.post('/api/appointments', headers=patient.headers, json={
        'doctor_id': doctor['id'], 'date': '2024-06-01', 'time': '10:00 AM',
    })
    assert resp.status_code == 400
    assert resp.get_json()['field'] == 'reason'

    listing = client.get('/api/appointments', headers=patient.headers).get_json()['data']
    assert listing == []


def test_unknown_doctor_uses_supplied_snapshot(client, patient):
    created = book(client, patient, 'ext-42', doctor_name='Dr. Visiting', doctor_specialization='ENT')
    assert created['doctor_name'] == 'Dr. Visiting'
    assert created['doctor_specialization'] == 'ENT'


def test_listing_is_scoped_by_role(client, patient, other_patient, admin, doctor):
    mine = [book(client, patient, doctor['id'])['id'] for _ in range(2)]
    theirs = book(client, other_patient, doctor['id'])['id']

    as_patient = client.get('/api/appointments', headers=patient.headers).get_json()['data']
    assert sorted(a['id'] for a in as_patient) == sorted(mine)

    as_admin = client.get('/api/appointments', headers=admin.headers).get_json()['data']
    assert sorted(a['id'] for a in as_admin) == sorted(mine + [theirs])


def test_listing_is_newest_first_and_repeatable(client, patient, doctor):
    ids = [book(client, patient, doctor['id'], reason=f'visit {n}')['id'] for n in range(3)]

    first = client.get('/api/appointments', headers=patient.headers).get_json()['data']
    second = client.get('/api/appointments', headers=patient.headers).get_json()['data']

    assert [a['id'] for a in first] == list(reversed(ids))
    assert first == second


def test_admin_approves_and_owner_sees_it(client, patient, other_patient, admin, doctor):
    apt = book(client, patient, doctor['id'])

    resp = client.put(f"/api/appointments/{apt['id']}", headers=admin.headers, json={'status': 'approved'})
    assert resp.status_code == 200
    assert resp.get_json()['data']['status'] == 'approved'

    seen = client.get('/api/appointments', headers=patient.headers).get_json()['data']
    assert seen[0]['status'] == 'approved'

    resp = client.put(f"/api/appointments/{apt['id']}", headers=other_patient.headers, json={'status': 'cancelled'})
    assert resp.status_code == 403
    assert resp.get_json() == {'success': False, 'error': 'Not authorized'}


def test_other_patient_cannot_update_or_delete(client, patient, other_patient, doctor):
    apt = book(client, patient, doctor['id'], notes='original')

    put = client.put(f"/api/appointments/{apt['id']}", headers=other_patient.headers,
                     json={'status': 'cancelled', 'notes': 'hijacked'})
    delete = client.delete(f"/api/appointments/{apt['id']}", headers=other_patient.headers)
    assert put.status_code == 403
    assert delete.status_code == 403

    unchanged = client.get(f"/api/appointments/{apt['id']}", headers=patient.headers).get_json()['data']
    assert unchanged['status'] == 'pending'
    assert unchanged['notes'] == 'original'


def test_other_patient_cannot_read_by_id(client, patient, other_patient, doctor):
    apt = book(client, patient, doctor['id'])
    resp = client.get(f"/api/appointments/{apt['id']}", headers=other_patient.headers)
    assert resp.status_code == 403


def test_missing_appointment_is_404_even_for_admin(client, patient, admin):
    for account in (patient, admin):
        assert client.put('/api/appointments/does-not-exist', headers=account.headers,
                          json={'status': 'approved'}).status_code == 404
        assert client.delete('/api/appointments/does-not-exist', headers=account.headers).status_code == 404
        assert client.get('/api/appointments/does-not-exist', headers=account.headers).status_code == 404


def test_owner_cancels_own_appointment(client, patient, doctor):
    apt = book(client, patient, doctor['id'])
    resp = client.put(f"/api/appointments/{apt['id']}", headers=patient.headers, json={'status': 'cancelled'})
    assert resp.status_code == 200
    assert resp.get_json()['data']['status'] == 'cancelled'


def test_any_known_status_is_accepted_from_any_state(client, patient, admin, doctor, caplog):
    apt = book(client, patient, doctor['id'])
    url = f"/api/appointments/{apt['id']}"

    assert client.put(url, headers=admin.headers, json={'status': 'cancelled'}).status_code == 200
    with caplog.at_level(logging.WARNING, logger='healthhub.lifecycle'):
        resp = client.put(url, headers=admin.headers, json={'status': 'approved'})
    assert resp.status_code == 200
    assert resp.get_json()['data']['status'] == 'approved'
    assert 'outside the designed workflow' in caplog.text

    # owners are not restricted to cancelling either
    resp = client.put(url, headers=patient.headers, json={'status': 'completed'})
    assert resp.status_code == 200
    assert resp.get_json()['data']['status'] == 'completed'


def test_unknown_status_is_rejected(client, patient, admin, doctor):
    apt = book(client, patient, doctor['id'])
    resp = client.put(f"/api/appointments/{apt['id']}", headers=admin.headers, json={'status': 'archived'})
    assert resp.status_code == 400
    assert resp.get_json()['field'] == 'status'


def test_notes_update_keeps_status(client, patient, admin, doctor):
    apt = book(client, patient, doctor['id'])
    resp = client.put(f"/api/appointments/{apt['id']}", headers=admin.headers, json={'notes': 'Bring reports'})
    data = resp.get_json()['data']
    assert data['status'] == 'pending'
    assert data['notes'] == 'Bring reports'


def test_owner_and_admin_can_delete(client, patient, admin, doctor):
    own = book(client, patient, doctor['id'])
    other = book(client, patient, doctor['id'])

    assert client.delete(f"/api/appointments/{own['id']}", headers=patient.headers).status_code == 200
    assert client.delete(f"/api/appointments/{other['id']}", headers=admin.headers).status_code == 200
    assert client.get('/api/appointments', headers=patient.headers).get_json()['data'] == []
    # hard delete: gone for good
    assert client.delete(f"/api/appointments/{own['id']}", headers=patient.headers).status_code == 404


def test_doctor_snapshot_is_not_refreshed(app, client, patient, doctor):
    from healthhub.extensions import db
    from healthhub.models import Doctor

    apt = book(client, patient, doctor['id'])
    with app.app_context():
        db.session.get(Doctor, doctor['id']).name = 'Dr. Sarah Johnson-Lee'
        db.session.commit()

    row = client.get(f"/api/appointments/{apt['id']}", headers=patient.headers).get_json()['data']
    assert row['doctor_name'] == 'Dr. Sarah Johnson'


def test_anonymous_calls_are_rejected(client, patient, doctor):
    apt = book(client, patient, doctor['id'])
    assert client.get('/api/appointments').status_code == 401
    assert client.post('/api/appointments', json={}).status_code == 401
    assert client.put(f"/api/appointments/{apt['id']}", json={'status': 'cancelled'}).status_code == 401
    assert client.delete(f"/api/appointments/{apt['id']}").status_code == 401


def test_token_of_deleted_user_is_rejected(app, client, doctor):
    from healthhub.extensions import db
    from healthhub.models import User

    account = register(client, 'gone@demo.com')
    with app.app_context():
        db.session.delete(db.session.get(User, account.user['id']))
        db.session.commit()

    resp = client.get('/api/appointments', headers=account.headers)
    assert resp.status_code == 401


def test_update_checks_existence_then_policy_before_body(client, patient, other_patient, doctor):
    apt = book(client, patient, doctor['id'])

    missing = client.put('/api/appointments/nope', data='x', headers=patient.headers)
    assert missing.status_code == 404

    forbidden = client.put(f"/api/appointments/{apt['id']}", data='x', headers=other_patient.headers)
    assert forbidden.status_code == 403

    invalid = client.put(f"/api/appointments/{apt['id']}", data='x', headers=patient.headers)
    assert invalid.status_code == 400
    assert invalid.get_json()['error'] == 'Request body must be JSON'


def test_overlong_time_is_a_validation_error(client, patient, doctor):
    resp = client.post('/api/appointments', headers=patient.headers, json={
        'doctor_id': doctor['id'],
        'date': '2024-06-01',
        'time': 'Tomorrow, 10:00 AM - 10:30 AM, or later that afternoon',
        'reason': 'checkup',
    })
    assert resp.status_code == 400
    assert resp.get_json()['field'] == 'time'

    created = book(client, patient, doctor['id'], time='Tomorrow, 10:00 AM - 10:30 AM')
    assert created['time'] == 'Tomorrow, 10:00 AM - 10:30 AM'
