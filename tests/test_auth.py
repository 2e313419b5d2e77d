from conftest import bearer, book, login, register


def test_register_then_login_returns_same_user(client):
    registered = register(client, 'p@demo.com', password='demo123', name='Pat')

    assert registered.user['role'] == 'patient'
    assert registered.token

    again = login(client, 'p@demo.com', 'demo123')
    assert again.user['id'] == registered.user['id']
    assert again.token


def test_password_is_never_returned(client):
    account = register(client, 'p@demo.com')
    assert 'password' not in account.user
    assert 'password_hash' not in account.user

    profile = client.get('/api/auth/profile', headers=account.headers).get_json()['data']
    assert 'password_hash' not in profile


def test_email_is_normalized(client):
    register(client, '  Mixed@Demo.COM ')
    account = login(client, 'mixed@demo.com')
    assert account.user['email'] == 'mixed@demo.com'


def test_duplicate_email_is_rejected(client):
    register(client, 'p@demo.com')
    resp = client.post('/api/auth/register', json={
        'email': 'P@demo.com', 'password': 'x', 'name': 'Dup'
    })
    assert resp.status_code == 400
    assert resp.get_json() == {'success': False, 'error': 'User already exists', 'field': 'email'}


def test_register_requires_fields(client):
    resp = client.post('/api/auth/register', json={'email': 'p@demo.com', 'password': 'x'})
    assert resp.status_code == 400
    assert resp.get_json()['field'] == 'name'


def test_register_requires_json_body(client):
    resp = client.post('/api/auth/register', data='not json', content_type='text/plain')
    assert resp.status_code == 400
    assert resp.get_json()['error'] == 'Request body must be JSON'


def test_admin_cannot_self_register(client):
    resp = client.post('/api/auth/register', json={
        'email': 'boss@demo.com', 'password': 'x', 'name': 'Boss', 'role': 'admin'
    })
    assert resp.status_code == 400
    assert resp.get_json()['field'] == 'role'


def test_admin_self_registration_can_be_enabled(app, client):
    app.config['ALLOW_ADMIN_SIGNUP'] = True
    account = register(client, 'boss@demo.com', role='admin')
    assert account.user['role'] == 'admin'


def test_wrong_password_is_unauthorized(client):
    register(client, 'p@demo.com', password='demo123')
    resp = client.post('/api/auth/login', json={'email': 'p@demo.com', 'password': 'nope'})
    assert resp.status_code == 401
    assert resp.get_json()['error'] == 'Invalid email or password'


def test_unknown_email_is_unauthorized(client):
    resp = client.post('/api/auth/login', json={'email': 'ghost@demo.com', 'password': 'x'})
    assert resp.status_code == 401


def test_missing_token_is_unauthorized(client):
    resp = client.get('/api/auth/profile')
    assert resp.status_code == 401
    assert resp.get_json() == {'success': False, 'error': 'Authentication required'}


def test_garbage_token_is_unauthorized(client):
    resp = client.get('/api/auth/profile', headers=bearer('not-a-jwt'))
    assert resp.status_code == 401
    assert resp.get_json()['success'] is False


def test_profile_update_passes_fields_through(client):
    account = register(client, 'p@demo.com', name='Pat')
    resp = client.put('/api/auth/profile', headers=account.headers, json={
        'name': 'Patricia',
        'blood_group': 'O+',
        'allergies': ['penicillin'],
        'role': 'admin',
        'email': 'hijack@demo.com',
    })
    assert resp.status_code == 200
    data = resp.get_json()['data']
    assert data['name'] == 'Patricia'
    assert data['blood_group'] == 'O+'
    assert data['allergies'] == ['penicillin']
    # role and email are not profile fields
    assert data['role'] == 'patient'
    assert data['email'] == 'p@demo.com'


def test_blank_profile_name_keeps_current_name(client, doctor):
    account = register(client, 'p@demo.com', name='Real Name')
    resp = client.put('/api/auth/profile', headers=account.headers, json={'name': '   ', 'phone': '  '})
    assert resp.status_code == 200
    assert resp.get_json()['data']['name'] == 'Real Name'

    booked = book(client, account, doctor['id'])
    assert booked['patient_name'] == 'Real Name'


def test_logout_acknowledges(client, patient):
    resp = client.post('/api/auth/logout', headers=patient.headers)
    assert resp.status_code == 200
    assert resp.get_json()['success'] is True
