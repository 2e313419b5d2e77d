from collections import namedtuple

import pytest

from healthhub import create_app
from healthhub.client import HealthHubAPI, Session
from healthhub.extensions import db
from healthhub.models import Doctor, User
from healthhub.policy import ROLE_ADMIN

Account = namedtuple('Account', ['user', 'token', 'headers'])

TEST_SERVER = 'http://testserver'


def bearer(token):
    return {'Authorization': f'Bearer {token}'}


def register(client, email, password='demo123', name='Test Patient', **extra):
    payload = {'email': email, 'password': password, 'name': name}
    payload.update(extra)
    resp = client.post('/api/auth/register', json=payload)
    assert resp.status_code == 201, resp.get_json()
    body = resp.get_json()
    return Account(body['user'], body['token'], bearer(body['token']))


def login(client, email, password='demo123'):
    resp = client.post('/api/auth/login', json={'email': email, 'password': password})
    assert resp.status_code == 200, resp.get_json()
    body = resp.get_json()
    return Account(body['user'], body['token'], bearer(body['token']))


def book(client, account, doctor_id, **overrides):
    payload = {
        'doctor_id': doctor_id,
        'date': '2024-06-01',
        'time': '10:00 AM',
        'reason': 'checkup',
    }
    payload.update(overrides)
    resp = client.post('/api/appointments', json=payload, headers=account.headers)
    assert resp.status_code == 201, resp.get_json()
    return resp.get_json()['data']


@pytest.fixture
def app():
    app = create_app('testing')
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def doctor(app):
    with app.app_context():
        doc = Doctor(
            name='Dr. Sarah Johnson',
            email='sarah.johnson@healthhub.com',
            specialization='Cardiology',
            qualification='MBBS, MD (Cardiology)',
            experience=15,
            consultation_fee=150,
            hospital='City General Hospital',
            languages=['English', 'Spanish'],
        )
        db.session.add(doc)
        db.session.commit()
        return doc.to_dict()


@pytest.fixture
def patient(client):
    return register(client, 'p@demo.com', name='Pat Patient')


@pytest.fixture
def other_patient(client):
    return register(client, 'other@demo.com', name='Olive Other')


@pytest.fixture
def admin(app, client):
    with app.app_context():
        user = User(email='admin@demo.com', name='Demo Admin', role=ROLE_ADMIN)
        user.set_password('demo123')
        db.session.add(user)
        db.session.commit()
    return login(client, 'admin@demo.com')


class TransportResponse:
    """The slice of requests.Response that HealthHubAPI reads"""

    def __init__(self, response):
        self._response = response
        self.status_code = response.status_code
        self.ok = response.status_code < 400
        self.reason = response.status

    def json(self):
        data = self._response.get_json(silent=True)
        if data is None:
            raise ValueError('Response body is not JSON')
        return data


class FlaskTransport:
    """Sends HealthHubAPI traffic through the Flask test client"""

    def __init__(self, client):
        self.client = client
        self.calls = []

    def request(self, method, url, json=None, params=None, headers=None, timeout=None):
        assert url.startswith(TEST_SERVER)
        path = url[len(TEST_SERVER):]
        self.calls.append((method, path))
        response = self.client.open(
            path,
            method=method,
            json=json,
            query_string=params,
            headers=headers,
        )
        return TransportResponse(response)


@pytest.fixture
def transport(client):
    return FlaskTransport(client)


@pytest.fixture
def make_api(transport):
    def _make(session=None):
        return HealthHubAPI(session or Session(), base_url=f'{TEST_SERVER}/api', http=transport)
    return _make
