"""
HTTP client for the HealthHub REST API.

Every call goes through ``HealthHubAPI._request``: the bearer token comes
from the session, non-2xx responses raise ``ApiError``, and a 401 clears
the session so callers fall back to signing in again.
"""
import logging
import os

import requests

logger = logging.getLogger(__name__)

DEFAULT_API_URL = 'http://localhost:5000/api'


class ApiError(Exception):
    """A non-2xx response from the API"""

    def __init__(self, status_code, message):
        super().__init__(f'{status_code}: {message}')
        self.status_code = status_code
        self.message = message


class HealthHubAPI:

    def __init__(self, session, base_url=None, timeout=None, http=None):
        """
        Args:
            session: client Session supplying the bearer token
            base_url: API root, defaults to $HEALTHHUB_API_URL
            timeout: per-request timeout in seconds (None = requests default)
            http: requests.Session-compatible object, mainly for tests
        """
        self.session = session
        self.base_url = (base_url or os.getenv('HEALTHHUB_API_URL', DEFAULT_API_URL)).rstrip('/')
        self.timeout = timeout
        self.http = http or requests.Session()

    def _request(self, method, path, json=None, params=None):
        headers = {'Content-Type': 'application/json'}
        headers.update(self.session.auth_headers())

        response = self.http.request(
            method,
            f'{self.base_url}{path}',
            json=json,
            params=params,
            headers=headers,
            timeout=self.timeout,
        )

        try:
            body = response.json()
        except ValueError:
            body = {}

        if response.status_code == 401:
            logger.info("Session rejected by API, clearing it")
            self.session.clear()

        if not response.ok:
            message = body.get('error') if isinstance(body, dict) else None
            raise ApiError(response.status_code, message or response.reason or 'Request failed')

        return body

    @staticmethod
    def _data(body):
        return body.get('data')

    # Auth

    def login(self, email, password):
        body = self._request('POST', '/auth/login', json={'email': email, 'password': password})
        return body['user'], body['token']

    def register(self, data):
        body = self._request('POST', '/auth/register', json=data)
        return body['user'], body['token']

    def get_profile(self):
        return self._data(self._request('GET', '/auth/profile'))

    def update_profile(self, data):
        return self._data(self._request('PUT', '/auth/profile', json=data))

    # Doctors

    def list_doctors(self, specialization=None):
        params = {'specialization': specialization} if specialization else None
        return self._data(self._request('GET', '/doctors', params=params))

    def search_doctors(self, query):
        return self._data(self._request('GET', '/doctors/search', params={'q': query}))

    def get_doctor(self, doctor_id):
        return self._data(self._request('GET', f'/doctors/{doctor_id}'))

    # Appointments

    def list_appointments(self):
        return self._data(self._request('GET', '/appointments'))

    def get_appointment(self, appointment_id):
        return self._data(self._request('GET', f'/appointments/{appointment_id}'))

    def create_appointment(self, data):
        return self._data(self._request('POST', '/appointments', json=data))

    def update_appointment(self, appointment_id, data):
        return self._data(self._request('PUT', f'/appointments/{appointment_id}', json=data))

    def delete_appointment(self, appointment_id):
        self._request('DELETE', f'/appointments/{appointment_id}')

    # Medical records

    def list_records(self):
        return self._data(self._request('GET', '/records'))

    def get_record(self, record_id):
        return self._data(self._request('GET', f'/records/{record_id}'))

    def create_record(self, data):
        return self._data(self._request('POST', '/records', json=data))

    def delete_record(self, record_id):
        self._request('DELETE', f'/records/{record_id}')
