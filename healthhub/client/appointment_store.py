"""
In-memory appointment cache for the signed-in principal.

The server is the source of truth: a successful create or update is
merged from the server's response, never from a locally guessed value.
Remote failures are logged and reported as ``False``; the cache is left
as it was.
"""
import logging
from collections import Counter

import requests

from healthhub import lifecycle
from .api import ApiError

logger = logging.getLogger(__name__)

_REMOTE_ERRORS = (ApiError, requests.RequestException)


class AppointmentStore:

    def __init__(self, api, session):
        self.api = api
        self.session = session
        self._appointments = []
        self.is_loading = False

    def refresh(self):
        """Replace the cache with the server's current list."""
        try:
            appointments = self.api.list_appointments()
        except _REMOTE_ERRORS as e:
            logger.error("Failed to fetch appointments: %s", e)
            return False
        self._appointments = list(appointments or [])
        return True

    def create(self, draft):
        """Book an appointment from ``draft`` (doctor, date, time, reason...)."""
        user = self.session.user or {}
        payload = dict(draft)
        payload.update({
            'patient_id': user.get('id'),
            'patient_name': user.get('name'),
            'patient_email': user.get('email'),
        })

        self.is_loading = True
        try:
            created = self.api.create_appointment(payload)
        except _REMOTE_ERRORS as e:
            logger.error("Failed to create appointment: %s", e)
            return False
        finally:
            self.is_loading = False

        self._appointments.append(created)
        return True

    def update_status(self, appointment_id, new_status, notes=None):
        if not lifecycle.is_valid_status(new_status):
            logger.error("Refusing to send unknown status %r for %s", new_status, appointment_id)
            return False

        payload = {'status': new_status}
        if notes is not None:
            payload['notes'] = notes

        self.is_loading = True
        try:
            updated = self.api.update_appointment(appointment_id, payload)
        except _REMOTE_ERRORS as e:
            logger.error("Failed to update appointment: %s", e)
            return False
        finally:
            self.is_loading = False

        self._appointments = [
            updated if apt.get('id') == appointment_id else apt
            for apt in self._appointments
        ]
        return True

    def delete(self, appointment_id):
        try:
            self.api.delete_appointment(appointment_id)
        except _REMOTE_ERRORS as e:
            logger.error("Failed to delete appointment: %s", e)
            return False

        self._appointments = [apt for apt in self._appointments if apt.get('id') != appointment_id]
        return True

    def get_for_patient(self, patient_id):
        return [apt for apt in self._appointments if apt.get('patient_id') == patient_id]

    def get_all(self):
        return list(self._appointments)

    def get(self, appointment_id):
        for apt in self._appointments:
            if apt.get('id') == appointment_id:
                return apt
        return None

    def status_counts(self, appointments=None):
        counts = Counter(apt.get('status') for apt in (appointments if appointments is not None else self._appointments))
        return {status: counts.get(status, 0) for status in lifecycle.STATUSES}

    def pending(self, limit=None):
        result = [apt for apt in self._appointments if apt.get('status') == lifecycle.PENDING]
        return result[:limit] if limit is not None else result

    def next_actions(self, appointment):
        """Statuses to offer the signed-in principal for ``appointment``"""
        return lifecycle.next_actions(self.session.principal, appointment)
