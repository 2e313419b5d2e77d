import logging

import requests

from .api import ApiError

logger = logging.getLogger(__name__)

_REMOTE_ERRORS = (ApiError, requests.RequestException)


class MedicalRecordStore:
    """Medical records of the signed-in patient"""

    def __init__(self, api, session):
        self.api = api
        self.session = session
        self.records = []

    def _patient_id(self):
        principal = self.session.principal
        return principal.id if principal else None

    def refresh(self):
        try:
            records = self.api.list_records() or []
        except _REMOTE_ERRORS as e:
            logger.error("Failed to fetch records: %s", e)
            return False
        patient_id = self._patient_id()
        self.records = [r for r in records if r.get('patient_id') == patient_id]
        return True

    def upload(self, record):
        """Store a record reference (title, type, file_url...)."""
        try:
            created = self.api.create_record(dict(record))
        except _REMOTE_ERRORS as e:
            logger.error("Failed to upload record: %s", e)
            return False
        self.records.append(created)
        return True

    def delete(self, record_id):
        try:
            self.api.delete_record(record_id)
        except _REMOTE_ERRORS as e:
            logger.error("Failed to delete record: %s", e)
            return False
        self.records = [r for r in self.records if r.get('id') != record_id]
        return True
