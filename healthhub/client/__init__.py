"""
Client library for the HealthHub API: session, HTTP client and the
state containers a front end builds on.
"""
from .session import Session
from .api import HealthHubAPI, ApiError
from .auth import AuthManager
from .appointment_store import AppointmentStore
from .record_store import MedicalRecordStore
from .doctor_directory import DoctorDirectory, DoctorPage

__all__ = [
    "Session",
    "HealthHubAPI",
    "ApiError",
    "AuthManager",
    "AppointmentStore",
    "MedicalRecordStore",
    "DoctorDirectory",
    "DoctorPage",
]
