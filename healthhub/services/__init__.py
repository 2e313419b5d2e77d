from .appointment_service import (
    list_appointments,
    get_appointment,
    create_appointment,
    update_appointment,
    delete_appointment,
)

from .record_service import (
    list_records,
    get_record,
    create_record,
    delete_record,
)

from .auth_service import issue_token, register_user, authenticate, update_profile

__all__ = [
    # Appointment Services
    "list_appointments",
    "get_appointment",
    "create_appointment",
    "update_appointment",
    "delete_appointment",
    # Medical Record Services
    "list_records",
    "get_record",
    "create_record",
    "delete_record",
    # Auth Services
    "issue_token",
    "register_user",
    "authenticate",
    "update_profile",
]
