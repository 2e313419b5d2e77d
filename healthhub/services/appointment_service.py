"""
Appointment operations behind /api/appointments.

Order of checks for anything touching an existing appointment:
existence (404), then the authorization policy (403), then input
validation (400). Listings are scoped by the policy in the query itself.
"""
import logging

from healthhub import lifecycle, policy
from healthhub.errors import NotFoundError, ValidationError
from healthhub.extensions import db
from healthhub.models import Appointment, Doctor
from healthhub.utils.database import commit_or_rollback
from healthhub.utils.validation import check_lengths, optional_string, require_fields

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('doctor_id', 'date', 'time', 'reason')
FIELD_LENGTHS = {
    'doctor_id': Appointment.__table__.c.doctor_id.type.length,
    'date': Appointment.__table__.c.date.type.length,
    'time': Appointment.__table__.c.time.type.length,
    'doctor_name': Appointment.__table__.c.doctor_name.type.length,
    'doctor_specialization': Appointment.__table__.c.doctor_specialization.type.length,
}


def _find(appointment_id):
    appointment = db.session.get(Appointment, str(appointment_id))
    if not appointment:
        raise NotFoundError('Appointment not found')
    return appointment


def list_appointments(principal):
    """Admin: every appointment. Patient: their own. Newest first."""
    query = policy.scope_query(principal, Appointment.query, Appointment)
    return query.order_by(
        Appointment.created_at.desc(),
        Appointment.id.desc()
    ).all()


def get_appointment(principal, appointment_id):
    appointment = _find(appointment_id)
    policy.ensure_can_read(principal, appointment)
    return appointment


def create_appointment(user, data):
    """
    Book an appointment for ``user``.

    Patient identity comes from the authenticated user, never the payload,
    and the status always starts at pending. Doctor name and specialization
    are copied from the directory when the doctor is known, otherwise from
    the payload.
    """
    require_fields(data, REQUIRED_FIELDS)
    check_lengths(data, FIELD_LENGTHS)

    doctor_id = str(data['doctor_id']).strip()
    doctor = db.session.get(Doctor, doctor_id)
    if doctor:
        doctor_name = doctor.name
        doctor_specialization = doctor.specialization
    else:
        doctor_name = optional_string(data, 'doctor_name')
        doctor_specialization = optional_string(data, 'doctor_specialization')

    appointment = Appointment(
        patient_id=user.id,
        patient_name=user.name,
        patient_email=user.email,
        doctor_id=doctor_id,
        doctor_name=doctor_name,
        doctor_specialization=doctor_specialization,
        date=str(data['date']).strip(),
        time=str(data['time']).strip(),
        reason=str(data['reason']).strip(),
        notes=optional_string(data, 'notes') or None,
        status=lifecycle.initial_status(data.get('status')),
    )
    db.session.add(appointment)
    commit_or_rollback('create appointment')

    logger.info("Appointment %s created by %s with doctor %s", appointment.id, user.id, doctor_id)
    return appointment


def update_appointment(principal, appointment_id, data):
    """Update status and/or notes; any known status is accepted."""
    appointment = _find(appointment_id)
    policy.ensure_can_mutate(principal, appointment, policy.OP_UPDATE)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be JSON')

    status = data.get('status')
    if status is not None and not isinstance(status, str):
        raise ValidationError('Field "status" must be a string', field='status')
    notes = optional_string(data, 'notes')

    previous = lifecycle.apply_update(principal, appointment, status=status, notes=notes)
    commit_or_rollback('update appointment')

    logger.info(
        "Appointment %s updated by %s %s (%s -> %s)",
        appointment.id, principal.role, principal.id, previous, appointment.status,
    )
    return appointment


def delete_appointment(principal, appointment_id):
    """Permanently remove an appointment (no soft delete)."""
    appointment = _find(appointment_id)
    policy.ensure_can_mutate(principal, appointment, policy.OP_DELETE)

    db.session.delete(appointment)
    commit_or_rollback('delete appointment')

    logger.info("Appointment %s deleted by %s %s", appointment_id, principal.role, principal.id)
