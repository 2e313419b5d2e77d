"""
Appointment lifecycle.

An appointment is created ``pending``. The designed workflow is a
request/approve one: an admin approves or rejects a pending appointment,
and its owner (or an admin) may cancel it. Every other status is terminal.

The generic update path is deliberately wider than that: it accepts any
known status from any prior state and only the policy's ownership/role
check applies. Updates outside the designed transitions are logged for
review, not rejected.
"""
import logging

from healthhub import policy
from healthhub.errors import ValidationError

logger = logging.getLogger(__name__)

PENDING = 'pending'
APPROVED = 'approved'
REJECTED = 'rejected'
COMPLETED = 'completed'
CANCELLED = 'cancelled'

STATUSES = (PENDING, APPROVED, REJECTED, COMPLETED, CANCELLED)
INITIAL_STATUS = PENDING
TERMINAL_STATUSES = frozenset((APPROVED, REJECTED, COMPLETED, CANCELLED))

# (from, to) -> actors offered the transition
_ADMIN = 'admin'
_OWNER = 'owner'
DESIGNED_TRANSITIONS = {
    (PENDING, APPROVED): {_ADMIN},
    (PENDING, REJECTED): {_ADMIN},
    (PENDING, CANCELLED): {_ADMIN, _OWNER},
}


def _status_of(appointment):
    if isinstance(appointment, dict):
        return appointment.get('status')
    return appointment.status


def is_valid_status(status):
    return status in STATUSES


def validate_status(status, field='status'):
    if not is_valid_status(status):
        raise ValidationError(
            f'Invalid status. Valid values: {", ".join(STATUSES)}',
            field=field,
        )
    return status


def initial_status(requested=None):
    """Creation always starts at pending, whatever the caller asked for"""
    if requested and requested != INITIAL_STATUS:
        logger.info("Ignoring requested initial status %r", requested)
    return INITIAL_STATUS


def is_terminal(status):
    return status in TERMINAL_STATUSES


def _actors(principal, appointment):
    actors = set()
    if principal is None:
        return actors
    if principal.is_admin:
        actors.add(_ADMIN)
    if policy.is_owner(principal, appointment):
        actors.add(_OWNER)
    return actors


def is_designed_transition(principal, appointment, new_status):
    allowed = DESIGNED_TRANSITIONS.get((_status_of(appointment), new_status))
    if not allowed:
        return False
    return bool(allowed & _actors(principal, appointment))


def next_actions(principal, appointment):
    """Statuses a client should offer this principal for the appointment.

    Admins see approve/reject on pending appointments; a non-admin owner
    sees cancel. Nothing is offered on terminal appointments.
    """
    current = _status_of(appointment)
    if principal is None or is_terminal(current):
        return []
    if principal.is_admin:
        return [APPROVED, REJECTED]
    if policy.is_owner(principal, appointment):
        return [CANCELLED]
    return []


def apply_update(principal, appointment, status=None, notes=None):
    """Apply a status and/or notes update in place.

    Empty values leave the current field untouched. Returns the previous
    status.
    """
    previous = appointment.status
    if status:
        validate_status(status)
        if status != previous and not is_designed_transition(principal, appointment, status):
            logger.warning(
                "Appointment %s moved %s -> %s by %s %s outside the designed workflow",
                appointment.id, previous, status, principal.role, principal.id,
            )
        appointment.status = status
    if notes:
        appointment.notes = notes
    return previous
