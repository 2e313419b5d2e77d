"""
Authorization and ownership policy.

Every listing and mutating operation on appointments and medical records
asks this module whether the principal may proceed. The rules:

- an admin may read and mutate any appointment
- a patient may read and mutate only appointments they own
- medical records are owner-only, admins included

Records may be model instances or plain dicts (client-side cache); both
expose the owner as ``patient_id``.
"""
from collections import namedtuple

from healthhub.errors import AuthenticationError, AuthorizationError

ROLE_PATIENT = 'patient'
ROLE_ADMIN = 'admin'
ROLES = (ROLE_PATIENT, ROLE_ADMIN)

OP_UPDATE = 'update'
OP_DELETE = 'delete'
MUTATIONS = (OP_UPDATE, OP_DELETE)


class Principal(namedtuple('Principal', ['id', 'role'])):
    """The authenticated actor behind a request"""
    __slots__ = ()

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    @classmethod
    def from_user(cls, user):
        if isinstance(user, dict):
            return cls(str(user['id']), user.get('role', ROLE_PATIENT))
        return cls(str(user.id), user.role)


def owner_of(record):
    if isinstance(record, dict):
        return record.get('patient_id')
    return getattr(record, 'patient_id', None)


def is_owner(principal, record):
    owner = owner_of(record)
    return owner is not None and str(owner) == str(principal.id)


def _require_principal(principal):
    if principal is None:
        raise AuthenticationError()


# -- appointments ----------------------------------------------------------

def can_read(principal, record):
    if principal is None:
        return False
    return principal.is_admin or is_owner(principal, record)


def can_mutate(principal, record, operation=OP_UPDATE):
    if operation not in MUTATIONS:
        raise ValueError(f"Unknown operation: {operation}")
    if principal is None:
        return False
    return principal.is_admin or is_owner(principal, record)


def ensure_can_read(principal, record):
    _require_principal(principal)
    if not can_read(principal, record):
        raise AuthorizationError()


def ensure_can_mutate(principal, record, operation=OP_UPDATE):
    _require_principal(principal)
    if not can_mutate(principal, record, operation):
        raise AuthorizationError()


def scope_query(principal, query, model):
    """Restrict a listing query to the rows the principal may read"""
    _require_principal(principal)
    if principal.is_admin:
        return query
    return query.filter(model.patient_id == principal.id)


def filter_visible(principal, records):
    return [record for record in records if can_read(principal, record)]


# -- medical records -------------------------------------------------------

def can_access_record(principal, record):
    # No admin override for medical records
    return principal is not None and is_owner(principal, record)


def ensure_record_owner(principal, record):
    _require_principal(principal)
    if not can_access_record(principal, record):
        raise AuthorizationError()


def scope_record_query(principal, query, model):
    _require_principal(principal)
    return query.filter(model.patient_id == principal.id)
