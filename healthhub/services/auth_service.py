"""
Registration, credential checks and token issuance.
"""
import logging

from flask_jwt_extended import create_access_token

from healthhub.errors import AuthenticationError, ValidationError
from healthhub.extensions import db
from healthhub.models import User
from healthhub.models.user import PROFILE_FIELDS
from healthhub.policy import ROLE_ADMIN, ROLE_PATIENT, ROLES
from healthhub.utils.database import commit_or_rollback
from healthhub.utils.validation import optional_string, require_fields

logger = logging.getLogger(__name__)

_LIST_FIELDS = ('allergies', 'chronic_conditions', 'medications')


def issue_token(user):
    """Access token with the user id as identity and the role as a claim"""
    return create_access_token(
        identity=user.id,
        additional_claims={'role': user.role},
    )


def register_user(data, allow_admin=False):
    require_fields(data, ('email', 'password', 'name'))
    if not isinstance(data['password'], str) or not isinstance(data['email'], str):
        raise ValidationError('Email and password must be strings')

    role = data.get('role') or ROLE_PATIENT
    if role not in ROLES:
        raise ValidationError(f'Invalid role. Valid values: {", ".join(ROLES)}', field='role')
    if role == ROLE_ADMIN and not allow_admin:
        raise ValidationError('Admin accounts cannot be self-registered', field='role')

    email = User.normalize_email(data['email'])
    if User.query.filter_by(email=email).first():
        raise ValidationError('User already exists', field='email')

    user = User(
        email=email,
        name=optional_string(data, 'name'),
        phone=optional_string(data, 'phone'),
        role=role,
    )
    user.set_password(data['password'])
    db.session.add(user)
    commit_or_rollback('register user')

    logger.info("Registered %s %s", user.role, user.id)
    return user


def authenticate(email, password):
    if not isinstance(email, str) or not isinstance(password, str) or not email or not password:
        raise ValidationError('Email and password required')

    user = User.query.filter_by(email=User.normalize_email(email)).first()
    if not user or not user.check_password(password):
        raise AuthenticationError('Invalid email or password')
    return user


def update_profile(user, data):
    """Pass-through update of profile fields; empty values are ignored"""
    for field in PROFILE_FIELDS:
        if field in _LIST_FIELDS:
            value = data.get(field)
            if value in (None, '', []):
                continue
            if not isinstance(value, list):
                raise ValidationError(f'Field "{field}" must be a list', field=field)
            setattr(user, field, [str(item) for item in value])
        else:
            value = optional_string(data, field)
            if not value:
                continue
            setattr(user, field, value)

    commit_or_rollback('update profile')
    return user
