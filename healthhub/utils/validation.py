from flask import request

from healthhub.errors import ValidationError


def get_json_body():
    """Return the request's JSON object or raise ValidationError"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError('Request body must be JSON')
    return data


def _is_blank(value):
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_fields(data, fields):
    """Raise ValidationError naming the first missing or blank field"""
    for field in fields:
        if _is_blank(data.get(field)):
            raise ValidationError(f'Field "{field}" is required', field=field)


def optional_string(data, field):
    value = data.get(field)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f'Field "{field}" must be a string', field=field)
    return value.strip()


def check_lengths(data, limits):
    """Raise ValidationError for string fields longer than their column"""
    for field, limit in limits.items():
        value = data.get(field)
        if isinstance(value, str) and len(value.strip()) > limit:
            raise ValidationError(f'Field "{field}" must be at most {limit} characters', field=field)
