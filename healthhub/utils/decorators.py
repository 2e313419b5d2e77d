from functools import wraps

from flask import g
from flask_jwt_extended import get_jwt_identity

from healthhub.errors import AuthenticationError, AuthorizationError
from healthhub.extensions import db
from healthhub.models import User
from healthhub.policy import Principal


def get_current_user():
    """
    Load the user behind the request's JWT.
    Must be called from a route protected by @jwt_required().
    """
    if 'current_user' in g:
        return g.current_user

    user_id = get_jwt_identity()
    user = db.session.get(User, str(user_id)) if user_id else None
    if not user:
        # Token is valid but the account no longer exists
        raise AuthenticationError('Authentication required')

    g.current_user = user
    return user


def current_principal():
    return Principal.from_user(get_current_user())


def require_role(*roles):
    """
    Decorator to require specific roles
    Usage: @require_role('admin')
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            """
            Require that the current JWT-authenticated user has one of the given roles.
            Must be used together with @jwt_required() on the route.
            """
            user = get_current_user()
            if user.role not in roles:
                raise AuthorizationError(f'Permission denied. Required roles: {", ".join(roles)}')
            return f(*args, **kwargs)
        return decorated_function
    return decorator
