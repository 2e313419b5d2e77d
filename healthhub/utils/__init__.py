from .decorators import require_role, get_current_user, current_principal
from .validation import get_json_body, require_fields, optional_string
from .database import commit_or_rollback

__all__ = [
    # Decorators
    "require_role",
    "get_current_user",
    "current_principal",
    # Validation
    "get_json_body",
    "require_fields",
    "optional_string",
    # Database
    "commit_or_rollback",
]
