import logging

from sqlalchemy.exc import SQLAlchemyError

from healthhub.errors import UnexpectedError
from healthhub.extensions import db

logger = logging.getLogger(__name__)


def commit_or_rollback(action):
    """Commit the session; on failure roll back and raise UnexpectedError.

    ``action`` describes the write for logs and the error message,
    e.g. 'create appointment'.
    """
    try:
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error("Failed to %s: %s", action, e, exc_info=True)
        raise UnexpectedError(f'Failed to {action}')
