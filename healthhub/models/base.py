import uuid
from datetime import datetime, timezone

from healthhub.extensions import db


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def generate_id():
    return uuid.uuid4().hex


def isoformat(value):
    return value.isoformat() if value else None


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=utcnow, onupdate=utcnow, nullable=False)
