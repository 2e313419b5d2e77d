"""
Medical record operations behind /api/records. Owner-only throughout.
"""
import logging

from healthhub import policy
from healthhub.errors import NotFoundError, ValidationError
from healthhub.extensions import db
from healthhub.models import MedicalRecord
from healthhub.models.medical_record import RECORD_TYPES
from healthhub.utils.database import commit_or_rollback
from healthhub.utils.validation import optional_string, require_fields

logger = logging.getLogger(__name__)


def _find(record_id):
    record = db.session.get(MedicalRecord, str(record_id))
    if not record:
        raise NotFoundError('Record not found')
    return record


def list_records(principal):
    query = policy.scope_record_query(principal, MedicalRecord.query, MedicalRecord)
    return query.order_by(
        MedicalRecord.uploaded_at.desc(),
        MedicalRecord.id.desc()
    ).all()


def get_record(principal, record_id):
    record = _find(record_id)
    policy.ensure_record_owner(principal, record)
    return record


def create_record(principal, data):
    require_fields(data, ('title', 'type'))
    if data['type'] not in RECORD_TYPES:
        raise ValidationError(
            f'Invalid type. Valid values: {", ".join(RECORD_TYPES)}',
            field='type',
        )

    record = MedicalRecord(
        patient_id=principal.id,
        title=optional_string(data, 'title'),
        type=data['type'],
        description=optional_string(data, 'description'),
        file_url=optional_string(data, 'file_url'),
        file_name=optional_string(data, 'file_name'),
        doctor_name=optional_string(data, 'doctor_name'),
    )
    db.session.add(record)
    commit_or_rollback('create record')

    logger.info("Medical record %s (%s) added by %s", record.id, record.type, principal.id)
    return record


def delete_record(principal, record_id):
    record = _find(record_id)
    policy.ensure_record_owner(principal, record)

    db.session.delete(record)
    commit_or_rollback('delete record')

    logger.info("Medical record %s deleted by %s", record_id, principal.id)
