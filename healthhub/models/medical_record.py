from healthhub.extensions import db
from .base import TimestampMixin, generate_id, isoformat, utcnow

RECORD_TYPES = ('lab_report', 'prescription', 'imaging', 'other')


class MedicalRecord(db.Model, TimestampMixin):
    __tablename__ = 'medical_records'

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    patient_id = db.Column(db.String(32), nullable=False, index=True)
    title = db.Column(db.String(200), nullable=False)
    type = db.Column(db.String(20), nullable=False)  # lab_report, prescription, imaging, other
    description = db.Column(db.Text)

    # Opaque reference to the uploaded file; storage lives elsewhere
    file_url = db.Column(db.String(1000))
    file_name = db.Column(db.String(255))
    doctor_name = db.Column(db.String(120))
    uploaded_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'patient_id': self.patient_id,
            'title': self.title,
            'type': self.type,
            'description': self.description,
            'file_url': self.file_url,
            'file_name': self.file_name,
            'doctor_name': self.doctor_name,
            'uploaded_at': isoformat(self.uploaded_at),
        }

    def __repr__(self):
        return f"<MedicalRecord {self.title} ({self.type}) of {self.patient_id}>"
