from healthhub.extensions import db
from healthhub.lifecycle import INITIAL_STATUS
from .base import TimestampMixin, generate_id, isoformat


class Appointment(db.Model, TimestampMixin):
    __tablename__ = 'appointments'

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    patient_id = db.Column(db.String(32), nullable=False, index=True)

    # Snapshots taken at creation, never refreshed
    patient_name = db.Column(db.String(120))
    patient_email = db.Column(db.String(120))
    doctor_id = db.Column(db.String(64), nullable=False, index=True)
    doctor_name = db.Column(db.String(120))
    doctor_specialization = db.Column(db.String(100))

    date = db.Column(db.String(50), nullable=False)  # e.g., "2024-06-01"
    time = db.Column(db.String(50), nullable=False)  # e.g., "10:00 AM"

    # Status: pending, approved, rejected, completed, cancelled
    status = db.Column(db.String(20), nullable=False, default=INITIAL_STATUS, index=True)
    reason = db.Column(db.Text, nullable=False)
    notes = db.Column(db.Text)

    def to_dict(self):
        return {
            'id': self.id,
            'patient_id': self.patient_id,
            'patient_name': self.patient_name,
            'patient_email': self.patient_email,
            'doctor_id': self.doctor_id,
            'doctor_name': self.doctor_name,
            'doctor_specialization': self.doctor_specialization,
            'date': self.date,
            'time': self.time,
            'status': self.status,
            'reason': self.reason,
            'notes': self.notes,
            'created_at': isoformat(self.created_at),
            'updated_at': isoformat(self.updated_at),
        }

    def __repr__(self):
        return f"<Appointment {self.patient_id} - {self.doctor_name} on {self.date} {self.time}>"
