from healthhub.extensions import db
from .base import TimestampMixin, generate_id


class Doctor(db.Model, TimestampMixin):
    """Reference data shown in the directory; doctors never sign in"""
    __tablename__ = 'doctors'

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    specialization = db.Column(db.String(100), nullable=False, index=True)
    qualification = db.Column(db.String(200), nullable=False)
    experience = db.Column(db.Integer, nullable=False)  # years
    rating = db.Column(db.Float, default=0)  # 0-5
    review_count = db.Column(db.Integer, default=0)
    consultation_fee = db.Column(db.Float, nullable=False)
    avatar = db.Column(db.String(500))
    available = db.Column(db.Boolean, default=True)
    next_available = db.Column(db.String(50))  # e.g., "Today, 2:00 PM"
    bio = db.Column(db.Text)
    languages = db.Column(db.JSON, default=list)
    hospital = db.Column(db.String(200), nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'specialization': self.specialization,
            'qualification': self.qualification,
            'experience': self.experience,
            'rating': self.rating,
            'review_count': self.review_count,
            'consultation_fee': self.consultation_fee,
            'avatar': self.avatar,
            'available': self.available,
            'next_available': self.next_available,
            'bio': self.bio,
            'languages': self.languages or [],
            'hospital': self.hospital,
        }

    def __repr__(self):
        return f"<Doctor {self.name} ({self.specialization})>"
