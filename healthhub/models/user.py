from healthhub.extensions import db, bcrypt
from healthhub.policy import ROLE_ADMIN, ROLE_PATIENT
from .base import TimestampMixin, generate_id, isoformat

# Free-form profile fields stored and returned as-is
PROFILE_FIELDS = (
    'name',
    'phone',
    'avatar',
    'date_of_birth',
    'gender',
    'blood_group',
    'allergies',
    'chronic_conditions',
    'medications',
)


class User(db.Model, TimestampMixin):
    __tablename__ = 'users'

    id = db.Column(db.String(32), primary_key=True, default=generate_id)
    email = db.Column(db.String(120), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    name = db.Column(db.String(120), nullable=False)

    # Role - 'patient' or 'admin', fixed at registration
    role = db.Column(db.String(20), nullable=False, default=ROLE_PATIENT, index=True)

    # Profile
    phone = db.Column(db.String(30))
    avatar = db.Column(db.String(500))
    date_of_birth = db.Column(db.String(20))
    gender = db.Column(db.String(20))
    blood_group = db.Column(db.String(5))
    allergies = db.Column(db.JSON, default=list)
    chronic_conditions = db.Column(db.JSON, default=list)
    medications = db.Column(db.JSON, default=list)

    @staticmethod
    def normalize_email(email):
        return (email or '').strip().lower()

    def set_password(self, password):
        """Hash and set password"""
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        """Check if provided password matches hash"""
        return bcrypt.check_password_hash(self.password_hash, password)

    @property
    def is_admin(self):
        return self.role == ROLE_ADMIN

    def to_dict(self, include_profile=True):
        data = {
            'id': self.id,
            'email': self.email,
            'name': self.name,
            'role': self.role,
            'phone': self.phone,
            'avatar': self.avatar,
            'created_at': isoformat(self.created_at),
        }
        if include_profile:
            data.update({
                'date_of_birth': self.date_of_birth,
                'gender': self.gender,
                'blood_group': self.blood_group,
                'allergies': self.allergies or [],
                'chronic_conditions': self.chronic_conditions or [],
                'medications': self.medications or [],
            })
        return data

    def __repr__(self):
        return f"<User {self.email} ({self.role})>"
