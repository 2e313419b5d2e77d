from .auth import auth_bp
from .appointment import appointment_bp
from .record import record_bp
from .doctor import doctor_bp
from .admin import admin_bp
from .health import health_bp, api_health_bp

__all__ = ['auth_bp', 'appointment_bp', 'record_bp', 'doctor_bp', 'admin_bp', 'health_bp', 'api_health_bp']
