from .user import User
from .doctor import Doctor
from .appointment import Appointment
from .medical_record import MedicalRecord

__all__ = ["User", "Doctor", "Appointment", "MedicalRecord"]
