"""
Database seed data: runs on app startup and only fills what is missing.
"""
import logging

from healthhub.extensions import db
from healthhub.models import Doctor, User
from healthhub.policy import ROLE_ADMIN, ROLE_PATIENT

logger = logging.getLogger(__name__)

DOCTORS = [
    {
        "name": "Dr. Sarah Johnson",
        "email": "sarah.johnson@healthhub.com",
        "specialization": "Cardiology",
        "qualification": "MBBS, MD (Cardiology)",
        "experience": 15,
        "rating": 4.9,
        "review_count": 245,
        "consultation_fee": 150,
        "available": True,
        "next_available": "Today, 2:00 PM",
        "bio": "Specialist in cardiovascular diseases with over 15 years of experience.",
        "languages": ["English", "Spanish"],
        "hospital": "City General Hospital",
    },
    {
        "name": "Dr. Michael Chen",
        "email": "michael.chen@healthhub.com",
        "specialization": "Orthopedics",
        "qualification": "MBBS, MS (Orthopedics)",
        "experience": 12,
        "rating": 4.8,
        "review_count": 189,
        "consultation_fee": 120,
        "available": True,
        "next_available": "Tomorrow, 10:00 AM",
        "bio": "Expert in joint replacement and sports injuries.",
        "languages": ["English", "Mandarin"],
        "hospital": "Metro Orthopedic Center",
    },
    {
        "name": "Dr. Emily Davis",
        "email": "emily.davis@healthhub.com",
        "specialization": "Pediatrics",
        "qualification": "MBBS, MD (Pediatrics)",
        "experience": 10,
        "rating": 4.9,
        "review_count": 312,
        "consultation_fee": 100,
        "available": True,
        "next_available": "Today, 4:00 PM",
        "bio": "Dedicated to child healthcare and development.",
        "languages": ["English"],
        "hospital": "Children's Medical Center",
    },
    {
        "name": "Dr. James Wilson",
        "email": "james.wilson@healthhub.com",
        "specialization": "Dermatology",
        "qualification": "MBBS, MD (Dermatology)",
        "experience": 8,
        "rating": 4.7,
        "review_count": 156,
        "consultation_fee": 110,
        "available": False,
        "next_available": "Next week",
        "bio": "Specialist in skin conditions and cosmetic procedures.",
        "languages": ["English", "French"],
        "hospital": "Skin Care Clinic",
    },
    {
        "name": "Dr. Priya Sharma",
        "email": "priya.sharma@healthhub.com",
        "specialization": "Neurology",
        "qualification": "MBBS, DM (Neurology)",
        "experience": 14,
        "rating": 4.9,
        "review_count": 278,
        "consultation_fee": 180,
        "available": True,
        "next_available": "Tomorrow, 3:00 PM",
        "bio": "Expert in neurological disorders and brain health.",
        "languages": ["English", "Hindi"],
        "hospital": "Neuro Care Hospital",
    },
    {
        "name": "Dr. David Brown",
        "email": "david.brown@healthhub.com",
        "specialization": "General Medicine",
        "qualification": "MBBS, MD",
        "experience": 20,
        "rating": 4.8,
        "review_count": 423,
        "consultation_fee": 80,
        "available": True,
        "next_available": "Today, 11:00 AM",
        "bio": "General physician with two decades of experience.",
        "languages": ["English"],
        "hospital": "Community Health Center",
    },
]

DEMO_USERS = [
    {
        "email": "patient@demo.com",
        "password": "demo123",
        "name": "Demo Patient",
        "role": ROLE_PATIENT,
        "phone": "555-0100",
    },
    {
        "email": "admin@demo.com",
        "password": "demo123",
        "name": "Demo Admin",
        "role": ROLE_ADMIN,
        "phone": "555-0101",
    },
]


def seed_doctors():
    """Create the doctor directory if it is empty."""
    try:
        if Doctor.query.count() == 0:
            for doc in DOCTORS:
                db.session.add(Doctor(**doc))
            db.session.commit()
            logger.info("Seeded %d doctors", len(DOCTORS))
        else:
            logger.info("Doctors already exist in database")
    except Exception as e:
        db.session.rollback()
        logger.warning("Doctor seeding skipped: %s", e)


def seed_demo_users():
    """Create the demo patient and admin accounts when absent."""
    try:
        created = 0
        for data in DEMO_USERS:
            if User.query.filter_by(email=data["email"]).first():
                continue
            user = User(
                email=data["email"],
                name=data["name"],
                role=data["role"],
                phone=data["phone"],
            )
            user.set_password(data["password"])
            db.session.add(user)
            created += 1
        db.session.commit()
        if created:
            logger.info("Created %d demo user(s) (password: demo123)", created)
    except Exception as e:
        db.session.rollback()
        logger.warning("Demo user seeding skipped: %s", e)
