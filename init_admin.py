#!/usr/bin/env python3
"""
Create administrator accounts (self-registration only creates patients).
Run with: python init_admin.py [email] [password] [name]
"""
import sys

from healthhub import create_app
from healthhub.extensions import db
from healthhub.models import User
from healthhub.policy import ROLE_ADMIN

# Default admin users to create
DEFAULT_ADMINS = [
    {
        'email': 'admin@healthhub.com',
        'password': 'admin123',
        'name': 'HealthHub Admin',
        'phone': ''
    },
]


def create_admins(admins):
    """Create admin users that do not exist yet"""
    app = create_app()

    with app.app_context():
        print("=" * 60)
        print("Initializing Admin Users")
        print("=" * 60)
        print()

        created_count = 0

        for admin_data in admins:
            email = User.normalize_email(admin_data['email'])

            existing = User.query.filter_by(email=email).first()
            if existing:
                print(f"  - '{email}' already exists as {existing.role} (skipping)")
                continue

            admin = User(
                email=email,
                name=admin_data['name'],
                role=ROLE_ADMIN,
                phone=admin_data.get('phone') or None,
            )
            admin.set_password(admin_data['password'])

            db.session.add(admin)
            created_count += 1
            print(f"  ✓ Created: {email} - Password: {admin_data['password']}")

        db.session.commit()

        print()
        print("=" * 60)
        print(f"✅ Created {created_count} new admin user(s)")
        print("=" * 60)
        print("\n⚠️  IMPORTANT: Change passwords after first login!")


if __name__ == '__main__':
    if len(sys.argv) >= 3:
        create_admins([{
            'email': sys.argv[1],
            'password': sys.argv[2],
            'name': sys.argv[3] if len(sys.argv) > 3 else 'Administrator',
        }])
    else:
        create_admins(DEFAULT_ADMINS)
