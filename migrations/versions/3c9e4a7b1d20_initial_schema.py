"""Initial schema: users, doctors, appointments, medical records

Revision ID: 3c9e4a7b1d20
Revises:
Create Date: 2026-10-19 10:00:00

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c9e4a7b1d20'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def upgrade():
    op.create_table(
        'users',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('email', sa.String(length=120), nullable=False),
        sa.Column('password_hash', sa.String(length=255), nullable=False),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('role', sa.String(length=20), nullable=False),
        sa.Column('phone', sa.String(length=30), nullable=True),
        sa.Column('avatar', sa.String(length=500), nullable=True),
        sa.Column('date_of_birth', sa.String(length=20), nullable=True),
        sa.Column('gender', sa.String(length=20), nullable=True),
        sa.Column('blood_group', sa.String(length=5), nullable=True),
        sa.Column('allergies', sa.JSON(), nullable=True),
        sa.Column('chronic_conditions', sa.JSON(), nullable=True),
        sa.Column('medications', sa.JSON(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_role', 'users', ['role'])

    op.create_table(
        'doctors',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('name', sa.String(length=120), nullable=False),
        sa.Column('email', sa.String(length=120), nullable=False, unique=True),
        sa.Column('specialization', sa.String(length=100), nullable=False),
        sa.Column('qualification', sa.String(length=200), nullable=False),
        sa.Column('experience', sa.Integer(), nullable=False),
        sa.Column('rating', sa.Float(), nullable=True),
        sa.Column('review_count', sa.Integer(), nullable=True),
        sa.Column('consultation_fee', sa.Float(), nullable=False),
        sa.Column('avatar', sa.String(length=500), nullable=True),
        sa.Column('available', sa.Boolean(), nullable=True),
        sa.Column('next_available', sa.String(length=50), nullable=True),
        sa.Column('bio', sa.Text(), nullable=True),
        sa.Column('languages', sa.JSON(), nullable=True),
        sa.Column('hospital', sa.String(length=200), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_doctors_specialization', 'doctors', ['specialization'])

    op.create_table(
        'appointments',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('patient_id', sa.String(length=32), nullable=False),
        sa.Column('patient_name', sa.String(length=120), nullable=True),
        sa.Column('patient_email', sa.String(length=120), nullable=True),
        sa.Column('doctor_id', sa.String(length=64), nullable=False),
        sa.Column('doctor_name', sa.String(length=120), nullable=True),
        sa.Column('doctor_specialization', sa.String(length=100), nullable=True),
        sa.Column('date', sa.String(length=50), nullable=False),
        sa.Column('time', sa.String(length=50), nullable=False),
        sa.Column('status', sa.String(length=20), nullable=False, server_default='pending'),
        sa.Column('reason', sa.Text(), nullable=False),
        sa.Column('notes', sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_appointments_patient_id', 'appointments', ['patient_id'])
    op.create_index('ix_appointments_doctor_id', 'appointments', ['doctor_id'])
    op.create_index('ix_appointments_status', 'appointments', ['status'])

    op.create_table(
        'medical_records',
        sa.Column('id', sa.String(length=32), primary_key=True),
        sa.Column('patient_id', sa.String(length=32), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('type', sa.String(length=20), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('file_url', sa.String(length=1000), nullable=True),
        sa.Column('file_name', sa.String(length=255), nullable=True),
        sa.Column('doctor_name', sa.String(length=120), nullable=True),
        sa.Column('uploaded_at', sa.DateTime(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_medical_records_patient_id', 'medical_records', ['patient_id'])


def downgrade():
    op.drop_index('ix_medical_records_patient_id', table_name='medical_records')
    op.drop_table('medical_records')
    op.drop_index('ix_appointments_status', table_name='appointments')
    op.drop_index('ix_appointments_doctor_id', table_name='appointments')
    op.drop_index('ix_appointments_patient_id', table_name='appointments')
    op.drop_table('appointments')
    op.drop_index('ix_doctors_specialization', table_name='doctors')
    op.drop_table('doctors')
    op.drop_index('ix_users_role', table_name='users')
    op.drop_index('ix_users_email', table_name='users')
    op.drop_table('users')
