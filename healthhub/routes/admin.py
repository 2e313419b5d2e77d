from datetime import date

from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required
from sqlalchemy import func, or_

from healthhub import lifecycle
from healthhub.errors import NotFoundError
from healthhub.extensions import db
from healthhub.models import Appointment, Doctor, User
from healthhub.policy import ROLE_ADMIN, ROLE_PATIENT
from healthhub.utils.decorators import require_role

admin_bp = Blueprint('admin', __name__, url_prefix='/api/admin')


@admin_bp.route('/patients', methods=['GET'])
@jwt_required()
@require_role(ROLE_ADMIN)
def list_patients():
    """
    List patients with how many appointments each has
    Query params: search (name or email, optional)
    Access: admin
    """
    query = User.query.filter(User.role == ROLE_PATIENT)
    search = (request.args.get('search', type=str) or '').strip()
    if search:
        pattern = f'%{search}%'
        query = query.filter(or_(User.name.ilike(pattern), User.email.ilike(pattern)))

    patients = query.order_by(User.name.asc()).all()

    counts = dict(
        db.session.query(Appointment.patient_id, func.count(Appointment.id))
        .group_by(Appointment.patient_id)
        .all()
    )

    result = []
    for patient in patients:
        item = patient.to_dict()
        item['appointment_count'] = counts.get(patient.id, 0)
        result.append(item)

    return jsonify({
        'success': True,
        'data': result
    }), 200


@admin_bp.route('/patients/<string:patient_id>', methods=['GET'])
@jwt_required()
@require_role(ROLE_ADMIN)
def get_patient(patient_id):
    """Patient profile plus their appointments. Access: admin"""
    patient = db.session.get(User, patient_id)
    if not patient or patient.role != ROLE_PATIENT:
        raise NotFoundError('Patient not found')

    appointments = Appointment.query.filter_by(patient_id=patient.id).order_by(
        Appointment.created_at.desc(),
        Appointment.id.desc()
    ).all()

    data = patient.to_dict()
    data['appointments'] = [apt.to_dict() for apt in appointments]
    return jsonify({
        'success': True,
        'data': data
    }), 200


@admin_bp.route('/stats', methods=['GET'])
@jwt_required()
@require_role(ROLE_ADMIN)
def dashboard_stats():
    """Counts for the admin dashboard. Access: admin"""
    by_status = dict(
        db.session.query(Appointment.status, func.count(Appointment.id))
        .group_by(Appointment.status)
        .all()
    )
    today = date.today().isoformat()

    return jsonify({
        'success': True,
        'data': {
            'total_appointments': sum(by_status.values()),
            'pending_appointments': by_status.get(lifecycle.PENDING, 0),
            'approved_appointments': by_status.get(lifecycle.APPROVED, 0),
            'completed_appointments': by_status.get(lifecycle.COMPLETED, 0),
            'today_appointments': Appointment.query.filter(Appointment.date == today).count(),
            'total_patients': User.query.filter(User.role == ROLE_PATIENT).count(),
            'total_doctors': Doctor.query.count(),
        }
    }), 200
