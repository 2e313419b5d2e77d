from flask import Blueprint, jsonify, request
from sqlalchemy import or_

from healthhub.errors import NotFoundError
from healthhub.extensions import db
from healthhub.models import Doctor

doctor_bp = Blueprint('doctor', __name__, url_prefix='/api/doctors')


@doctor_bp.route('', methods=['GET'])
def list_doctors():
    """
    List doctors
    Query params: specialization (optional, exact match)
    """
    query = Doctor.query
    specialization = request.args.get('specialization', type=str)
    if specialization:
        query = query.filter(Doctor.specialization == specialization)

    doctors = query.order_by(Doctor.name.asc()).all()
    return jsonify({
        'success': True,
        'data': [doctor.to_dict() for doctor in doctors]
    }), 200


@doctor_bp.route('/search', methods=['GET'])
def search_doctors():
    """
    Search doctors by name, specialization or hospital
    Query params: q
    """
    term = (request.args.get('q', type=str) or '').strip()
    query = Doctor.query
    if term:
        pattern = f'%{term}%'
        query = query.filter(or_(
            Doctor.name.ilike(pattern),
            Doctor.specialization.ilike(pattern),
            Doctor.hospital.ilike(pattern),
        ))

    doctors = query.order_by(Doctor.name.asc()).all()
    return jsonify({
        'success': True,
        'data': [doctor.to_dict() for doctor in doctors]
    }), 200


@doctor_bp.route('/<string:doctor_id>', methods=['GET'])
def get_doctor(doctor_id):
    doctor = db.session.get(Doctor, doctor_id)
    if not doctor:
        raise NotFoundError('Doctor not found')
    return jsonify({
        'success': True,
        'data': doctor.to_dict()
    }), 200
