from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from healthhub.services import appointment_service
from healthhub.utils.decorators import current_principal, get_current_user
from healthhub.utils.validation import get_json_body

appointment_bp = Blueprint('appointment', __name__, url_prefix='/api/appointments')


@appointment_bp.route('', methods=['GET'])
@jwt_required()
def list_appointments():
    """
    List appointments, newest first.
    Admins see every appointment; patients see only their own.
    """
    appointments = appointment_service.list_appointments(current_principal())
    return jsonify({
        'success': True,
        'data': [apt.to_dict() for apt in appointments]
    }), 200


@appointment_bp.route('/<string:appointment_id>', methods=['GET'])
@jwt_required()
def get_appointment(appointment_id):
    appointment = appointment_service.get_appointment(current_principal(), appointment_id)
    return jsonify({
        'success': True,
        'data': appointment.to_dict()
    }), 200


@appointment_bp.route('', methods=['POST'])
@jwt_required()
def create_appointment():
    """
    Book an appointment for the signed-in user.
    Body: { "doctor_id", "date", "time", "reason", "notes"? }
    Status always starts as "pending".
    """
    data = get_json_body()
    appointment = appointment_service.create_appointment(get_current_user(), data)
    return jsonify({
        'success': True,
        'data': appointment.to_dict(),
        'message': 'Appointment created successfully'
    }), 201


@appointment_bp.route('/<string:appointment_id>', methods=['PUT'])
@jwt_required()
def update_appointment(appointment_id):
    """
    Update appointment status and/or notes
    Access: the owning patient or an admin
    Status values: pending, approved, rejected, completed, cancelled
    """
    # Body is validated after the existence and policy checks
    data = request.get_json(silent=True)
    appointment = appointment_service.update_appointment(current_principal(), appointment_id, data)
    return jsonify({
        'success': True,
        'data': appointment.to_dict(),
        'message': f'Appointment status is {appointment.status}'
    }), 200


@appointment_bp.route('/<string:appointment_id>', methods=['DELETE'])
@jwt_required()
def delete_appointment(appointment_id):
    """
    Permanently delete an appointment
    Access: the owning patient or an admin
    """
    appointment_service.delete_appointment(current_principal(), appointment_id)
    return jsonify({
        'success': True,
        'message': 'Appointment removed'
    }), 200
