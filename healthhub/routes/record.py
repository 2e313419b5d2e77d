from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from healthhub.services import record_service
from healthhub.utils.decorators import current_principal
from healthhub.utils.validation import get_json_body

record_bp = Blueprint('record', __name__, url_prefix='/api/records')


@record_bp.route('', methods=['GET'])
@jwt_required()
def list_records():
    """List the signed-in patient's medical records, latest upload first"""
    records = record_service.list_records(current_principal())
    return jsonify({
        'success': True,
        'data': [record.to_dict() for record in records]
    }), 200


@record_bp.route('/<string:record_id>', methods=['GET'])
@jwt_required()
def get_record(record_id):
    record = record_service.get_record(current_principal(), record_id)
    return jsonify({
        'success': True,
        'data': record.to_dict()
    }), 200


@record_bp.route('', methods=['POST'])
@jwt_required()
def create_record():
    """
    Add a medical record reference.
    Body: { "title", "type", "description"?, "file_url"?, "file_name"?, "doctor_name"? }
    type: lab_report, prescription, imaging, other
    """
    record = record_service.create_record(current_principal(), get_json_body())
    return jsonify({
        'success': True,
        'data': record.to_dict(),
        'message': 'Record created successfully'
    }), 201


@record_bp.route('/<string:record_id>', methods=['DELETE'])
@jwt_required()
def delete_record(record_id):
    """Delete a medical record. Only its owner may do this."""
    record_service.delete_record(current_principal(), record_id)
    return jsonify({
        'success': True,
        'message': 'Record removed'
    }), 200
