from flask import Blueprint, current_app, jsonify
from flask_jwt_extended import jwt_required

from healthhub.services import auth_service
from healthhub.utils.decorators import get_current_user
from healthhub.utils.validation import get_json_body

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')


@auth_bp.route('/register', methods=['POST'])
def register():
    """
    Register a new account and return it with an access token.
    Body: { "email", "password", "name", "phone"?, "role"? }
    """
    data = get_json_body()
    user = auth_service.register_user(
        data,
        allow_admin=current_app.config.get('ALLOW_ADMIN_SIGNUP', False),
    )

    return jsonify({
        'success': True,
        'user': user.to_dict(include_profile=False),
        'token': auth_service.issue_token(user),
    }), 201


@auth_bp.route('/login', methods=['POST'])
def login():
    """Login endpoint - verifies credentials and returns a JWT"""
    data = get_json_body()
    user = auth_service.authenticate(data.get('email'), data.get('password'))

    return jsonify({
        'success': True,
        'user': user.to_dict(include_profile=False),
        'token': auth_service.issue_token(user),
    }), 200


@auth_bp.route('/logout', methods=['POST'])
@jwt_required()
def logout():
    """Stateless JWT: the client discards its token"""
    return jsonify({
        'success': True,
        'message': 'Logged out successfully (delete tokens on client)'
    }), 200


@auth_bp.route('/profile', methods=['GET'])
@jwt_required()
def get_profile():
    """Get the signed-in user's profile (never includes the password)"""
    user = get_current_user()
    return jsonify({
        'success': True,
        'data': user.to_dict()
    }), 200


@auth_bp.route('/profile', methods=['PUT'])
@jwt_required()
def update_profile():
    """
    Update profile fields. Email and role cannot be changed here.
    """
    user = auth_service.update_profile(get_current_user(), get_json_body())
    return jsonify({
        'success': True,
        'data': user.to_dict(),
        'message': 'Profile updated successfully'
    }), 200
