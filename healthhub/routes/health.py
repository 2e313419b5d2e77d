"""
Health check endpoints for monitoring and load balancers
"""
from flask import Blueprint, jsonify
from healthhub.extensions import db
from healthhub.models.base import utcnow

health_bp = Blueprint('health', __name__, url_prefix='/health')


@health_bp.route('', methods=['GET'])
@health_bp.route('/ping', methods=['GET'])
def health_check():
    """Basic health check - no database connection"""
    return jsonify({
        'status': 'healthy',
        'timestamp': utcnow().isoformat(),
        'service': 'healthhub-api'
    }), 200


@health_bp.route('/ready', methods=['GET'])
def readiness_check():
    """Readiness check - includes database connection"""
    try:
        db.session.execute(db.text('SELECT 1'))
        db_status = 'connected'
    except Exception as e:
        db_status = f'error: {e.__class__.__name__}'

    return jsonify({
        'status': 'ready' if db_status == 'connected' else 'not_ready',
        'database': db_status,
        'timestamp': utcnow().isoformat()
    }), 200 if db_status == 'connected' else 503


@health_bp.route('/live', methods=['GET'])
def liveness_check():
    """Liveness check for Kubernetes/containers"""
    return jsonify({
        'status': 'alive',
        'timestamp': utcnow().isoformat()
    }), 200


# Path used by the web frontend
api_health_bp = Blueprint('api_health', __name__, url_prefix='/api/health')


@api_health_bp.route('', methods=['GET'])
def api_health():
    return jsonify({'status': 'ok', 'message': 'Server is running'}), 200
