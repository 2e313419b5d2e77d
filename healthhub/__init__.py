from flask import Flask
from .extensions import db, migrate, bcrypt, jwt
import logging
import os

# Setup basic logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s %(levelname)s: %(message)s'
)
logger = logging.getLogger(__name__)


def _setup_file_logging(app):
    from logging.handlers import RotatingFileHandler

    log_dir = app.config.get('LOG_DIR', 'logs')
    if not os.path.exists(log_dir):
        os.mkdir(log_dir)

    file_handler = RotatingFileHandler(
        os.path.join(log_dir, 'app.log'),
        maxBytes=10240000,
        backupCount=10
    )
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
    ))
    file_handler.setLevel(app.config.get('LOG_LEVEL', 'INFO'))
    app.logger.addHandler(file_handler)
    logging.getLogger('healthhub').addHandler(file_handler)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))
    app.logger.info('Application startup')


def _init_database(app):
    """Create tables and seed reference data; fails fast if the database is unreachable"""
    from . import models  # noqa: F401  (register tables with SQLAlchemy)

    if app.config.get('AUTO_CREATE_TABLES', True):
        try:
            db.create_all()
        except Exception as e:
            logger.error("Database unavailable at %s: %s", app.config['SQLALCHEMY_DATABASE_URI'].split('@')[-1], e)
            raise

    if app.config.get('SEED_DEMO_DATA'):
        from .seeds import seed_doctors, seed_demo_users
        seed_doctors()
        seed_demo_users()


def create_app(config_name=None):
    """Create Flask application factory"""
    app = Flask(__name__)

    # Load configuration
    if config_name:
        from healthhub.config import config
        config_class = config.get(config_name, config['default'])
    else:
        from healthhub.config import get_config
        config_class = get_config()
    config_class.validate()
    app.config.from_object(config_class)

    # Initialize extensions first (before error handlers)
    db.init_app(app)
    migrate.init_app(app, db)
    bcrypt.init_app(app)
    jwt.init_app(app)

    # Initialize CORS
    from healthhub.utils.cors import init_cors
    init_cors(app)

    # JSON error responses for the whole API
    from healthhub.errors import register_error_handlers
    register_error_handlers(app, jwt)

    # Setup logging
    if not app.debug and not app.testing:
        _setup_file_logging(app)

    from healthhub.middleware import setup_middleware
    setup_middleware(app)

    with app.app_context():
        # Register blueprints
        from .routes import auth_bp, appointment_bp, record_bp, doctor_bp, admin_bp, health_bp, api_health_bp
        app.register_blueprint(health_bp)  # Register health check first
        app.register_blueprint(api_health_bp)
        app.register_blueprint(auth_bp)
        app.register_blueprint(doctor_bp)
        app.register_blueprint(appointment_bp)
        app.register_blueprint(record_bp)
        app.register_blueprint(admin_bp)

        _init_database(app)

    return app
