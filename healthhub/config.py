import os
from datetime import timedelta
from dotenv import load_dotenv

load_dotenv()

DEFAULT_SECRET_KEY = 'dev-secret-key-change-in-production'


def _env_flag(name, default):
    return os.getenv(name, default).lower() == 'true'


def _connect_args(database_uri, timeout):
    """Driver-specific connect timeout (sqlite3 uses 'timeout', libpq 'connect_timeout')"""
    if database_uri.startswith('sqlite'):
        return {'timeout': timeout}
    return {'connect_timeout': timeout}


class Config:
    """Base configuration"""
    SECRET_KEY = os.getenv('SECRET_KEY') or DEFAULT_SECRET_KEY

    # JWT bearer tokens (identity = user id, role in claims)
    JWT_SECRET_KEY = os.getenv('JWT_SECRET_KEY') or SECRET_KEY
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(days=int(os.getenv('JWT_ACCESS_TOKEN_DAYS', '30')))
    JWT_TOKEN_LOCATION = ['headers']

    SQLALCHEMY_DATABASE_URI = os.getenv('DATABASE_URL', 'sqlite:///healthhub.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Bounded wait when the database is first reached at startup (seconds)
    DB_CONNECT_TIMEOUT = int(os.getenv('DB_CONNECT_TIMEOUT', '5'))
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
        'connect_args': _connect_args(SQLALCHEMY_DATABASE_URI, DB_CONNECT_TIMEOUT),
    }

    AUTO_CREATE_TABLES = _env_flag('AUTO_CREATE_TABLES', 'true')
    SEED_DEMO_DATA = _env_flag('SEED_DEMO_DATA', 'true')

    # Registration may only create patients unless explicitly enabled
    ALLOW_ADMIN_SIGNUP = _env_flag('ALLOW_ADMIN_SIGNUP', 'false')

    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv(
            'CORS_ORIGINS',
            'http://localhost:5173,http://localhost:8081'
        ).split(',')
        if origin.strip()
    ]

    # Logging
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')

    @classmethod
    def validate(cls):
        """Hook for environment-specific sanity checks"""


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False

    SEED_DEMO_DATA = _env_flag('SEED_DEMO_DATA', 'false')

    # Database connection pool for production
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 3600,
        'pool_size': 20,
        'max_overflow': 40,
        'connect_args': _connect_args(Config.SQLALCHEMY_DATABASE_URI, Config.DB_CONNECT_TIMEOUT),
    }

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'WARNING')

    @classmethod
    def validate(cls):
        """Ensure SECRET_KEY is set"""
        secret_key = os.getenv('SECRET_KEY')
        if not secret_key or secret_key == DEFAULT_SECRET_KEY:
            raise ValueError("SECRET_KEY environment variable must be set in production and must not be the default value")


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    DEBUG = True
    SECRET_KEY = 'test-secret-key'
    JWT_SECRET_KEY = 'test-jwt-secret-key-with-enough-length'
    SQLALCHEMY_DATABASE_URI = os.getenv('TEST_DATABASE_URL', 'sqlite:///:memory:')
    SQLALCHEMY_ENGINE_OPTIONS = {}
    BCRYPT_LOG_ROUNDS = 4
    SEED_DEMO_DATA = False
    ALLOW_ADMIN_SIGNUP = False


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config():
    """Get configuration based on FLASK_ENV"""
    env = os.getenv('FLASK_ENV', 'development')
    return config.get(env, config['default'])
