import os
from datetime import timedelta

class Config:
    """Base configuration"""

    # Server Settings
    PORT = int(os.environ.get('PORT', 3000))
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Database Settings
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Profile seed file, read once when the store is empty
    BOOTSTRAP_FILE = os.environ.get('PROFILE_BOOTSTRAP_FILE', 'data.json')

    # Upload Settings
    UPLOAD_FOLDER = os.environ.get('UPLOAD_FOLDER', 'static/uploads')
    # Public URL of UPLOAD_FOLDER, change both together
    UPLOAD_URL_PATH = os.environ.get('UPLOAD_URL_PATH', '/static/uploads')

    # Admin Settings
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD', 'admin')

    # Locale used for user-facing messages (see utils/messages.py)
    LOCALE = os.environ.get('APP_LOCALE', 'ar')


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    ADMIN_PASSWORD = 'test-password'
    SECRET_KEY = 'test-secret'
    BOOTSTRAP_FILE = None
    LOCALE = 'en'


# Select configuration based on environment
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}

def get_config(config_name=None):
    """Get configuration by name, falling back to FLASK_ENV"""
    env = config_name or os.environ.get('FLASK_ENV', 'development')
    return config.get(env, config['default'])
