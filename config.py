import os
from datetime import timedelta

class Config:
    """Base configuration"""

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

    # Page content override (JSON file with the same shape as utils.data.DEFAULT_PORTFOLIO)
    PORTFOLIO_DATA_FILE = os.environ.get('PORTFOLIO_DATA_FILE')

    # Contact Intake Settings
    CONTACT_MESSAGE_MAX_LENGTH = 5000
    CONTACT_FIELD_MAX_LENGTH = 255
    CONTACT_RATE_LIMIT_MAX_REQUESTS = int(os.environ.get('CONTACT_RATE_LIMIT_MAX_REQUESTS', '10'))
    CONTACT_RATE_LIMIT_WINDOW = int(os.environ.get('CONTACT_RATE_LIMIT_WINDOW', '60'))

    # Owner Notification Settings
    OWNER_TELEGRAM_BOT_TOKEN = os.environ.get('OWNER_TELEGRAM_BOT_TOKEN')
    OWNER_TELEGRAM_CHAT_ID = os.environ.get('OWNER_TELEGRAM_CHAT_ID')
    OWNER_SMTP_HOST = os.environ.get('OWNER_SMTP_HOST')
    OWNER_SMTP_PORT = os.environ.get('OWNER_SMTP_PORT', '587')
    OWNER_SMTP_EMAIL = os.environ.get('OWNER_SMTP_EMAIL')
    OWNER_SMTP_PASSWORD = os.environ.get('OWNER_SMTP_PASSWORD')
    OWNER_EMAIL = os.environ.get('OWNER_EMAIL')


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
    # In-memory SQLite uses StaticPool; pool options do not apply
    SQLALCHEMY_ENGINE_OPTIONS = {}
    PORTFOLIO_DATA_FILE = None
    OWNER_TELEGRAM_BOT_TOKEN = None
    OWNER_TELEGRAM_CHAT_ID = None
    OWNER_SMTP_HOST = None
    OWNER_SMTP_EMAIL = None
    OWNER_SMTP_PASSWORD = None
    OWNER_EMAIL = None


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
