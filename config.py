import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


def _database_url():
    """Resolve the database URL from DATABASE_URL or the individual PG* variables"""
    database_url = os.environ.get('DATABASE_URL')
    if not database_url:
        pg_user = os.environ.get('PGUSER')
        pg_pass = os.environ.get('PGPASSWORD')
        pg_host = os.environ.get('PGHOST')
        pg_port = os.environ.get('PGPORT')
        pg_db = os.environ.get('PGDATABASE')
        if all([pg_user, pg_pass, pg_host, pg_port, pg_db]):
            database_url = f"postgresql://{pg_user}:{pg_pass}@{pg_host}:{pg_port}/{pg_db}"

    if database_url and database_url.startswith("postgres://"):
        database_url = database_url.replace("postgres://", "postgresql://", 1)

    return database_url or 'sqlite:///portfolio.db'


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Database Settings
    SQLALCHEMY_DATABASE_URI = _database_url()
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_size': 10,
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Admin bootstrap
    ADMIN_EMAIL = os.environ.get('ADMIN_EMAIL')
    ADMIN_PASSWORD = os.environ.get('ADMIN_PASSWORD')
    ADMIN_NAME = os.environ.get('ADMIN_NAME', 'Admin')

    # One-time initialization endpoint (falls back to the session secret)
    INIT_SECRET = os.environ.get('INIT_SECRET') or os.environ.get('SESSION_SECRET')

    # Media host (Cloudinary)
    CLOUDINARY_CLOUD_NAME = os.environ.get('CLOUDINARY_CLOUD_NAME')
    CLOUDINARY_API_KEY = os.environ.get('CLOUDINARY_API_KEY')
    CLOUDINARY_API_SECRET = os.environ.get('CLOUDINARY_API_SECRET')
    CLOUDINARY_FOLDER = os.environ.get('CLOUDINARY_FOLDER', 'portfolio')
    CLOUDINARY_TIMEOUT = int(os.environ.get('CLOUDINARY_TIMEOUT', '60'))

    # Sign-in rate limiting
    LOGIN_RATE_LIMIT = int(os.environ.get('LOGIN_RATE_LIMIT', '10'))
    LOGIN_RATE_WINDOW = 60  # seconds

    # Aggregate portfolio read
    PORTFOLIO_READ_WORKERS = 6


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
    SECRET_KEY = 'testing-secret-key'
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    # Keep engine options empty for SQLite so no pool_size reaches its pool class.
    SQLALCHEMY_ENGINE_OPTIONS = {}
    INIT_SECRET = 'testing-init-secret'
    ADMIN_EMAIL = 'admin@example.com'
    ADMIN_PASSWORD = 'correct-horse-battery'
    ADMIN_NAME = 'Site Admin'
    CLOUDINARY_CLOUD_NAME = 'demo-cloud'
    CLOUDINARY_API_KEY = 'test-key'
    CLOUDINARY_API_SECRET = 'test-secret'
    LOGIN_RATE_LIMIT = 1000


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
