"""
Configuration management for the Clearance Tracker application
"""
import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """Base configuration class"""

    # Flask Configuration
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Database Configuration
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f"mysql+pymysql://{os.environ.get('MYSQL_USER', 'root')}:{os.environ.get('MYSQL_PASSWORD', '')}@{os.environ.get('MYSQL_HOST', 'localhost')}/{os.environ.get('MYSQL_DB', 'clearance')}"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_pre_ping': True,
        'pool_recycle': 300,
    }

    # Token Configuration
    JWT_SECRET = os.environ.get('JWT_SECRET') or SECRET_KEY
    JWT_EXPIRES_MIN = int(os.environ.get('JWT_EXPIRES_MIN', 60 * 24))
    ADMIN_TOKEN_REQUIRED = os.environ.get('ADMIN_TOKEN_REQUIRED', 'false').lower() in ['true', 'on', '1']

    # AWS Configuration (document storage)
    AWS_ACCESS_KEY_ID = os.environ.get('AWS_ACCESS_KEY_ID')
    AWS_SECRET_ACCESS_KEY = os.environ.get('AWS_SECRET_ACCESS_KEY')
    AWS_REGION = os.environ.get('AWS_REGION', 'ap-southeast-2')
    S3_BUCKET_NAME = os.environ.get('S3_BUCKET_NAME')

    # Clearance Settings
    DEFAULT_STUDENT_PASSWORD = os.environ.get('DEFAULT_STUDENT_PASSWORD', 'student123')
    # 'from_nothing' or 'on_transition'
    CLEARANCE_COMPLETION_RULE = os.environ.get('CLEARANCE_COMPLETION_RULE', 'from_nothing')

    # API client cache lifetime in seconds
    API_CACHE_TTL = int(os.environ.get('API_CACHE_TTL', 60))

    # Application Settings
    DEBUG = os.environ.get('FLASK_DEBUG', 'False').lower() in ['true', 'on', '1']
    TESTING = False

    @staticmethod
    def init_app(app):
        """Initialize application with configuration"""
        rule = app.config.get('CLEARANCE_COMPLETION_RULE')
        if rule not in ('from_nothing', 'on_transition'):
            raise ValueError(f"CLEARANCE_COMPLETION_RULE must be 'from_nothing' or 'on_transition', got {rule!r}")


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///clearance.db'


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    SECRET_KEY = os.environ.get('SECRET_KEY')

    @classmethod
    def init_app(cls, app):
        Config.init_app(app)

        # Ensure SECRET_KEY is set in production
        if not app.config['SECRET_KEY']:
            raise ValueError("SECRET_KEY environment variable must be set in production")


class TestingConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    JWT_SECRET = 'testing-jwt-secret'
    ADMIN_TOKEN_REQUIRED = False
    CLEARANCE_COMPLETION_RULE = 'from_nothing'
    S3_BUCKET_NAME = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
