import os
from datetime import timedelta

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


class Config:
    """Base configuration"""

    # Flask Settings
    SECRET_KEY = os.environ.get('SESSION_SECRET', 'CHANGE-THIS-SECRET-KEY-IN-PRODUCTION')
    PERMANENT_SESSION_LIFETIME = timedelta(days=7)
    SESSION_COOKIE_SECURE = False
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'

    # Database Settings (newsletter subscribers only)
    _database_url = os.environ.get('DATABASE_URL')
    if _database_url and _database_url.startswith("postgres://"):
        _database_url = _database_url.replace("postgres://", "postgresql://", 1)

    SQLALCHEMY_DATABASE_URI = _database_url or 'sqlite:///portfolio.db'
    SQLALCHEMY_ENGINE_OPTIONS = {}
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Content Settings
    POSTS_FOLDER = os.path.join(BASE_DIR, 'posts')
    POST_EXTENSIONS = {'md', 'mdx'}
    HOME_PROJECTS_LIMIT = 2
    # Sections served by the site; remove one to hide its page and nav entry
    ENABLED_SECTIONS = ('home', 'about', 'blog', 'work', 'gallery')

    # JSON Settings
    JSON_AS_ASCII = False

    # Newsletter Notification Settings
    SITE_TELEGRAM_BOT_TOKEN = os.environ.get('SITE_TELEGRAM_BOT_TOKEN')
    SITE_TELEGRAM_CHAT_ID = os.environ.get('SITE_TELEGRAM_CHAT_ID')

    # Rate Limiting
    RATE_LIMIT_MAX_REQUESTS = 10
    RATE_LIMIT_WINDOW = 60


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False
    TESTING = False
    SESSION_COOKIE_SECURE = True
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 3600,
        'pool_pre_ping': True,
    }


class TestingConfig(Config):
    """Testing configuration"""
    DEBUG = True
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SITE_TELEGRAM_BOT_TOKEN = None
    SITE_TELEGRAM_CHAT_ID = None


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
