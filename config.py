"""Application configuration module.

Provides configuration classes for different environments with pathlib-based
paths. Moment discovery settings can be overridden from the environment.
"""
import os
from pathlib import Path


# Base directories using pathlib
BASE_DIR = Path(__file__).parent.absolute()
INSTANCE_DIR = BASE_DIR / 'instance'


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in ('0', 'false', 'no', 'off', '')


class Config:
    """Base configuration with common settings."""

    # Flask secret key
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production'

    # Database configuration
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or f"sqlite:///{INSTANCE_DIR / 'photomoments.db'}"
    SQLALCHEMY_ENGINE_OPTIONS = {
        'connect_args': {
            'check_same_thread': False,
            'timeout': 5.0
        }
    }
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Moment discovery
    MOMENTS_ENABLED = _env_flag('MOMENTS_ENABLED', True)
    MOMENTS_CRON_HOUR = os.environ.get('MOMENTS_CRON_HOUR', '*/6')  # Huey crontab hour field


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG = True
    SQLALCHEMY_ECHO = False


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG = False


class TestingConfig(Config):
    """Test configuration, callers override the database URI."""

    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    MOMENTS_ENABLED = True


# Configuration dictionary for easy lookup
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
