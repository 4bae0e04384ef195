"""Flask application factory module.

Provides create_app() factory function. Creates and configures the
application with database setup and API blueprint registration.
"""
from typing import Optional

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import text


class Base(DeclarativeBase):
    """Base class for SQLAlchemy models."""
    pass


# Initialize SQLAlchemy with custom base
db = SQLAlchemy(model_class=Base)


def ensure_directories(app):
    """Create the instance directory if it doesn't exist.

    Args:
        app: Flask application instance with config loaded
    """
    instance_path = app.config.get('INSTANCE_DIR')
    if instance_path:
        instance_path.mkdir(parents=True, exist_ok=True)


def create_app(config_name='development', test_config: Optional[dict] = None):
    """Application factory function.

    Args:
        config_name: Configuration environment ('development', 'production' or 'testing')
        test_config: Optional mapping applied on top of the config class,
                     before the database is initialized

    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__, instance_relative_config=True)

    # Load configuration
    from config import config as config_dict, INSTANCE_DIR
    app.config.from_object(config_dict[config_name])
    app.config['INSTANCE_DIR'] = INSTANCE_DIR
    if test_config:
        app.config.update(test_config)

    # Initialize database
    db.init_app(app)

    from photomoments.routes import api_bp
    app.register_blueprint(api_bp)

    with app.app_context():
        ensure_directories(app)

        # Import models to register them with SQLAlchemy
        from photomoments import models  # noqa: F401 - registers models

        # Enable SQLite WAL mode for better concurrency
        uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
        if uri.startswith('sqlite:///'):
            with db.engine.connect() as conn:
                conn.execute(text('PRAGMA journal_mode=WAL'))
                conn.execute(text('PRAGMA busy_timeout=5000'))
                conn.commit()

        # Create all tables
        db.create_all()

    return app
