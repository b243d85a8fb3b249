"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

from flask import Flask

from .error_handlers import register_error_handlers as _register_error_handlers
from .extensions import db
from .logging_config import setup_logging
from .module_registry import register_default_modules


def configure_logging(app: Flask) -> None:
    """Configure the application logger (shared by every bookexchange_app module)."""

    logger = setup_logging(
        app,
        log_level=app.config.get("LOG_LEVEL", "INFO"),
        log_dir=app.config.get("LOG_DIR"),
    )
    logger.propagate = False
    app.logger.info("Flask app logger configured successfully.")


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)


def register_error_handlers(app: Flask) -> None:
    """Install the application-wide JSON error handlers."""

    _register_error_handlers(app)


def register_modules(app: Flask) -> None:
    """Set up all default feature modules."""

    register_default_modules(app)


def initialize_database(app: Flask) -> None:
    """Create database tables if they do not exist yet."""

    from .. import models  # noqa: F401  (registers the tables on db.metadata)

    db.create_all()
    app.logger.info("Database tables ensured.")
