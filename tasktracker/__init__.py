"""Flask application factory with OpenTelemetry instrumentation."""

import logging

from flask import Flask

from tasktracker.extensions import db, ma
from tasktracker.telemetry import telemetry_enabled


def create_app(config_class: type | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config_class: Configuration class to use. Defaults to Config.

    Returns:
        Configured Flask application instance.
    """
    # Initialize telemetry BEFORE creating Flask app
    if telemetry_enabled():
        from tasktracker.telemetry import instrument_flask_app, setup_telemetry

        setup_telemetry()

    app = Flask(__name__)

    if telemetry_enabled():
        instrument_flask_app(app)

    # Load configuration
    if config_class is None:
        from tasktracker.config import Config

        config_class = Config
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    ma.init_app(app)

    # Register blueprints
    from tasktracker.routes import health_bp, tasks_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(tasks_bp)

    from tasktracker.errors import register_error_handlers

    register_error_handlers(app)

    if telemetry_enabled():
        from tasktracker.middleware import register_metrics_middleware

        register_metrics_middleware(app)

    # Attach OTel log handler after app setup
    if telemetry_enabled():
        from tasktracker.telemetry import get_otel_log_handler

        handler = get_otel_log_handler()
        if handler:
            root_logger = logging.getLogger()
            if handler not in root_logger.handlers:
                root_logger.addHandler(handler)

    configure_logging()

    # Create the tasks table if it does not exist yet
    with app.app_context():
        db.create_all()

    return app


def configure_logging() -> None:
    """Configure logging for the application."""
    # App loggers - propagate to root (where OTel handler is)
    logging.getLogger("tasktracker").setLevel(logging.DEBUG)
    logging.getLogger("tasktracker").propagate = True

    # Reduce noise from framework loggers
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    logging.getLogger("werkzeug").propagate = False

    # SQLAlchemy engine logs can be noisy
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
