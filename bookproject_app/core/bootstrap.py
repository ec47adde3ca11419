"""Bootstrap helpers for configuring the Flask application."""

from __future__ import annotations

import logging

from flask import Flask
from flask_login import current_user

from ..extensions import csrf_protect, db, login_manager
from .logging_config import setup_file_logging


def configure_logging(app: Flask) -> None:
    """Attach a console handler once, plus a rotating file when LOG_TO_FILE is set."""

    log_level = str(app.config.get("LOG_LEVEL", "INFO"))
    app.logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))

    has_console = any(
        type(handler) is logging.StreamHandler for handler in app.logger.handlers
    )
    if not has_console:
        handler = logging.StreamHandler()
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        handler.setFormatter(formatter)
        app.logger.addHandler(handler)
        app.logger.propagate = False
        app.logger.info("Flask app logger configured successfully.")

    if app.config.get("LOG_TO_FILE"):
        setup_file_logging(app, app.config["LOG_DIR"], log_level)


def register_extensions(app: Flask) -> None:
    """Initialize shared extensions with the Flask app instance."""

    db.init_app(app)
    login_manager.init_app(app)
    csrf_protect.init_app(app)


def register_context_processors(app: Flask) -> None:
    """Register the user loader and global template context."""

    @login_manager.user_loader
    def load_user(user_id: str):
        from ..models import User

        return db.session.get(User, int(user_id))

    @app.context_processor
    def inject_user() -> dict[str, object]:
        return {"current_user": current_user}


def register_blueprints(app: Flask) -> None:
    """Register the module blueprints with the app."""

    from ..modules.goals import goals_bp

    app.register_blueprint(goals_bp)
    app.logger.debug("Registered blueprint %s", goals_bp.name)


def register_event_handlers(app: Flask) -> None:
    """Connect module event subscribers to the core signals."""

    from ..modules.goals.events import init_goal_events

    init_goal_events()
    app.logger.debug("Goal event handlers connected.")


def initialize_database(app: Flask) -> None:
    """Create database tables."""

    from .. import models  # noqa: F401  # register tables on the metadata

    db.create_all()
    app.logger.info("Database tables ready at %s", app.config["SQLALCHEMY_DATABASE_URI"])
