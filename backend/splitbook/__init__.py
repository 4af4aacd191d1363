import logging.config

import click
from flask import Flask
from flask_cors import CORS
from flask_smorest import Api
from flask_sqlalchemy import SQLAlchemy

from .config import Config

# Initialize extensions at module level to avoid circular imports
db = SQLAlchemy()

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {"format": "[%(asctime)s] %(levelname)s in %(name)s: %(message)s"},
            },
            "handlers": {
                "wsgi": {
                    "class": "logging.StreamHandler",
                    "stream": "ext://flask.logging.wsgi_errors_stream",
                    "formatter": "default",
                },
            },
            "loggers": {
                "splitbook": {"level": level, "handlers": ["wsgi"], "propagate": False},
            },
        }
    )


def _register_commands(app: Flask) -> None:
    from .store import get_store

    @app.cli.command("init-db")
    def init_db_command():
        """Create database tables if they do not already exist."""
        db.create_all()
        click.echo("Initialized the database.")

    @app.cli.command("list-users")
    def list_users_command():
        """Print every registered user."""
        for user in get_store().list_users():
            click.echo(f"{user.id}\t{user.email}\t{user.password}\t{user.workspace_id}")


# PUBLIC_INTERFACE
def create_app(config=None) -> Flask:
    """Build the Flask application.

    Parameters:
        config: Optional mapping of settings overriding :class:`Config`.

    Returns:
        The configured app with all blueprints registered and tables created.
    """
    # Create the Flask app
    app = Flask(__name__)
    app.url_map.strict_slashes = False
    app.config.from_object(Config)
    if config:
        app.config.from_mapping(config)

    _configure_logging(app.config["LOG_LEVEL"])

    # CORS configuration - allow all origins, as the browser client is served elsewhere
    CORS(app, resources={r"/*": {"origins": "*"}})

    # Initialize SQLAlchemy
    db.init_app(app)

    # Initialize API
    api = Api(app)

    from .errors import register_error_handlers
    from .routes.auth import blp as auth_blp
    from .routes.expenses import blp as expenses_blp
    from .routes.health import blp as health_blp
    from .routes.members import blp as members_blp
    from .routes.settle import blp as settle_blp
    from .store import build_store

    prefix = app.config["API_PREFIX"]
    for blp in (health_blp, auth_blp, members_blp, expenses_blp, settle_blp):
        api.register_blueprint(blp, url_prefix=f"{prefix}{blp.url_prefix or ''}")

    register_error_handlers(app)
    app.extensions["splitbook_store"] = build_store(app.config["SPLITBOOK_STORE"], db)
    _register_commands(app)

    # Create database tables if they do not already exist
    with app.app_context():
        # Import models to register them with SQLAlchemy's metadata
        from . import models  # noqa: F401
        db.create_all()

    logger.info("Splitbook API ready under %s (store=%s)", prefix or "/", app.config["SPLITBOOK_STORE"])
    return app
