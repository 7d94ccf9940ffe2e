import logging

from flask import Flask
from .extensions import db, migrate

__version__ = "0.1.0"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

def configure_logging(app):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("circles").setLevel(level)
    app.logger.setLevel(level)

def init_on_startup(app):
    """Create the schema and seed it, logging a warning if seeding fails."""
    from .errors import SeedError
    from .schema import init_schema
    from .seed import seed_database

    with app.app_context():
        init_schema()
        try:
            seed_database()
        except SeedError as exc:
            app.logger.warning("continuing without seed data: %s", exc)

def create_app(config_object="config.Config"):
    app = Flask(__name__)
    app.config.from_object(config_object)
    configure_logging(app)

    db.init_app(app)
    migrate.init_app(app, db)

    from . import models  # noqa: F401

    from .blueprints.api import bp as api_bp
    app.register_blueprint(api_bp)

    from .commands import register_commands
    register_commands(app)

    if app.config.get("AUTO_INIT_DB"):
        init_on_startup(app)

    return app
