import logging

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from .errors import SchemaError
from .extensions import db
from . import models  # noqa: F401  registers the tables on db.metadata

log = logging.getLogger(__name__)

TABLES = ("circles", "members")

def missing_tables():
    existing = set(inspect(db.engine).get_table_names())
    return [t for t in TABLES if t not in existing]

def init_schema():
    """Create circles and members if they are absent. Safe to call repeatedly."""
    try:
        missing = missing_tables()
        db.create_all()
    except SQLAlchemyError as exc:
        log.error("schema creation failed: %s", exc)
        raise SchemaError(f"Failed to create schema: {exc}") from exc
    if missing:
        log.info("created tables: %s", ", ".join(missing))
    else:
        log.debug("schema already present")
    return missing
