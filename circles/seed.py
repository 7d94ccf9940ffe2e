"""Fixed seed rows for a fresh database.

Members point at circles by position (1-based) in ``SEED_CIRCLES``; the
real ids are looked up after the circles are flushed.
"""
import logging

from sqlalchemy.exc import SQLAlchemyError

from .errors import SeedError
from .extensions import db
from .models import Circle, Member
from .schema import init_schema

log = logging.getLogger(__name__)

# (name, capacity, owner_id)
SEED_CIRCLES = [
    ("Circle A", 5, 1),
    ("Circle B", 8, 2),
    ("Circle C", 10, 3),
]

# (name, grade, circle position, age, major)
SEED_MEMBERS = [
    ("Alice", 3, 1, 21, "math"),
    ("Bob", 2, 2, 22, "math"),
    ("Charlie", 3, 3, 23, "math"),
    ("David", 4, 1, 21, "math"),
    ("Eve", 2, 2, 19, "math"),
    ("Frank", 4, 3, 20, "math"),
]

def is_seeded():
    return db.session.query(Circle.id).first() is not None

def seed_database(force=False):
    """Insert the seed rows in one transaction.

    Returns False without touching anything when circles already exist,
    unless ``force`` is set, in which case the rows are inserted again.
    Any database error rolls the whole step back and raises SeedError.
    """
    try:
        if not force and is_seeded():
            log.info("circles already present, skipping seed")
            return False

        circles = [Circle(name=n, capacity=cap, owner_id=owner)
                   for n, cap, owner in SEED_CIRCLES]
        db.session.add_all(circles)
        db.session.flush()

        for name, grade, pos, age, major in SEED_MEMBERS:
            db.session.add(Member(name=name, grade=grade, circle_id=circles[pos - 1].id,
                                  age=age, major=major))
        db.session.commit()
    except SQLAlchemyError as exc:
        db.session.rollback()
        log.error("seeding failed, rolled back: %s", exc)
        raise SeedError(f"Failed to seed database: {exc}") from exc

    log.info("seeded %d circles and %d members", len(SEED_CIRCLES), len(SEED_MEMBERS))
    return True

def initialize_database(force_seed=False):
    """Create the schema, then seed it. Both steps must succeed."""
    init_schema()
    return seed_database(force=force_seed)
