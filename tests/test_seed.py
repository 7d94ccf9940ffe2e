"""Seed loader contents, guard and rollback."""
import pytest
from sqlalchemy import delete

from circles import seed
from circles.errors import SeedError
from circles.extensions import db
from circles.models import Circle, Member
from circles.seed import initialize_database, is_seeded, seed_database


def _circles():
    return [(c.id, c.name, c.capacity, c.owner_id)
            for c in Circle.query.order_by(Circle.id)]


def _members():
    return [(m.name, m.grade, m.circle_id, m.age, m.major)
            for m in Member.query.order_by(Member.id)]


class TestSeedContents:

    def test_returns_true_on_first_run(self, app):
        assert is_seeded() is False
        assert seed_database() is True
        assert is_seeded() is True

    def test_circles(self, seeded):
        assert _circles() == [
            (1, "Circle A", 5, 1),
            (2, "Circle B", 8, 2),
            (3, "Circle C", 10, 3),
        ]

    def test_members(self, seeded):
        assert _members() == [
            ("Alice", 3, 1, 21, "math"),
            ("Bob", 2, 2, 22, "math"),
            ("Charlie", 3, 3, 23, "math"),
            ("David", 4, 1, 21, "math"),
            ("Eve", 2, 2, 19, "math"),
            ("Frank", 4, 3, 20, "math"),
        ]

    def test_referential_integrity(self, seeded):
        circle_ids = {c.id for c in Circle.query.all()}
        for m in Member.query.filter(Member.circle_id.isnot(None)):
            assert m.circle_id in circle_ids

    def test_owners_are_members_of_their_circle(self, seeded):
        for c in Circle.query.all():
            assert c.owner is not None
            assert c.owner.circle_id == c.id

    def test_delete_circle_a_removes_alice_and_david(self, seeded):
        db.session.execute(delete(Circle).where(Circle.name == "Circle A"))
        db.session.commit()
        names = {m.name for m in Member.query.all()}
        assert names == {"Bob", "Charlie", "Eve", "Frank"}
        assert Circle.query.count() == 2

    def test_circle_a_over_capacity_is_allowed(self, seeded):
        for i in range(5):
            db.session.add(Member(name=f"extra{i}", grade=1, circle_id=1))
        db.session.commit()
        assert Member.query.filter_by(circle_id=1).count() == 7


class TestSeedGuard:

    def test_second_run_skips(self, seeded):
        assert seed_database() is False
        assert Circle.query.count() == 3
        assert Member.query.count() == 6

    def test_force_duplicates_rows(self, seeded):
        assert seed_database(force=True) is True
        assert Circle.query.count() == 6
        assert Member.query.count() == 12
        assert Circle.query.filter_by(name="Circle A").count() == 2
        # duplicated members point at the duplicated circles
        new_ids = {c.id for c in Circle.query.filter(Circle.id > 3)}
        assert {m.circle_id for m in Member.query.filter(Member.id > 6)} == new_ids

    def test_guard_only_looks_at_circles(self, app):
        db.session.add(Member(name="early", grade=1))
        db.session.commit()
        assert seed_database() is True
        assert Member.query.count() == 7


class TestSeedFailure:

    def test_bad_row_rolls_back_everything(self, app, monkeypatch):
        monkeypatch.setattr(seed, "SEED_MEMBERS",
                            seed.SEED_MEMBERS + [(None, 1, 1, 20, "math")])
        with pytest.raises(SeedError):
            seed_database()
        assert Circle.query.count() == 0
        assert Member.query.count() == 0

    def test_can_seed_after_failure(self, app, monkeypatch):
        monkeypatch.setattr(seed, "SEED_CIRCLES", [("Broken", None, 1)])
        with pytest.raises(SeedError):
            seed_database()
        monkeypatch.undo()
        assert seed_database() is True
        assert Circle.query.count() == 3


class TestInitializeDatabase:

    def test_creates_schema_and_seeds(self, app):
        db.drop_all()
        assert initialize_database() is True
        assert Circle.query.count() == 3
        assert Member.query.count() == 6

    def test_repeat_is_idempotent(self, app):
        initialize_database()
        assert initialize_database() is False
        assert Circle.query.count() == 3
        assert Member.query.count() == 6
