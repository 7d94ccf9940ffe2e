import pytest

from circles import create_app
from circles.extensions import db
from circles.schema import init_schema
from circles.seed import seed_database


@pytest.fixture
def app():
    app = create_app("config.TestingConfig")
    with app.app_context():
        init_schema()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def seeded(app):
    seed_database()
    return app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def runner(app):
    return app.test_cli_runner()
