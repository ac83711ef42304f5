from datetime import datetime

import pytest

from config import TestConfig
from runit import create_app
from runit.dao import SqlAlchemyStore
from runit.domain import Exercise, Logic


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def store(app):
    return SqlAlchemyStore()


@pytest.fixture
def logic(store):
    return Logic(store)


@pytest.fixture
def runner_logic(logic):
    """Logic with a signed-up, logged-in user 'runner'."""
    assert logic.signup_user("runner", "secret").ok
    return logic


def make_exercise(when="2018-01-31 10:10:10", duration=3600, distance=10.0):
    return Exercise(datetime.strptime(when, "%Y-%m-%d %H:%M:%S"), duration, distance)
