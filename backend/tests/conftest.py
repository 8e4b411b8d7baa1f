import os
import sys
from datetime import datetime, timedelta
import pytest

# Ensure the backend root (containing the `mathquiz` package) is on sys.path
CURRENT_DIR = os.path.dirname(__file__)
BACKEND_ROOT = os.path.abspath(os.path.join(CURRENT_DIR, '..'))
if BACKEND_ROOT not in sys.path:
    sys.path.insert(0, BACKEND_ROOT)

from mathquiz import create_app, db


class TestConfig:
    TESTING = True
    DEBUG = False
    SECRET_KEY = os.environ.get('SECRET_KEY', 'test-secret')
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    API_PREFIX = '/api/v1'
    MAX_ANSWERS_PER_GAME = 10
    CORS_ORIGINS = ['http://localhost:5173']
    LOG_LEVEL = 'WARNING'


class FakeClock:
    """Manually advanced stand-in for the service clock."""

    def __init__(self, start=None):
        self.now = start or datetime(2026, 1, 1, 12, 0, 0)

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now = self.now + timedelta(seconds=seconds)


@pytest.fixture()
def flask_app():
    application = create_app(TestConfig)
    with application.app_context():
        # Ensure models are imported so tables are created
        import mathquiz.models  # noqa: F401
        db.create_all()
        yield application
        db.session.remove()
        db.drop_all()


@pytest.fixture()
def client(flask_app):
    return flask_app.test_client()


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def service(flask_app, clock):
    """Game service wired to the test database with a controllable clock."""
    from mathquiz.services.games import GameService
    from mathquiz.stores import PlayerStore, GameStore, QuestionStore, AnswerStore

    return GameService(
        players=PlayerStore(db.session),
        games=GameStore(db.session),
        questions=QuestionStore(db.session),
        answers=AnswerStore(db.session),
        clock=clock,
        max_answers=10,
    )
