"""
Shared pytest fixtures for all test files
"""
from datetime import datetime, timedelta

import pytest

from config import Config


class TestConfig(Config):
    """Standard test configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SQLALCHEMY_ENGINE_OPTIONS = {}  # SQLite doesn't support pool settings
    SECRET_KEY = 'test-secret-key'
    SENTRY_DSN = ''
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SERVE_API_DOCS = False
    STORAGE_BACKEND = 'memory'
    RECENT_THREADS_LIMIT = 10
    RECENT_REPLIES_LIMIT = 3


def make_app(storage_backend, **overrides):
    from anonboard import create_app

    settings = {'STORAGE_BACKEND': storage_backend, **overrides}
    return create_app(type('BackendTestConfig', (TestConfig,), settings))


@pytest.fixture(params=['memory', 'sql'])
def test_app(request):
    """Create and configure a test application instance, once per storage backend"""
    from anonboard import db

    app = make_app(request.param)

    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def app(test_app):
    """Alias for test_app for compatibility"""
    return test_app


@pytest.fixture
def client(test_app):
    """Create test client"""
    return test_app.test_client()


@pytest.fixture
def threads(test_app):
    """The thread collection the app was configured with"""
    from anonboard import get_thread_collection
    return get_thread_collection()


class FakeClock:
    """Stands in for utcnow, moving one second forward on every call"""

    def __init__(self):
        self.now = datetime(2025, 1, 1, 12, 0, 0)

    def __call__(self, naive=True):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def clock(monkeypatch):
    fake = FakeClock()
    monkeypatch.setattr('anonboard.shared.thread.utcnow', fake)
    monkeypatch.setattr('anonboard.shared.reply.utcnow', fake)
    return fake
