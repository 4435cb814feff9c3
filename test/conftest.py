"""
Pytest configuration and fixtures for testing.
Uses an in-memory SQLite database per test.
"""
import os

import pytest

# Set test environment variables BEFORE importing the package,
# since blueprints read API_PREFIX at import time
os.environ['FLASK_ENV'] = 'testing'
os.environ['SECRET_KEY'] = 'sfndsfojoriwew09rjfjndsknfkj'
os.environ['DATABASE_URL'] = 'sqlite:///:memory:'
os.environ['API_PREFIX'] = '/api'
for _name in ('DB_HOST', 'DB_USER', 'DB_PASSWORD', 'DB_PORT', 'DB_NAME'):
    os.environ.pop(_name, None)

from passwordguard import create_app, db  # noqa: E402
from passwordguard.policy import PolicyConfig  # noqa: E402
from passwordguard.policy.settings import OPTIONS  # noqa: E402


# Regression settings: small min_length, every rule on, enforcing
TEST_POLICY = {
    'min_length': '8',
    'require_upper': 'on',
    'require_lower': 'on',
    'require_digit': 'on',
    'require_special': 'on',
    'reject_username': 'on',
    'log_only': 'off',
}


@pytest.fixture
def policy():
    """Policy used by the scenario tests (min_length=8, everything on)."""
    return PolicyConfig(min_length=8)


@pytest.fixture
def make_app(monkeypatch):
    """
    Return a factory that builds an app with the given policy settings.

    Settings are passed through the PASSWORDGUARD_* environment variables,
    the same way an operator would configure them.
    """
    created = []

    def _make_app(report_all=False, **settings):
        for name in OPTIONS:
            monkeypatch.delenv(f'PASSWORDGUARD_{name.upper()}', raising=False)
        values = dict(TEST_POLICY)
        values.update({k: str(v) for k, v in settings.items()})
        for name, value in values.items():
            monkeypatch.setenv(f'PASSWORDGUARD_{name.upper()}', value)
        monkeypatch.setenv('PASSWORDGUARD_REPORT_ALL', 'true' if report_all else 'false')

        app = create_app({'TESTING': True})
        created.append(app)
        return app

    yield _make_app

    for app in created:
        with app.app_context():
            db.session.remove()
            db.drop_all()


@pytest.fixture
def app(make_app):
    """Create application for testing."""
    return make_app()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()
