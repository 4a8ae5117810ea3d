"""
Shared fixtures for flight app tests.

Every test gets its own store and application, so no records leak
between tests.
"""

import pytest

from flightapp.app import create_app
from flightapp.store import FlightStore


@pytest.fixture
def store() -> FlightStore:
    """A fresh, empty flight store."""
    return FlightStore()


@pytest.fixture
def app(store):
    """Flask application bound to the test store."""
    app = create_app(store=store)
    app.config['TESTING'] = True
    return app


@pytest.fixture
def client(app):
    """Flask test client."""
    with app.test_client() as c:
        yield c


@pytest.fixture
def sample_flight() -> dict:
    """A typical flight payload."""
    return {'id': 1, 'origin': 'A', 'gate': 'B2'}
