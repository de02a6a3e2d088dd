"""
Portfolio Test Configuration and Fixtures
Shared pytest fixtures for all test modules.
"""
import os

os.environ['FLASK_ENV'] = 'testing'

from unittest.mock import MagicMock

import pytest

from app import create_app
from extensions import db
from contact.form import ContactFormData
from utils.security import reset_rate_limits


VALID_PAYLOAD = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "subject": "Hi",
    "message": "Hello there",
}


# =============================================================================
# Application Fixtures
# =============================================================================


@pytest.fixture
def app():
    """Create an app bound to a fresh in-memory database."""
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture(autouse=True)
def clear_rate_limits():
    """Rate limit buckets are module-level; start every test empty."""
    reset_rate_limits()
    yield
    reset_rate_limits()


# =============================================================================
# Contact Fixtures
# =============================================================================


@pytest.fixture
def valid_payload():
    return dict(VALID_PAYLOAD)


@pytest.fixture
def valid_form():
    return ContactFormData(**VALID_PAYLOAD)


@pytest.fixture
def intake_client():
    """Collaborator double that accepts every message."""
    client = MagicMock()
    client.create_message.return_value = {"message": "Thanks!"}
    return client


@pytest.fixture
def notices():
    """Collects notices emitted by a workflow."""
    return []
