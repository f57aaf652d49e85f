"""Shared pytest fixtures for the test suite."""

import pytest

from crm import create_app
from crm.extensions import db as _db
from crm.repositories.customer_repository import new_customer_repository
from crm.repositories.queries import CustomerQueries


@pytest.fixture(scope="session")
def app():
    """Create an application instance configured for testing."""
    app = create_app("testing")
    with app.app_context():
        _db.create_all()
        yield app
        _db.drop_all()


@pytest.fixture(autouse=True)
def db_session(app):
    """Ensure a clean database state for each test.

    Re-creates all tables before each test to guarantee isolation.
    """
    with app.app_context():
        _db.create_all()
        yield _db.session
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture()
def client(app):
    """Flask test client."""
    return app.test_client()


@pytest.fixture()
def queries(db_session):
    return CustomerQueries(db_session)


@pytest.fixture()
def repository(queries):
    """SQL-backed customer repository bound to the test session."""
    return new_customer_repository(queries)
