"""Pytest configuration and shared fixtures"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from pando.database import Base, build_engine
from pando.models import Organization, User


# Test database URL (in-memory SQLite shared across the test's connections)
TEST_DATABASE_URL = "sqlite://"


@pytest.fixture(scope="function")
def test_engine():
    """Create a test database engine with all tables"""
    engine = build_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def test_db(test_engine):
    """Create a database session for testing"""
    session_maker = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)
    session = session_maker()
    yield session
    session.rollback()
    session.close()


@pytest.fixture
def sample_organization(test_db) -> Organization:
    """Create a sample organization for testing"""
    org = Organization(name="Test Organization")
    test_db.add(org)
    test_db.commit()
    test_db.refresh(org)
    return org


@pytest.fixture
def sample_user(test_db) -> User:
    """Create a sample user for testing"""
    user = User(
        email="test@example.com",
        given_name="Test",
    )
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user
