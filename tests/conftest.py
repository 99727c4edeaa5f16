"""
Pytest configuration and fixtures for testing.

This file provides reusable test fixtures for:
- Database setup/teardown
- FastAPI test client
- Sample job data
"""

import copy
import os

# Keep the app's own engine off disk before any app module is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.database import Base, get_db
from app.crud import job as job_crud
from app.models.job import Job  # noqa: F401  Registers the jobs table
from main import app
from seed_jobs import SAMPLE_JOBS


# Use in-memory SQLite for testing (fast, isolated)
SQLALCHEMY_TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session():
    """
    Create a fresh database session for each test.
    Drops all tables after the test completes.
    """
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db_session):
    """
    FastAPI test client with overridden database dependency.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def sample_jobs():
    """The two sample postings (WebWorks, AdVision)"""
    return copy.deepcopy(SAMPLE_JOBS)


@pytest.fixture
def seeded_jobs(db_session, sample_jobs):
    """Jobs table reset to the sample postings, returned in insertion order"""
    job_crud.delete_all(db_session)
    return job_crud.create_many(db_session, sample_jobs)


@pytest.fixture
def new_job_data():
    """A job that is not part of the seed data"""
    return {
        "title": "Product Owner",
        "type": "Full-Time",
        "description": "Oversee product development from start to finish.",
        "company": {
            "name": "Tech Innovations",
            "contactEmail": "careers@techinnovations.com",
            "contactPhone": "777888999"
        }
    }
