"""
Root pytest configuration for backend tests.

Provides:
- Shared fixtures (app, client, db_session)
- Token and seed helpers for the HR dashboard endpoints
"""

import os
import sys
from pathlib import Path

# Add backend directory to Python path so imports like
# `from models import Profile` and `from services.hr_charts import ...` work
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# config.py validates DATABASE_URL at import time
os.environ.setdefault('DATABASE_URL', 'sqlite://')

import pytest


@pytest.fixture
def app():
    """Create test Flask application backed by in-memory SQLite."""
    from app import create_app
    from config import TestConfig
    from models.database import db

    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def db_session(app):
    from models.database import db
    return db.session


@pytest.fixture
def make_token(app):
    """Issue a session token for a user id."""
    from routes.auth import generate_token

    def _make(user_id, **kwargs):
        return generate_token(user_id, **kwargs)
    return _make


@pytest.fixture
def auth_headers(make_token):
    def _headers(user_id):
        return {"Authorization": f"Bearer {make_token(user_id)}"}
    return _headers


@pytest.fixture
def seed(db_session):
    """
    Insert rows and commit.

    seed.profile("hr-1", "HR")
    job = seed.job("hr-1", "Backend Engineer")
    seed.applications(job.id, [datetime(2024, 1, 5), ...])
    """
    from models import Profile, Job, Application

    class Seeder:
        def profile(self, user_id, role):
            profile = Profile(id=user_id, role=role)
            db_session.add(profile)
            db_session.commit()
            return profile

        def job(self, owner_id, title, job_id=None):
            job = Job(id=job_id, title=title, created_by=owner_id) if job_id else Job(title=title, created_by=owner_id)
            db_session.add(job)
            db_session.commit()
            return job

        def applications(self, job_id, timestamps):
            for created_at in timestamps:
                db_session.add(Application(job_id=job_id, created_at=created_at))
            db_session.commit()

    return Seeder()
