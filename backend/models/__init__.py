"""
Models package - SQLAlchemy models
"""
from models.database import db
from models.profile import Profile
from models.job import Job
from models.application import Application

__all__ = [
    'db',
    'Profile',
    'Job',
    'Application',
]
