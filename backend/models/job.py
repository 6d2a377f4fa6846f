"""
Job Model - A job posting owned by the HR user who created it
"""
import uuid
from datetime import datetime

from models.database import db


class Job(db.Model):
    __tablename__ = 'jobs'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    title = db.Column(db.String(255), nullable=True)
    created_by = db.Column(db.String(36), db.ForeignKey('profiles.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
