"""
Application Model - A candidate's application to a job

job_id carries no foreign key constraint: rows imported from older systems
may reference jobs that no longer exist. Charts label those as
'Unknown Job'.
"""
import uuid
from datetime import datetime

from models.database import db


class Application(db.Model):
    __tablename__ = 'applications'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    job_id = db.Column(db.String(36), nullable=True, index=True)
    applicant_id = db.Column(db.String(36), nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, index=True)
