"""
Profile Model - One row per authenticated user

The profile id is the user id issued by the identity provider. The role
decides dashboard access:
- 'HR'    → sees charts for the jobs they created
- 'ADMIN' → sees charts across every job
- anything else → no dashboard access
"""
import uuid
from datetime import datetime

from models.database import db


class Profile(db.Model):
    __tablename__ = 'profiles'

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    role = db.Column(db.String(20), nullable=False, default='APPLICANT')
    full_name = db.Column(db.String(255), nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
