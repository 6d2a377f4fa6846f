"""
Recruiting data store - the four reads the chart pipeline needs.

Usage:
    from services.hr_charts.store import RecruitingStore

    store = RecruitingStore()
    profile = store.fetch_profile(user_id)
    job_ids = store.fetch_job_ids(owner_id=user_id)
    rows = store.fetch_applications(RestrictedScope.of(job_ids))

Each method returns plain dicts. Any SQLAlchemy failure is raised as
StoreError carrying the driver's message and error code.
"""

import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from models.database import db
from models.profile import Profile
from models.job import Job
from models.application import Application
from services.hr_charts.errors import StoreError
from services.hr_charts.scope import Scope, RestrictedScope

logger = logging.getLogger('hr_charts.store')


def _error_code(error: SQLAlchemyError) -> Optional[str]:
    """Driver error code (psycopg2 pgcode, SQLSTATE) if the driver exposes one."""
    orig = getattr(error, 'orig', None)
    for attr in ('pgcode', 'sqlstate'):
        code = getattr(orig, attr, None)
        if code:
            return str(code)
    return None


def _store_error(operation: str, error: SQLAlchemyError) -> StoreError:
    orig = getattr(error, 'orig', None)
    message = str(orig) if orig is not None else str(error)
    code = _error_code(error)
    logger.error(
        "store_error operation=%s code=%s message=%s",
        operation, code, message,
    )
    return StoreError(message.strip() or None, code=code)


def _apply_scope(query, scope: Scope):
    if isinstance(scope, RestrictedScope):
        return query.filter(Application.job_id.in_(scope.sorted_ids()))
    return query


class RecruitingStore:
    """Read-only access to profiles, jobs and applications."""

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def fetch_profile(self, user_id: str) -> Optional[Dict[str, Any]]:
        try:
            profile = self.session.get(Profile, user_id)
        except SQLAlchemyError as e:
            raise _store_error('fetch_profile', e)
        if profile is None:
            return None
        return {'id': profile.id, 'role': profile.role}

    def fetch_job_ids(self, owner_id: str) -> List[str]:
        try:
            rows = (
                self.session.query(Job.id)
                .filter(Job.created_by == owner_id)
                .order_by(Job.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise _store_error('fetch_job_ids', e)
        return [row.id for row in rows]

    def fetch_applications(self, scope: Scope) -> List[Dict[str, Any]]:
        query = self.session.query(Application.created_at, Application.job_id)
        query = _apply_scope(query, scope).order_by(Application.created_at, Application.id)
        try:
            rows = query.all()
        except SQLAlchemyError as e:
            raise _store_error('fetch_applications', e)
        return [{'created_at': row.created_at, 'job_id': row.job_id} for row in rows]

    def fetch_applications_with_job_title(self, scope: Scope) -> List[Dict[str, Any]]:
        # Outer join: dangling job references come back with a NULL title
        query = (
            self.session.query(Application.job_id, Job.title.label('job_title'))
            .outerjoin(Job, Job.id == Application.job_id)
        )
        query = _apply_scope(query, scope).order_by(Application.created_at, Application.id)
        try:
            rows = query.all()
        except SQLAlchemyError as e:
            raise _store_error('fetch_applications_with_job_title', e)
        return [{'job_id': row.job_id, 'job_title': row.job_title} for row in rows]
