from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError, ProgrammingError

from services.hr_charts.errors import StoreError
from services.hr_charts.scope import RestrictedScope, UNRESTRICTED
from services.hr_charts.store import RecruitingStore


@pytest.fixture
def store(app):
    return RecruitingStore()


@pytest.fixture
def rows(seed):
    seed.profile("hr-1", "HR")
    seed.profile("hr-2", "HR")
    seed.job("hr-1", "Engineer", job_id="j1")
    seed.job("hr-1", None, job_id="j2")
    seed.job("hr-2", "Accountant", job_id="j3")
    seed.applications("j1", [datetime(2024, 1, 2), datetime(2024, 1, 1)])
    seed.applications("j2", [datetime(2024, 1, 3)])
    seed.applications("j3", [datetime(2024, 2, 1)])
    seed.applications(None, [datetime(2024, 3, 1)])


def test_fetch_profile(store, rows):
    assert store.fetch_profile("hr-1") == {"id": "hr-1", "role": "HR"}
    assert store.fetch_profile("missing") is None


def test_fetch_job_ids_only_owned(store, rows):
    assert store.fetch_job_ids("hr-1") == ["j1", "j2"]
    assert store.fetch_job_ids("nobody") == []


def test_fetch_applications_restricted(store, rows):
    result = store.fetch_applications(RestrictedScope.of(["j1"]))
    assert result == [
        {"created_at": datetime(2024, 1, 1), "job_id": "j1"},
        {"created_at": datetime(2024, 1, 2), "job_id": "j1"},
    ]


def test_fetch_applications_unrestricted_includes_orphans(store, rows):
    result = store.fetch_applications(UNRESTRICTED)
    assert len(result) == 5
    assert {"created_at": datetime(2024, 3, 1), "job_id": None} in result


def test_fetch_applications_with_job_title(store, rows):
    result = store.fetch_applications_with_job_title(RestrictedScope.of(["j1", "j2"]))
    assert result == [
        {"job_id": "j1", "job_title": "Engineer"},
        {"job_id": "j1", "job_title": "Engineer"},
        {"job_id": "j2", "job_title": None},
    ]


class _FailingSession:
    def __init__(self, error):
        self.error = error

    def get(self, *args, **kwargs):
        raise self.error

    def query(self, *args, **kwargs):
        return _FailingQuery(self.error)


class _FailingQuery:
    def __init__(self, error):
        self.error = error

    def filter(self, *args):
        return self

    def outerjoin(self, *args):
        return self

    def order_by(self, *args):
        return self

    def all(self):
        raise self.error


class _DriverError(Exception):
    pgcode = "42P01"


def test_driver_error_code_is_kept(app):
    error = ProgrammingError("SELECT", {}, _DriverError('relation "jobs" does not exist'))
    store = RecruitingStore(session=_FailingSession(error))

    with pytest.raises(StoreError) as exc:
        store.fetch_job_ids("hr-1")

    assert exc.value.code == "42P01"
    assert exc.value.message == 'relation "jobs" does not exist'


def test_error_without_driver_code(app):
    error = OperationalError("SELECT", {}, Exception("could not connect"))
    store = RecruitingStore(session=_FailingSession(error))

    with pytest.raises(StoreError) as exc:
        store.fetch_applications(UNRESTRICTED)

    assert exc.value.code is None
    assert exc.value.message == "could not connect"


def test_profile_error_wrapped(app):
    error = OperationalError("SELECT", {}, Exception("timeout"))
    with pytest.raises(StoreError):
        RecruitingStore(session=_FailingSession(error)).fetch_profile("hr-1")
