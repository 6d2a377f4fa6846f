"""
In-process chart aggregations.

The store cannot GROUP BY for us, so rows are counted here. Ordering and
truncation are part of the API contract:

- monthly: ascending by YYYY-MM, last MONTHLY_MAX_MONTHS months kept,
  not re-sorted after truncation
- by-job:  descending by count, ties keep first-encountered order,
  top BY_JOB_MAX_JOBS jobs kept

Month keys are derived in UTC. Naive datetimes are taken to already be
UTC; ISO-8601 strings (as returned by REST stores) are parsed first.
"""

from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Union

from constants import (
    MONTHLY_MAX_MONTHS,
    BY_JOB_MAX_JOBS,
    UNKNOWN_JOB_TITLE,
    UNKNOWN_JOB_ID,
)

Timestamp = Union[datetime, str]


def to_utc(value: Timestamp) -> datetime:
    """Normalize a stored timestamp to an aware UTC datetime."""
    if isinstance(value, str):
        text = value.strip()
        if text.endswith('Z'):
            text = text[:-1] + '+00:00'
        value = datetime.fromisoformat(text)
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def month_key(created_at: Timestamp) -> str:
    """'2024-03-31T23:30:00-02:00' -> '2024-04'"""
    dt = to_utc(created_at)
    return f"{dt.year:04d}-{dt.month:02d}"


def aggregate_monthly(
    rows: Iterable[Mapping[str, Any]],
    max_months: int = MONTHLY_MAX_MONTHS,
) -> List[Dict[str, Any]]:
    """
    Count applications per calendar month.

    Args:
        rows: mappings with a 'created_at' timestamp
        max_months: number of most recent months to keep

    Returns:
        [{"month": "YYYY-MM", "count": n}, ...] ascending by month
    """
    counts = Counter(month_key(row['created_at']) for row in rows)
    # YYYY-MM sorts lexicographically in chronological order
    monthly = [{'month': month, 'count': counts[month]} for month in sorted(counts)]
    if max_months <= 0:
        return []
    return monthly[-max_months:]


def aggregate_by_job(
    rows: Iterable[Mapping[str, Any]],
    max_jobs: int = BY_JOB_MAX_JOBS,
) -> List[Dict[str, Any]]:
    """
    Count applications per job.

    Args:
        rows: mappings with 'job_id' and 'job_title' (either may be None)
        max_jobs: number of jobs to keep

    Returns:
        [{"job_id": ..., "job_title": ..., "count": n}, ...] descending by count
    """
    groups: Dict[str, Dict[str, Any]] = {}
    for row in rows:
        job_id = row.get('job_id') or UNKNOWN_JOB_ID
        group = groups.get(job_id)
        if group is None:
            group = {
                'job_id': job_id,
                'job_title': row.get('job_title') or UNKNOWN_JOB_TITLE,
                'count': 0,
            }
            groups[job_id] = group
        group['count'] += 1

    # sorted() is stable: equal counts stay in first-encountered order
    ranked = sorted(groups.values(), key=lambda g: g['count'], reverse=True)
    return ranked[:max_jobs]
