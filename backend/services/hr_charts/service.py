"""
HR Charts Service - authorize, scope, fetch, aggregate.

The endpoint calls get_chart_data(); nothing else touches the store.

Steps (strictly sequential, each depends on the previous):
    1. Authorize:  profile must exist and have role HR or ADMIN
    2. Validate:   chart type must be monthly or by-job
    3. Scope:      ADMIN → all jobs, HR → jobs they created
    4. Fetch:      applications visible under the scope
    5. Aggregate:  count, order, truncate

Usage:
    from services.hr_charts.service import get_chart_data

    rows = get_chart_data(store, user_id, request.args)
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional

from constants import ROLE_ADMIN, DASHBOARD_ROLES
from services.hr_charts.aggregations import aggregate_monthly, aggregate_by_job
from services.hr_charts.errors import (
    StoreError,
    StoreFailure,
    Unauthenticated,
    ProfileNotFound,
    Forbidden,
)
from services.hr_charts.params import ChartType, parse_chart_params
from services.hr_charts.scope import Scope, RestrictedScope, UNRESTRICTED

logger = logging.getLogger('hr_charts.service')


# =============================================================================
# CHART REGISTRY
# =============================================================================

@dataclass(frozen=True)
class ChartSpec:
    """Everything needed to build one chart: which rows, and how to count them."""
    chart_type: ChartType
    fetch: Callable[[Any, Scope], List[Dict[str, Any]]]  # store, scope -> rows
    aggregate: Callable[[List[Dict[str, Any]]], List[Dict[str, Any]]]
    fetch_error: str


CHART_REGISTRY = {
    ChartType.MONTHLY: ChartSpec(
        chart_type=ChartType.MONTHLY,
        fetch=lambda store, scope: store.fetch_applications(scope),
        aggregate=aggregate_monthly,
        fetch_error='Failed to fetch applications',
    ),
    ChartType.BY_JOB: ChartSpec(
        chart_type=ChartType.BY_JOB,
        fetch=lambda store, scope: store.fetch_applications_with_job_title(scope),
        aggregate=aggregate_by_job,
        fetch_error='Failed to fetch job data',
    ),
}


# =============================================================================
# PIPELINE STEPS
# =============================================================================

def authorize(store, user_id: Optional[str]) -> Dict[str, Any]:
    """Return the caller's profile, or raise the matching ChartsError."""
    if not user_id:
        raise Unauthenticated()

    try:
        profile = store.fetch_profile(user_id)
    except StoreError as e:
        logger.warning("profile_lookup_failed user_id=%s err=%s", user_id, e)
        raise ProfileNotFound()

    if not profile:
        raise ProfileNotFound()
    if profile.get('role') not in DASHBOARD_ROLES:
        logger.info("dashboard_forbidden user_id=%s role=%s", user_id, profile.get('role'))
        raise Forbidden()
    return profile


def resolve_scope(store, user_id: str, profile: Mapping[str, Any]) -> Scope:
    """ADMIN sees every job; HR sees only the jobs they created."""
    if profile.get('role') == ROLE_ADMIN:
        return UNRESTRICTED
    try:
        job_ids = store.fetch_job_ids(owner_id=user_id)
    except StoreError as e:
        raise StoreFailure.from_store_error(e, 'Failed to fetch jobs')
    return RestrictedScope.of(job_ids)


def build_chart(store, chart_type: ChartType, scope: Scope) -> List[Dict[str, Any]]:
    spec = CHART_REGISTRY[chart_type]
    try:
        rows = spec.fetch(store, scope)
    except StoreError as e:
        raise StoreFailure.from_store_error(e, spec.fetch_error)
    return spec.aggregate(rows)


def get_chart_data(store, user_id: Optional[str], args: Mapping[str, str]) -> List[Dict[str, Any]]:
    """
    Run the full chart pipeline for one request.

    Args:
        store: object exposing the RecruitingStore read methods
        user_id: authenticated caller id, or None
        args: query args (must carry 'type')

    Returns:
        Aggregate rows for the requested chart

    Raises:
        ChartsError: any failure, already carrying its status and message
    """
    profile = authorize(store, user_id)
    params = parse_chart_params(args)
    scope = resolve_scope(store, user_id, profile)

    if scope.is_empty():
        # HR user without jobs: nothing to aggregate, applications are not queried
        logger.info("empty_scope user_id=%s chart=%s", user_id, params.chart_type.value)
        return []

    data = build_chart(store, params.chart_type, scope)
    logger.debug(
        "chart_built user_id=%s chart=%s rows=%d",
        user_id, params.chart_type.value, len(data),
    )
    return data
