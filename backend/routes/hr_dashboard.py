"""
HR Dashboard Endpoints

Endpoints:
- /hr/dashboard/charts?type=monthly - applications per month (last 12 months)
- /hr/dashboard/charts?type=by-job  - applications per job (top 10)

HR users only see applications to jobs they created; ADMIN users see all.
Responses are never cached: the payload depends on the caller.
"""

import logging
import time
from typing import Optional

from flask import Blueprint, g, request

from api.serializers.response import success_envelope, envelope_response
from services.hr_charts.errors import ChartsError, UnexpectedFailure
from services.hr_charts.service import get_chart_data
from services.hr_charts.store import RecruitingStore
from utils.session import get_user_id_from_request

hr_dashboard_bp = Blueprint('hr_dashboard', __name__)

logger = logging.getLogger("hr_dashboard.charts")


def _log_charts_request(
    start: float,
    chart_type: Optional[str],
    rows: Optional[int] = None,
    err: Optional[Exception] = None,
) -> None:
    """One line per chart request: caller, chart type, elapsed ms, then rows or the error."""
    payload = {
        "type": chart_type,
        "user_id": g.get("user_id"),
        "elapsed_ms": int((time.perf_counter() - start) * 1000),
    }
    if err is None:
        payload["rows"] = rows
        logger.info("charts_success %s", payload)
    else:
        payload["status"] = getattr(err, "status_code", 500)
        payload["code"] = getattr(err, "code", None)
        logger.exception("charts_error %s err=%s", payload, err)


@hr_dashboard_bp.after_request
def add_cache_control(response):
    response.headers['Cache-Control'] = 'private, no-store'
    response.headers['Vary'] = 'Authorization, Cookie'
    return response


@hr_dashboard_bp.route("/charts", methods=["GET"])
def charts():
    """
    Aggregated chart data for the HR dashboard.

    Query params:
      - type: 'monthly' | 'by-job' (required)

    Returns:
      200 {"success": true, "data": [{"month": "2024-01", "count": 3}, ...]}
      200 {"success": true, "data": [{"job_id": "...", "job_title": "...", "count": 5}, ...]}
      4xx/5xx {"success": false, "error": "...", "code": "..."}
    """
    start = time.perf_counter()
    chart_type = request.args.get("type")

    try:
        user_id = get_user_id_from_request()
        data = get_chart_data(RecruitingStore(), user_id, request.args)
    except ChartsError as e:
        if e.status_code >= 500:
            _log_charts_request(start, chart_type, err=e)
        raise
    except Exception as e:
        _log_charts_request(start, chart_type, err=e)
        raise UnexpectedFailure() from e

    _log_charts_request(start, chart_type, rows=len(data))
    return envelope_response(success_envelope(data))
