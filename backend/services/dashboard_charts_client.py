"""
HR Dashboard Charts Client - fetch chart data and shape it for display

Calls GET /api/hr/dashboard/charts and turns aggregate rows into labelled
series ready for a line or bar chart.

Any failure (transport error, non-JSON body, success: false envelope) is
terminal for that call: it is logged and an empty series is returned, so
the caller renders its "No data available" state.

Usage:
    from services.dashboard_charts_client import DashboardChartsClient

    client = DashboardChartsClient("https://hr.example.com", token=session_token)

    for point in client.monthly_series():
        print(point['month'], point['applications'])     # "Jan 2024", 3

    for bar in client.top_jobs():
        print(bar['job_title'], bar['applications'])
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import requests

logger = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

CHARTS_PATH = "/api/hr/dashboard/charts"
DEFAULT_TIMEOUT_SECONDS = 10.0

MONTH_NAMES = ['Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
               'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec']

# Bar chart labels longer than this are cut and suffixed with an ellipsis
MAX_TITLE_LENGTH = 30
ELLIPSIS = '...'

DEFAULT_TOP_JOBS = 8


class ChartsClientError(Exception):
    """Raised when the charts endpoint cannot produce data."""

    def __init__(self, message: str, status_code: Optional[int] = None, code: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.code = code


@dataclass
class ChartsResponse:
    """Wrapper for a charts API call."""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    error: Optional[str] = None
    code: Optional[str] = None
    status_code: Optional[int] = None


# =============================================================================
# Label formatting
# =============================================================================

def format_month_label(month: str) -> str:
    """'2024-01' -> 'Jan 2024'"""
    year, month_num = month.split('-')
    return f"{MONTH_NAMES[int(month_num) - 1]} {year}"


def truncate_title(title: str, max_length: int = MAX_TITLE_LENGTH) -> str:
    if len(title) > max_length:
        return title[:max_length] + ELLIPSIS
    return title


# =============================================================================
# Client
# =============================================================================

class DashboardChartsClient:
    """
    Thin HTTP client for the HR dashboard charts endpoint.
    """

    def __init__(
        self,
        base_url: str,
        token: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        if token:
            self.session.headers['Authorization'] = f"Bearer {token}"

    def fetch(self, chart_type: str) -> ChartsResponse:
        """
        Call the endpoint and unwrap its envelope.

        Raises:
            ChartsClientError: transport failure, non-JSON body or success: false
        """
        url = f"{self.base_url}{CHARTS_PATH}"
        try:
            response = self.session.get(url, params={'type': chart_type}, timeout=self.timeout)
        except requests.RequestException as e:
            raise ChartsClientError(f"Request failed: {e}")

        try:
            body = response.json()
        except ValueError:
            raise ChartsClientError(
                f"Non-JSON response (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        if not isinstance(body, dict) or body.get('success') is not True:
            error = body.get('error') if isinstance(body, dict) else None
            code = body.get('code') if isinstance(body, dict) else None
            raise ChartsClientError(
                error or f"Failed to fetch {chart_type} data",
                status_code=response.status_code,
                code=code,
            )

        return ChartsResponse(
            success=True,
            data=body.get('data') or [],
            status_code=response.status_code,
        )

    def _series(self, chart_type: str, shape: Callable[[Dict[str, Any]], Dict[str, Any]], limit: Optional[int] = None) -> List[Dict[str, Any]]:
        try:
            rows = self.fetch(chart_type).data
        except ChartsClientError as e:
            logger.error(
                "Error fetching %s data: %s (status=%s code=%s)",
                chart_type, e, e.status_code, e.code,
            )
            return []

        try:
            return [shape(row) for row in rows[:limit]]
        except (KeyError, ValueError, TypeError, IndexError, AttributeError) as e:
            logger.error("Malformed %s row in response: %r", chart_type, e)
            return []

    def monthly_series(self) -> List[Dict[str, Any]]:
        """Applications per month, labelled 'Mon YYYY', oldest first."""
        return self._series('monthly', lambda row: {
            'month': format_month_label(row['month']),
            'applications': row['count'],
        })

    def top_jobs(self, limit: int = DEFAULT_TOP_JOBS) -> List[Dict[str, Any]]:
        """Jobs with the most applications, titles truncated for axis labels."""
        return self._series('by-job', lambda row: {
            'job_title': truncate_title(row['job_title']),
            'applications': row['count'],
        }, limit=limit)
