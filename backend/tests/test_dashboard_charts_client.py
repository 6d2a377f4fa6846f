"""
Tests for DashboardChartsClient label shaping and failure handling.

No network: a fake session returns canned responses.
"""
import logging

import pytest
import requests

from services.dashboard_charts_client import (
    DashboardChartsClient,
    ChartsClientError,
    format_month_label,
    truncate_title,
)


class FakeResponse:
    def __init__(self, status_code=200, body=None, raise_on_json=False):
        self.status_code = status_code
        self._body = body
        self._raise = raise_on_json

    def json(self):
        if self._raise:
            raise ValueError("No JSON object could be decoded")
        return self._body


class FakeSession:
    def __init__(self, response=None, exc=None):
        self.headers = {}
        self.response = response
        self.exc = exc
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append((url, params, timeout))
        if self.exc:
            raise self.exc
        return self.response


def _client(response=None, exc=None):
    session = FakeSession(response, exc)
    return DashboardChartsClient("https://hr.example.com/", token="tok", session=session), session


class TestLabels:
    @pytest.mark.parametrize("month,label", [
        ("2024-01", "Jan 2024"),
        ("2023-12", "Dec 2023"),
        ("2025-06", "Jun 2025"),
    ])
    def test_month_label(self, month, label):
        assert format_month_label(month) == label

    def test_short_title_unchanged(self):
        assert truncate_title("Backend Engineer") == "Backend Engineer"

    def test_exactly_thirty_chars_unchanged(self):
        title = "x" * 30
        assert truncate_title(title) == title

    def test_long_title_truncated_with_ellipsis(self):
        title = "Senior Staff Platform Reliability Engineer"
        assert truncate_title(title) == title[:30] + "..."


class TestClient:
    def test_sends_bearer_token_and_type(self):
        client, session = _client(FakeResponse(body={"success": True, "data": []}))

        client.monthly_series()

        assert session.headers["Authorization"] == "Bearer tok"
        url, params, _ = session.calls[0]
        assert url == "https://hr.example.com/api/hr/dashboard/charts"
        assert params == {"type": "monthly"}

    def test_monthly_series(self):
        body = {"success": True, "data": [
            {"month": "2023-12", "count": 4},
            {"month": "2024-01", "count": 3},
        ]}
        client, _ = _client(FakeResponse(body=body))

        assert client.monthly_series() == [
            {"month": "Dec 2023", "applications": 4},
            {"month": "Jan 2024", "applications": 3},
        ]

    def test_top_jobs_limits_and_truncates(self):
        rows = [
            {"job_id": f"j{i}", "job_title": f"Position number {i} with a long descriptive title", "count": 10 - i}
            for i in range(10)
        ]
        client, session = _client(FakeResponse(body={"success": True, "data": rows}))

        bars = client.top_jobs()

        assert len(bars) == 8
        assert bars[0]["applications"] == 10
        assert all(len(b["job_title"]) <= 33 for b in bars)
        assert bars[0]["job_title"].endswith("...")
        assert session.calls[0][1] == {"type": "by-job"}

    def test_error_envelope_returns_empty(self, caplog):
        client, _ = _client(FakeResponse(403, {"success": False, "error": "Forbidden: HR or ADMIN role required"}))

        with caplog.at_level(logging.ERROR):
            assert client.monthly_series() == []

        assert any("Forbidden" in r.getMessage() for r in caplog.records)

    def test_non_json_returns_empty(self):
        client, _ = _client(FakeResponse(502, raise_on_json=True))
        assert client.top_jobs() == []

    def test_transport_error_returns_empty(self):
        client, _ = _client(exc=requests.ConnectionError("refused"))
        assert client.monthly_series() == []

    def test_fetch_raises_with_code(self):
        client, _ = _client(FakeResponse(500, {"success": False, "error": "timeout", "code": "57014"}))

        with pytest.raises(ChartsClientError) as exc:
            client.fetch("monthly")

        assert exc.value.status_code == 500
        assert exc.value.code == "57014"

    @pytest.mark.parametrize("row", [
        {"count": 3},
        {"month": "January", "count": 3},
        {"month": "2024-13", "count": 3},
        {"month": None, "count": 3},
    ])
    def test_malformed_month_row_returns_empty(self, row, caplog):
        client, _ = _client(FakeResponse(body={"success": True, "data": [row]}))

        with caplog.at_level(logging.ERROR):
            assert client.monthly_series() == []

        assert any("Malformed monthly row" in r.getMessage() for r in caplog.records)

    @pytest.mark.parametrize("row", [
        {"job_id": "j1", "job_title": None, "count": 2},
        {"job_id": "j1", "count": 2},
        {"job_id": "j1", "job_title": "Designer"},
    ])
    def test_malformed_job_row_returns_empty(self, row):
        client, _ = _client(FakeResponse(body={"success": True, "data": [row]}))
        assert client.top_jobs() == []
