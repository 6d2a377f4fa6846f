"""
HR dashboard chart pipeline.

- errors.py:       failure kinds and their HTTP statuses
- params.py:       query param validation (chart type)
- scope.py:        visibility scope (unrestricted / restricted to job ids)
- store.py:        SQLAlchemy reads of profiles, jobs, applications
- aggregations.py: monthly and by-job counting
- service.py:      the pipeline the endpoint calls
"""

from services.hr_charts.params import ChartType
from services.hr_charts.service import get_chart_data
from services.hr_charts.store import RecruitingStore

__all__ = ['ChartType', 'get_chart_data', 'RecruitingStore']
