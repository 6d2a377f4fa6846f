"""
Centralized Constants - SINGLE SOURCE OF TRUTH

Roles, chart limits and placeholder labels used by the HR dashboard
endpoint and its clients. Import from here, do not redefine elsewhere.
"""

# =============================================================================
# ROLES
# =============================================================================

ROLE_HR = 'HR'
ROLE_ADMIN = 'ADMIN'

# Roles allowed to read dashboard charts
DASHBOARD_ROLES = frozenset({ROLE_HR, ROLE_ADMIN})

# =============================================================================
# CHART LIMITS
# =============================================================================

# Monthly chart keeps the most recent N distinct months
MONTHLY_MAX_MONTHS = 12

# By-job chart keeps the top N jobs by application count
BY_JOB_MAX_JOBS = 10

# =============================================================================
# PLACEHOLDERS
# =============================================================================

UNKNOWN_JOB_TITLE = 'Unknown Job'
UNKNOWN_JOB_ID = 'unknown'

# =============================================================================
# ERROR CODES
# =============================================================================

UNKNOWN_ERROR_CODE = 'UNKNOWN_ERROR'
INTERNAL_ERROR_CODE = 'INTERNAL_ERROR'
