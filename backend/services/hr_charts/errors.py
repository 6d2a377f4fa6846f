"""
HR Charts error taxonomy.

Every failure of the chart pipeline is one of these. The error envelope
middleware turns them into:

    {"success": false, "error": "<message>", "code": "<code>"}

with ``status_code`` as the HTTP status.
"""

from typing import Optional

from constants import UNKNOWN_ERROR_CODE, INTERNAL_ERROR_CODE


class StoreError(Exception):
    """Raised by the data store when a query fails."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code


class ChartsError(Exception):
    """Base class for failures surfaced to the caller."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None, code: Optional[str] = None):
        self.message = message or self.default_message
        self.code = code
        super().__init__(self.message)

    def to_dict(self):
        body = {"success": False, "error": self.message}
        if self.code:
            body["code"] = self.code
        return body


class Unauthenticated(ChartsError):
    status_code = 401
    default_message = "Unauthorized"


class ProfileNotFound(ChartsError):
    status_code = 404
    default_message = "Profile not found"


class Forbidden(ChartsError):
    status_code = 403
    default_message = "Forbidden: HR or ADMIN role required"


class InvalidParameter(ChartsError):
    status_code = 400
    default_message = "Invalid parameter"


class StoreFailure(ChartsError):
    status_code = 500
    default_message = "Failed to fetch data"

    @classmethod
    def from_store_error(cls, error: StoreError, fallback: Optional[str] = None):
        return cls(error.message or fallback, code=error.code or UNKNOWN_ERROR_CODE)


class UnexpectedFailure(ChartsError):
    status_code = 500

    def __init__(self, message: Optional[str] = None, code: Optional[str] = INTERNAL_ERROR_CODE):
        super().__init__(message, code)
