"""
Global middleware for API requests.

Provides:
- Request ID injection and sampled request logging (X-Request-ID)
- Error envelope standardization ({"success": false, ...})
"""

from .request_logging import setup_request_id_middleware, setup_request_logging_middleware
from .error_envelope import setup_error_handlers

__all__ = [
    'setup_request_id_middleware',
    'setup_request_logging_middleware',
    'setup_error_handlers',
]
