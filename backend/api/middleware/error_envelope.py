"""
Error envelope middleware - Standardize all error responses.

Every error leaves the API as:
{
    "success": false,
    "error": "Profile not found",
    "code": "NOT_FOUND"          # optional
}

- ChartsError subclasses carry their own status, message and code
- werkzeug HTTPExceptions (404 route, 405 method, ...) keep their status
- anything else is logged and reported as a generic 500
"""

import logging
from flask import Flask, g
from werkzeug.exceptions import HTTPException

from api.serializers.response import error_envelope, envelope_response
from services.hr_charts.errors import ChartsError, UnexpectedFailure


logger = logging.getLogger('api.middleware.error')


def setup_error_handlers(app: Flask) -> None:
    """
    Set up standardized error handlers on Flask app.

    Args:
        app: Flask application instance
    """

    @app.errorhandler(ChartsError)
    def handle_charts_error(error):
        """Handle failures raised by the chart pipeline."""
        if error.status_code >= 500:
            logger.error(
                "charts_error status=%s code=%s message=%s request_id=%s",
                error.status_code, error.code, error.message,
                getattr(g, 'request_id', None),
            )
        return envelope_response(error.to_dict(), error.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_error(error):
        """Handle Flask/Werkzeug HTTP exceptions."""
        # "Method Not Allowed" -> "METHOD_NOT_ALLOWED"
        code = error.name.upper().replace(' ', '_')
        return envelope_response(error_envelope(error.description, code), error.code)

    @app.errorhandler(Exception)
    def handle_generic_error(error):
        """Handle unhandled Python exceptions."""
        request_id = getattr(g, 'request_id', None)

        logger.exception(
            f"Unhandled error: {error}",
            extra={
                "event": "unhandled_error",
                "request_id": request_id,
                "error_type": type(error).__name__,
            }
        )

        failure = UnexpectedFailure()
        return envelope_response(failure.to_dict(), failure.status_code)
