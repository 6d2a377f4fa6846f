"""
Response envelope helpers.

Every API response uses the same discriminated shape:

    success: {"success": true, "data": [...]}
    failure: {"success": false, "error": "<message>", "code": "<code>"}

"code" is only present when a machine-readable code exists.
"""

from typing import Any, Dict, Optional, Tuple

from flask import g, jsonify


def success_envelope(data: Any) -> Dict[str, Any]:
    """Build a success envelope around ``data``."""
    return {"success": True, "data": data}


def error_envelope(message: str, code: Optional[str] = None) -> Dict[str, Any]:
    """Build a failure envelope."""
    body = {"success": False, "error": message}
    if code:
        body["code"] = code
    return body


def envelope_response(body: Dict[str, Any], status_code: int = 200) -> Tuple[Any, int]:
    """
    jsonify an envelope and attach X-Request-ID.

    Returns:
        Tuple of (response, status_code) for Flask
    """
    response = jsonify(body)
    request_id = getattr(g, 'request_id', None)
    if request_id:
        response.headers['X-Request-ID'] = request_id
    return response, status_code
