"""
Session resolution - who is calling?

The identity provider issues a signed JWT. Browsers send it in the session
cookie, API clients as ``Authorization: Bearer <token>``. The header wins
when both are present.

Usage:
    from utils.session import get_user_id_from_request

    user_id = get_user_id_from_request()   # None when not authenticated
"""
from typing import Optional

from flask import current_app, g, request


def get_token_from_request() -> Optional[str]:
    auth_header = request.headers.get('Authorization')
    if auth_header and auth_header.startswith('Bearer '):
        token = auth_header.split(' ', 1)[1].strip()
        return token or None

    cookie_name = current_app.config.get('AUTH_COOKIE_NAME', 'session')
    return request.cookies.get(cookie_name) or None


def get_user_id_from_request() -> Optional[str]:
    """
    Extract and verify the caller's user id.

    Returns:
        User id if the token is valid, None otherwise
    """
    from routes.auth import verify_token

    token = get_token_from_request()
    if not token:
        return None

    user_id = verify_token(token)
    if user_id:
        g.user_id = user_id
    return user_id
