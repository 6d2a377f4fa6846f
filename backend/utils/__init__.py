"""
Utility modules for the backend.
"""
from .session import get_token_from_request, get_user_id_from_request

__all__ = [
    'get_token_from_request',
    'get_user_id_from_request',
]
