"""
API package - request/response plumbing shared by all blueprints.

This package provides:
- Response envelope builders (serializers)
- Global middleware (request id, request logging, error envelope)
"""

from .serializers import success_envelope, error_envelope, envelope_response

__all__ = ['success_envelope', 'error_envelope', 'envelope_response']
