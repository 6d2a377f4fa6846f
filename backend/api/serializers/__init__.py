"""
Response serializers and envelope helpers.
"""

from .response import success_envelope, error_envelope, envelope_response

__all__ = ['success_envelope', 'error_envelope', 'envelope_response']
