"""
Authentication Routes - JWT session tokens

Includes:
- Token issue/verify helpers used by the session resolver and the CLI
- /me endpoint reporting the caller's identity and dashboard role
"""
from datetime import datetime, timedelta, timezone

import jwt
from flask import Blueprint, current_app

from api.serializers.response import success_envelope, envelope_response
from services.hr_charts.errors import Unauthenticated, ProfileNotFound
from services.hr_charts.store import RecruitingStore
from utils.session import get_user_id_from_request

auth_bp = Blueprint('auth', __name__)


def generate_token(user_id, expires_in_hours=None):
    """Generate JWT token for user"""
    config = current_app.config
    hours = expires_in_hours if expires_in_hours is not None else config['JWT_EXPIRATION_HOURS']
    now = datetime.now(timezone.utc)
    payload = {
        'user_id': user_id,
        'exp': now + timedelta(hours=hours),
        'iat': now,
    }
    return jwt.encode(payload, config['JWT_SECRET'], algorithm=config['JWT_ALGORITHM'])


def verify_token(token):
    """Verify JWT token and return user_id"""
    config = current_app.config
    try:
        payload = jwt.decode(token, config['JWT_SECRET'], algorithms=[config['JWT_ALGORITHM']])
        return payload.get('user_id')
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None


@auth_bp.route("/me", methods=["GET"])
def get_current_user():
    """Get current user id and role (requires authentication)"""
    user_id = get_user_id_from_request()
    if not user_id:
        raise Unauthenticated()

    profile = RecruitingStore().fetch_profile(user_id)
    if not profile:
        raise ProfileNotFound()

    return envelope_response(success_envelope(profile))
