import logging
import secrets
from datetime import datetime, timezone
from functools import wraps
from flask import current_app, jsonify, request

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


def _unauthorized(code: str, message: str):
    return jsonify(
        {
            "error": {"code": code, "message": message},
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    ), 401


def require_auth(f):
    """Require a valid bearer token (app.config["PARAMHUB_TOKEN"])"""

    @wraps(f)
    def decorated_function(*args, **kwargs):
        auth_header = request.headers.get("Authorization")

        if not auth_header:
            logger.warning(f"Missing Authorization header from {request.remote_addr}")
            return _unauthorized("MISSING_TOKEN", "Authorization header is required")

        if not auth_header.startswith(BEARER_PREFIX):
            logger.warning(f"Malformed Authorization header from {request.remote_addr}")
            return _unauthorized("INVALID_FORMAT", "Authorization header must be: Bearer <token>")

        token = auth_header[len(BEARER_PREFIX):]

        # Constant-time comparison
        if not secrets.compare_digest(token, current_app.config["PARAMHUB_TOKEN"]):
            logger.warning(f"Rejected token from {request.remote_addr} for {request.path}")
            return _unauthorized("INVALID_TOKEN", "Authentication failed")

        return f(*args, **kwargs)

    return decorated_function
