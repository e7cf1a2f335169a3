import logging
from datetime import datetime, timezone
from flask import Blueprint, jsonify

from ..auth import require_auth
from ..param_settings import PRESET_SETTINGS, list_endpoint_keys

logger = logging.getLogger(__name__)

system_bp = Blueprint("system", __name__)

VERSION = "1.0.0"


@system_bp.route("/api/health", methods=["GET"])
def health():
    """Health check endpoint - no authentication required"""
    return jsonify(
        {
            "status": "healthy",
            "version": VERSION,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "endpoint_count": len(list_endpoint_keys()),
        }
    )


@system_bp.route("/api/auth/verify", methods=["POST"])
@require_auth
def verify_token():
    """Verify if the provided token is valid"""
    return jsonify({"valid": True, "message": "Token is valid"})


@system_bp.route("/api/endpoints", methods=["GET"])
@require_auth
def list_endpoints():
    """List registered endpoint keys"""
    endpoints = [
        {"key": key, "has_columns": key in PRESET_SETTINGS}
        for key in list_endpoint_keys()
    ]
    return jsonify({"endpoints": endpoints, "total": len(endpoints)})
