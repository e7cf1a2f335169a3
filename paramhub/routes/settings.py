import logging
import yaml
from flask import Blueprint, Response, jsonify, request

from ..auth import require_auth
from ..param_settings import (
    get_agent_param_settings,
    get_default_values,
    get_param_settings,
    get_preset_settings,
)
from ..validators import validate_endpoint_key, validate_settings

logger = logging.getLogger(__name__)

settings_bp = Blueprint("settings", __name__)

RESPONSE_FORMATS = ("json", "yaml")


def _error(code: str, message: str, status: int):
    return jsonify({"error": {"code": code, "message": message}}), status


def _not_found(endpoint_key: str):
    return _error("ENDPOINT_NOT_FOUND", f"No parameter settings registered for '{endpoint_key}'", 404)


def _check_key(endpoint_key: str):
    """Return an error response for a malformed key, else None"""
    valid, err = validate_endpoint_key(endpoint_key)
    if not valid:
        return _error("INVALID_ENDPOINT", err, 400)
    return None


def _render(payload: dict):
    fmt = request.args.get("format", "json")
    if fmt not in RESPONSE_FORMATS:
        return _error("INVALID_FORMAT", f"format must be one of: {', '.join(RESPONSE_FORMATS)}", 400)
    if fmt == "yaml":
        body = yaml.safe_dump(payload, sort_keys=False, default_flow_style=False)
        return Response(body, mimetype="application/x-yaml")
    return jsonify(payload)


# ============================================
# Lookups
# ============================================


@settings_bp.route("/api/param-settings/<endpoint_key>", methods=["GET"])
@require_auth
def param_settings(endpoint_key):
    """Flat (preset) configuration for an endpoint"""
    error = _check_key(endpoint_key)
    if error:
        return error

    configuration = get_param_settings(endpoint_key)
    if configuration is None:
        return _not_found(endpoint_key)

    return _render({"endpoint": endpoint_key, "settings": [d.to_dict() for d in configuration]})


@settings_bp.route("/api/preset-settings/<endpoint_key>", methods=["GET"])
@require_auth
def preset_settings(endpoint_key):
    """Two-column configuration for an endpoint"""
    error = _check_key(endpoint_key)
    if error:
        return error

    columns = get_preset_settings(endpoint_key)
    if columns is None:
        return _not_found(endpoint_key)

    return _render({"endpoint": endpoint_key, **columns.to_dict()})


@settings_bp.route("/api/agent-param-settings/<endpoint_key>", methods=["GET"])
@require_auth
def agent_param_settings(endpoint_key):
    """Agent configuration (column 2) for an endpoint"""
    error = _check_key(endpoint_key)
    if error:
        return error

    configuration = get_agent_param_settings(endpoint_key)
    if configuration is None:
        return _not_found(endpoint_key)

    return _render({"endpoint": endpoint_key, "settings": [d.to_dict() for d in configuration]})


@settings_bp.route("/api/param-settings/<endpoint_key>/defaults", methods=["GET"])
@require_auth
def param_defaults(endpoint_key):
    """Declared defaults of an endpoint's flat configuration"""
    error = _check_key(endpoint_key)
    if error:
        return error

    configuration = get_param_settings(endpoint_key)
    if configuration is None:
        return _not_found(endpoint_key)

    return _render({"endpoint": endpoint_key, "defaults": get_default_values(configuration)})


# ============================================
# Validation
# ============================================


@settings_bp.route("/api/param-settings/<endpoint_key>/validate", methods=["POST"])
@require_auth
def validate_param_values(endpoint_key):
    """Validate a {key: value} mapping against an endpoint's configuration"""
    error = _check_key(endpoint_key)
    if error:
        return error

    configuration = get_param_settings(endpoint_key)
    if configuration is None:
        return _not_found(endpoint_key)

    data = request.get_json(silent=True)
    if data is None:
        return _error("INVALID_REQUEST", "Request body must be JSON", 400)

    try:
        valid, errors = validate_settings(configuration, data)
    except Exception as e:
        logger.error(f"Failed to validate settings for {endpoint_key}: {e}", exc_info=True)
        return _error("INTERNAL_ERROR", str(e), 500)

    if not valid:
        logger.debug(f"Rejected settings for {endpoint_key}: {errors}")
    return jsonify({"endpoint": endpoint_key, "valid": valid, "errors": errors})
