import math
import re
from typing import Any, Dict, List, Optional, Tuple

from .definitions import SettingDefinition, SettingsConfiguration

MAX_SETTINGS = 100

# Endpoint keys: "openAI", "azureOpenAI", "bedrock-anthropic", ...
ENDPOINT_KEY_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9_]*(-[a-zA-Z0-9_]+)?$")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_whole(value: float) -> bool:
    return isinstance(value, int) or value.is_integer()


def validate_setting_value(definition: SettingDefinition, value: Any) -> Tuple[bool, Optional[str]]:
    key = definition.key

    # Unset
    if value is None:
        return True, None

    if definition.type == "number":
        if not _is_number(value):
            return False, f"{key} must be a number"
        if not math.isfinite(value):
            return False, f"{key} must be a finite number"
        r = definition.range
        if r is not None:
            if not r.contains(value):
                return False, f"{key} must be between {r.min} and {r.max}, got {value}"
            # Whole steps (token counts, top-k) only take whole values
            if _is_whole(r.step) and not _is_whole(value):
                return False, f"{key} must be a whole number, got {value}"

    elif definition.type == "boolean":
        if not isinstance(value, bool):
            return False, f"{key} must be a boolean"

    elif definition.type == "string":
        if not isinstance(value, str):
            return False, f"{key} must be a string"

    elif definition.type == "enum":
        options = definition.options or []
        if value not in options:
            return False, f"{key} must be one of: {', '.join(options)}"

    elif definition.type == "array":
        if not isinstance(value, list):
            return False, f"{key} must be a list"
        if not all(isinstance(item, str) for item in value):
            return False, f"{key} items must be strings"
        if definition.min_tags is not None and len(value) < definition.min_tags:
            return False, f"{key} needs at least {definition.min_tags} items"
        if definition.max_tags is not None and len(value) > definition.max_tags:
            return False, f"{key} allows at most {definition.max_tags} items"

    return True, None


def validate_settings(
    configuration: SettingsConfiguration, values: Dict[str, Any]
) -> Tuple[bool, List[str]]:
    """
    Validate user-supplied values against a configuration.

    Args:
        configuration: Ordered definitions for the endpoint
        values: {setting key: value}

    Returns:
        (is_valid, list_of_error_messages)
    """
    if not isinstance(values, dict):
        return False, ["settings must be a JSON object"]

    if len(values) > MAX_SETTINGS:
        return False, [f"Too many settings (max {MAX_SETTINGS})"]

    definitions = {d.key: d for d in configuration}
    errors = []

    for key, value in values.items():
        definition = definitions.get(key)
        if definition is None:
            errors.append(f"Unknown setting: {key}")
            continue
        valid, error = validate_setting_value(definition, value)
        if not valid:
            errors.append(error)

    return len(errors) == 0, errors


def validate_endpoint_key(key: str) -> Tuple[bool, Optional[str]]:
    if not key:
        return False, "endpoint key is required"

    if not isinstance(key, str):
        return False, "endpoint key must be a string"

    if len(key) > 100:
        return False, "endpoint key too long"

    if not ENDPOINT_KEY_PATTERN.match(key):
        return False, "endpoint key contains invalid characters"

    return True, None
