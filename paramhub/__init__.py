from .definitions import SettingDefinition, SettingRange, SettingsColumns, create_definition
from .param_settings import (
    endpoint_key,
    get_agent_param_settings,
    get_default_values,
    get_param_settings,
    get_preset_settings,
    list_endpoint_keys,
)

__all__ = [
    "SettingDefinition",
    "SettingRange",
    "SettingsColumns",
    "create_definition",
    "endpoint_key",
    "get_agent_param_settings",
    "get_default_values",
    "get_param_settings",
    "get_preset_settings",
    "list_endpoint_keys",
]
