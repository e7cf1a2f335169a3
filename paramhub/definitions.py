"""
Definition model for configurable generation parameters.

A SettingDefinition describes one parameter (type, UI hint, range, options,
default). Provider tables never subclass a definition; they derive new values
from a base with create_definition().
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from types import MappingProxyType
from typing import Any, Dict, Optional, Tuple

SETTING_TYPES = ("string", "number", "boolean", "enum", "array")
COMPONENTS = ("input", "slider", "switch", "dropdown", "combobox", "tags", "textarea")
OPTION_TYPES = ("conversation", "model")

# Python field name -> serialized (camelCase) name
_SERIALIZED_NAMES = {
    "option_type": "optionType",
    "enum_mappings": "enumMappings",
    "label_code": "labelCode",
    "description_code": "descriptionCode",
    "placeholder_code": "placeholderCode",
    "select_placeholder": "selectPlaceholder",
    "select_placeholder_code": "selectPlaceholderCode",
    "search_placeholder": "searchPlaceholder",
    "search_placeholder_code": "searchPlaceholderCode",
    "show_default": "showDefault",
    "column_span": "columnSpan",
    "min_tags": "minTags",
    "max_tags": "maxTags",
}


@dataclass(frozen=True)
class SettingRange:
    min: float
    max: float
    step: float

    @classmethod
    def from_settings(cls, entry: Dict[str, Any]) -> "SettingRange":
        """Build a range from a provider settings entry ({min, max, step, ...})"""
        return cls(min=entry["min"], max=entry["max"], step=entry["step"])

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max

    def to_dict(self) -> dict:
        return {"min": self.min, "max": self.max, "step": self.step}


@dataclass(frozen=True)
class SettingDefinition:
    key: str
    type: str
    component: str
    option_type: str

    default: Any = None
    range: Optional[SettingRange] = None
    options: Optional[Tuple[str, ...]] = None
    enum_mappings: Optional[Mapping[str, str]] = None

    label: Optional[str] = None
    label_code: Optional[bool] = None
    description: Optional[str] = None
    description_code: Optional[bool] = None
    placeholder: Optional[str] = None
    placeholder_code: Optional[bool] = None
    select_placeholder: Optional[str] = None
    select_placeholder_code: Optional[bool] = None
    search_placeholder: Optional[str] = None
    search_placeholder_code: Optional[bool] = None
    show_default: Optional[bool] = None

    column_span: Optional[int] = None
    min_tags: Optional[int] = None
    max_tags: Optional[int] = None

    def __post_init__(self):
        # Lists become tuples and dicts read-only mappings, so a definition
        # shared by several configurations cannot be changed through one of them
        for name in ("default", "options", "enum_mappings"):
            object.__setattr__(self, name, freeze_value(getattr(self, name)))

    def __hash__(self):
        return hash((self.key, self.type, self.component, self.option_type))

    def to_dict(self) -> dict:
        """Serialize to the camelCase shape consumed by renderers, skipping unset fields"""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, SettingRange):
                value = value.to_dict()
            else:
                value = thaw_value(value)
            data[_SERIALIZED_NAMES.get(f.name, f.name)] = value
        return data


SettingsConfiguration = Tuple[SettingDefinition, ...]


@dataclass(frozen=True)
class SettingsColumns:
    col1: SettingsConfiguration = field(default_factory=tuple)
    col2: SettingsConfiguration = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "col1": [d.to_dict() for d in self.col1],
            "col2": [d.to_dict() for d in self.col2],
        }


def freeze_value(value: Any) -> Any:
    """Return an immutable copy of lists/tuples (as tuples) and dicts (as read-only mappings)"""
    if isinstance(value, (list, tuple)):
        return tuple(freeze_value(item) for item in value)
    if isinstance(value, Mapping):
        return MappingProxyType({k: freeze_value(v) for k, v in value.items()})
    return value


def thaw_value(value: Any) -> Any:
    """Inverse of freeze_value: fresh lists and dicts, safe for the caller to mutate"""
    if isinstance(value, tuple):
        return [thaw_value(item) for item in value]
    if isinstance(value, Mapping):
        return {k: thaw_value(v) for k, v in value.items()}
    return value


def create_definition(base: SettingDefinition, **overrides: Any) -> SettingDefinition:
    """
    Derive a new definition from a base by replacing fields.

    Overridden values are frozen on the way in, so later changes to the
    objects passed as overrides do not reach the new definition. Fields
    that are not overridden are immutable and shared with the base.

    Args:
        base: Definition to start from
        **overrides: Field values to replace (or set, if unset on the base)

    Returns:
        New SettingDefinition
    """
    return replace(base, **overrides)
