"""
Parameter settings per endpoint.
Defines which generation parameters each endpoint exposes, their metadata,
and how they are ordered for presets (flat) and for editing (two columns).
"""

import logging
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from .definitions import (
    SettingDefinition,
    SettingRange,
    SettingsColumns,
    SettingsConfiguration,
    create_definition,
    thaw_value,
)
from .settings_types import (
    ANTHROPIC_SETTINGS,
    GOOGLE_SETTINGS,
    OPENAI_SETTINGS,
    PROVIDER_SEPARATOR,
    BedrockProvider,
    ImageDetail,
    ModelEndpoint,
    ReasoningEffort,
    ReasoningSummary,
)

logger = logging.getLogger(__name__)

# Keys that only appear in column layouts, never in flat configurations
COLUMN_ONLY_KEYS = frozenset({"model"})

# ============================================
# BASE DEFINITIONS
# Provider-agnostic parameters refined per provider
# ============================================

BASE_DEFINITIONS: Dict[str, SettingDefinition] = {
    "model": SettingDefinition(
        key="model",
        label="com_ui_model",
        label_code=True,
        type="string",
        component="dropdown",
        option_type="model",
        select_placeholder="com_ui_select_model",
        search_placeholder="com_ui_select_search_model",
        search_placeholder_code=True,
        select_placeholder_code=True,
        column_span=4,
    ),
    "temperature": SettingDefinition(
        key="temperature",
        label="com_endpoint_temperature",
        label_code=True,
        description="com_endpoint_openai_temp",
        description_code=True,
        type="number",
        component="slider",
        option_type="model",
        column_span=4,
    ),
    "topP": SettingDefinition(
        key="topP",
        label="com_endpoint_top_p",
        label_code=True,
        description="com_endpoint_anthropic_topp",
        description_code=True,
        type="number",
        component="slider",
        option_type="model",
        column_span=4,
    ),
    "stop": SettingDefinition(
        key="stop",
        label="com_endpoint_stop",
        label_code=True,
        description="com_endpoint_openai_stop",
        description_code=True,
        placeholder="com_endpoint_stop_placeholder",
        placeholder_code=True,
        type="array",
        default=[],
        component="tags",
        option_type="conversation",
        min_tags=0,
        max_tags=4,
    ),
    "imageDetail": SettingDefinition(
        key="imageDetail",
        label="com_endpoint_plug_image_detail",
        label_code=True,
        description="com_endpoint_openai_detail",
        description_code=True,
        type="enum",
        default=OPENAI_SETTINGS["imageDetail"]["default"],
        component="slider",
        options=[ImageDetail.LOW.value, ImageDetail.AUTO.value, ImageDetail.HIGH.value],
        enum_mappings={
            ImageDetail.LOW.value: "com_ui_low",
            ImageDetail.AUTO.value: "com_ui_auto",
            ImageDetail.HIGH.value: "com_ui_high",
        },
        option_type="conversation",
        column_span=2,
    ),
}

# ============================================
# SHARED DEFINITIONS
# Identity and prompt fields reused unchanged by every provider
# ============================================

LIBRECHAT: Dict[str, SettingDefinition] = {
    "modelLabel": SettingDefinition(
        key="modelLabel",
        label="com_endpoint_custom_name",
        label_code=True,
        type="string",
        default="",
        component="input",
        placeholder="com_endpoint_openai_custom_name_placeholder",
        placeholder_code=True,
        option_type="conversation",
    ),
    "maxContextTokens": SettingDefinition(
        key="maxContextTokens",
        label="com_endpoint_context_tokens",
        label_code=True,
        type="number",
        component="input",
        placeholder="com_nav_theme_system",
        placeholder_code=True,
        description="com_endpoint_context_info",
        description_code=True,
        option_type="model",
        column_span=2,
    ),
    "resendFiles": SettingDefinition(
        key="resendFiles",
        label="com_endpoint_plug_resend_files",
        label_code=True,
        description="com_endpoint_openai_resend_files",
        description_code=True,
        type="boolean",
        default=OPENAI_SETTINGS["resendFiles"]["default"],
        component="switch",
        option_type="conversation",
        show_default=False,
        column_span=2,
    ),
    "promptPrefix": SettingDefinition(
        key="promptPrefix",
        label="com_endpoint_prompt_prefix",
        label_code=True,
        type="string",
        default="",
        component="textarea",
        placeholder="com_endpoint_openai_prompt_prefix_placeholder",
        placeholder_code=True,
        option_type="model",
    ),
}


def _toggle(key: str, label: str, description: str, default: bool, option_type: str) -> SettingDefinition:
    """Boolean switch with the default hidden, half a row wide"""
    return SettingDefinition(
        key=key,
        label=label,
        label_code=True,
        description=description,
        description_code=True,
        type="boolean",
        default=default,
        component="switch",
        option_type=option_type,
        show_default=False,
        column_span=2,
    )


# ============================================
# OPENAI
# ============================================

OPENAI_PARAMS: Dict[str, SettingDefinition] = {
    "chatGptLabel": create_definition(LIBRECHAT["modelLabel"], key="chatGptLabel"),
    "promptPrefix": LIBRECHAT["promptPrefix"],
    "temperature": create_definition(
        BASE_DEFINITIONS["temperature"],
        default=OPENAI_SETTINGS["temperature"]["default"],
        range=SettingRange.from_settings(OPENAI_SETTINGS["temperature"]),
    ),
    "top_p": create_definition(
        BASE_DEFINITIONS["topP"],
        key="top_p",
        default=OPENAI_SETTINGS["top_p"]["default"],
        range=SettingRange.from_settings(OPENAI_SETTINGS["top_p"]),
    ),
    "frequency_penalty": SettingDefinition(
        key="frequency_penalty",
        label="com_endpoint_frequency_penalty",
        label_code=True,
        description="com_endpoint_openai_freq",
        description_code=True,
        type="number",
        default=OPENAI_SETTINGS["frequency_penalty"]["default"],
        range=SettingRange.from_settings(OPENAI_SETTINGS["frequency_penalty"]),
        component="slider",
        option_type="model",
        column_span=4,
    ),
    "presence_penalty": SettingDefinition(
        key="presence_penalty",
        label="com_endpoint_presence_penalty",
        label_code=True,
        description="com_endpoint_openai_pres",
        description_code=True,
        type="number",
        default=OPENAI_SETTINGS["presence_penalty"]["default"],
        range=SettingRange.from_settings(OPENAI_SETTINGS["presence_penalty"]),
        component="slider",
        option_type="model",
        column_span=4,
    ),
    "max_tokens": SettingDefinition(
        key="max_tokens",
        label="com_endpoint_max_output_tokens",
        label_code=True,
        type="number",
        component="input",
        description="com_endpoint_openai_max_tokens",
        description_code=True,
        placeholder="com_nav_theme_system",
        placeholder_code=True,
        option_type="model",
        column_span=2,
    ),
    "reasoning_effort": SettingDefinition(
        key="reasoning_effort",
        label="com_endpoint_reasoning_effort",
        label_code=True,
        description="com_endpoint_openai_reasoning_effort",
        description_code=True,
        type="enum",
        default=ReasoningEffort.NONE.value,
        component="slider",
        options=[e.value for e in ReasoningEffort],
        enum_mappings={
            ReasoningEffort.NONE.value: "com_ui_none",
            ReasoningEffort.LOW.value: "com_ui_low",
            ReasoningEffort.MEDIUM.value: "com_ui_medium",
            ReasoningEffort.HIGH.value: "com_ui_high",
        },
        option_type="model",
        column_span=4,
    ),
    "useResponsesApi": _toggle(
        "useResponsesApi",
        "com_endpoint_use_responses_api",
        "com_endpoint_openai_use_responses_api",
        False,
        "model",
    ),
    "web_search": _toggle(
        "web_search",
        "com_ui_web_search",
        "com_endpoint_openai_use_web_search",
        False,
        "model",
    ),
    "reasoning_summary": SettingDefinition(
        key="reasoning_summary",
        label="com_endpoint_reasoning_summary",
        label_code=True,
        description="com_endpoint_openai_reasoning_summary",
        description_code=True,
        type="enum",
        default=ReasoningSummary.NONE.value,
        component="slider",
        options=[s.value for s in ReasoningSummary],
        enum_mappings={
            ReasoningSummary.NONE.value: "com_ui_none",
            ReasoningSummary.AUTO.value: "com_ui_auto",
            ReasoningSummary.CONCISE.value: "com_ui_concise",
            ReasoningSummary.DETAILED.value: "com_ui_detailed",
        },
        option_type="model",
        column_span=4,
    ),
    "disableStreaming": _toggle(
        "disableStreaming",
        "com_endpoint_disable_streaming_label",
        "com_endpoint_disable_streaming",
        False,
        "model",
    ),
}

# ============================================
# ANTHROPIC
# ============================================

ANTHROPIC_PARAMS: Dict[str, SettingDefinition] = {
    "maxOutputTokens": SettingDefinition(
        key="maxOutputTokens",
        label="com_endpoint_max_output_tokens",
        label_code=True,
        type="number",
        component="input",
        description="com_endpoint_anthropic_maxoutputtokens",
        description_code=True,
        placeholder="com_nav_theme_system",
        placeholder_code=True,
        range=SettingRange.from_settings(ANTHROPIC_SETTINGS["maxOutputTokens"]),
        option_type="model",
        column_span=2,
    ),
    "temperature": create_definition(
        BASE_DEFINITIONS["temperature"],
        default=ANTHROPIC_SETTINGS["temperature"]["default"],
        range=SettingRange.from_settings(ANTHROPIC_SETTINGS["temperature"]),
    ),
    "topP": create_definition(
        BASE_DEFINITIONS["topP"],
        default=ANTHROPIC_SETTINGS["topP"]["default"],
        range=SettingRange.from_settings(ANTHROPIC_SETTINGS["topP"]),
    ),
    "topK": SettingDefinition(
        key="topK",
        label="com_endpoint_top_k",
        label_code=True,
        description="com_endpoint_anthropic_topk",
        description_code=True,
        type="number",
        default=ANTHROPIC_SETTINGS["topK"]["default"],
        range=SettingRange.from_settings(ANTHROPIC_SETTINGS["topK"]),
        component="slider",
        option_type="model",
        column_span=4,
    ),
    "promptCache": _toggle(
        "promptCache",
        "com_endpoint_prompt_cache",
        "com_endpoint_anthropic_prompt_cache",
        ANTHROPIC_SETTINGS["promptCache"]["default"],
        "conversation",
    ),
    "thinking": _toggle(
        "thinking",
        "com_endpoint_thinking",
        "com_endpoint_anthropic_thinking",
        ANTHROPIC_SETTINGS["thinking"]["default"],
        "conversation",
    ),
    "thinkingBudget": SettingDefinition(
        key="thinkingBudget",
        label="com_endpoint_thinking_budget",
        label_code=True,
        description="com_endpoint_anthropic_thinking_budget",
        description_code=True,
        type="number",
        component="input",
        default=ANTHROPIC_SETTINGS["thinkingBudget"]["default"],
        range=SettingRange.from_settings(ANTHROPIC_SETTINGS["thinkingBudget"]),
        option_type="conversation",
        column_span=2,
    ),
    "web_search": _toggle(
        "web_search",
        "com_ui_web_search",
        "com_endpoint_anthropic_use_web_search",
        ANTHROPIC_SETTINGS["web_search"]["default"],
        "conversation",
    ),
}

# ============================================
# BEDROCK
# Gateway-wide fields plus per-family sampling tables
# ============================================

BEDROCK_PARAMS: Dict[str, SettingDefinition] = {
    "system": SettingDefinition(
        key="system",
        label="com_endpoint_prompt_prefix",
        label_code=True,
        type="string",
        default="",
        component="textarea",
        placeholder="com_endpoint_openai_prompt_prefix_placeholder",
        placeholder_code=True,
        option_type="model",
    ),
    "region": SettingDefinition(
        key="region",
        type="string",
        label="com_ui_region",
        label_code=True,
        component="combobox",
        option_type="conversation",
        select_placeholder="com_ui_select_region",
        search_placeholder="com_ui_select_search_region",
        search_placeholder_code=True,
        select_placeholder_code=True,
        column_span=2,
    ),
    "maxTokens": SettingDefinition(
        key="maxTokens",
        label="com_endpoint_max_output_tokens",
        label_code=True,
        type="number",
        component="input",
        description="com_endpoint_anthropic_maxoutputtokens",
        description_code=True,
        placeholder="com_nav_theme_system",
        placeholder_code=True,
        option_type="model",
        column_span=2,
    ),
    "temperature": create_definition(
        BASE_DEFINITIONS["temperature"],
        default=1,
        range=SettingRange(min=0, max=1, step=0.01),
    ),
    # Anthropic models on Bedrock accept a much wider top-k
    "topK": create_definition(
        ANTHROPIC_PARAMS["topK"],
        range=SettingRange(min=0, max=500, step=1),
    ),
    "topP": create_definition(
        BASE_DEFINITIONS["topP"],
        default=0.999,
        range=SettingRange(min=0, max=1, step=0.01),
    ),
}

MISTRAL_PARAMS: Dict[str, SettingDefinition] = {
    "temperature": create_definition(
        BASE_DEFINITIONS["temperature"],
        default=0.7,
        range=SettingRange(min=0, max=1, step=0.01),
    ),
    "topP": create_definition(
        BASE_DEFINITIONS["topP"],
        range=SettingRange(min=0, max=1, step=0.01),
    ),
}

COHERE_PARAMS: Dict[str, SettingDefinition] = {
    "temperature": create_definition(
        BASE_DEFINITIONS["temperature"],
        default=0.3,
        range=SettingRange(min=0, max=1, step=0.01),
    ),
    "topP": create_definition(
        BASE_DEFINITIONS["topP"],
        default=0.75,
        range=SettingRange(min=0.01, max=0.99, step=0.01),
    ),
}

META_PARAMS: Dict[str, SettingDefinition] = {
    "temperature": create_definition(
        BASE_DEFINITIONS["temperature"],
        default=0.5,
        range=SettingRange(min=0, max=1, step=0.01),
    ),
    "topP": create_definition(
        BASE_DEFINITIONS["topP"],
        default=0.9,
        range=SettingRange(min=0, max=1, step=0.01),
    ),
}

# ============================================
# GOOGLE
# ============================================

GOOGLE_PARAMS: Dict[str, SettingDefinition] = {
    "temperature": create_definition(
        BASE_DEFINITIONS["temperature"],
        default=GOOGLE_SETTINGS["temperature"]["default"],
        range=SettingRange.from_settings(GOOGLE_SETTINGS["temperature"]),
    ),
    "topP": create_definition(
        BASE_DEFINITIONS["topP"],
        default=GOOGLE_SETTINGS["topP"]["default"],
        range=SettingRange.from_settings(GOOGLE_SETTINGS["topP"]),
    ),
    "topK": SettingDefinition(
        key="topK",
        label="com_endpoint_top_k",
        label_code=True,
        description="com_endpoint_google_topk",
        description_code=True,
        type="number",
        default=GOOGLE_SETTINGS["topK"]["default"],
        range=SettingRange.from_settings(GOOGLE_SETTINGS["topK"]),
        component="slider",
        option_type="model",
        column_span=4,
    ),
    "maxOutputTokens": SettingDefinition(
        key="maxOutputTokens",
        label="com_endpoint_max_output_tokens",
        label_code=True,
        type="number",
        component="input",
        description="com_endpoint_google_maxoutputtokens",
        description_code=True,
        placeholder="com_nav_theme_system",
        placeholder_code=True,
        default=GOOGLE_SETTINGS["maxOutputTokens"]["default"],
        range=SettingRange.from_settings(GOOGLE_SETTINGS["maxOutputTokens"]),
        option_type="model",
        column_span=2,
    ),
    "thinking": _toggle(
        "thinking",
        "com_endpoint_thinking",
        "com_endpoint_google_thinking",
        GOOGLE_SETTINGS["thinking"]["default"],
        "conversation",
    ),
    # No default: an empty budget means "auto"
    "thinkingBudget": SettingDefinition(
        key="thinkingBudget",
        label="com_endpoint_thinking_budget",
        label_code=True,
        description="com_endpoint_google_thinking_budget",
        description_code=True,
        placeholder="com_ui_auto",
        placeholder_code=True,
        type="number",
        component="input",
        range=SettingRange.from_settings(GOOGLE_SETTINGS["thinkingBudget"]),
        option_type="conversation",
        column_span=2,
    ),
    "web_search": _toggle(
        "web_search",
        "com_endpoint_use_search_grounding",
        "com_endpoint_google_use_search_grounding",
        False,
        "model",
    ),
}

# ============================================
# CONFIGURATIONS
# Flat lists are preset order; col1/col2 are editor order
# ============================================

OPENAI_CONFIG: SettingsConfiguration = (
    LIBRECHAT["modelLabel"],
    LIBRECHAT["promptPrefix"],
    LIBRECHAT["maxContextTokens"],
    OPENAI_PARAMS["max_tokens"],
    OPENAI_PARAMS["temperature"],
    OPENAI_PARAMS["top_p"],
    OPENAI_PARAMS["frequency_penalty"],
    OPENAI_PARAMS["presence_penalty"],
    BASE_DEFINITIONS["stop"],
    LIBRECHAT["resendFiles"],
    BASE_DEFINITIONS["imageDetail"],
    OPENAI_PARAMS["web_search"],
    OPENAI_PARAMS["reasoning_effort"],
    OPENAI_PARAMS["useResponsesApi"],
    OPENAI_PARAMS["reasoning_summary"],
    OPENAI_PARAMS["disableStreaming"],
)

OPENAI_COLUMNS = SettingsColumns(
    col1=(
        BASE_DEFINITIONS["model"],
        LIBRECHAT["modelLabel"],
        LIBRECHAT["promptPrefix"],
    ),
    col2=(
        LIBRECHAT["maxContextTokens"],
        OPENAI_PARAMS["max_tokens"],
        OPENAI_PARAMS["temperature"],
        OPENAI_PARAMS["top_p"],
        OPENAI_PARAMS["frequency_penalty"],
        OPENAI_PARAMS["presence_penalty"],
        BASE_DEFINITIONS["stop"],
        LIBRECHAT["resendFiles"],
        BASE_DEFINITIONS["imageDetail"],
        OPENAI_PARAMS["reasoning_effort"],
        OPENAI_PARAMS["reasoning_summary"],
        OPENAI_PARAMS["useResponsesApi"],
        OPENAI_PARAMS["web_search"],
        OPENAI_PARAMS["disableStreaming"],
    ),
)

ANTHROPIC_CONFIG: SettingsConfiguration = (
    LIBRECHAT["modelLabel"],
    LIBRECHAT["promptPrefix"],
    LIBRECHAT["maxContextTokens"],
    ANTHROPIC_PARAMS["maxOutputTokens"],
    ANTHROPIC_PARAMS["temperature"],
    ANTHROPIC_PARAMS["topP"],
    ANTHROPIC_PARAMS["topK"],
    LIBRECHAT["resendFiles"],
    ANTHROPIC_PARAMS["promptCache"],
    ANTHROPIC_PARAMS["thinking"],
    ANTHROPIC_PARAMS["thinkingBudget"],
    ANTHROPIC_PARAMS["web_search"],
)

ANTHROPIC_COLUMNS = SettingsColumns(
    col1=(
        BASE_DEFINITIONS["model"],
        LIBRECHAT["modelLabel"],
        LIBRECHAT["promptPrefix"],
    ),
    col2=(
        LIBRECHAT["maxContextTokens"],
        ANTHROPIC_PARAMS["maxOutputTokens"],
        ANTHROPIC_PARAMS["temperature"],
        ANTHROPIC_PARAMS["topP"],
        ANTHROPIC_PARAMS["topK"],
        LIBRECHAT["resendFiles"],
        ANTHROPIC_PARAMS["promptCache"],
        ANTHROPIC_PARAMS["thinking"],
        ANTHROPIC_PARAMS["thinkingBudget"],
        ANTHROPIC_PARAMS["web_search"],
    ),
)

GOOGLE_CONFIG: SettingsConfiguration = (
    LIBRECHAT["modelLabel"],
    LIBRECHAT["promptPrefix"],
    LIBRECHAT["maxContextTokens"],
    GOOGLE_PARAMS["maxOutputTokens"],
    GOOGLE_PARAMS["temperature"],
    GOOGLE_PARAMS["topP"],
    GOOGLE_PARAMS["topK"],
    LIBRECHAT["resendFiles"],
    GOOGLE_PARAMS["thinking"],
    GOOGLE_PARAMS["thinkingBudget"],
    GOOGLE_PARAMS["web_search"],
)

GOOGLE_COLUMNS = SettingsColumns(
    col1=(
        BASE_DEFINITIONS["model"],
        LIBRECHAT["modelLabel"],
        LIBRECHAT["promptPrefix"],
    ),
    col2=(
        LIBRECHAT["maxContextTokens"],
        GOOGLE_PARAMS["maxOutputTokens"],
        GOOGLE_PARAMS["temperature"],
        GOOGLE_PARAMS["topP"],
        GOOGLE_PARAMS["topK"],
        LIBRECHAT["resendFiles"],
        GOOGLE_PARAMS["thinking"],
        GOOGLE_PARAMS["thinkingBudget"],
        GOOGLE_PARAMS["web_search"],
    ),
)

BEDROCK_ANTHROPIC_CONFIG: SettingsConfiguration = (
    LIBRECHAT["modelLabel"],
    BEDROCK_PARAMS["system"],
    LIBRECHAT["maxContextTokens"],
    BEDROCK_PARAMS["maxTokens"],
    BEDROCK_PARAMS["temperature"],
    BEDROCK_PARAMS["topP"],
    BEDROCK_PARAMS["topK"],
    BASE_DEFINITIONS["stop"],
    LIBRECHAT["resendFiles"],
    BEDROCK_PARAMS["region"],
    ANTHROPIC_PARAMS["thinking"],
    ANTHROPIC_PARAMS["thinkingBudget"],
)

BEDROCK_ANTHROPIC_COLUMNS = SettingsColumns(
    col1=(
        BASE_DEFINITIONS["model"],
        LIBRECHAT["modelLabel"],
        BEDROCK_PARAMS["system"],
        BASE_DEFINITIONS["stop"],
    ),
    col2=(
        LIBRECHAT["maxContextTokens"],
        BEDROCK_PARAMS["maxTokens"],
        BEDROCK_PARAMS["temperature"],
        BEDROCK_PARAMS["topP"],
        BEDROCK_PARAMS["topK"],
        LIBRECHAT["resendFiles"],
        BEDROCK_PARAMS["region"],
        ANTHROPIC_PARAMS["thinking"],
        ANTHROPIC_PARAMS["thinkingBudget"],
    ),
)

BEDROCK_MISTRAL_CONFIG: SettingsConfiguration = (
    LIBRECHAT["modelLabel"],
    LIBRECHAT["promptPrefix"],
    LIBRECHAT["maxContextTokens"],
    BEDROCK_PARAMS["maxTokens"],
    MISTRAL_PARAMS["temperature"],
    MISTRAL_PARAMS["topP"],
    LIBRECHAT["resendFiles"],
    BEDROCK_PARAMS["region"],
)

BEDROCK_MISTRAL_COLUMNS = SettingsColumns(
    col1=(
        BASE_DEFINITIONS["model"],
        LIBRECHAT["modelLabel"],
        LIBRECHAT["promptPrefix"],
    ),
    col2=(
        LIBRECHAT["maxContextTokens"],
        BEDROCK_PARAMS["maxTokens"],
        MISTRAL_PARAMS["temperature"],
        MISTRAL_PARAMS["topP"],
        LIBRECHAT["resendFiles"],
        BEDROCK_PARAMS["region"],
    ),
)

BEDROCK_COHERE_CONFIG: SettingsConfiguration = (
    LIBRECHAT["modelLabel"],
    LIBRECHAT["promptPrefix"],
    LIBRECHAT["maxContextTokens"],
    BEDROCK_PARAMS["maxTokens"],
    COHERE_PARAMS["temperature"],
    COHERE_PARAMS["topP"],
    LIBRECHAT["resendFiles"],
    BEDROCK_PARAMS["region"],
)

BEDROCK_COHERE_COLUMNS = SettingsColumns(
    col1=(
        BASE_DEFINITIONS["model"],
        LIBRECHAT["modelLabel"],
        LIBRECHAT["promptPrefix"],
    ),
    col2=(
        LIBRECHAT["maxContextTokens"],
        BEDROCK_PARAMS["maxTokens"],
        COHERE_PARAMS["temperature"],
        COHERE_PARAMS["topP"],
        LIBRECHAT["resendFiles"],
        BEDROCK_PARAMS["region"],
    ),
)

BEDROCK_GENERAL_CONFIG: SettingsConfiguration = (
    LIBRECHAT["modelLabel"],
    LIBRECHAT["promptPrefix"],
    LIBRECHAT["maxContextTokens"],
    META_PARAMS["temperature"],
    META_PARAMS["topP"],
    LIBRECHAT["resendFiles"],
    BEDROCK_PARAMS["region"],
)

BEDROCK_GENERAL_COLUMNS = SettingsColumns(
    col1=(
        BASE_DEFINITIONS["model"],
        LIBRECHAT["modelLabel"],
        LIBRECHAT["promptPrefix"],
    ),
    col2=(
        LIBRECHAT["maxContextTokens"],
        META_PARAMS["temperature"],
        META_PARAMS["topP"],
        LIBRECHAT["resendFiles"],
        BEDROCK_PARAMS["region"],
    ),
)

# ============================================
# REGISTRIES
# ============================================


def endpoint_key(
    endpoint: Union[ModelEndpoint, str], provider: Optional[Union[BedrockProvider, str]] = None
) -> str:
    """
    Build a registry key from an endpoint and an optional Bedrock provider.

    Example: endpoint_key("bedrock", "anthropic") -> "bedrock-anthropic"
    """
    key = endpoint.value if isinstance(endpoint, Enum) else endpoint
    if provider is None:
        return key
    provider = provider.value if isinstance(provider, Enum) else provider
    return f"{key}{PROVIDER_SEPARATOR}{provider}"


_BEDROCK = ModelEndpoint.BEDROCK

PARAM_SETTINGS: Mapping[str, SettingsConfiguration] = MappingProxyType(
    {
        endpoint_key(ModelEndpoint.OPENAI): OPENAI_CONFIG,
        endpoint_key(ModelEndpoint.AZURE_OPENAI): OPENAI_CONFIG,
        endpoint_key(ModelEndpoint.CUSTOM): OPENAI_CONFIG,
        endpoint_key(ModelEndpoint.ANTHROPIC): ANTHROPIC_CONFIG,
        endpoint_key(_BEDROCK, BedrockProvider.ANTHROPIC): BEDROCK_ANTHROPIC_CONFIG,
        endpoint_key(_BEDROCK, BedrockProvider.MISTRAL_AI): BEDROCK_MISTRAL_CONFIG,
        endpoint_key(_BEDROCK, BedrockProvider.COHERE): BEDROCK_COHERE_CONFIG,
        endpoint_key(_BEDROCK, BedrockProvider.META): BEDROCK_GENERAL_CONFIG,
        endpoint_key(_BEDROCK, BedrockProvider.AI21): BEDROCK_GENERAL_CONFIG,
        endpoint_key(_BEDROCK, BedrockProvider.AMAZON): BEDROCK_GENERAL_CONFIG,
        endpoint_key(_BEDROCK, BedrockProvider.DEEPSEEK): BEDROCK_GENERAL_CONFIG,
        endpoint_key(ModelEndpoint.GOOGLE): GOOGLE_CONFIG,
    }
)

PRESET_SETTINGS: Mapping[str, SettingsColumns] = MappingProxyType(
    {
        endpoint_key(ModelEndpoint.OPENAI): OPENAI_COLUMNS,
        endpoint_key(ModelEndpoint.AZURE_OPENAI): OPENAI_COLUMNS,
        endpoint_key(ModelEndpoint.CUSTOM): OPENAI_COLUMNS,
        endpoint_key(ModelEndpoint.ANTHROPIC): ANTHROPIC_COLUMNS,
        endpoint_key(_BEDROCK, BedrockProvider.ANTHROPIC): BEDROCK_ANTHROPIC_COLUMNS,
        endpoint_key(_BEDROCK, BedrockProvider.MISTRAL_AI): BEDROCK_MISTRAL_COLUMNS,
        endpoint_key(_BEDROCK, BedrockProvider.COHERE): BEDROCK_COHERE_COLUMNS,
        endpoint_key(_BEDROCK, BedrockProvider.META): BEDROCK_GENERAL_COLUMNS,
        endpoint_key(_BEDROCK, BedrockProvider.AI21): BEDROCK_GENERAL_COLUMNS,
        endpoint_key(_BEDROCK, BedrockProvider.AMAZON): BEDROCK_GENERAL_COLUMNS,
        endpoint_key(_BEDROCK, BedrockProvider.DEEPSEEK): BEDROCK_GENERAL_COLUMNS,
        endpoint_key(ModelEndpoint.GOOGLE): GOOGLE_COLUMNS,
    }
)

# Agents edit only the tunable column
AGENT_PARAM_SETTINGS: Mapping[str, SettingsConfiguration] = MappingProxyType(
    {key: columns.col2 for key, columns in PRESET_SETTINGS.items()}
)

logger.debug(
    f"Registered parameter settings for {len(PARAM_SETTINGS)} endpoints "
    f"({len(PRESET_SETTINGS)} with column layouts)"
)

# ============================================
# HELPER FUNCTIONS
# ============================================


def get_param_settings(
    endpoint: Union[ModelEndpoint, str], provider: Optional[Union[BedrockProvider, str]] = None
) -> Optional[SettingsConfiguration]:
    """Get the flat (preset) configuration for an endpoint, or None if unregistered"""
    return PARAM_SETTINGS.get(endpoint_key(endpoint, provider))


def get_preset_settings(
    endpoint: Union[ModelEndpoint, str], provider: Optional[Union[BedrockProvider, str]] = None
) -> Optional[SettingsColumns]:
    """Get the two-column configuration for an endpoint, or None if unregistered"""
    return PRESET_SETTINGS.get(endpoint_key(endpoint, provider))


def get_agent_param_settings(
    endpoint: Union[ModelEndpoint, str], provider: Optional[Union[BedrockProvider, str]] = None
) -> Optional[SettingsConfiguration]:
    """Get the agent configuration (column 2) for an endpoint, or None if unregistered"""
    return AGENT_PARAM_SETTINGS.get(endpoint_key(endpoint, provider))


def list_endpoint_keys() -> List[str]:
    """Registered endpoint keys, in registration order"""
    return list(PARAM_SETTINGS)


def get_default_values(configuration: SettingsConfiguration) -> Dict[str, Any]:
    """
    Collect declared defaults of a configuration.

    Args:
        configuration: Ordered definitions (flat or a single column)

    Returns:
        {key: default} for every definition with a default, in configuration order.
        Values are copies, safe to mutate.
    """
    return {
        definition.key: thaw_value(definition.default)
        for definition in configuration
        if definition.default is not None
    }
