"""
Endpoint identifiers, enum value sets and per-provider numeric settings.
"""

from enum import Enum


class ModelEndpoint(str, Enum):
    OPENAI = "openAI"
    AZURE_OPENAI = "azureOpenAI"
    CUSTOM = "custom"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"
    BEDROCK = "bedrock"
    ASSISTANTS = "assistants"
    AGENTS = "agents"


class BedrockProvider(str, Enum):
    ANTHROPIC = "anthropic"
    MISTRAL_AI = "mistral"
    COHERE = "cohere"
    META = "meta"
    AI21 = "ai21"
    AMAZON = "amazon"
    DEEPSEEK = "deepseek"
    MOONSHOT = "moonshot"
    OPENAI = "openai"


class ImageDetail(str, Enum):
    LOW = "low"
    AUTO = "auto"
    HIGH = "high"


class ReasoningEffort(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ReasoningSummary(str, Enum):
    NONE = "none"
    AUTO = "auto"
    CONCISE = "concise"
    DETAILED = "detailed"


# Joins an endpoint with a Bedrock provider, e.g. "bedrock-anthropic"
PROVIDER_SEPARATOR = "-"

# ============================================
# PROVIDER SETTINGS
# Numeric defaults and ranges per provider
# ============================================

OPENAI_SETTINGS = {
    "temperature": {"min": 0, "max": 2, "step": 0.01, "default": 1},
    "top_p": {"min": 0, "max": 1, "step": 0.01, "default": 1},
    "presence_penalty": {"min": -2, "max": 2, "step": 0.01, "default": 0},
    "frequency_penalty": {"min": -2, "max": 2, "step": 0.01, "default": 0},
    "resendFiles": {"default": True},
    "imageDetail": {"default": ImageDetail.AUTO.value},
}

ANTHROPIC_SETTINGS = {
    "temperature": {"min": 0, "max": 1, "step": 0.01, "default": 1},
    "topP": {"min": 0, "max": 1, "step": 0.01, "default": 0.7},
    "topK": {"min": 1, "max": 40, "step": 1, "default": 5},
    "maxOutputTokens": {"min": 1, "max": 128000, "step": 1, "default": 8192},
    "promptCache": {"default": True},
    "thinking": {"default": True},
    "thinkingBudget": {"min": 1024, "max": 200000, "step": 100, "default": 2000},
    "web_search": {"default": False},
}

GOOGLE_SETTINGS = {
    "temperature": {"min": 0, "max": 2, "step": 0.01, "default": 1},
    "topP": {"min": 0, "max": 1, "step": 0.01, "default": 0.95},
    "topK": {"min": 1, "max": 40, "step": 1, "default": 40},
    "maxOutputTokens": {"min": 1, "max": 64000, "step": 1, "default": 8192},
    "thinking": {"default": True},
    # -1 lets the model pick its own budget
    "thinkingBudget": {"min": -1, "max": 32768, "step": 1, "default": -1},
}
