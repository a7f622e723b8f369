"""Configuration constants for git-relax LLM providers.

The provider is picked from environment variables, in this order:
  1. OPENROUTER_API_KEY -> OpenRouter
  2. OPENAI_API_KEY     -> OpenAI
LLM_MODEL overrides the selected provider's default model.

User preferences (base branch, request timeout) live in
~/.git-relax/config.yaml. See gitrelax.global_config.
"""

from enum import Enum


class LLMProvider(Enum):
    """Supported LLM providers."""

    OPENROUTER = "openrouter"
    OPENAI = "openai"


# ============================================================
# PROVIDER DEFAULTS
# ============================================================

DEFAULT_MODELS = {
    LLMProvider.OPENROUTER: "google/gemini-2.0-flash-001",
    LLMProvider.OPENAI: "gpt-4o-mini",
}

BASE_URLS = {
    LLMProvider.OPENROUTER: "https://openrouter.ai/api/v1",
    LLMProvider.OPENAI: "https://api.openai.com/v1",
}

# ============================================================
# ENVIRONMENT VARIABLES
# ============================================================

# Checked in priority order: the first one that is set wins.
API_KEY_ENV_VARS = {
    LLMProvider.OPENROUTER: "OPENROUTER_API_KEY",
    LLMProvider.OPENAI: "OPENAI_API_KEY",
}

MODEL_OVERRIDE_ENV_VAR = "LLM_MODEL"

# ============================================================
# FALLBACKS
# ============================================================

DEFAULT_BASE_BRANCH = "main"
