"""Provider resolution.

Turns environment state into an immutable ProviderConfig. This is the only
place that reads credentials; the chat client receives the result.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from gitrelax.config import (
    API_KEY_ENV_VARS,
    BASE_URLS,
    DEFAULT_MODELS,
    MODEL_OVERRIDE_ENV_VAR,
    LLMProvider,
)
from gitrelax.llm.exceptions import MissingAPIKeyError


class ProviderConfig(BaseModel):
    """Resolved provider settings.

    Attributes:
        provider: Which provider the key belongs to.
        api_key: Secret API key, sent as a bearer token. Hidden from repr.
        model: Model identifier used for every request.
        base_url: API root; requests go to <base_url>/chat/completions.
    """

    model_config = ConfigDict(frozen=True)

    provider: LLMProvider
    api_key: str = Field(repr=False)
    model: str
    base_url: str

    @property
    def endpoint_url(self) -> str:
        """Full URL of the chat-completion endpoint."""
        return f"{self.base_url.rstrip('/')}/chat/completions"


def resolve_provider_config(environ: Optional[Mapping[str, str]] = None) -> ProviderConfig:
    """Resolve the provider configuration from environment variables.

    OPENROUTER_API_KEY always wins over OPENAI_API_KEY when both are set.

    Args:
        environ: Mapping to read from. Defaults to os.environ.

    Returns:
        A fully populated ProviderConfig.

    Raises:
        MissingAPIKeyError: If neither credential variable is set.
    """
    if environ is None:
        environ = os.environ

    model_override = environ.get(MODEL_OVERRIDE_ENV_VAR)

    for provider, env_var in API_KEY_ENV_VARS.items():
        api_key = environ.get(env_var)
        if api_key:
            return ProviderConfig(
                provider=provider,
                api_key=api_key,
                model=model_override or DEFAULT_MODELS[provider],
                base_url=BASE_URLS[provider],
            )

    raise MissingAPIKeyError(
        f"API key not found. Set it using:\n"
        f"  export {API_KEY_ENV_VARS[LLMProvider.OPENROUTER]}=your_key_here  (recommended)\n"
        f"  export {API_KEY_ENV_VARS[LLMProvider.OPENAI]}=your_key_here"
    )


def mask_api_key(api_key: str) -> str:
    """Mask an API key for display."""
    if len(api_key) > 12:
        return api_key[:8] + "..." + api_key[-4:]
    return "***"
