"""LLM module for git-relax.

This module provides the chat client used to turn diffs into commit
messages and pull request text. The provider is resolved from environment
variables; see gitrelax/config.py.
"""

from typing import Optional

from dotenv import load_dotenv

from gitrelax.llm.client import ChatClient
from gitrelax.llm.exceptions import (
    EmptyCompletionError,
    LLMError,
    MissingAPIKeyError,
    ProviderError,
    TransportError,
)
from gitrelax.llm.models import ChatMessage, ChatRequest, ChatResponse, Role
from gitrelax.llm.prompts import COMMIT, PR_BODY, PR_TITLE, PromptName, get_prompt
from gitrelax.llm.provider import ProviderConfig, resolve_provider_config

# Load environment variables from .env file
load_dotenv()


def get_client(timeout: Optional[float] = None) -> ChatClient:
    """Build a chat client from the current environment.

    Args:
        timeout: Optional request timeout in seconds.

    Returns:
        A ChatClient bound to the resolved provider.

    Raises:
        MissingAPIKeyError: If no API key is set.
    """
    config = resolve_provider_config()
    return ChatClient(config, timeout=timeout)


# Export commonly used items
__all__ = [
    "ChatClient",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "Role",
    "ProviderConfig",
    "resolve_provider_config",
    "get_client",
    "LLMError",
    "MissingAPIKeyError",
    "TransportError",
    "ProviderError",
    "EmptyCompletionError",
    "PromptName",
    "get_prompt",
    "COMMIT",
    "PR_TITLE",
    "PR_BODY",
]
