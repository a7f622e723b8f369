"""Chat-completion client.

Performs one request/response exchange against an OpenAI-compatible
endpoint and returns the generated text verbatim.
"""

import logging
from typing import Optional

import httpx
from openai import APIConnectionError, APIStatusError, OpenAI
from pydantic import ValidationError

from gitrelax.config import LLMProvider
from gitrelax.llm.exceptions import (
    EmptyCompletionError,
    LLMError,
    ProviderError,
    TransportError,
)
from gitrelax.llm.models import ChatRequest, ChatResponse
from gitrelax.llm.provider import ProviderConfig

logger = logging.getLogger(__name__)

# Attribution headers OpenRouter uses to identify the calling app
OPENROUTER_HEADERS = {
    "HTTP-Referer": "https://github.com/git-relax",
    "X-Title": "git-relax",
}


class ChatClient:
    """Client for a single-shot chat completion.

    The client owns its ProviderConfig and never reads the environment.
    Calls are not retried; every failure is raised as an LLMError subclass.
    """

    def __init__(
        self,
        config: ProviderConfig,
        http_client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ):
        """Initialize the chat client.

        Args:
            config: The resolved provider configuration.
            http_client: Optional httpx client to send requests through.
            timeout: Request timeout in seconds. Defaults to the SDK's timeout.
        """
        self.config = config

        client_kwargs = {
            "api_key": config.api_key,
            "base_url": config.base_url,
            "max_retries": 0,
        }
        if config.provider == LLMProvider.OPENROUTER:
            client_kwargs["default_headers"] = OPENROUTER_HEADERS
        if http_client is not None:
            client_kwargs["http_client"] = http_client
        if timeout is not None:
            client_kwargs["timeout"] = timeout

        self._client = OpenAI(**client_kwargs)
        # Drop OPENAI_ORG_ID / OPENAI_PROJECT_ID picked up from the environment
        self._client.organization = None
        self._client.project = None

    @property
    def model(self) -> str:
        return self.config.model

    def chat(self, system_prompt: str, user_content: str) -> str:
        """Send one system + user exchange and return the generated text.

        Args:
            system_prompt: Instruction text sent with the system role.
            user_content: Content to act on, usually a diff. May be empty.

        Returns:
            The content of the first choice, unmodified.

        Raises:
            TransportError: If the request could not be sent or answered.
            ProviderError: If the provider returned a failure status.
            EmptyCompletionError: If the response contains no choices.
            LLMError: If the response body is not a chat completion.
        """
        request = ChatRequest.for_exchange(self.config.model, system_prompt, user_content)

        logger.debug(
            "POST %s (model=%s, %d chars of user content)",
            self.config.endpoint_url,
            self.model,
            len(user_content),
        )

        try:
            raw = self._client.chat.completions.with_raw_response.create(**request.to_payload())
        except APIStatusError as e:
            logger.debug("Provider returned status %s", e.status_code)
            raise ProviderError(e.status_code, e.response.text) from e
        except APIConnectionError as e:
            raise TransportError(f"Request to {self.config.endpoint_url} failed: {e}") from e

        body = raw.http_response.text
        logger.debug("Provider returned status %s", raw.http_response.status_code)

        try:
            response = ChatResponse.model_validate_json(body)
        except ValidationError as e:
            raise LLMError(f"Unexpected response from provider.\nError: {e}\nRaw response:\n{body}") from e

        content = response.first_content()
        if content is None:
            raise EmptyCompletionError("No response: the provider returned zero choices")

        return content
