"""LLM-related exception classes.

Contains all exception classes for chat-completion calls:
- LLMError: Base exception for LLM-related errors
- MissingAPIKeyError: Raised when no credential source is set
- TransportError: Raised when the request could not be sent or answered
- ProviderError: Raised when the provider responds with a failure status
- EmptyCompletionError: Raised when the provider returns no choices
"""

from typing import Optional


class LLMError(Exception):
    """Base exception for LLM-related errors."""

    pass


class MissingAPIKeyError(LLMError):
    """Raised when none of the supported API keys are set."""

    pass


class TransportError(LLMError):
    """Raised when the request could not be sent or no response was received."""

    pass


class ProviderError(LLMError):
    """Raised when the provider answers with a non-success status.

    Attributes:
        status_code: The HTTP status code returned by the provider.
        body: The raw response body text, kept for diagnosis.
    """

    def __init__(self, status_code: int, body: str, message: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        super().__init__(message or f"API error ({status_code}): {body}")


class EmptyCompletionError(LLMError):
    """Raised when a response parses but contains no choices."""

    pass
