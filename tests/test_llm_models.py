"""Tests for gitrelax.llm.models, prompts and exceptions."""

import pytest
from pydantic import ValidationError

from gitrelax.llm.exceptions import (
    EmptyCompletionError,
    LLMError,
    MissingAPIKeyError,
    ProviderError,
    TransportError,
)
from gitrelax.llm.models import ChatMessage, ChatRequest, ChatResponse, Role
from gitrelax.llm.prompts import (
    COMMIT,
    PR_BODY,
    PR_TITLE,
    PROMPTS,
    PromptName,
    get_prompt,
)


class TestExceptions:
    """Tests for LLM exception classes."""

    def test_missing_api_key_is_llm_error(self):
        """Test that MissingAPIKeyError is an LLMError."""
        assert isinstance(MissingAPIKeyError("missing key"), LLMError)

    def test_provider_error_keeps_status_and_body(self):
        """Test ProviderError attributes and default message."""
        error = ProviderError(403, "forbidden")

        assert error.status_code == 403
        assert error.body == "forbidden"
        assert "forbidden" in str(error)
        assert "403" in str(error)

    def test_provider_error_custom_message(self):
        """Test ProviderError with an explicit message."""
        error = ProviderError(500, "raw", message="custom")
        assert str(error) == "custom"

    def test_distinct_error_types(self):
        """Test that empty completion and transport errors are distinct."""
        assert not issubclass(EmptyCompletionError, ProviderError)
        assert not issubclass(TransportError, ProviderError)


class TestChatRequest:
    """Tests for ChatRequest model."""

    def test_for_exchange_orders_messages(self):
        """Test that the system message precedes the user message."""
        request = ChatRequest.for_exchange("gpt-4o-mini", "P", "U")

        assert [m.role for m in request.messages] == [Role.SYSTEM, Role.USER]
        assert [m.content for m in request.messages] == ["P", "U"]

    def test_payload_wire_format(self):
        """Test serialization to the provider's JSON body."""
        request = ChatRequest.for_exchange("m", "P", "")

        assert request.to_payload() == {
            "model": "m",
            "messages": [
                {"role": "system", "content": "P"},
                {"role": "user", "content": ""},
            ],
        }

    def test_unknown_role_rejected(self):
        """Test that roles outside the enum are rejected."""
        with pytest.raises(ValidationError):
            ChatMessage(role="assistant", content="x")


class TestChatResponse:
    """Tests for ChatResponse model."""

    def test_first_content(self):
        response = ChatResponse.model_validate(
            {"choices": [{"message": {"content": "a"}}, {"message": {"content": "b"}}]}
        )
        assert response.first_content() == "a"

    def test_first_content_empty(self):
        response = ChatResponse.model_validate({"choices": []})
        assert response.first_content() is None

    def test_ignores_extra_fields(self):
        """Test that extra provider fields are ignored."""
        response = ChatResponse.model_validate_json(
            '{"id": "x", "choices": [{"index": 0, "message": {"role": "assistant", '
            '"content": "hi"}, "finish_reason": "stop"}], "usage": {}}'
        )
        assert response.first_content() == "hi"


class TestPrompts:
    """Tests for the prompt registry."""

    @pytest.mark.parametrize("prompt", [COMMIT, PR_TITLE, PR_BODY])
    def test_lists_allowed_types(self, prompt):
        assert "feat|fix|docs|refactor|test|chore" in prompt

    @pytest.mark.parametrize("prompt", [COMMIT, PR_TITLE, PR_BODY])
    def test_asks_for_output_only(self, prompt):
        assert "Output ONLY" in prompt

    def test_titles_are_lowercase_imperative(self):
        for prompt in (COMMIT, PR_TITLE):
            assert "lowercase" in prompt
            assert "imperative mood" in prompt
            assert "max 50 chars" in prompt

    def test_body_has_sections(self):
        assert "## Summary" in PR_BODY
        assert "## Changes" in PR_BODY

    def test_get_prompt_by_name(self):
        assert get_prompt(PromptName.COMMIT) is COMMIT
        assert get_prompt("pr-title") is PR_TITLE
        assert get_prompt("pr-body") is PR_BODY

    def test_get_prompt_unknown(self):
        with pytest.raises(ValueError):
            get_prompt("changelog")

    def test_registry_covers_all_names(self):
        assert set(PROMPTS) == set(PromptName)
