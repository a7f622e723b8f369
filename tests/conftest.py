"""Shared test fixtures and configuration."""

import tempfile
from pathlib import Path

import httpx
import pytest

from gitrelax.config import LLMProvider
from gitrelax.llm.client import ChatClient
from gitrelax.llm.provider import ProviderConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_diff():
    """Sample staged diff for testing."""
    return """diff --git a/existing_file.py b/existing_file.py
index 1234567..abcdefg 100644
--- a/existing_file.py
+++ b/existing_file.py
@@ -1,5 +1,8 @@
 def main():
-    print("old")
+    print("new")
+
+def helper():
+    return True
"""


@pytest.fixture
def provider_config():
    """A resolved OpenRouter configuration with a fake key."""
    return ProviderConfig(
        provider=LLMProvider.OPENROUTER,
        api_key="sk-or-test-1234567890",
        model="google/gemini-2.0-flash-001",
        base_url="https://openrouter.ai/api/v1",
    )


class FakeProvider:
    """Simulated chat-completion endpoint for httpx.MockTransport.

    Records every request it receives and answers with `response`, or
    raises `error` when one is set.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.response = httpx.Response(
            200,
            json={"choices": [{"message": {"role": "assistant", "content": "ok"}}]},
        )
        self.error: Exception | None = None

    def reply_with(self, status_code: int, **kwargs) -> None:
        self.response = httpx.Response(status_code, **kwargs)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_provider():
    """A simulated provider with a default successful reply."""
    return FakeProvider()


@pytest.fixture
def chat_client(provider_config, fake_provider):
    """A ChatClient whose HTTP traffic goes to fake_provider."""
    http_client = httpx.Client(transport=httpx.MockTransport(fake_provider.handler))
    client = ChatClient(provider_config, http_client=http_client)
    yield client
    http_client.close()


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git and gh commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
