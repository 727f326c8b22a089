"""Shared fixtures for the spec assistant tests."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from spec_assistant.ai.chat.service import SpecChatService
from spec_assistant.ai.openai.config import OpenAISettings


@pytest.fixture
def openai_settings():
    """Settings with a key and vector store, isolated from .env files."""
    return OpenAISettings(
        _env_file=None,
        api_key="sk-test",
        vector_store_id="vs_test123",
        model_name="gpt-5",
    )


@pytest.fixture
def mock_openai_client():
    """OpenAI client whose Responses API returns a plain answer."""
    client = MagicMock()
    client.responses.create = AsyncMock(
        return_value=SimpleNamespace(output_text="かぶり厚さは30mm以上", output=[])
    )
    return client


@pytest.fixture
def chat_service(openai_settings, mock_openai_client):
    return SpecChatService(settings=openai_settings, client=mock_openai_client)
