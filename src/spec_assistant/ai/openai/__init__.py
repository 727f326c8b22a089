"""OpenAI module for AI operations."""

from spec_assistant.ai.openai.client import create_openai_client
from spec_assistant.ai.openai.config import OpenAISettings, get_openai_settings
from spec_assistant.ai.openai.exceptions import (
    OpenAIAuthenticationError,
    OpenAIError,
    OpenAIFileUploadError,
    OpenAIVectorStoreError,
)

__all__ = [
    "OpenAISettings",
    "get_openai_settings",
    "create_openai_client",
    "OpenAIError",
    "OpenAIAuthenticationError",
    "OpenAIFileUploadError",
    "OpenAIVectorStoreError",
]
