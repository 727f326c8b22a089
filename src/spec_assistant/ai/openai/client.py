"""Construction of the async OpenAI client."""

import httpx
from openai import AsyncOpenAI

from spec_assistant.ai.openai.config import OpenAISettings
from spec_assistant.ai.openai.exceptions import OpenAIAuthenticationError
from spec_assistant.utils.logger import logger


def create_openai_client(settings: OpenAISettings) -> AsyncOpenAI:
    """Build an ``AsyncOpenAI`` client from settings.

    Args:
        settings: OpenAI settings providing the key and timeouts

    Returns:
        AsyncOpenAI: Configured client

    Raises:
        OpenAIAuthenticationError: If no key is configured or the client fails to build
    """
    if not settings.api_key:
        raise OpenAIAuthenticationError("OPENAI_API_KEY が未設定です")

    try:
        timeout = httpx.Timeout(
            timeout=settings.request_timeout,
            connect=settings.connect_timeout,
        )
        client = AsyncOpenAI(api_key=settings.api_key, timeout=timeout)
    except Exception as e:
        logger.error("[OPENAI] Failed to initialize client", error=str(e))
        raise OpenAIAuthenticationError(
            f"Failed to authenticate with OpenAI: {e}", e
        ) from e

    logger.info(
        "[OPENAI] Client initialized",
        timeout_seconds=settings.request_timeout,
    )
    return client
