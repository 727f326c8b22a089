"""OpenAI API configuration."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class OpenAISettings(BaseSettings):
    """Settings for OpenAI API integration.

    Attributes:
        api_key: OpenAI API key for authentication
        vector_store_id: Vector store holding the specification document
        model_name: Model used for answering (e.g., 'gpt-5', 'gpt-4o')
        request_timeout: HTTP read timeout in seconds
        connect_timeout: HTTP connect timeout in seconds

    Note:
        ``api_key`` and ``vector_store_id`` are optional at load time so the
        server can boot without them. Requests fail with a configuration error
        until both are set. ``vector_store_id`` is printed by
        ``scripts/setup_vector_store.py``.
    """

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="OpenAI API key",
    )
    vector_store_id: str | None = Field(
        default=None,
        description="ID of the vector store searched by the file_search tool",
    )
    model_name: str = Field(
        default="gpt-5",
        description="OpenAI model used for answering",
    )
    request_timeout: float = Field(
        default=300.0,
        gt=0,
        description="HTTP request timeout in seconds",
    )
    connect_timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP connection timeout in seconds",
    )


@lru_cache
def get_openai_settings() -> OpenAISettings:
    """Get cached OpenAI settings instance.

    Returns:
        OpenAISettings: Cached settings instance
    """
    return OpenAISettings()
