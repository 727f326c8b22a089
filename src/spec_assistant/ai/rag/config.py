"""Configuration for provisioning the specification vector store."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RagSettings(BaseSettings):
    """Settings for the one-time vector store setup.

    All settings can be configured via environment variables with RAG_ prefix.
    """

    model_config = SettingsConfigDict(
        env_prefix="RAG_",
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    document_path: Path = Field(
        default=Path("docs/spec.pdf"),
        description="Specification document uploaded to the vector store",
    )
    vector_store_name: str = Field(
        default="施工管理-建築工事標準仕様書",
        description="Display name of the created vector store",
    )


@lru_cache
def get_rag_settings() -> RagSettings:
    """Get cached RAG settings instance."""
    return RagSettings()
