"""Pydantic schemas for the vector store setup."""

from pathlib import Path

from pydantic import BaseModel


class VectorStoreProvisionResult(BaseModel):
    """IDs created by a vector store setup run."""

    vector_store_id: str
    file_id: str
    attachment_id: str
    document_path: Path

    def env_line(self) -> str:
        """Configuration line the operator adds to ``.env.local``."""
        return f"OPENAI_VECTOR_STORE_ID={self.vector_store_id}"
