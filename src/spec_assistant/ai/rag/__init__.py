"""RAG (Retrieval-Augmented Generation) setup for the specification document."""

from spec_assistant.ai.rag.config import RagSettings, get_rag_settings
from spec_assistant.ai.rag.schemas import VectorStoreProvisionResult
from spec_assistant.ai.rag.vector_store_service import VectorStoreService

__all__ = [
    "RagSettings",
    "VectorStoreProvisionResult",
    "VectorStoreService",
    "get_rag_settings",
]
