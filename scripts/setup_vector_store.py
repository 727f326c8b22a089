"""
One-time setup of the specification vector store.

Requires OPENAI_API_KEY. The document path and store name come from
RAG_DOCUMENT_PATH (default: docs/spec.pdf) and RAG_VECTOR_STORE_NAME.

Usage:
    python scripts/setup_vector_store.py
"""

from spec_assistant.ai.rag.setup import main

if __name__ == "__main__":
    main()
