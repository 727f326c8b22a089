"""
One-time setup of the specification vector store.

Creates an OpenAI vector store, uploads the specification document and
attaches it to the store, then prints the ID to put into ``.env.local``.
Every run creates a new store.
"""

import asyncio
import sys

from openai import AsyncOpenAI

from spec_assistant.ai.openai import create_openai_client, get_openai_settings
from spec_assistant.ai.rag.config import RagSettings, get_rag_settings
from spec_assistant.ai.rag.vector_store_service import VectorStoreService
from spec_assistant.utils.logger import logger


async def setup_vector_store(
    client: AsyncOpenAI | None = None,
    rag_settings: RagSettings | None = None,
) -> None:
    """Provision the vector store and print the resulting configuration.

    Args:
        client: OpenAI client to use; built from settings and closed afterwards if omitted
        rag_settings: Document path and store name; loaded from the environment if omitted
    """
    rag_settings = rag_settings or get_rag_settings()
    owns_client = client is None
    if client is None:
        client = create_openai_client(get_openai_settings())

    try:
        result = await VectorStoreService(client).provision(
            document_path=rag_settings.document_path,
            name=rag_settings.vector_store_name,
        )
    finally:
        if owns_client:
            await client.close()

    print(f"✅ Vector Store created: {result.vector_store_id}")
    print(f"✅ File uploaded: {result.file_id}")
    print(f"✅ File attached to Vector Store: {result.attachment_id}")
    print()
    print("▼ Add this to .env.local ▼")
    print(result.env_line())


def main():
    try:
        asyncio.run(setup_vector_store())
    except Exception as e:
        logger.exception("Vector store setup failed", error=str(e))
        print(f"❌ Error: {e}", file=sys.stderr)
        sys.exit(1)
