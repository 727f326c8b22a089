"""Service for provisioning the OpenAI vector store of the specification."""

from pathlib import Path

from openai import AsyncOpenAI

from spec_assistant.ai.openai.exceptions import (
    OpenAIFileUploadError,
    OpenAIVectorStoreError,
)
from spec_assistant.ai.rag.schemas import VectorStoreProvisionResult
from spec_assistant.utils.logger import logger


class VectorStoreService:
    """Creates a vector store and loads the specification document into it."""

    def __init__(self, client: AsyncOpenAI):
        """Initialize the vector store service.

        Args:
            client: OpenAI client used for all remote calls
        """
        self.client = client

    async def create_vector_store(self, name: str) -> str:
        """Create a new vector store.

        Args:
            name: Display name of the store

        Returns:
            str: Vector store ID
        """
        try:
            logger.info("[RAG] Creating vector store", store_name=name)
            vector_store = await self.client.vector_stores.create(name=name)
        except Exception as e:
            logger.error("[RAG] Failed to create vector store", error=str(e))
            raise OpenAIVectorStoreError(f"Failed to create vector store: {e}", e) from e

        logger.info("[RAG] Created vector store", vector_store_id=vector_store.id)
        return vector_store.id

    async def upload_document(self, document_path: Path) -> str:
        """Upload a local document for use with file search.

        Args:
            document_path: Path to the document

        Returns:
            str: File ID

        Raises:
            OpenAIFileUploadError: If the file does not exist or the upload fails
        """
        path = Path(document_path)
        if not path.exists():
            raise OpenAIFileUploadError(f"PDFが見つかりません: {path}")

        try:
            logger.info("[RAG] Uploading file", file_path=str(path))
            with open(path, "rb") as f:
                uploaded_file = await self.client.files.create(
                    file=f,
                    purpose="assistants",
                )
        except Exception as e:
            logger.error("[RAG] File upload failed", file_path=str(path), error=str(e))
            raise OpenAIFileUploadError(f"Failed to upload file: {e}", e) from e

        logger.info("[RAG] File uploaded", file_id=uploaded_file.id)
        return uploaded_file.id

    async def attach_file(self, vector_store_id: str, file_id: str) -> str:
        """Attach an uploaded file to a vector store.

        Args:
            vector_store_id: Target vector store
            file_id: Uploaded file

        Returns:
            str: ID of the vector store file
        """
        try:
            attached = await self.client.vector_stores.files.create(
                vector_store_id=vector_store_id,
                file_id=file_id,
            )
        except Exception as e:
            logger.error(
                "[RAG] Failed to attach file",
                vector_store_id=vector_store_id,
                file_id=file_id,
                error=str(e),
            )
            raise OpenAIVectorStoreError(
                f"Failed to attach file {file_id} to vector store {vector_store_id}: {e}",
                e,
            ) from e

        logger.info(
            "[RAG] Attached file to vector store",
            vector_store_id=vector_store_id,
            attachment_id=attached.id,
        )
        return attached.id

    async def provision(
        self, document_path: Path, name: str
    ) -> VectorStoreProvisionResult:
        """Create a vector store holding ``document_path``.

        Every call creates a new store; nothing is reused. The first failing
        step aborts the run.

        Args:
            document_path: Specification document to index
            name: Display name of the new store

        Returns:
            VectorStoreProvisionResult: IDs of the created resources
        """
        path = Path(document_path)
        if not path.exists():
            raise OpenAIFileUploadError(f"PDFが見つかりません: {path}")

        vector_store_id = await self.create_vector_store(name)
        file_id = await self.upload_document(path)
        attachment_id = await self.attach_file(vector_store_id, file_id)

        return VectorStoreProvisionResult(
            vector_store_id=vector_store_id,
            file_id=file_id,
            attachment_id=attachment_id,
            document_path=path,
        )
