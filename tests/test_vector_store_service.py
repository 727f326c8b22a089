"""Tests for the vector store setup service."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from spec_assistant.ai.openai.exceptions import (
    OpenAIFileUploadError,
    OpenAIVectorStoreError,
)
from spec_assistant.ai.rag.vector_store_service import VectorStoreService


@pytest.fixture
def document(tmp_path):
    path = tmp_path / "spec.pdf"
    path.write_bytes(b"%PDF-1.4 test")
    return path


@pytest.fixture
def calls():
    return []


@pytest.fixture
def openai_client(calls):
    """OpenAI client recording the order of remote calls."""

    async def create_store(**kwargs):
        calls.append(("vector_stores.create", kwargs))
        return SimpleNamespace(id="vs_abc")

    async def upload(**kwargs):
        calls.append(("files.create", kwargs))
        return SimpleNamespace(id="file_123")

    async def attach(**kwargs):
        calls.append(("vector_stores.files.create", kwargs))
        return SimpleNamespace(id="vsf_456")

    client = MagicMock()
    client.vector_stores.create = AsyncMock(side_effect=create_store)
    client.files.create = AsyncMock(side_effect=upload)
    client.vector_stores.files.create = AsyncMock(side_effect=attach)
    return client


class TestVectorStoreService:
    """Test suite for VectorStoreService."""

    @pytest.mark.asyncio
    async def test_provision_creates_uploads_and_attaches(
        self, openai_client, calls, document
    ):
        service = VectorStoreService(openai_client)

        result = await service.provision(document, name="施工管理-建築工事標準仕様書")

        assert [name for name, _ in calls] == [
            "vector_stores.create",
            "files.create",
            "vector_stores.files.create",
        ]
        assert calls[0][1] == {"name": "施工管理-建築工事標準仕様書"}
        assert calls[1][1]["purpose"] == "assistants"
        assert calls[2][1] == {"vector_store_id": "vs_abc", "file_id": "file_123"}

        assert result.vector_store_id == "vs_abc"
        assert result.file_id == "file_123"
        assert result.attachment_id == "vsf_456"
        assert result.env_line() == "OPENAI_VECTOR_STORE_ID=vs_abc"

    @pytest.mark.asyncio
    async def test_missing_document_fails_before_remote_calls(
        self, openai_client, calls, tmp_path
    ):
        service = VectorStoreService(openai_client)

        with pytest.raises(OpenAIFileUploadError) as exc_info:
            await service.provision(tmp_path / "missing.pdf", name="store")

        assert "PDFが見つかりません" in exc_info.value.message
        assert calls == []

    @pytest.mark.asyncio
    async def test_upload_failure_stops_before_attach(
        self, openai_client, calls, document
    ):
        openai_client.files.create = AsyncMock(side_effect=RuntimeError("upload boom"))
        service = VectorStoreService(openai_client)

        with pytest.raises(OpenAIFileUploadError) as exc_info:
            await service.provision(document, name="store")

        assert isinstance(exc_info.value.original_error, RuntimeError)
        assert [name for name, _ in calls] == ["vector_stores.create"]
        openai_client.vector_stores.files.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_failure_is_wrapped(self, openai_client, document):
        openai_client.vector_stores.create = AsyncMock(side_effect=RuntimeError("quota"))
        service = VectorStoreService(openai_client)

        with pytest.raises(OpenAIVectorStoreError) as exc_info:
            await service.provision(document, name="store")

        assert "quota" in exc_info.value.message
        openai_client.files.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_attach_failure_is_wrapped(self, openai_client, document):
        openai_client.vector_stores.files.create = AsyncMock(
            side_effect=RuntimeError("attach boom")
        )
        service = VectorStoreService(openai_client)

        with pytest.raises(OpenAIVectorStoreError) as exc_info:
            await service.provision(document, name="store")

        assert "vs_abc" in exc_info.value.message
