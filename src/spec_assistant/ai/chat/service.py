"""
Specification chat service.

Answers construction-management questions with the OpenAI Responses API,
grounding the answer in the specification document through the file_search
tool.
"""

from pathlib import Path
from typing import Any

from openai import AsyncOpenAI
from openai.types.responses import EasyInputMessageParam, FileSearchToolParam

from spec_assistant.ai.chat.constants import (
    DEFAULT_ERROR_MESSAGE,
    MISSING_API_KEY_MESSAGE,
    MISSING_QUESTION_MESSAGE,
    MISSING_VECTOR_STORE_MESSAGE,
    TOOL_CHOICE,
    AnswerMode,
)
from spec_assistant.ai.chat.exceptions import (
    AnswerGenerationError,
    ChatConfigurationError,
    EmptyQuestionError,
)
from spec_assistant.ai.chat.extraction import answer_from_response
from spec_assistant.ai.chat.schemas import ChatAnswer
from spec_assistant.ai.openai.client import create_openai_client
from spec_assistant.ai.openai.config import OpenAISettings
from spec_assistant.utils.logger import logger

PROMPTS_DIR = Path(__file__).parent / "prompts"


def load_system_prompts(prompts_dir: Path = PROMPTS_DIR) -> dict[AnswerMode, str]:
    """Load the instruction template of every answer mode.

    Args:
        prompts_dir: Directory containing ``<mode>.md`` files

    Returns:
        dict: Template text keyed by mode
    """
    prompts = {
        mode: (prompts_dir / mode.prompt_file).read_text(encoding="utf-8")
        for mode in AnswerMode
    }
    logger.info("[CHAT] Loaded system prompts", modes=[m.value for m in prompts])
    return prompts


class SpecChatService:
    """Service answering questions against the specification vector store."""

    def __init__(
        self,
        settings: OpenAISettings,
        client: AsyncOpenAI | None = None,
        system_prompts: dict[AnswerMode, str] | None = None,
    ):
        """Initialize the chat service.

        Args:
            settings: OpenAI settings (model, vector store, credentials)
            client: OpenAI client to use; built from settings on first use if omitted
            system_prompts: Instruction templates per mode; loaded from package data if omitted
        """
        self.settings = settings
        self._client = client
        self.system_prompts = system_prompts or load_system_prompts()

    def _get_client(self) -> AsyncOpenAI:
        """Return the injected client, or build one from settings."""
        if self._client is None:
            if not self.settings.api_key:
                raise ChatConfigurationError(MISSING_API_KEY_MESSAGE)
            self._client = create_openai_client(self.settings)
        return self._client

    def build_request(
        self, question: str, mode: AnswerMode, vector_store_id: str
    ) -> dict[str, Any]:
        """Build the ``responses.create`` parameters for a question.

        Args:
            question: User question
            mode: Answer mode selecting template and retrieval limit
            vector_store_id: Vector store searched by the file_search tool

        Returns:
            dict: Keyword arguments for ``client.responses.create``
        """
        return {
            "model": self.settings.model_name,
            "input": [
                EasyInputMessageParam(
                    role="system", content=self.system_prompts[mode]
                ),
                EasyInputMessageParam(role="user", content=question),
            ],
            "tools": [
                FileSearchToolParam(
                    type="file_search",
                    vector_store_ids=[vector_store_id],
                    max_num_results=mode.max_num_results,
                )
            ],
            "tool_choice": TOOL_CHOICE,
        }

    async def answer(self, question: str | None, mode: str | None = None) -> ChatAnswer:
        """Answer a question using the configured vector store.

        Args:
            question: User question; must contain non-whitespace text
            mode: Mode flag from the request (``"fast"`` or anything else)

        Returns:
            ChatAnswer: Answer text with the mode and response shape used

        Raises:
            EmptyQuestionError: If the question is missing or blank
            ChatConfigurationError: If the vector store ID or API key is missing
            AnswerGenerationError: If the model API call fails
            EmptyAnswerError: If the response contains no answer text
        """
        if question is None or not question.strip():
            raise EmptyQuestionError(MISSING_QUESTION_MESSAGE)

        vector_store_id = self.settings.vector_store_id
        if not vector_store_id:
            raise ChatConfigurationError(MISSING_VECTOR_STORE_MESSAGE)

        client = self._get_client()
        answer_mode = AnswerMode.from_flag(mode)
        params = self.build_request(question, answer_mode, vector_store_id)

        logger.info(
            "[OPENAI] Generating answer",
            model=params["model"],
            mode=answer_mode.value,
            max_num_results=answer_mode.max_num_results,
            vector_store_id=vector_store_id,
        )

        try:
            response = await client.responses.create(**params)
        except Exception as e:
            logger.error(
                "[OPENAI] Answer generation failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise AnswerGenerationError(str(e) or DEFAULT_ERROR_MESSAGE, e) from e

        text, source = answer_from_response(response)
        logger.info(
            "[CHAT] Answer generated",
            mode=answer_mode.value,
            source=source,
            answer_length=len(text),
        )
        return ChatAnswer(answer=text, mode=answer_mode, source=source)
