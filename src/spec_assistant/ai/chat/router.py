"""FastAPI router for the specification chat endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from spec_assistant.ai.chat.constants import DEFAULT_ERROR_MESSAGE
from spec_assistant.ai.chat.exceptions import ChatError
from spec_assistant.ai.chat.schemas import ChatErrorResponse, ChatRequest, ChatResponse
from spec_assistant.ai.chat.service import SpecChatService
from spec_assistant.ai.openai.config import get_openai_settings
from spec_assistant.utils.logger import logger

router = APIRouter(tags=["Chat"])


# Singleton service instance
_chat_service: SpecChatService | None = None


def get_chat_service() -> SpecChatService:
    """
    Get or create the chat service singleton.

    Returns:
        SpecChatService: The chat service instance
    """
    global _chat_service
    if _chat_service is None:
        _chat_service = SpecChatService(settings=get_openai_settings())
        logger.info("Initialized SpecChatService")
    return _chat_service


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=int(status_code),
        content=ChatErrorResponse(error=message).model_dump(),
    )


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ChatErrorResponse}, 500: {"model": ChatErrorResponse}},
)
async def chat(
    request: ChatRequest,
    chat_service: Annotated[SpecChatService, Depends(get_chat_service)],
) -> ChatResponse | JSONResponse:
    """
    Answer a question about the construction specification.

    Args:
        request: Question and optional answer mode
        chat_service: Chat service dependency

    Returns:
        ChatResponse: The answer, or a JSON error body with status 400/500
    """
    logger.info("[USER_INPUT]", input=request.question, mode=request.mode)

    try:
        result = await chat_service.answer(request.question, request.mode)
    except ChatError as e:
        logger.error(
            "[CHAT] Request failed",
            error=e.message,
            error_type=type(e).__name__,
            status_code=int(e.status_code),
        )
        return error_response(e.status_code, e.message)
    except Exception as e:
        logger.exception("[CHAT] Unexpected error", error=str(e))
        return error_response(500, str(e) or DEFAULT_ERROR_MESSAGE)

    logger.info("[AGENT_OUTPUT]", mode=result.mode.value, output=result.answer)
    return ChatResponse(answer=result.answer)
