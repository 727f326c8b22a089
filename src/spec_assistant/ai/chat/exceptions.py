"""Errors raised while answering a chat request.

Each error carries the HTTP status the API boundary responds with and a
message that is shown to the end user as-is.
"""

from http import HTTPStatus


class ChatError(Exception):
    """Base exception for chat request failures."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class EmptyQuestionError(ChatError):
    """The question is missing or blank."""

    status_code = HTTPStatus.BAD_REQUEST


class ChatConfigurationError(ChatError):
    """Required server configuration is missing."""

    pass


class AnswerGenerationError(ChatError):
    """The model API call failed."""

    pass


class EmptyAnswerError(ChatError):
    """No answer text could be recovered from the model response."""

    pass
