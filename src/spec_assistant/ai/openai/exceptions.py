"""OpenAI API exceptions."""


class OpenAIError(Exception):
    """Base exception for OpenAI API errors."""

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize OpenAI error.

        Args:
            message: Error message
            original_error: Original exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class OpenAIAuthenticationError(OpenAIError):
    """Exception raised when the client cannot be constructed."""

    pass


class OpenAIFileUploadError(OpenAIError):
    """Exception raised for file upload errors."""

    pass


class OpenAIVectorStoreError(OpenAIError):
    """Exception raised when a vector store cannot be created or populated."""

    pass
