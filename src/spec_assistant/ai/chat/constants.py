"""Constants for the specification chat."""

from enum import Enum


class AnswerMode(str, Enum):
    """Answer style selected in the UI."""

    FAST = "fast"
    DETAIL = "detail"

    @classmethod
    def from_flag(cls, flag: object) -> "AnswerMode":
        """Map the request's mode flag onto a mode.

        Only the exact string ``"fast"`` selects the fast mode; anything else,
        including a missing flag, falls back to the detailed mode.
        """
        return cls.FAST if flag == cls.FAST.value else cls.DETAIL

    @property
    def max_num_results(self) -> int:
        """Number of passages the file_search tool may return."""
        return FILE_SEARCH_MAX_RESULTS[self]

    @property
    def prompt_file(self) -> str:
        return f"{self.value}.md"


FILE_SEARCH_MAX_RESULTS: dict[AnswerMode, int] = {
    AnswerMode.FAST: 3,
    AnswerMode.DETAIL: 6,
}

TOOL_CHOICE = "auto"

# User-facing error messages
MISSING_QUESTION_MESSAGE = "質問がありません"
MISSING_VECTOR_STORE_MESSAGE = "OPENAI_VECTOR_STORE_ID が未設定です"
MISSING_API_KEY_MESSAGE = "OPENAI_API_KEY が未設定です"
EMPTY_ANSWER_MESSAGE = "回答本文を取得できませんでした（output_text空）"
DEFAULT_ERROR_MESSAGE = "エラーが発生しました"
