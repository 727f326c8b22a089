"""Schemas for the chat API and the model responses it consumes."""

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from spec_assistant.ai.chat.constants import AnswerMode


class ChatRequest(BaseModel):
    """Body of ``POST /api/chat``."""

    question: str | None = None
    mode: str | None = None

    @field_validator("question", mode="before")
    @classmethod
    def stringify_scalar_question(cls, value: Any) -> Any:
        # Falsy scalars (0, false) count as a missing question
        if isinstance(value, bool):
            return "true" if value else None
        if isinstance(value, (int, float)):
            return str(value) if value else None
        return value

    @field_validator("mode", mode="before")
    @classmethod
    def ignore_non_string_mode(cls, value: Any) -> str | None:
        # Unknown flags select the detailed mode rather than rejecting the request
        return value if isinstance(value, str) else None


class ChatResponse(BaseModel):
    answer: str


class ChatErrorResponse(BaseModel):
    error: str


class ChatAnswer(BaseModel):
    """Answer produced by the chat service."""

    answer: str
    mode: AnswerMode
    source: Literal["output_text", "output_items"]


# Model response shapes
#
# The Responses API payload is only loosely relied upon: fields with an
# unexpected type are dropped rather than rejected.


def as_mapping(value: Any) -> dict[str, Any] | None:
    """Return a plain dict view of a mapping, pydantic model or attribute object."""
    if isinstance(value, Mapping):
        return dict(value)
    if isinstance(value, BaseModel):
        return value.model_dump()
    if hasattr(value, "__dict__") and not isinstance(value, type):
        return dict(vars(value))
    return None


def _mapping_list(value: Any) -> list[dict[str, Any]]:
    if not isinstance(value, (list, tuple)):
        return []
    return [m for m in (as_mapping(v) for v in value) if m is not None]


def _string_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _clean(text: str | None) -> str | None:
    if text is None:
        return None
    return text.strip() or None


class ResponseContentPart(BaseModel):
    """A content part of an output item, e.g. ``{"type": "output_text", "text": ...}``."""

    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    text: str | None = None
    content: str | None = None

    @field_validator("type", "text", "content", mode="before")
    @classmethod
    def drop_non_strings(cls, value: Any) -> str | None:
        return _string_or_none(value)

    def fragments(self) -> list[str]:
        return [f for f in (_clean(self.text), _clean(self.content)) if f]


class ResponseOutputItem(BaseModel):
    """An entry of the response's ``output`` list (message, tool call, ...)."""

    model_config = ConfigDict(extra="ignore")

    type: str | None = None
    content: list[ResponseContentPart] = Field(default_factory=list)
    text: str | None = None

    @field_validator("type", "text", mode="before")
    @classmethod
    def drop_non_strings(cls, value: Any) -> str | None:
        return _string_or_none(value)

    @field_validator("content", mode="before")
    @classmethod
    def keep_object_parts(cls, value: Any) -> list[dict[str, Any]]:
        return _mapping_list(value)

    def fragments(self) -> list[str]:
        collected = [f for part in self.content for f in part.fragments()]
        own_text = _clean(self.text)
        if own_text:
            collected.append(own_text)
        return collected


class DirectTextShape(BaseModel):
    """The response exposes a non-blank aggregated ``output_text``."""

    kind: Literal["output_text"] = "output_text"
    text: str


class OutputItemsShape(BaseModel):
    """No usable ``output_text``; the answer must be assembled from ``output``."""

    kind: Literal["output_items"] = "output_items"
    items: list[ResponseOutputItem]

    @field_validator("items", mode="before")
    @classmethod
    def keep_object_items(cls, value: Any) -> list[dict[str, Any]]:
        return _mapping_list(value)


class EmptyShape(BaseModel):
    """Neither ``output_text`` nor an ``output`` list is present."""

    kind: Literal["empty"] = "empty"


ResponseShape = Annotated[
    DirectTextShape | OutputItemsShape | EmptyShape,
    Field(discriminator="kind"),
]
