"""Recovering the answer text from a Responses API result.

The result is first classified into one of a closed set of shapes
(``ResponseShape``) and the answer is then read off that shape. A shape that
yields no text is an error, never an empty answer.
"""

import json
from typing import Any

from spec_assistant.ai.chat.constants import EMPTY_ANSWER_MESSAGE
from spec_assistant.ai.chat.exceptions import EmptyAnswerError
from spec_assistant.ai.chat.schemas import (
    DirectTextShape,
    EmptyShape,
    OutputItemsShape,
    ResponseShape,
    as_mapping,
)
from spec_assistant.utils.logger import logger

FRAGMENT_SEPARATOR = "\n\n"


def classify_response(raw: Any) -> ResponseShape:
    """Classify a raw model response.

    Args:
        raw: SDK ``Response`` object, mapping, or any object exposing
            ``output_text`` / ``output`` attributes

    Returns:
        ResponseShape: The matching shape
    """
    # output_text is a computed property on the SDK model, absent from model_dump()
    output_text = getattr(raw, "output_text", None)
    data = as_mapping(raw) or {}
    if output_text is None:
        output_text = data.get("output_text")

    if isinstance(output_text, str) and output_text.strip():
        return DirectTextShape(text=output_text)

    output = data.get("output")
    if isinstance(output, (list, tuple)):
        return OutputItemsShape(items=output)

    return EmptyShape()


def extract_answer(shape: ResponseShape) -> str:
    """Read the answer text off a classified response.

    Raises:
        EmptyAnswerError: If the shape carries no text
    """
    if isinstance(shape, DirectTextShape):
        answer = shape.text.strip()
    elif isinstance(shape, OutputItemsShape):
        fragments = [f for item in shape.items for f in item.fragments()]
        answer = FRAGMENT_SEPARATOR.join(fragments).strip()
    else:
        answer = ""

    if not answer:
        raise EmptyAnswerError(EMPTY_ANSWER_MESSAGE)
    return answer


def answer_from_response(raw: Any) -> tuple[str, str]:
    """Classify ``raw`` and extract its answer.

    Returns:
        tuple: (answer, shape kind that produced it)

    Raises:
        EmptyAnswerError: If no text can be recovered
    """
    shape = classify_response(raw)
    try:
        return extract_answer(shape), shape.kind
    except EmptyAnswerError:
        logger.warning(
            "[CHAT] No answer text in model response",
            shape=shape.kind,
            raw_output=_dump_output(raw),
        )
        raise


def _dump_output(raw: Any) -> str:
    data = as_mapping(raw) or {}
    return json.dumps(data.get("output"), ensure_ascii=False, indent=2, default=str)
