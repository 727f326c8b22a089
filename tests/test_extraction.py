"""Tests for recovering answer text from model responses."""

from types import SimpleNamespace

import pytest

from spec_assistant.ai.chat.exceptions import EmptyAnswerError
from spec_assistant.ai.chat.extraction import (
    answer_from_response,
    classify_response,
    extract_answer,
)
from spec_assistant.ai.chat.schemas import (
    DirectTextShape,
    EmptyShape,
    OutputItemsShape,
)


def message_item(*texts):
    return {
        "type": "message",
        "role": "assistant",
        "content": [{"type": "output_text", "text": t} for t in texts],
    }


class TestClassifyResponse:
    """Test suite for response shape classification."""

    def test_direct_output_text(self):
        shape = classify_response({"output_text": "結論です", "output": []})
        assert isinstance(shape, DirectTextShape)
        assert shape.kind == "output_text"

    def test_attribute_object_output_text(self):
        shape = classify_response(SimpleNamespace(output_text="回答", output=None))
        assert isinstance(shape, DirectTextShape)

    def test_blank_output_text_falls_back_to_items(self):
        shape = classify_response({"output_text": "   ", "output": [message_item("A")]})
        assert isinstance(shape, OutputItemsShape)
        assert len(shape.items) == 1

    def test_missing_everything_is_empty(self):
        assert isinstance(classify_response({}), EmptyShape)
        assert isinstance(classify_response({"output": "not a list"}), EmptyShape)
        assert isinstance(classify_response(None), EmptyShape)

    def test_non_string_output_text_is_ignored(self):
        shape = classify_response({"output_text": 42, "output": [message_item("A")]})
        assert isinstance(shape, OutputItemsShape)


class TestExtractAnswer:
    """Test suite for answer extraction."""

    def test_direct_text_is_trimmed_only(self):
        raw = {"output_text": "\n  ■結論\n- 30mm以上  \n"}
        assert extract_answer(classify_response(raw)) == "■結論\n- 30mm以上"

    def test_fragments_joined_with_blank_line(self):
        raw = {
            "output_text": "",
            "output": [
                {"type": "file_search_call", "id": "fs_1", "queries": ["かぶり"]},
                message_item("  第一段落 ", "第二段落"),
            ],
        }
        assert extract_answer(classify_response(raw)) == "第一段落\n\n第二段落"

    def test_encounter_order_across_parts_and_items(self):
        raw = {
            "output": [
                {
                    "type": "message",
                    "content": [{"text": "a", "content": "b"}, {"content": "c"}],
                    "text": "d",
                },
                {"type": "other", "text": "e"},
            ]
        }
        assert extract_answer(classify_response(raw)) == "a\n\nb\n\nc\n\nd\n\ne"

    def test_malformed_entries_are_skipped(self):
        raw = {
            "output": [
                None,
                "stray string",
                {"type": "message", "content": "not a list"},
                {"type": "message", "content": [{"text": 5}, 7, {"text": "  ok  "}]},
                {"text": "   "},
            ]
        }
        assert extract_answer(classify_response(raw)) == "ok"

    def test_attribute_objects_are_traversed(self):
        part = SimpleNamespace(type="output_text", text="属性から")
        item = SimpleNamespace(type="message", content=[part])
        raw = SimpleNamespace(output_text="", output=[item])
        assert extract_answer(classify_response(raw)) == "属性から"

    @pytest.mark.parametrize(
        "raw",
        [
            {},
            {"output_text": "   "},
            {"output": []},
            {"output": [{"type": "file_search_call"}]},
            {"output": [message_item("  ", "\n")]},
        ],
    )
    def test_no_text_raises(self, raw):
        with pytest.raises(EmptyAnswerError) as exc_info:
            extract_answer(classify_response(raw))
        assert exc_info.value.status_code == 500

    def test_answer_from_response_reports_source(self):
        assert answer_from_response({"output_text": "x"}) == ("x", "output_text")
        assert answer_from_response({"output": [message_item("y")]}) == (
            "y",
            "output_items",
        )
