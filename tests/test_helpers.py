"""Tests for batching and response parsing helpers."""

import pytest
from unittest.mock import MagicMock

from arb_translator.errors import ResponseParseError, ResponseShapeError
from arb_translator.utils.helpers import (
    parse_translation_array,
    response_text,
    split_into_batches,
    strip_code_fences,
)


class TestBatching:
    """Test partitioning of strings into batches."""

    def test_partition_lengths(self):
        values = [f"text{i}" for i in range(120)]

        batches = split_into_batches(values, 50)

        assert [len(b) for b in batches] == [50, 50, 20]

    def test_concatenation_reconstructs_input(self):
        values = [f"text{i}" for i in range(7)]

        batches = split_into_batches(values, 3)

        assert [v for batch in batches for v in batch] == values

    def test_exact_multiple(self):
        assert [len(b) for b in split_into_batches(["a"] * 100, 50)] == [50, 50]

    def test_empty_input_yields_no_batches(self):
        assert split_into_batches([], 50) == []

    def test_non_positive_size_rejected(self):
        with pytest.raises(ValueError):
            split_into_batches(["a"], 0)


class TestCodeFences:
    """Test stripping of markdown code fences."""

    def test_json_fence(self):
        assert strip_code_fences('```json\n["a","b"]\n```') == '["a","b"]'

    def test_bare_fence(self):
        assert strip_code_fences('```\n["a"]\n```') == '["a"]'

    def test_single_line_fence(self):
        assert strip_code_fences('```["a"]```') == '["a"]'

    def test_no_fence(self):
        assert strip_code_fences('  ["a"]\n') == '["a"]'

    def test_prose_around_fence(self):
        text = "Here you go:\n```json\n[\"a\",\"b\"]\n```\nDone."

        assert strip_code_fences(text) == '["a","b"]'

    def test_backticks_inside_bare_array_kept(self):
        text = '["Run ```make```", "ok"]'

        assert strip_code_fences(text) == text


class TestResponseParsing:
    """Test validation of provider payloads."""

    def test_bare_array(self):
        assert parse_translation_array('["a","b"]', 2) == ["a", "b"]

    def test_fenced_array_parses_like_bare(self):
        fenced = parse_translation_array('```json\n["a","b"]\n```', 2)

        assert fenced == parse_translation_array('["a","b"]', 2)

    def test_trailing_prose_after_fence(self):
        assert parse_translation_array("```json\n[\"a\"]\n```\nDone.", 1) == ["a"]

    def test_invalid_json(self):
        with pytest.raises(ResponseParseError):
            parse_translation_array("Here are your translations: a, b", 2)

    def test_object_instead_of_array(self):
        with pytest.raises(ResponseShapeError, match="JSON array"):
            parse_translation_array('{"translations": ["a"]}', 1)

    def test_short_array(self):
        payload = "[" + ",".join(['"x"'] * 49) + "]"

        with pytest.raises(ResponseShapeError, match="Expected 50 translations, got 49"):
            parse_translation_array(payload, 50)

    def test_non_string_item(self):
        with pytest.raises(ResponseShapeError, match="index 1"):
            parse_translation_array('["a", 2]', 2)

    def test_placeholders_are_not_validated(self):
        assert parse_translation_array('["Bonjour {nom}"]', 1) == ["Bonjour {nom}"]


class TestResponseText:
    """Test flattening of chat model responses."""

    def test_string_content(self):
        assert response_text(MagicMock(content='["a"]')) == '["a"]'

    def test_list_of_text_parts(self):
        response = MagicMock(content=[{"type": "text", "text": '["a",'}, '"b"]'])

        assert response_text(response) == '["a","b"]'
