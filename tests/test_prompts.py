"""Tests for the ARB translation prompt."""

import json

from arb_translator.prompts.arb_translation import get_translation_prompt


class TestTranslationPrompt:
    """Test prompt generation."""

    def test_names_exact_language_code(self):
        prompt = get_translation_prompt(["Hello"], "pt_BR")

        assert "'pt_BR'" in prompt

    def test_requests_bare_json_array(self):
        prompt = get_translation_prompt(["Hello"], "fr")

        assert "JSON array" in prompt
        assert "no markdown formatting" in prompt

    def test_placeholder_instruction(self):
        prompt = get_translation_prompt(["Hello {name}"], "fr")

        assert "{name}" in prompt
        assert "placeholder" in prompt
        assert "untranslated, verbatim, and in place" in prompt

    def test_embeds_serialized_batch(self):
        texts = ["Hello", 'Say "hi"', "Größe"]

        prompt = get_translation_prompt(texts, "de")

        assert json.dumps(texts, ensure_ascii=False) in prompt
        assert "exactly 3 translations" in prompt
