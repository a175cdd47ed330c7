"""Prompts for translating ARB resource strings."""

import json
from typing import Sequence


ARB_TRANSLATION_PROMPT = """You are a professional software localization translator. Translate the following user interface strings to language code '{target_lang_code}'.

RULES:
- Return exactly {count} translations, in the same order as the input.
- Text enclosed in curly braces, such as {{name}} or {{count}}, is a placeholder. Leave every placeholder untranslated, verbatim, and in place.
- Keep punctuation, line breaks and surrounding whitespace consistent with the source.

OUTPUT FORMAT - RESPOND WITH JUST THE JSON ARRAY:
Respond with a JSON array of strings only, no extra strings, no explanations, no markdown formatting.
Example input: ["Hello {{name}}", "Settings"]
Correct output for 'fr': ["Bonjour {{name}}", "Paramètres"]
Wrong output: ["Bonjour {{nom}}", "Paramètres"]

INPUT (JSON array of strings):
{texts}"""


def get_translation_prompt(texts: Sequence[str], target_lang_code: str) -> str:
    """
    Generate the provider instruction for one batch.

    Args:
        texts: Source strings of the batch
        target_lang_code: Exact target language code

    Returns:
        Formatted prompt string
    """
    return ARB_TRANSLATION_PROMPT.format(
        target_lang_code=target_lang_code,
        count=len(texts),
        texts=json.dumps(list(texts), ensure_ascii=False),
    )
