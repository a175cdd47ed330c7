"""Boundary around the external text-generation provider."""

import asyncio
import logging
from typing import List, Protocol, Sequence

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from ..errors import ProviderError
from ..models.model_router import get_model_router
from ..models.translation import REQUEST_TIMEOUT, TranslationJob, TranslationRequest
from ..prompts.arb_translation import get_translation_prompt
from ..utils.helpers import parse_translation_array, response_text

logger = logging.getLogger(__name__)


class TranslationClient(Protocol):
    """Translate one batch of strings into one language."""

    async def translate(self, batch: Sequence[str], target_lang_code: str) -> List[str]:
        """
        Returns:
            Translations, same length and order as ``batch``

        Raises:
            ProviderError, ResponseParseError, ResponseShapeError
        """
        ...


class LLMTranslationClient:
    """TranslationClient backed by a langchain chat model."""

    def __init__(self, model: BaseChatModel, timeout: float = REQUEST_TIMEOUT):
        self._model = model
        self._timeout = timeout

    @classmethod
    def from_job(cls, job: TranslationJob) -> "LLMTranslationClient":
        model = get_model_router().get_model(
            job.model_name,
            job.api_key.get_secret_value(),
            timeout=job.request_timeout,
        )
        return cls(model, timeout=job.request_timeout)

    async def translate(self, batch: Sequence[str], target_lang_code: str) -> List[str]:
        request = TranslationRequest(texts=list(batch), target_language=target_lang_code)
        prompt = get_translation_prompt(request.texts, request.target_language)

        try:
            response = await asyncio.wait_for(
                self._model.ainvoke([HumanMessage(content=prompt)]),
                timeout=self._timeout,
            )
        except asyncio.TimeoutError as e:
            raise ProviderError(f"Provider call timed out after {self._timeout}s") from e
        except Exception as e:
            # SDK errors differ per provider; all of them are transport failures here
            raise ProviderError(f"Provider call failed: {type(e).__name__}: {e}") from e

        text = response_text(response)
        logger.debug("Response received from LLM (%d chars)", len(text))
        return parse_translation_array(text, len(request.texts))
