"""Sequential batch translation with bounded linear-backoff retries."""

import asyncio
import logging
import time
from typing import Awaitable, Callable, List, Optional, Sequence

from ..errors import BatchExhaustedError, TranslationClientError
from ..models.translation import (
    BATCH_DELAY,
    BATCH_SIZE,
    MAX_RETRIES,
    RETRY_DELAY,
    TranslationBatch,
    TranslationJob,
)
from ..services.translation_client import TranslationClient
from ..utils.helpers import split_into_batches

logger = logging.getLogger(__name__)

Sleep = Callable[[float], Awaitable[None]]


class BatchTranslator:
    """Translate a list of strings batch by batch, preserving order.

    Only ``TranslationClientError`` is retried; a batch that still fails
    after ``max_retries`` retries raises ``BatchExhaustedError`` and aborts
    the whole list.
    """

    def __init__(
        self,
        client: TranslationClient,
        batch_size: int = BATCH_SIZE,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY,
        batch_delay: float = BATCH_DELAY,
        sleep: Optional[Sleep] = None,
    ):
        if batch_size <= 0:
            raise ValueError(f"Batch size must be positive, got {batch_size}")
        self.client = client
        self.batch_size = batch_size
        self.max_retries = max_retries
        self.retry_delay = retry_delay
        self.batch_delay = batch_delay
        self._sleep = sleep or asyncio.sleep

    @classmethod
    def from_job(cls, job: TranslationJob, client: TranslationClient, sleep: Optional[Sleep] = None) -> "BatchTranslator":
        return cls(
            client,
            batch_size=job.batch_size,
            max_retries=job.max_retries,
            retry_delay=job.retry_delay,
            batch_delay=job.batch_delay,
            sleep=sleep,
        )

    def backoff_delay(self, attempt: int) -> float:
        """Delay before retry number ``attempt + 1`` (linear: 1x, 2x, 3x...)."""
        return self.retry_delay * (attempt + 1)

    async def translate_batch(self, batch: TranslationBatch, target_lang_code: str) -> List[str]:
        """
        Translate one batch, retrying failed attempts.

        Args:
            batch: The batch and its position
            target_lang_code: Target language code

        Returns:
            Translations for ``batch.texts``

        Raises:
            BatchExhaustedError: If every attempt failed
        """
        logger.info(
            "Translating batch %d/%d (%d strings) to '%s'",
            batch.number, batch.total, len(batch.texts), target_lang_code,
        )
        attempt = 0
        while True:
            try:
                translated = await self.client.translate(batch.texts, target_lang_code)
            except TranslationClientError as e:
                if attempt >= self.max_retries:
                    logger.error(
                        "Batch %d/%d failed after %d retries: %s",
                        batch.number, batch.total, self.max_retries, e,
                    )
                    raise BatchExhaustedError(batch.number, batch.total, e) from e
                delay = self.backoff_delay(attempt)
                attempt += 1
                logger.warning(
                    "Batch %d/%d attempt failed (%s: %s); retry %d/%d in %.1fs",
                    batch.number, batch.total, type(e).__name__, e,
                    attempt, self.max_retries, delay,
                )
                await self._sleep(delay)
                continue

            logger.info("Batch %d/%d translated", batch.number, batch.total)
            return translated

    async def translate_all(self, values: Sequence[str], target_lang_code: str) -> List[str]:
        """
        Translate every value, one batch at a time.

        Args:
            values: Strings in document order
            target_lang_code: Target language code

        Returns:
            Translations index-aligned with ``values``
        """
        chunks = split_into_batches(values, self.batch_size)
        total = len(chunks)
        start_time = time.time()
        translated: List[str] = []

        for number, texts in enumerate(chunks, 1):
            batch = TranslationBatch(number=number, total=total, texts=texts)
            translated.extend(await self.translate_batch(batch, target_lang_code))
            if number < total:
                await self._sleep(self.batch_delay)

        logger.info(
            "Translated %d strings to '%s' in %d batches (%.2fs)",
            len(translated), target_lang_code, total, time.time() - start_time,
        )
        return translated
