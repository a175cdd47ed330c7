"""Multi-target translation run: one source, many target languages."""

import asyncio
import logging
import time
from typing import List, Optional

from ..models.document import load_resource_document, write_resource_document
from ..models.translation import TargetResult, TranslationJob
from ..services.translation_client import TranslationClient
from ..utils.helpers import split_into_batches
from .batch_translator import BatchTranslator, Sleep

logger = logging.getLogger(__name__)


async def run_translation_job(
    job: TranslationJob,
    client: TranslationClient,
    sleep: Optional[Sleep] = None,
) -> List[TargetResult]:
    """
    Translate the job's source file into every target, in order.

    The source is parsed and its strings extracted once. Each target is
    rebuilt from a fresh copy and written before the next one starts; the
    first failure aborts the remaining targets and leaves earlier files
    on disk.

    Args:
        job: Explicit run configuration
        client: Provider boundary used for every batch
        sleep: Awaitable sleep, injectable for tests

    Returns:
        One TargetResult per target, in job order
    """
    sleep = sleep or asyncio.sleep
    source = load_resource_document(job.source_file)
    entries = source.extract_translatables()
    logger.info("Found %d strings to translate in %s", len(entries), job.source_file)

    translator = BatchTranslator.from_job(job, client, sleep=sleep)
    batch_count = len(split_into_batches(entries.values, job.batch_size))
    results: List[TargetResult] = []

    for index, target in enumerate(job.targets):
        if index > 0:
            await sleep(job.language_delay)

        logger.info(
            "Translating %s to %s in language %s",
            job.source_file, target.file, target.lang_code,
        )
        start_time = time.time()
        translated = await translator.translate_all(entries.values, target.lang_code)

        document = source.rebuild(entries.keys, translated, target.lang_code)
        write_resource_document(target.file, document)
        logger.info("Translated ARB created: %s", target.file)

        results.append(TargetResult(
            file=target.file,
            lang_code=target.lang_code,
            translated_count=len(translated),
            batch_count=batch_count,
            processing_time=time.time() - start_time,
        ))

    return results
