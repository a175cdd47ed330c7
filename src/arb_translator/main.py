"""Command entry point for the ARB translator."""

import asyncio
import logging
import sys
from typing import List

from dotenv import load_dotenv
from pydantic import ValidationError

from .config import build_translation_job, get_settings
from .errors import ArbTranslatorError, ConfigurationError
from .models.translation import TargetResult, TranslationJob
from .services.translation_client import LLMTranslationClient
from .workflows.orchestrator import run_translation_job

logger = logging.getLogger("arb_translator")

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_job() -> TranslationJob:
    """Read settings from the environment and build the run configuration."""
    try:
        settings = get_settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
    configure_logging(settings.log_level)
    return build_translation_job(settings)


async def translate(job: TranslationJob) -> List[TargetResult]:
    client = LLMTranslationClient.from_job(job)
    return await run_translation_job(job, client)


def main() -> int:
    """Run the translation and return the process exit status."""
    load_dotenv()
    try:
        job = load_job()
        logger.info(
            "Translating %s into %d target(s) with %s",
            job.source_file, len(job.targets), job.model_name,
        )
        results = asyncio.run(translate(job))
    except ArbTranslatorError as e:
        configure_logging()
        logger.error("Translation failed: %s", e)
        return 1

    for result in results:
        logger.info(
            "%s: %d strings in %d batches (%.2fs)",
            result.file, result.translated_count, result.batch_count, result.processing_time,
        )
    logger.info("Done translating %d file(s).", len(results))
    return 0


if __name__ == "__main__":
    sys.exit(main())
