"""Value types passed between the translation pipeline stages."""

from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, SecretStr

# Pipeline defaults
BATCH_SIZE = 50
MAX_RETRIES = 3
RETRY_DELAY = 2.0
BATCH_DELAY = 0.5
LANGUAGE_DELAY = 1.0
REQUEST_TIMEOUT = 30.0
DEFAULT_MODEL = "gemini-2.5-flash"


class TranslationTarget(BaseModel):
    """One output file and the language it is written in."""
    model_config = ConfigDict(frozen=True)

    file: Path = Field(..., description="Path of the translated ARB file")
    lang_code: str = Field(..., description="Target language code, e.g. 'fr'")


class TranslationJob(BaseModel):
    """Explicit configuration for a whole translation run."""
    model_config = ConfigDict(frozen=True, protected_namespaces=())

    source_file: Path = Field(..., description="Path of the source ARB file")
    targets: List[TranslationTarget] = Field(..., description="Targets, translated in order")
    model_name: str = Field(DEFAULT_MODEL, description="Provider model to use")
    api_key: SecretStr = Field(..., description="Provider access credential")
    batch_size: int = Field(BATCH_SIZE, gt=0, description="Strings per provider request")
    max_retries: int = Field(MAX_RETRIES, ge=0, description="Retries per batch after the first attempt")
    retry_delay: float = Field(RETRY_DELAY, ge=0, description="Linear backoff step in seconds")
    batch_delay: float = Field(BATCH_DELAY, ge=0, description="Pause between batches in seconds")
    language_delay: float = Field(LANGUAGE_DELAY, ge=0, description="Pause between target languages in seconds")
    request_timeout: float = Field(REQUEST_TIMEOUT, gt=0, description="Bound on a single provider call in seconds")


class TranslationRequest(BaseModel):
    """A single provider call: one batch of strings and one target language."""
    model_config = ConfigDict(frozen=True)

    texts: List[str] = Field(..., description="Source strings in batch order")
    target_language: str = Field(..., description="Target language code")


class TranslationBatch(BaseModel):
    """A contiguous slice of the translatable values and its position."""
    model_config = ConfigDict(frozen=True)

    number: int = Field(..., description="1-indexed ordinal of the batch")
    total: int = Field(..., description="Total number of batches for the language")
    texts: List[str] = Field(..., description="Strings in this batch")


class TargetResult(BaseModel):
    """Outcome of translating the source into one target."""
    file: Path
    lang_code: str
    translated_count: int
    batch_count: int
    processing_time: float
