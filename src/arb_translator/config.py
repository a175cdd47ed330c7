"""Configuration management for the ARB translator."""

from typing import List, Optional

from pydantic import ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigMismatchError, ConfigurationError, MissingConfigError
from .models.model_router import provider_for_model
from .models.translation import (
    BATCH_DELAY,
    BATCH_SIZE,
    DEFAULT_MODEL,
    LANGUAGE_DELAY,
    MAX_RETRIES,
    REQUEST_TIMEOUT,
    RETRY_DELAY,
    TranslationJob,
    TranslationTarget,
)


class Settings(BaseSettings):
    """Run settings loaded from INPUT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        protected_namespaces=(),
    )

    # Files and languages
    source_file: Optional[str] = None
    target_file: Optional[str] = None
    target_lang_code: Optional[str] = None

    # API Keys
    gemini_api_key: Optional[str] = None
    anthropic_api_key: Optional[str] = None
    openai_api_key: Optional[str] = None

    # Translation Configuration
    model_name: str = DEFAULT_MODEL
    batch_size: int = BATCH_SIZE
    max_retries: int = MAX_RETRIES
    retry_delay: float = RETRY_DELAY
    batch_delay: float = BATCH_DELAY
    language_delay: float = LANGUAGE_DELAY
    request_timeout: float = REQUEST_TIMEOUT

    log_level: str = "INFO"

    @property
    def target_files(self) -> List[str]:
        return split_list(self.target_file)

    @property
    def target_lang_codes(self) -> List[str]:
        return split_list(self.target_lang_code)

    def api_key_for(self, model_name: str) -> Optional[str]:
        """Return the credential matching the provider family of ``model_name``."""
        return {
            "google": self.gemini_api_key,
            "anthropic": self.anthropic_api_key,
            "openai": self.openai_api_key,
        }[provider_for_model(model_name)]


def split_list(raw: Optional[str]) -> List[str]:
    """Split a comma or newline separated value, dropping blanks."""
    if not raw:
        return []
    return [item.strip() for item in raw.replace("\n", ",").split(",") if item.strip()]


def get_settings() -> Settings:
    """Read the settings from the current environment."""
    return Settings()


def build_translation_job(settings: Settings) -> TranslationJob:
    """
    Turn raw settings into an explicit translation job.

    Args:
        settings: Settings read from the environment

    Returns:
        Validated TranslationJob

    Raises:
        MissingConfigError: If a required input is absent
        ConfigMismatchError: If file and language counts differ
        UnsupportedModelError: If the model name is unknown
        ConfigurationError: If a tuning value is out of range
    """
    files = settings.target_files
    langs = settings.target_lang_codes
    api_key = settings.api_key_for(settings.model_name)

    missing = [
        name
        for name, value in (
            ("source_file", (settings.source_file or "").strip()),
            ("target_file", files),
            ("target_lang_code", langs),
            ("api_key", (api_key or "").strip()),
        )
        if not value
    ]
    if missing:
        raise MissingConfigError(f"Missing required configuration: {', '.join(missing)}")

    if len(files) != len(langs):
        raise ConfigMismatchError(len(files), len(langs))

    try:
        return TranslationJob(
            source_file=settings.source_file.strip(),
            targets=[TranslationTarget(file=f, lang_code=l) for f, l in zip(files, langs)],
            model_name=settings.model_name,
            api_key=api_key.strip(),
            batch_size=settings.batch_size,
            max_retries=settings.max_retries,
            retry_delay=settings.retry_delay,
            batch_delay=settings.batch_delay,
            language_delay=settings.language_delay,
            request_timeout=settings.request_timeout,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
