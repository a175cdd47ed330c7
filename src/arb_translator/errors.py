"""Exception hierarchy for the ARB translator."""


class ArbTranslatorError(Exception):
    """Base class for all translator errors."""


class ConfigurationError(ArbTranslatorError):
    """Invalid or incomplete run configuration."""


class MissingConfigError(ConfigurationError):
    """A required configuration value is absent or empty."""


class ConfigMismatchError(ConfigurationError):
    """Target file count differs from target language count."""

    def __init__(self, file_count: int, lang_count: int):
        self.file_count = file_count
        self.lang_count = lang_count
        super().__init__(
            f"Number of target files ({file_count}) does not match "
            f"number of target language codes ({lang_count})"
        )


class UnsupportedModelError(ConfigurationError):
    """The requested provider model is not known to the model router."""


class SourceNotFoundError(ArbTranslatorError):
    """The source path does not resolve to a readable file."""


class SourceFormatError(ArbTranslatorError):
    """The source file is not a JSON object."""


class TargetWriteError(ArbTranslatorError):
    """A translated document could not be written to its target path."""


class TranslationClientError(ArbTranslatorError):
    """Retryable failure of a single provider translation call."""


class ProviderError(TranslationClientError):
    """Transport, timeout or non-success response from the provider."""


class ResponseParseError(TranslationClientError):
    """The provider payload is not parseable JSON."""


class ResponseShapeError(TranslationClientError):
    """The parsed payload is not an array of strings of the batch's length."""


class BatchExhaustedError(ArbTranslatorError):
    """A batch kept failing after the retry budget was spent."""

    def __init__(self, batch_number: int, total_batches: int, last_error: Exception):
        self.batch_number = batch_number
        self.total_batches = total_batches
        self.last_error = last_error
        super().__init__(
            f"Batch {batch_number}/{total_batches} failed after all retries: {last_error}"
        )
