"""ARB resource document model, string extraction and reassembly."""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, List, Sequence, Union

from pydantic import BaseModel, Field, model_validator

from ..errors import SourceFormatError, SourceNotFoundError, TargetWriteError

logger = logging.getLogger(__name__)

LOCALE_KEY = "@@locale"
METADATA_PREFIX = "@"


class TranslatableEntries(BaseModel):
    """Index-aligned keys and string values selected for translation."""
    keys: List[str] = Field(default_factory=list)
    values: List[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_alignment(self) -> "TranslatableEntries":
        if len(self.keys) != len(self.values):
            raise ValueError("keys and values must have the same length")
        return self

    def __len__(self) -> int:
        return len(self.keys)


class ResourceDocument:
    """An ordered ARB mapping of keys to heterogeneous JSON values.

    The source document is never mutated; derived documents are built
    from independent copies via ``rebuild``.
    """

    def __init__(self, entries: Dict[str, Any]):
        self._entries = entries

    @classmethod
    def from_json(cls, text: str) -> "ResourceDocument":
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SourceFormatError(f"Source is not valid JSON: {e}") from e
        if not isinstance(data, dict):
            raise SourceFormatError(
                f"Source must be a JSON object, got {type(data).__name__}"
            )
        return cls(data)

    def to_json(self) -> str:
        return json.dumps(self._entries, indent=2, ensure_ascii=False) + "\n"

    def to_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._entries)

    def __getitem__(self, key: str) -> Any:
        return self._entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def extract_translatables(self) -> TranslatableEntries:
        """
        Select the entries that are sent to the provider.

        Returns:
            Keys and values, in document order, of every string-valued entry
            that is neither the locale tag nor ARB metadata
        """
        keys: List[str] = []
        values: List[str] = []
        for key, value in self._entries.items():
            if is_translatable(key, value):
                keys.append(key)
                values.append(value)
        return TranslatableEntries(keys=keys, values=values)

    def rebuild(self, keys: Sequence[str], translated: Sequence[str], target_lang_code: str) -> "ResourceDocument":
        """
        Build the document for a target language.

        Args:
            keys: Keys from ``extract_translatables``
            translated: Translations, index-aligned with ``keys``
            target_lang_code: Language code written to the locale tag

        Returns:
            A new document; non-translated entries are carried over unchanged
        """
        if len(keys) != len(translated):
            raise ValueError(
                f"Got {len(translated)} translations for {len(keys)} keys"
            )

        entries = copy.deepcopy(self._entries)
        for key, value in zip(keys, translated):
            logger.debug("Translating key: %s", key)
            if key == LOCALE_KEY:
                entries[key] = target_lang_code
            else:
                entries[key] = value

        if LOCALE_KEY in entries:
            entries[LOCALE_KEY] = target_lang_code
        return ResourceDocument(entries)


def is_translatable(key: str, value: Any) -> bool:
    """Whether an entry is content that goes to the provider."""
    return (
        isinstance(value, str)
        and key != LOCALE_KEY
        and not key.startswith(METADATA_PREFIX)
    )


def load_resource_document(path: Union[str, Path]) -> ResourceDocument:
    """
    Read and parse a source ARB file.

    Raises:
        SourceNotFoundError: If the path is not a readable file
        SourceFormatError: If the content is not a JSON object
    """
    path = Path(path)
    if not path.is_file():
        raise SourceNotFoundError(f"Source file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SourceNotFoundError(f"Source file not readable: {path} ({e})") from e
    return ResourceDocument.from_json(text)


def write_resource_document(path: Union[str, Path], document: ResourceDocument) -> Path:
    """
    Serialize a document to ``path`` with 2-space indentation.

    Raises:
        TargetWriteError: If the directory or file cannot be written
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(document.to_json(), encoding="utf-8")
    except OSError as e:
        raise TargetWriteError(f"Cannot write target file: {path} ({e})") from e
    return path

