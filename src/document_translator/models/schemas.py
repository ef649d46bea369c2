"""Pydantic models for document translation."""

import json
from typing import Any

from pydantic import BaseModel, Field

from document_translator.models.result import ErrorKind

DEFAULT_SOURCE_LANGUAGE = "auto"
DEFAULT_TARGET_LANGUAGE = "en"


class S3Location(BaseModel):
    """An object in S3."""

    bucket: str
    key: str

    @property
    def s3_uri(self) -> str:
        """Return full S3 URI."""
        return f"s3://{self.bucket}/{self.key}"


class InvocationTrigger(BaseModel):
    """The single source object an invocation processes."""

    source: S3Location


class TranslationItem(BaseModel):
    """One text to translate, with its language pair."""

    text: str = Field(min_length=1)
    source_language: str = DEFAULT_SOURCE_LANGUAGE
    target_language: str = DEFAULT_TARGET_LANGUAGE

    @classmethod
    def from_raw(cls, raw: dict[str, Any]) -> "TranslationItem | None":
        """
        Build an item from a raw document entry.

        Args:
            raw: Entry with optional Text, SourceLanguageCode and
                TargetLanguageCode fields.

        Returns:
            TranslationItem, or None if the entry has no usable text.
        """
        text = raw.get("Text")
        if not isinstance(text, str) or not text:
            return None

        return cls(
            text=text,
            source_language=_language_code(raw.get("SourceLanguageCode"), DEFAULT_SOURCE_LANGUAGE),
            target_language=_language_code(raw.get("TargetLanguageCode"), DEFAULT_TARGET_LANGUAGE),
        )


def _language_code(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return default


class TranslationResult(BaseModel):
    """A successfully translated item."""

    original_text: str
    translated_text: str
    source_language: str
    target_language: str


class ItemFailure(BaseModel):
    """An item that could not be translated under the partial policy."""

    index: int
    text: str
    error: str


class ResponseDocument(BaseModel):
    """The translated document written to the output bucket."""

    original_file: str
    translations: list[TranslationResult] = Field(default_factory=list)
    failed_items: list[ItemFailure] | None = None

    def to_json(self) -> str:
        """Serialize with stable key order, unescaped non-ASCII and 2-space indent."""
        return json.dumps(
            self.model_dump(exclude_none=True),
            ensure_ascii=False,
            indent=2,
        )


class ProcessOutcome(BaseModel):
    """Terminal state of one invocation."""

    status_code: int
    message: str
    error_kind: ErrorKind | None = None
    output_bucket: str | None = None
    output_key: str | None = None
    translated_count: int = 0
    failed_count: int = 0

    @property
    def success(self) -> bool:
        return self.error_kind is None


class TranslationBatch(BaseModel):
    """Ordered results of translating every item of one document."""

    translations: list[TranslationResult] = Field(default_factory=list)
    failures: list[ItemFailure] = Field(default_factory=list)


class InvocationPlan(BaseModel):
    """Decoded trigger plus the settings resolved for one invocation."""

    trigger: InvocationTrigger
    output_bucket: str
    fail_fast: bool = True
    max_concurrency: int = 1
    log_level: str = "INFO"
