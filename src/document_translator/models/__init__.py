"""Models package for document translator."""

from document_translator.models.result import ErrorKind, Result, StageError
from document_translator.models.schemas import (
    InvocationTrigger,
    ProcessOutcome,
    ResponseDocument,
    S3Location,
    TranslationItem,
    TranslationResult,
)

__all__ = [
    "ErrorKind",
    "InvocationTrigger",
    "ProcessOutcome",
    "ResponseDocument",
    "Result",
    "S3Location",
    "StageError",
    "TranslationItem",
    "TranslationResult",
]
