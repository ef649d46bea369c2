"""Explicit success-or-error outcome returned by every pipeline stage."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories a stage can report."""

    INVALID_EVENT = "InvalidEventError"
    CONFIGURATION = "ConfigurationError"
    FETCH = "FetchError"
    PARSE = "ParseError"
    TRANSLATION = "TranslationError"
    WRITE = "WriteError"
    INTERNAL = "InternalError"

    @property
    def status_code(self) -> int:
        """HTTP-style status code reported to the invoking trigger."""
        if self is ErrorKind.INVALID_EVENT:
            return 400
        return 500


class StageError(BaseModel):
    """A typed failure produced by one pipeline stage."""

    kind: ErrorKind
    stage: str
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value} in {self.stage}: {self.message}"


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or a StageError, never both."""

    value: T | None = None
    error: StageError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T | None = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, stage: str, message: str) -> "Result[T]":
        return cls(error=StageError(kind=kind, stage=stage, message=message))
