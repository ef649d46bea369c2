"""Configuration management for the document translator Lambda."""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from document_translator.models.result import ErrorKind, Result

# Load .env if exists (local dev only, no-op in Lambda)
load_dotenv()

FAIL_FAST = "fail_fast"
PARTIAL = "partial"
FAILURE_POLICIES = (FAIL_FAST, PARTIAL)


def _get_env(key: str, default: str = "") -> str:
    """Get an environment variable, treating blank values as missing."""
    value = os.getenv(key, "").strip()
    return value or default


@dataclass
class Config:
    """Translator configuration, read from the environment when instantiated."""

    aws_region: str = field(default_factory=lambda: _get_env("AWS_REGION", "us-east-1"))
    output_bucket: str = field(default_factory=lambda: _get_env("OUTPUT_BUCKET"))
    log_level: str = field(default_factory=lambda: _get_env("LOG_LEVEL", "INFO").upper())
    failure_policy: str = field(
        default_factory=lambda: _get_env("TRANSLATION_FAILURE_POLICY", FAIL_FAST).lower()
    )
    max_concurrency: str = field(default_factory=lambda: _get_env("MAX_CONCURRENCY", "1"))

    def resolve_output_bucket(self) -> Result[str]:
        """Return the required output bucket, or a ConfigurationError."""
        if not self.output_bucket:
            return Result.failure(
                ErrorKind.CONFIGURATION,
                "configuration",
                "OUTPUT_BUCKET environment variable is required",
            )
        return Result.success(self.output_bucket)

    def resolve_fail_fast(self) -> Result[bool]:
        """Return True for the fail-fast policy, False for partial success."""
        if self.failure_policy not in FAILURE_POLICIES:
            return Result.failure(
                ErrorKind.CONFIGURATION,
                "configuration",
                f"TRANSLATION_FAILURE_POLICY must be one of {', '.join(FAILURE_POLICIES)}, "
                f"got '{self.failure_policy}'",
            )
        return Result.success(self.failure_policy == FAIL_FAST)

    def resolve_max_concurrency(self) -> Result[int]:
        """Return the number of parallel translation calls allowed."""
        try:
            value = int(self.max_concurrency)
        except ValueError:
            value = 0
        if value < 1:
            return Result.failure(
                ErrorKind.CONFIGURATION,
                "configuration",
                f"MAX_CONCURRENCY must be a positive integer, got '{self.max_concurrency}'",
            )
        return Result.success(value)

    def resolve_log_level(self) -> Result[str]:
        """Return a logging level name the logging module knows."""
        if not isinstance(logging.getLevelName(self.log_level), int):
            return Result.failure(
                ErrorKind.CONFIGURATION,
                "configuration",
                f"LOG_LEVEL must be a logging level name, got '{self.log_level}'",
            )
        return Result.success(self.log_level)
