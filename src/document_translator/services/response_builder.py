"""Maps invocation outcomes to the Lambda response contract."""

import json

from document_translator.models.result import ErrorKind, StageError
from document_translator.models.schemas import ProcessOutcome

SUCCESS_MESSAGE = "Translation completed"


def outcome_from_error(error: StageError) -> ProcessOutcome:
    """Build a failed outcome carrying the error kind and message."""
    return ProcessOutcome(
        status_code=error.kind.status_code,
        message=str(error),
        error_kind=error.kind,
    )


def outcome_from_exception(exc: Exception) -> ProcessOutcome:
    """Build a failed outcome for an error no stage anticipated."""
    return ProcessOutcome(
        status_code=ErrorKind.INTERNAL.status_code,
        message=f"Unexpected error: {exc}",
        error_kind=ErrorKind.INTERNAL,
    )


def build_response(outcome: ProcessOutcome) -> dict:
    """
    Convert an outcome into {"statusCode", "body"}.

    Args:
        outcome: Terminal state of the invocation.

    Returns:
        Response dict whose body is a JSON-encoded string.
    """
    if outcome.success:
        body = {
            "message": outcome.message,
            "output_bucket": outcome.output_bucket,
            "output_key": outcome.output_key,
            "translated_count": outcome.translated_count,
        }
        if outcome.failed_count:
            body["failed_count"] = outcome.failed_count
    else:
        body = {
            "error": outcome.error_kind.value,
            "message": outcome.message,
        }

    return {
        "statusCode": outcome.status_code,
        "body": json.dumps(body, ensure_ascii=False),
    }
