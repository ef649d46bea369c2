"""Decoder for S3 object-created notifications."""

import logging
import urllib.parse
from typing import Any

from document_translator.models.result import ErrorKind, Result
from document_translator.models.schemas import InvocationTrigger, S3Location

logger = logging.getLogger(__name__)

STAGE = "event_decoder"


def _invalid(message: str) -> Result[InvocationTrigger]:
    return Result.failure(ErrorKind.INVALID_EVENT, STAGE, message)


def _nested_str(record: dict, *path: str) -> str | None:
    """Walk nested dicts along path and return a non-empty string, or None."""
    node: Any = record
    for name in path:
        if not isinstance(node, dict):
            return None
        node = node.get(name)
    if isinstance(node, str) and node:
        return node
    return None


def decode_event(event: Any) -> Result[InvocationTrigger]:
    """
    Extract the source object from an S3 notification.

    Only the first record is processed; any further records are ignored.

    Args:
        event: Raw Lambda event with a Records list.

    Returns:
        Result with the InvocationTrigger, or an InvalidEventError.
    """
    if not isinstance(event, dict):
        return _invalid("Event is not a JSON object")

    records = event.get("Records")
    if not isinstance(records, list) or not records:
        return _invalid("Event has no Records")

    if len(records) > 1:
        logger.warning("Event has %d records, only the first is processed", len(records))

    record = records[0]
    bucket = _nested_str(record, "s3", "bucket", "name")
    if bucket is None:
        return _invalid("Record is missing s3.bucket.name")

    raw_key = _nested_str(record, "s3", "object", "key")
    if raw_key is None:
        return _invalid("Record is missing s3.object.key")

    # S3 notifications URL-encode object keys
    key = urllib.parse.unquote_plus(raw_key)

    return Result.success(InvocationTrigger(source=S3Location(bucket=bucket, key=key)))
