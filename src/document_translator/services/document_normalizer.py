"""Service for turning a fetched JSON document into translation items."""

import json
import logging

from document_translator.models.result import ErrorKind, Result
from document_translator.models.schemas import TranslationItem

logger = logging.getLogger(__name__)

STAGE = "document_normalizer"


def _parse_error(message: str) -> Result[list[TranslationItem]]:
    return Result.failure(ErrorKind.PARSE, STAGE, message)


def normalize_document(raw: bytes) -> Result[list[TranslationItem]]:
    """Parse document bytes into an ordered list of translation items.

    Accepts either a list of item objects or a single object. A single
    object without Text is translated as its own compact JSON text.
    Items without a non-empty Text are dropped.
    """
    try:
        content = raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        return _parse_error(f"Document is not valid UTF-8: {e}")

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        return _parse_error(f"Document is not valid JSON: {e}")

    if isinstance(data, dict):
        raw_items = [_single_object_item(data)]
    elif isinstance(data, list):
        for index, entry in enumerate(data):
            if not isinstance(entry, dict):
                return _parse_error(
                    f"Item {index} is a {type(entry).__name__}, expected an object"
                )
        raw_items = data
    else:
        return _parse_error(
            f"Document must be a list of items or a single object, got {type(data).__name__}"
        )

    items = []
    for index, entry in enumerate(raw_items):
        item = TranslationItem.from_raw(entry)
        if item is None:
            logger.warning("Skipping item %d: missing or empty Text", index)
            continue
        items.append(item)

    logger.info("Normalized %d of %d items", len(items), len(raw_items))
    return Result.success(items)


def _single_object_item(data: dict) -> dict:
    if "Text" in data:
        return data
    return {
        **data,
        "Text": json.dumps(data, ensure_ascii=False, separators=(",", ":")),
    }
