"""Assembles the translated document from a translation batch."""

from document_translator.models.schemas import ResponseDocument, TranslationBatch


def build_response_document(
    source_key: str,
    batch: TranslationBatch,
    include_failures: bool = False,
) -> ResponseDocument:
    """Collect translations in processing order under the source key.

    failed_items is only set when include_failures is True, so fail-fast
    output keeps the two-key document shape.
    """
    document = ResponseDocument(original_file=source_key)
    for result in batch.translations:
        document.translations.append(result)

    if include_failures:
        document.failed_items = list(batch.failures)

    return document
