"""Handler for translating one uploaded document."""

import logging
from typing import Any

from document_translator.config import Config
from document_translator.models.capabilities import (
    JSON_CONTENT_TYPE,
    DocumentFetcher,
    DocumentWriter,
    Translator,
)
from document_translator.models.result import Result, StageError
from document_translator.models.schemas import (
    InvocationPlan,
    InvocationTrigger,
    ProcessOutcome,
)
from document_translator.services.aggregator import build_response_document
from document_translator.services.document_normalizer import normalize_document
from document_translator.services.event_decoder import decode_event
from document_translator.services.response_builder import (
    SUCCESS_MESSAGE,
    outcome_from_error,
)
from document_translator.services.translation_runner import TranslationRunner
from document_translator.utils.key_deriver import derive_output_key

logger = logging.getLogger(__name__)


def failed_outcome(error: StageError, trigger: InvocationTrigger | None = None) -> ProcessOutcome:
    """Log a stage failure with its trigger and build the failed outcome."""
    if trigger is None:
        logger.error("Stage %s failed: %s", error.stage, error.message)
    else:
        logger.error(
            "Stage %s failed for %s: %s",
            error.stage,
            trigger.source.s3_uri,
            error.message,
        )
    return outcome_from_error(error)


def prepare_invocation(event: Any, config: Config) -> Result[InvocationPlan]:
    """
    Decode the trigger and resolve every setting the invocation needs.

    Touches no AWS client, so malformed events and bad configuration are
    reported before any client is built.

    Args:
        event: Raw S3 notification.
        config: Configuration read for this invocation.

    Returns:
        Result with the InvocationPlan, or the first InvalidEventError or
        ConfigurationError.
    """
    decoded = decode_event(event)
    if not decoded.ok:
        return Result(error=decoded.error)
    logger.info("Trigger for %s", decoded.value.source.s3_uri)

    output_bucket = config.resolve_output_bucket()
    if not output_bucket.ok:
        return Result(error=output_bucket.error)

    fail_fast = config.resolve_fail_fast()
    if not fail_fast.ok:
        return Result(error=fail_fast.error)

    max_concurrency = config.resolve_max_concurrency()
    if not max_concurrency.ok:
        return Result(error=max_concurrency.error)

    log_level = config.resolve_log_level()
    if not log_level.ok:
        return Result(error=log_level.error)

    return Result.success(
        InvocationPlan(
            trigger=decoded.value,
            output_bucket=output_bucket.value,
            fail_fast=fail_fast.value,
            max_concurrency=max_concurrency.value,
            log_level=log_level.value,
        )
    )


def translate_document(
    plan: InvocationPlan,
    fetcher: DocumentFetcher,
    translator: Translator,
    writer: DocumentWriter,
) -> ProcessOutcome:
    """Fetch, translate and write the document of a prepared invocation.

    1. Fetch and normalize the document
    2. Translate every item in order
    3. Write the translated document to the derived key

    Args:
        plan: Trigger and settings from prepare_invocation.
        fetcher: Reads the source document.
        translator: Translates one item at a time.
        writer: Persists the translated document.

    Returns:
        ProcessOutcome describing success or the first failed stage.
    """
    trigger = plan.trigger
    source = trigger.source
    logger.info("Processing %s", source.s3_uri)

    fetched = fetcher.fetch(source.bucket, source.key)
    if not fetched.ok:
        return failed_outcome(fetched.error, trigger)

    normalized = normalize_document(fetched.value)
    if not normalized.ok:
        return failed_outcome(normalized.error, trigger)

    runner = TranslationRunner(
        translator,
        fail_fast=plan.fail_fast,
        max_concurrency=plan.max_concurrency,
    )
    translated = runner.run(normalized.value)
    if not translated.ok:
        return failed_outcome(translated.error, trigger)
    batch = translated.value

    document = build_response_document(
        source.key,
        batch,
        include_failures=not plan.fail_fast,
    )

    output_key = derive_output_key(source.key)
    written = writer.write(
        plan.output_bucket,
        output_key,
        document.to_json().encode("utf-8"),
        content_type=JSON_CONTENT_TYPE,
    )
    if not written.ok:
        return failed_outcome(written.error, trigger)

    logger.info(
        "Wrote %d translations for %s to s3://%s/%s",
        len(document.translations),
        source.s3_uri,
        plan.output_bucket,
        output_key,
    )

    return ProcessOutcome(
        status_code=200,
        message=SUCCESS_MESSAGE,
        output_bucket=plan.output_bucket,
        output_key=output_key,
        translated_count=len(batch.translations),
        failed_count=len(batch.failures),
    )


def process_document(
    event: Any,
    fetcher: DocumentFetcher,
    translator: Translator,
    writer: DocumentWriter,
    config: Config,
) -> ProcessOutcome:
    """Translate the document announced by an S3 notification.

    Runs prepare_invocation and, if it succeeds, translate_document.
    """
    prepared = prepare_invocation(event, config)
    if not prepared.ok:
        return failed_outcome(prepared.error)
    return translate_document(prepared.value, fetcher, translator, writer)
