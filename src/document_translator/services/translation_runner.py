"""Service for translating document items in order."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed

from document_translator.models.capabilities import Translator
from document_translator.models.result import ErrorKind, Result
from document_translator.models.schemas import (
    ItemFailure,
    TranslationBatch,
    TranslationItem,
    TranslationResult,
)

logger = logging.getLogger(__name__)


class TranslationRunner:
    """Translates items one call per item, preserving document order.

    With fail_fast (the default) the first failed call aborts the batch and
    every result produced so far is discarded. Otherwise failed items are
    recorded and the remaining items are still translated.
    """

    def __init__(
        self,
        translator: Translator,
        fail_fast: bool = True,
        max_concurrency: int = 1,
    ):
        """
        Initialize translation runner.

        Args:
            translator: Translation capability used for every item.
            fail_fast: Abort the whole batch on the first failure.
            max_concurrency: Number of translate calls allowed in flight.
        """
        self._translator = translator
        self._fail_fast = fail_fast
        self._max_concurrency = max(1, max_concurrency)

    def run(self, items: list[TranslationItem]) -> Result[TranslationBatch]:
        """
        Translate all items.

        Args:
            items: Items in document order.

        Returns:
            Result with the ordered batch, or the first TranslationError
            when running fail-fast.
        """
        if self._max_concurrency == 1 or len(items) <= 1:
            outcomes = self._run_sequential(items)
        else:
            outcomes = self._run_parallel(items)

        if isinstance(outcomes, Result):
            return outcomes

        batch = TranslationBatch()
        for index, (item, outcome) in enumerate(zip(items, outcomes)):
            if outcome.ok:
                batch.translations.append(outcome.value)
            else:
                batch.failures.append(
                    ItemFailure(index=index, text=item.text, error=outcome.error.message)
                )

        if batch.failures:
            logger.warning(
                "Translated %d items, %d failed",
                len(batch.translations),
                len(batch.failures),
            )
        else:
            logger.info("Translated %d items", len(batch.translations))
        return Result.success(batch)

    def _translate_one(self, index: int, item: TranslationItem) -> Result[TranslationResult]:
        try:
            translated = self._translator.translate(
                item.text,
                item.source_language,
                item.target_language,
            )
        except Exception as e:
            logger.error("Unexpected error translating item %d: %s", index, e)
            translated = Result.failure(
                ErrorKind.TRANSLATION,
                "translate",
                f"Unexpected error translating item {index}: {e}",
            )
        if not translated.ok:
            logger.error("Translation failed for item %d: %s", index, translated.error.message)
            return Result(error=translated.error)

        return Result.success(
            TranslationResult(
                original_text=item.text,
                translated_text=translated.value,
                source_language=item.source_language,
                target_language=item.target_language,
            )
        )

    def _run_sequential(
        self,
        items: list[TranslationItem],
    ) -> list[Result[TranslationResult]] | Result[TranslationBatch]:
        outcomes = []
        for index, item in enumerate(items):
            outcome = self._translate_one(index, item)
            if not outcome.ok and self._fail_fast:
                logger.error("Aborting batch at item %d of %d", index, len(items))
                return Result(error=outcome.error)
            outcomes.append(outcome)
        return outcomes

    def _run_parallel(
        self,
        items: list[TranslationItem],
    ) -> list[Result[TranslationResult]] | Result[TranslationBatch]:
        outcomes: list[Result[TranslationResult] | None] = [None] * len(items)

        with ThreadPoolExecutor(max_workers=self._max_concurrency) as executor:
            futures = {
                executor.submit(self._translate_one, index, item): index
                for index, item in enumerate(items)
            }
            for future in as_completed(futures):
                index = futures[future]
                outcome = future.result()
                if not outcome.ok and self._fail_fast:
                    for pending in futures:
                        pending.cancel()
                    logger.error("Aborting batch at item %d of %d", index, len(items))
                    return Result(error=outcome.error)
                outcomes[index] = outcome

        return outcomes
