"""AWS Translate client wrapper."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from document_translator.models.capabilities import Translator
from document_translator.models.result import ErrorKind, Result

logger = logging.getLogger(__name__)


class TranslateClient(Translator):
    """Handles AWS Translate operations."""

    def __init__(self, client: Any):
        """
        Initialize Translate client wrapper.

        Args:
            client: boto3 translate client instance.
        """
        self._client = client

    def translate(self, text: str, source_language: str, target_language: str) -> Result[str]:
        """
        Translate a single text with translate_text.

        Args:
            text: Text to translate.
            source_language: Source language code, "auto" for detection.
            target_language: Target language code.

        Returns:
            Result with the translated text, or a TranslationError.
        """
        try:
            response = self._client.translate_text(
                Text=text,
                SourceLanguageCode=source_language,
                TargetLanguageCode=target_language,
            )
            translated = response["TranslatedText"]
            logger.debug(
                "Translated %d chars %s -> %s",
                len(text),
                response.get("SourceLanguageCode", source_language),
                target_language,
            )
            return Result.success(translated)
        except (ClientError, BotoCoreError) as e:
            logger.error(
                "Failed to translate text (%s -> %s): %s",
                source_language,
                target_language,
                e,
            )
            return Result.failure(
                ErrorKind.TRANSLATION,
                "translate",
                f"Translation {source_language} -> {target_language} failed: {e}",
            )
        except KeyError as e:
            logger.error("Unexpected translate_text response, missing %s", e)
            return Result.failure(
                ErrorKind.TRANSLATION,
                "translate",
                f"Unexpected translate_text response, missing {e}",
            )
