"""Abstract storage and translation capabilities consumed by the pipeline."""

from abc import ABC, abstractmethod

from document_translator.models.result import Result

JSON_CONTENT_TYPE = "application/json"


class DocumentFetcher(ABC):
    """Reads source documents."""

    @abstractmethod
    def fetch(self, bucket: str, key: str) -> Result[bytes]:
        """
        Read the raw bytes of an object.

        Args:
            bucket: Source bucket name.
            key: Source object key.

        Returns:
            Result with the object bytes, or a FetchError.
        """
        pass


class DocumentWriter(ABC):
    """Persists translated documents."""

    @abstractmethod
    def write(
        self,
        bucket: str,
        key: str,
        body: bytes,
        content_type: str = JSON_CONTENT_TYPE,
    ) -> Result[None]:
        """
        Write an object in a single attempt.

        Args:
            bucket: Destination bucket name.
            key: Destination object key.
            body: Serialized document.
            content_type: MIME type stored with the object.

        Returns:
            Empty successful Result, or a WriteError.
        """
        pass


class Translator(ABC):
    """Translates one text at a time."""

    @abstractmethod
    def translate(self, text: str, source_language: str, target_language: str) -> Result[str]:
        """
        Translate a single text.

        Args:
            text: Text to translate.
            source_language: Source language code, or "auto" to detect.
            target_language: Target language code.

        Returns:
            Result with the translated text, or a TranslationError.
        """
        pass
