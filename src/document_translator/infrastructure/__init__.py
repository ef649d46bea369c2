"""Infrastructure package for document translator."""

from document_translator.infrastructure.s3_client import S3Client
from document_translator.infrastructure.translate_client import TranslateClient
from document_translator.infrastructure.dependency_injection import (
    DependenciesContainer,
)

__all__ = [
    "S3Client",
    "TranslateClient",
    "DependenciesContainer",
]
