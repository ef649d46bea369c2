"""Dependency injection container for the application."""

import os

import boto3
from dependency_injector import providers
from dependency_injector.containers import DeclarativeContainer

from document_translator.infrastructure.s3_client import S3Client
from document_translator.infrastructure.translate_client import TranslateClient


def _create_session() -> boto3.Session:
    """Create boto3 session.

    In Lambda: Uses execution role automatically.
    Locally: Uses AWS_PROFILE_TRANSLATOR from environment.
    """
    region = os.getenv("AWS_REGION", "us-east-1")

    if os.getenv("AWS_LAMBDA_FUNCTION_NAME"):
        return boto3.Session(region_name=region)

    profile = os.getenv("AWS_PROFILE_TRANSLATOR", "default")
    return boto3.Session(profile_name=profile, region_name=region)


class DependenciesContainer(DeclarativeContainer):
    """DI container for the application."""

    session = providers.Singleton(_create_session)

    # S3 dependency chain
    s3_boto_client = providers.Singleton(
        lambda session: session.client("s3"),
        session=session,
    )

    s3_client = providers.Singleton(
        S3Client,
        client=s3_boto_client,
    )

    # Translate dependency chain
    translate_boto_client = providers.Singleton(
        lambda session: session.client("translate"),
        session=session,
    )

    translate_client = providers.Singleton(
        TranslateClient,
        client=translate_boto_client,
    )
