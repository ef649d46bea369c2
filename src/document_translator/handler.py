"""AWS Lambda handler for document translation.

Triggered by an S3 notification when a JSON document is uploaded.
Translates each text item with AWS Translate and writes the translated
document to the output bucket.
"""

import json
import logging

from document_translator.config import Config
from document_translator.handlers.translate import (
    failed_outcome,
    prepare_invocation,
    translate_document,
)
from document_translator.infrastructure.dependency_injection import (
    DependenciesContainer,
)
from document_translator.services.response_builder import (
    build_response,
    outcome_from_exception,
)

# Configure root logger for Lambda (all modules will inherit this)
logging.getLogger().setLevel(logging.INFO)
logger = logging.getLogger(__name__)

# Reused across warm invocations
container = DependenciesContainer()


def lambda_handler(event: dict, context) -> dict:
    """
    Lambda handler function triggered by S3.

    Args:
        event: S3 notification event.
        context: Lambda context object.

    Returns:
        Response dict with statusCode and body.
    """
    logger.info("Received event: %s", json.dumps(event, default=str))

    try:
        prepared = prepare_invocation(event, Config())
        if not prepared.ok:
            outcome = failed_outcome(prepared.error)
        else:
            plan = prepared.value
            logging.getLogger().setLevel(plan.log_level)

            # Clients are built only once the event and settings are valid
            s3_client = container.s3_client()
            translate_client = container.translate_client()

            outcome = translate_document(
                plan=plan,
                fetcher=s3_client,
                translator=translate_client,
                writer=s3_client,
            )

    except Exception as e:
        logger.exception("Failed to process document: %s", e)
        outcome = outcome_from_exception(e)

    response = build_response(outcome)
    logger.info("Responding with status %d", response["statusCode"])
    return response
