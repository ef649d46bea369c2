"""Local test script for the document translator Lambda handler."""

import json
import logging

from document_translator.handler import lambda_handler

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


def main():
    """Run a local test of the Lambda handler."""
    # Sample S3 ObjectCreated notification
    event = {
        "Records": [
            {
                "eventVersion": "2.1",
                "eventSource": "aws:s3",
                "awsRegion": "us-east-1",
                "eventName": "ObjectCreated:Put",
                "s3": {
                    "s3SchemaVersion": "1.0",
                    "bucket": {
                        "name": "document-translator-input",
                        "arn": "arn:aws:s3:::document-translator-input",
                    },
                    "object": {
                        "key": "input/hello.json",
                        "size": 96,
                    },
                },
            }
        ]
    }

    context = None

    response = lambda_handler(event, context)

    print("\n" + "=" * 50)
    print("Response:")
    print(json.dumps(response, indent=2))
    print("=" * 50)


if __name__ == "__main__":
    main()
