"""DynamoDB Category Store — upsert-only persistence for category records.

Invariants:
    - put() is a plain PutItem: last writer wins, no condition expression
    - Boto/botocore failures and item serialization failures come back as
      PutOutcome.failure, never raised
    - Floats are written as Decimal (the only number type boto3 serializes)
    - Error payload keeps the AWS error code and message for the 500 body

Design Decisions:
    - One aioboto3 session per store (credentials bound once at startup), one
      resource context per put
"""

import logging
from decimal import Decimal

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from category_service.core.repository_protocols import PutOutcome
from category_service.infrastructure.secrets import StoreCredentials

logger = logging.getLogger(__name__)


def to_dynamo_item(value):
    """Convert floats (at any depth) to Decimal for DynamoDB."""
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: to_dynamo_item(v) for k, v in value.items()}
    if isinstance(value, list):
        return [to_dynamo_item(v) for v in value]
    return value


def describe_store_error(e: Exception) -> dict:
    """Flatten a boto error into a JSON-safe payload."""
    if isinstance(e, ClientError):
        err = e.response.get("Error", {})
        meta = e.response.get("ResponseMetadata", {})
        payload = {
            "code": err.get("Code", "ClientError"),
            "message": err.get("Message", str(e)),
        }
        if meta.get("HTTPStatusCode") is not None:
            payload["statusCode"] = meta["HTTPStatusCode"]
        if meta.get("RequestId"):
            payload["requestId"] = meta["RequestId"]
        return payload
    return {"code": type(e).__name__, "message": str(e)}


class DynamoCategoryStore:
    """Category store backed by a single DynamoDB table."""

    def __init__(
        self,
        table_name: str,
        region: str,
        credentials: StoreCredentials | None = None,
        session: aioboto3.Session | None = None,
    ):
        self.table_name = table_name
        self.region = region
        if session is None:
            session = aioboto3.Session(
                aws_access_key_id=credentials.aws_access_key_id if credentials else None,
                aws_secret_access_key=(
                    credentials.aws_secret_access_key if credentials else None
                ),
                region_name=region,
            )
        self._session = session

    async def put(self, record: dict) -> PutOutcome:
        """Upsert a category record."""
        try:
            async with self._session.resource(
                "dynamodb", region_name=self.region,
            ) as dynamodb:
                table = await dynamodb.Table(self.table_name)
                await table.put_item(Item=to_dynamo_item(record))
        except (ClientError, BotoCoreError, TypeError, ValueError, ArithmeticError) as e:
            logger.error(
                f"Error saving category to DynamoDB: {e}",
                extra={"table": self.table_name, "category_name": record.get("name")},
            )
            return PutOutcome.failure(describe_store_error(e))

        logger.info(
            "Category saved to DynamoDB",
            extra={"table": self.table_name, "category_name": record.get("name")},
        )
        return PutOutcome.success()
