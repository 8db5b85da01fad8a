"""Secrets Provider — one-shot Lambda invocation that returns the store credentials.

Invariants:
    - Called exactly once, during startup, before any route is served
    - Any failure (invoke error, function error, malformed payload) raises SecretsRetrievalError
    - No retry, no timeout beyond the SDK defaults

Design Decisions:
    - aioboto3 session per call: the function is invoked once, no client to keep alive
    - Payload parsing split into parse_secrets_payload so the nested-JSON format
      is testable without AWS
"""

import json
import logging
from dataclasses import dataclass

import aioboto3
from botocore.exceptions import BotoCoreError, ClientError

from category_service.core.errors import SecretsRetrievalError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreCredentials:
    """AWS credentials used by the category store."""
    aws_access_key_id: str
    aws_secret_access_key: str

    def __repr__(self) -> str:
        return f"StoreCredentials(aws_access_key_id={self.aws_access_key_id!r}, aws_secret_access_key=***)"


def parse_secrets_payload(raw: bytes | str, function_name: str) -> StoreCredentials:
    """Decode the Lambda response payload into store credentials.

    The payload is JSON. A function error shows up as an ``errorMessage`` key;
    otherwise ``body`` is a JSON string whose ``secret`` field is itself a JSON
    string holding ``AWS_ACCESS_KEY_ID`` and ``AWS_SECRET_ACCESS_KEY``.
    """
    try:
        payload = json.loads(raw)
        if payload.get("errorMessage"):
            raise SecretsRetrievalError(payload["errorMessage"], function_name)
        body = json.loads(payload["body"])
        secret = json.loads(body["secret"])
        return StoreCredentials(
            aws_access_key_id=secret["AWS_ACCESS_KEY_ID"],
            aws_secret_access_key=secret["AWS_SECRET_ACCESS_KEY"],
        )
    except SecretsRetrievalError:
        raise
    except (ValueError, KeyError, TypeError, AttributeError) as e:
        raise SecretsRetrievalError(
            f"malformed payload ({type(e).__name__}: {e})", function_name,
        ) from e


async def fetch_store_secrets(
    function_name: str, region: str, session: aioboto3.Session | None = None,
) -> StoreCredentials:
    """Invoke the secrets function and return the store credentials."""
    session = session or aioboto3.Session()
    try:
        async with session.client("lambda", region_name=region) as client:
            response = await client.invoke(FunctionName=function_name)
            raw = await response["Payload"].read()
    except (ClientError, BotoCoreError) as e:
        logger.error(f"Error invoking Lambda function: {e}")
        raise SecretsRetrievalError(str(e), function_name) from e

    try:
        return parse_secrets_payload(raw, function_name)
    except SecretsRetrievalError as e:
        logger.error(f"Error invoking Lambda function: {e.message}")
        raise
