"""Secrets provider — nested payload parsing and Lambda invocation.

Tests cover:
    - Well-formed payload yields StoreCredentials
    - errorMessage, malformed JSON and missing keys raise SecretsRetrievalError
    - Invocation errors raise SecretsRetrievalError
"""

import json
from unittest.mock import AsyncMock, MagicMock

import pytest
from botocore.exceptions import ClientError

from category_service.core.errors import SecretsRetrievalError
from category_service.infrastructure.secrets import (
    StoreCredentials, fetch_store_secrets, parse_secrets_payload,
)

FUNCTION = "fetchSecretsFunction_gr8"


def _payload(secret: dict) -> bytes:
    body = json.dumps({"secret": json.dumps(secret)})
    return json.dumps({"statusCode": 200, "body": body}).encode()


GOOD_PAYLOAD = _payload({
    "AWS_ACCESS_KEY_ID": "AKIA-test", "AWS_SECRET_ACCESS_KEY": "secret-test",
})


class _ClientContext:
    def __init__(self, client):
        self._client = client

    async def __aenter__(self):
        return self._client

    async def __aexit__(self, *exc):
        return False


def _make_session(raw: bytes = GOOD_PAYLOAD, invoke_error: Exception | None = None):
    stream = MagicMock()
    stream.read = AsyncMock(return_value=raw)
    client = MagicMock()
    client.invoke = AsyncMock(
        return_value={"Payload": stream}, side_effect=invoke_error,
    )
    session = MagicMock()
    session.client = MagicMock(return_value=_ClientContext(client))
    return session, client


def test_parse_well_formed_payload():
    creds = parse_secrets_payload(GOOD_PAYLOAD, FUNCTION)
    assert creds == StoreCredentials("AKIA-test", "secret-test")


def test_parse_function_error_raises():
    raw = json.dumps({"errorMessage": "Task timed out"})
    with pytest.raises(SecretsRetrievalError, match="Task timed out"):
        parse_secrets_payload(raw, FUNCTION)


@pytest.mark.parametrize("raw", [
    b"not json",
    json.dumps({"body": "not json"}),
    json.dumps({"body": json.dumps({"other": "x"})}),
    _payload({"AWS_ACCESS_KEY_ID": "only-id"}),
])
def test_parse_malformed_payload_raises(raw):
    with pytest.raises(SecretsRetrievalError, match="malformed payload"):
        parse_secrets_payload(raw, FUNCTION)


def test_credentials_repr_hides_secret():
    assert "secret-test" not in repr(StoreCredentials("AKIA-test", "secret-test"))


async def test_fetch_invokes_function_in_region():
    session, client = _make_session()

    creds = await fetch_store_secrets(FUNCTION, "us-east-2", session=session)

    assert creds.aws_access_key_id == "AKIA-test"
    session.client.assert_called_once_with("lambda", region_name="us-east-2")
    client.invoke.assert_awaited_once_with(FunctionName=FUNCTION)


async def test_fetch_invoke_error_raises(caplog):
    err = ClientError(
        {"Error": {"Code": "ResourceNotFoundException", "Message": "Function not found"}},
        "Invoke",
    )
    session, _ = _make_session(invoke_error=err)

    with pytest.raises(SecretsRetrievalError):
        await fetch_store_secrets(FUNCTION, "us-east-2", session=session)
    assert "Error invoking Lambda function" in caplog.text


async def test_fetch_function_error_raises():
    session, _ = _make_session(raw=json.dumps({"errorMessage": "denied"}).encode())
    with pytest.raises(SecretsRetrievalError, match="denied"):
        await fetch_store_secrets(FUNCTION, "us-east-2", session=session)
