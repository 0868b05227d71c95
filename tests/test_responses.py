"""Unit tests for the shared event/response helpers."""

import base64
import json

import pytest
from botocore.exceptions import ClientError

from backend.common.errors import BadRequest, ConfigurationError, NotFound
from backend.common.responses import (
    RESPONSE_HEADERS,
    caller_identity,
    format_response,
    parse_body,
    path_param,
    query_param,
    with_error_handling,
)


def test_format_response_wraps_data():
    resp = format_response([{"driverId": "HAM"}], 201)
    assert resp["statusCode"] == 201
    assert resp["headers"]["Access-Control-Allow-Origin"] == "*"
    assert json.loads(resp["body"]) == {"data": [{"driverId": "HAM"}]}


def test_params_tolerate_none():
    event = {"pathParameters": None, "queryStringParameters": None}
    assert path_param(event, "team") is None
    assert query_param(event, "language") is None


# --------------------------------------------------
# parse_body
# --------------------------------------------------

def test_parse_body_json_object():
    assert parse_body({"body": json.dumps({"team": "Ferrari"})}) == {"team": "Ferrari"}


def test_parse_body_base64():
    raw = base64.b64encode(json.dumps({"team": "Ferrari"}).encode()).decode()
    assert parse_body({"body": raw, "isBase64Encoded": True}) == {"team": "Ferrari"}


@pytest.mark.parametrize("body", [None, "", "{bad json", "[1, 2]", "\"text\""])
def test_parse_body_rejects(body):
    with pytest.raises(BadRequest):
        parse_body({"body": body})


# --------------------------------------------------
# caller_identity
# --------------------------------------------------

def test_caller_identity_from_cognito_claims():
    event = {"requestContext": {"authorizer": {"claims": {"sub": "abc-123", "email": "fan@example.com"}}}}
    assert caller_identity(event) == "fan@example.com"


def test_caller_identity_from_api_key():
    event = {"requestContext": {"identity": {"apiKeyId": "k1"}}}
    assert caller_identity(event) == "api-key:k1"


def test_caller_identity_anonymous():
    assert caller_identity({}) == "anonymous"


# --------------------------------------------------
# with_error_handling
# --------------------------------------------------

def _raising(exc):
    @with_error_handling
    def handler(event, context):
        raise exc
    return handler


@pytest.mark.parametrize(
    "exc, status",
    [
        (BadRequest("bad"), 400),
        (NotFound("missing"), 404),
        (ConfigurationError("TABLE_NAME not configured"), 500),
    ],
)
def test_api_errors_keep_status_and_message(exc, status):
    resp = _raising(exc)({}, None)
    assert resp["statusCode"] == status
    assert json.loads(resp["body"]) == {"error": exc.message}
    assert resp["headers"] == RESPONSE_HEADERS


def test_unexpected_errors_become_generic_500(caplog):
    exc = ClientError({"Error": {"Code": "InternalServerError", "Message": "secret detail"}}, "GetItem")
    resp = _raising(exc)({}, None)

    assert resp["statusCode"] == 500
    assert json.loads(resp["body"]) == {"error": "Internal server error"}
    assert "secret detail" not in resp["body"]
    assert "Unhandled error" in caplog.text
