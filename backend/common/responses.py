"""backend.common.responses

Helpers shared by the driver Lambdas for reading API Gateway proxy events
and building responses.

Every response uses the same envelope:
- success: `{"data": ...}`
- error: `{"error": "<message>"}`
"""

import base64
import binascii
import json
import logging
from functools import wraps

from backend.common.errors import ApiError, BadRequest

logger = logging.getLogger(__name__)

RESPONSE_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,PUT,OPTIONS",
    "Access-Control-Allow-Headers": "Authorization,Content-Type,X-Api-Key",
}

INTERNAL_ERROR_MESSAGE = "Internal server error"


def format_response(data, status_code=200):
    return {
        "statusCode": status_code,
        "headers": dict(RESPONSE_HEADERS),
        "body": json.dumps({"data": data}),
    }


def error_response(message, status_code):
    return {
        "statusCode": status_code,
        "headers": dict(RESPONSE_HEADERS),
        "body": json.dumps({"error": message}),
    }


def path_param(event, name):
    return (event.get("pathParameters") or {}).get(name)


def query_param(event, name):
    return (event.get("queryStringParameters") or {}).get(name)


def parse_body(event):
    """Return the JSON object sent in the request body.

    Raises `BadRequest` when the body is missing, undecodable, not JSON, or
    not a JSON object.
    """
    raw = event.get("body")
    if not raw:
        raise BadRequest("Request body is missing")

    if event.get("isBase64Encoded"):
        try:
            raw = base64.b64decode(raw).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            raise BadRequest("Invalid request body")

    try:
        body = json.loads(raw)
    except json.JSONDecodeError:
        raise BadRequest("Invalid JSON")

    if not isinstance(body, dict):
        raise BadRequest("Request body must be a JSON object")
    return body


def caller_identity(event):
    """Best-effort caller id from the gateway authorizer context."""
    request_context = event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    claims = authorizer.get("claims") or {}
    if claims:
        return claims.get("email") or claims.get("sub") or "cognito:unknown"

    api_key_id = (request_context.get("identity") or {}).get("apiKeyId")
    if api_key_id:
        return f"api-key:{api_key_id}"
    return "anonymous"


def with_error_handling(func):
    """Turn exceptions raised by a Lambda handler into error responses.

    `ApiError` subclasses keep their status and message. Anything else is
    logged with its traceback and returned as a generic 500.
    """

    @wraps(func)
    def wrapper(event, context):
        try:
            return func(event, context)
        except ApiError as e:
            if e.status_code >= 500:
                logger.error("Request failed: %s", e.message)
            else:
                logger.info("Rejected request with %d: %s", e.status_code, e.message)
            return error_response(e.message, e.status_code)
        except Exception:
            logger.exception("Unhandled error while processing request")
            return error_response(INTERNAL_ERROR_MESSAGE, 500)

    return wrapper
