"""
Decoding of QQ Connect's JSONP callback envelope.

Several graph.qq.com endpoints answer with a JSON object wrapped in a
callback call, e.g.:

    callback( {"client_id":"101","openid":"ABC"} );

The payload is taken from the first "{" to the last "}" so the exact
wrapper text does not matter.
"""
import json
import logging
from typing import Union

from .errors import DecodeError, ProviderError

logger = logging.getLogger(__name__)


def extract_callback_json(body: Union[bytes, str]) -> dict:
    """
    Extract the JSON object embedded in a callback-wrapped response.

    Args:
        body: Raw response body

    Returns:
        Decoded JSON object

    Raises:
        DecodeError: If no JSON object can be found or decoded
    """
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")

    start = body.find("{")
    end = body.rfind("}")
    if start == -1 or end < start:
        raise DecodeError(f"No JSON object in response: {body[:100]!r}")

    try:
        payload = json.loads(body[start:end + 1])
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON in callback envelope: {e}") from e

    if not isinstance(payload, dict):
        raise DecodeError("Callback envelope does not contain a JSON object")
    return payload


def raise_for_error_envelope(payload: dict) -> None:
    """
    Raise the error carried by a decoded callback envelope.

    Raises:
        ProviderError: If the payload has an "error" field
        DecodeError: Otherwise
    """
    if "error" not in payload:
        raise DecodeError(f"Unexpected response shape: keys={sorted(payload)}")

    try:
        code = int(payload["error"])
    except (TypeError, ValueError) as e:
        raise DecodeError(f"Non-numeric error code: {payload['error']!r}") from e

    message = str(payload.get("error_description") or "")
    logger.warning(f"QQ Connect error {code}: {message}")
    raise ProviderError(code, message)
