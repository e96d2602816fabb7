"""Body Decoding: turns raw request bytes into a structured JSON payload.

Invariants:
    - decode_json_body is PURE: bytes in, payload out, or a typed GatewayError raised
    - Empty body → {} regardless of content type
    - Only objects and arrays are accepted at top level (strict mode)
    - NaN, Infinity and -Infinity are not JSON and are rejected like any other syntax error
    - Malformed JSON NEVER silently becomes {}: it raises MalformedBodyError
    - Non-empty, non-JSON bodies raise UnsupportedMediaTypeError instead of guessing a payload
    - Every decode failure answers 500 with the generic envelope; the reason is log-only

Design Decisions:
    - Size check before parsing: oversized bodies are rejected without spending CPU on them
    - check_content_length lets the shell refuse a declared-oversized body before reading it
    - application/*+json accepted alongside application/json (vendor media types)
"""

import json

from app.core.errors import (
    MalformedBodyError, PayloadTooLargeError, UnsupportedMediaTypeError,
)


def media_type(content_type: str | None) -> str:
    """Bare lower-cased media type, parameters (charset, boundary) stripped."""
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def is_json_content_type(content_type: str | None) -> bool:
    mt = media_type(content_type)
    if mt == "application/json":
        return True
    return mt.startswith("application/") and mt.endswith("+json")


def check_content_length(content_length: str | None, limit: int) -> None:
    """Raise PayloadTooLargeError when the declared length exceeds the limit.

    Missing or unparsable headers are ignored; the streamed size is still
    enforced while the body is read.
    """
    if content_length is None:
        return
    try:
        declared = int(content_length)
    except ValueError:
        return
    if declared > limit:
        raise PayloadTooLargeError(declared, limit)


def _reject_constant(name: str):
    raise MalformedBodyError(f"{name} is not valid JSON")


def decode_json_body(
    content_type: str | None, raw: bytes, limit: int,
) -> dict | list:
    """Decode a request body into a dict or list."""
    if not raw:
        return {}
    if not is_json_content_type(content_type):
        raise UnsupportedMediaTypeError(media_type(content_type) or None)
    if len(raw) > limit:
        raise PayloadTooLargeError(len(raw), limit)

    try:
        payload = json.loads(raw.decode("utf-8"), parse_constant=_reject_constant)
    except UnicodeDecodeError as exc:
        raise MalformedBodyError(f"body is not UTF-8: {exc.reason}") from exc
    except json.JSONDecodeError as exc:
        raise MalformedBodyError(
            f"{exc.msg} at line {exc.lineno} column {exc.colno}",
        ) from exc

    if not isinstance(payload, (dict, list)):
        raise MalformedBodyError(
            f"top-level {type(payload).__name__} not allowed",
        )
    return payload
