"""Body Decoding: tests for pure JSON body decoding.

Tests cover:
    - Empty body → {} for any content type
    - JSON objects and arrays decode; scalars are rejected (strict)
    - Malformed JSON raises MalformedBodyError, never returns {}
    - NaN and Infinity literals are rejected as malformed
    - Declared Content-Length over the limit is refused before reading
    - Oversized bodies raise PayloadTooLargeError
    - Non-JSON bodies raise UnsupportedMediaTypeError
"""

import pytest

from app.core.body_decoding import (
    check_content_length,
    decode_json_body,
    is_json_content_type,
    media_type,
)
from app.core.errors import (
    MalformedBodyError,
    PayloadTooLargeError,
    UnsupportedMediaTypeError,
)

LIMIT = 1024


# ─── content type detection ──────────────────────────────────────

def test_media_type_strips_parameters():
    assert media_type("Application/JSON; charset=utf-8") == "application/json"
    assert media_type(None) == ""


@pytest.mark.parametrize("ct", [
    "application/json",
    "application/json; charset=utf-8",
    "application/vnd.api+json",
    "application/problem+json",
])
def test_json_content_types(ct):
    assert is_json_content_type(ct)


@pytest.mark.parametrize("ct", [
    None, "", "text/plain", "text/json", "application/xml",
    "multipart/form-data; boundary=x", "application/jsonp",
])
def test_non_json_content_types(ct):
    assert not is_json_content_type(ct)


# ─── decode_json_body ────────────────────────────────────────────

@pytest.mark.parametrize("ct", [None, "application/json", "text/plain"])
def test_empty_body_is_empty_object(ct):
    assert decode_json_body(ct, b"", LIMIT) == {}


def test_decodes_object():
    assert decode_json_body(
        "application/json", b'{"a": [1, 2], "b": null}', LIMIT,
    ) == {"a": [1, 2], "b": None}


def test_decodes_array():
    assert decode_json_body("application/json", b"[1, 2]", LIMIT) == [1, 2]


def test_decodes_unicode():
    raw = '{"name": "Zoë"}'.encode("utf-8")
    assert decode_json_body("application/json", raw, LIMIT) == {"name": "Zoë"}


@pytest.mark.parametrize("raw", [b"{", b'{"a": }', b"nope", b"{'a': 1}"])
def test_malformed_json_raises(raw):
    with pytest.raises(MalformedBodyError) as exc_info:
        decode_json_body("application/json", raw, LIMIT)
    assert exc_info.value.http_status == 500
    assert exc_info.value.to_response() == {"error": "Internal server error"}


@pytest.mark.parametrize("raw", [b"42", b'"text"', b"true", b"null"])
def test_top_level_scalars_rejected(raw):
    with pytest.raises(MalformedBodyError) as exc_info:
        decode_json_body("application/json", raw, LIMIT)
    assert "top-level" in exc_info.value.reason


@pytest.mark.parametrize("raw,name", [
    (b'{"x": NaN}', "NaN"),
    (b"[Infinity]", "Infinity"),
    (b'{"x": [1, -Infinity]}', "-Infinity"),
])
def test_non_finite_literals_rejected(raw, name):
    with pytest.raises(MalformedBodyError) as exc_info:
        decode_json_body("application/json", raw, LIMIT)
    assert exc_info.value.reason == f"{name} is not valid JSON"


def test_invalid_utf8_raises_malformed():
    with pytest.raises(MalformedBodyError):
        decode_json_body("application/json", b'{"a": "\xff"}', LIMIT)


def test_oversized_body_raises():
    raw = b'{"data": "' + b"x" * 100 + b'"}'
    with pytest.raises(PayloadTooLargeError) as exc_info:
        decode_json_body("application/json", raw, 50)
    assert exc_info.value.http_status == 500
    assert exc_info.value.limit == 50
    assert exc_info.value.size == len(raw)


def test_body_at_limit_is_accepted():
    raw = b'{"a": 1}'
    assert decode_json_body("application/json", raw, len(raw)) == {"a": 1}


@pytest.mark.parametrize("ct", [None, "text/plain", "application/x-www-form-urlencoded"])
def test_non_json_body_raises_unsupported(ct):
    with pytest.raises(UnsupportedMediaTypeError) as exc_info:
        decode_json_body(ct, b"name=Ada", LIMIT)
    assert exc_info.value.http_status == 500


# ─── check_content_length ────────────────────────────────────────

def test_declared_length_over_limit_raises():
    with pytest.raises(PayloadTooLargeError) as exc_info:
        check_content_length("2048", LIMIT)
    assert exc_info.value.size == 2048
    assert exc_info.value.limit == LIMIT


@pytest.mark.parametrize("value", [None, "0", str(LIMIT), "not-a-number"])
def test_declared_length_within_limit_or_unparsable_passes(value):
    assert check_content_length(value, LIMIT) is None
