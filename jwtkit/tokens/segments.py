"""Encoding of the individual token segments.

A segment is unpadded base64url. Decoding is strict: only the canonical
encoding of some byte string is accepted, so a segment with stray characters,
padding or non-zero trailing bits never decodes to the same bytes as a
different segment.
"""

import binascii
import json
from typing import Any

from jwt.utils import base64url_decode, base64url_encode

from jwtkit.exceptions import EncodingDecodingError, SerializationError


def encode_segment(data: bytes) -> str:
    """Encode bytes as an unpadded base64url segment."""
    return base64url_encode(data).decode("ascii")


def decode_segment(segment: str) -> bytes:
    """Decode an unpadded base64url segment.

    Args:
        segment: The segment text.

    Returns:
        The decoded bytes.

    Raises:
        EncodingDecodingError: If the segment is not canonical unpadded base64url.

    """
    try:
        data = base64url_decode(segment)
    except (binascii.Error, ValueError) as e:
        raise EncodingDecodingError(f"Malformed base64url segment: {e}") from e

    if encode_segment(data) != segment:
        raise EncodingDecodingError("Segment is not canonical unpadded base64url")

    return data


def dump_json(value: Any) -> bytes:
    """Serialize a JSON-compatible value to compact UTF-8 JSON.

    Raises:
        SerializationError: If the value is not JSON-compatible.

    """
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(str(e)) from e
