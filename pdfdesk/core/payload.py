"""Binary payload helpers for the operation boundary.

Payloads arrive either as raw bytes or as base64 text; both forms decode to
identical bytes.
"""

from __future__ import annotations

import base64
import binascii
from typing import Union

from .exceptions import CorruptInputError

Payload = Union[bytes, bytearray, memoryview, str]


def decode_payload(payload: Payload) -> bytes:
    """Return the raw bytes carried by *payload*."""

    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    if isinstance(payload, str):
        text = payload.strip()
        if text.startswith("data:") and "," in text:
            text = text.split(",", 1)[1]
        try:
            return base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise CorruptInputError("Payload is not valid base64 text") from exc
    raise CorruptInputError(f"Unsupported payload type: {type(payload).__name__}")


def encode_payload(data: bytes) -> str:
    """Return *data* as base64 text."""

    return base64.b64encode(data).decode("ascii")


__all__ = ["Payload", "decode_payload", "encode_payload"]
