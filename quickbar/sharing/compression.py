"""gzip + base64 text envelope for import strings."""
from __future__ import annotations

import base64
import binascii
import gzip
import zlib

from ..core.exceptions import DecodeError


def compress_string(text: str) -> str:
    """UTF-8 encode, gzip and base64-encode ``text``.

    The gzip header timestamp is zeroed so equal input gives equal output.
    """
    return base64.b64encode(gzip.compress(text.encode("utf-8"), mtime=0)).decode("ascii")


def decompress_string(data: str) -> str:
    """Exact inverse of :func:`compress_string`.

    Raises:
        DecodeError: On invalid base64, a corrupt or truncated gzip stream,
            or a payload that is not UTF-8.
    """
    try:
        raw = base64.b64decode(data.strip(), validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodeError(f"Invalid base64 payload: {e}") from e

    try:
        inflated = gzip.decompress(raw)
    except (OSError, EOFError, zlib.error) as e:
        raise DecodeError(f"Corrupt compressed payload: {e}") from e

    try:
        return inflated.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Payload is not UTF-8 text: {e}") from e
