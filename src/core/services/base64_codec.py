"""Strict standard Base64 (RFC 4648) for text.

Text is encoded as UTF-8 before encoding. Encoding never fails: lone
surrogates are carried through with `surrogatepass`. Decoding is strict: the
decoded bytes must be well-formed UTF-8, so encoded surrogates are
rejected. No character is skipped either: the URL-safe alphabet, whitespace,
line breaks and misplaced padding are all rejected.
"""

from __future__ import annotations

import base64
import binascii
import logging
import re

from core.domain.errors import DecodeError

logger = logging.getLogger(__name__)

TEXT_ENCODING = "utf-8"

_BASE64_RE = re.compile(r"[A-Za-z0-9+/]*={0,2}")


def encode_base64(text: str) -> str:
    """Encode `text` as padded standard Base64, without line wrapping."""

    raw = text.encode(TEXT_ENCODING, errors="surrogatepass")
    return base64.b64encode(raw).decode("ascii")


def decode_base64(encoded: str) -> str:
    """Decode a padded standard Base64 string back to text.

    Raises:
        DecodeError: length not a multiple of 4, a character outside the
            alphabet, padding outside the last two positions, or bytes that
            are not valid text.
    """

    if len(encoded) % 4 != 0:
        logger.debug("Rejected Base64 input of length %d", len(encoded))
        raise DecodeError("Base64 length must be a multiple of 4")
    if _BASE64_RE.fullmatch(encoded) is None:
        logger.debug("Rejected Base64 input with invalid characters or padding")
        raise DecodeError("Base64 input contains invalid characters or misplaced padding")

    try:
        raw = base64.b64decode(encoded, validate=True)
    except binascii.Error as exc:
        raise DecodeError(f"Malformed Base64 input: {exc}") from exc

    try:
        return raw.decode(TEXT_ENCODING)
    except UnicodeDecodeError as exc:
        raise DecodeError("Decoded bytes are not valid UTF-8 text") from exc
