"""Stateless text, codec and unit tools.

Every function here is pure: no shared state, no I/O, safe to call from
any thread.
"""

from core.services.base64_codec import decode_base64, encode_base64
from core.services.case_formatter import convert_case, format_case
from core.services.tokenizer import tokenize
from core.services.unit_converter import km_to_miles, miles_to_km

__all__ = [
    "convert_case",
    "decode_base64",
    "encode_base64",
    "format_case",
    "km_to_miles",
    "miles_to_km",
    "tokenize",
]
