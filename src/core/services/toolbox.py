"""Outcome-returning entry points for each tool.

The plain functions in `core.services` raise on invalid input. These
wrappers turn every call into a `ToolOutcome`, so a failure is part of the
return value and the caller (CLI, JSON export, tests) branches on
`outcome.ok` instead of catching exceptions.
"""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from core.domain.case_variant import CaseVariant, DistanceDirection
from core.domain.errors import DecodeError, ToolboxError
from core.domain.models import ToolOutcome
from core.services.base64_codec import decode_base64, encode_base64
from core.services.case_formatter import convert_case
from core.services.tokenizer import tokenize
from core.services.unit_converter import km_to_miles, miles_to_km

logger = logging.getLogger(__name__)

T = TypeVar("T")

DECODE_FAILURE_MESSAGE = "Invalid Base64 string"


def _attempt(
    tool: str,
    raw_input: str,
    func: Callable[[], T],
    **extra: object,
) -> ToolOutcome:
    try:
        output = func()
    except ToolboxError as exc:
        logger.debug("Tool %s failed (%s): %s", tool, exc.kind.value, exc.message)
        message = DECODE_FAILURE_MESSAGE if isinstance(exc, DecodeError) else exc.message
        return ToolOutcome(tool=tool, input=raw_input, error_kind=exc.kind, message=message, **extra)
    return ToolOutcome(tool=tool, input=raw_input, output=output, **extra)


def run_tokenize(text: str) -> ToolOutcome:
    return _attempt("tokens", text, lambda: tokenize(text))


def run_case(text: str, variant: CaseVariant) -> ToolOutcome:
    return _attempt("case", text, lambda: convert_case(text, variant), variant=variant)


def run_encode(text: str) -> ToolOutcome:
    return _attempt("base64-encode", text, lambda: encode_base64(text))


def run_decode(encoded: str) -> ToolOutcome:
    return _attempt("base64-decode", encoded, lambda: decode_base64(encoded))


def run_distance(value: float, direction: DistanceDirection) -> ToolOutcome:
    """Convert `value` in the given direction.

    The input is recorded in its numeric form (`repr(float)`), since parsing
    user text into a number belongs to the caller.
    """

    convert = miles_to_km if direction is DistanceDirection.MILES_TO_KM else km_to_miles
    return _attempt("distance", repr(float(value)), lambda: convert(value), direction=direction)
