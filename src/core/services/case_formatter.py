"""Case formatting over token sequences."""

from __future__ import annotations

from typing import Sequence, assert_never

from core.domain.case_variant import CaseVariant
from core.services.tokenizer import tokenize


def _capitalize(token: str) -> str:
    return token[:1].upper() + token[1:]


def format_case(tokens: Sequence[str], variant: CaseVariant) -> str:
    """Join lowercase `tokens` according to `variant`.

    An empty sequence always yields an empty string.
    """

    if variant is CaseVariant.UPPER:
        return " ".join(token.upper() for token in tokens)
    if variant is CaseVariant.LOWER:
        return " ".join(token.lower() for token in tokens)
    if variant is CaseVariant.TITLE:
        return " ".join(_capitalize(token) for token in tokens)
    if variant is CaseVariant.CAMEL:
        return "".join(
            token.lower() if index == 0 else _capitalize(token)
            for index, token in enumerate(tokens)
        )
    if variant is CaseVariant.PASCAL:
        return "".join(_capitalize(token) for token in tokens)
    if variant is CaseVariant.SNAKE:
        return "_".join(token.lower() for token in tokens)
    if variant is CaseVariant.KEBAB:
        return "-".join(token.lower() for token in tokens)
    assert_never(variant)


def convert_case(text: str, variant: CaseVariant) -> str:
    """Tokenize `text` and format it as `variant`."""

    return format_case(tokenize(text), variant)
