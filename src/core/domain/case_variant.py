"""Case variants supported by the case converter.

Kept in the domain layer so the formatter, the CLI and the settings share a
single closed set of choices.
"""

from __future__ import annotations

from enum import Enum


_LABELS: dict[str, str] = {
    "upper": "UPPERCASE",
    "lower": "lowercase",
    "title": "Title Case",
    "camel": "camelCase",
    "pascal": "PascalCase",
    "snake": "snake_case",
    "kebab": "kebab-case",
}


class CaseVariant(str, Enum):
    """Word-joining styles understood by `format_case`."""

    UPPER = "upper"
    LOWER = "lower"
    TITLE = "title"
    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    KEBAB = "kebab"

    @classmethod
    def default(cls) -> "CaseVariant":
        """Return the variant preselected by the case tool."""

        return cls.UPPER

    @classmethod
    def parse(cls, value: str) -> "CaseVariant":
        """Resolve a variant from its value or its display label.

        Matching is case-insensitive, so `"snake"`, `"SNAKE"` and
        `"snake_case"` all resolve to `CaseVariant.SNAKE`.
        """

        needle = value.strip().lower()
        for variant in cls:
            if needle in (variant.value, variant.label().lower()):
                return variant
        raise ValueError(f"Unknown case variant: {value!r}")

    def label(self) -> str:
        """Human readable label, as shown in the case tool selector."""

        return _LABELS[self.value]


class DistanceDirection(str, Enum):
    """Direction selector for the distance tool."""

    MILES_TO_KM = "miles-to-km"
    KM_TO_MILES = "km-to-miles"

    def label(self) -> str:
        return "Miles to Kilometers" if self is DistanceDirection.MILES_TO_KM else "Kilometers to Miles"

    def units(self) -> tuple[str, str]:
        """Return the (source, target) unit names."""

        if self is DistanceDirection.MILES_TO_KM:
            return "mi", "km"
        return "km", "mi"
