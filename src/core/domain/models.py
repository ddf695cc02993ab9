"""Domain models (Pydantic v2).

A `ToolOutcome` is the explicit result of running one tool: either an
`output` or an `error_kind` plus a message, never both. The CLI renders it
and the JSON exporter serializes it.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from core.domain.case_variant import CaseVariant, DistanceDirection
from core.domain.errors import ErrorKind


class ToolOutcome(BaseModel):
    """Result of a single tool invocation."""

    model_config = ConfigDict(frozen=True)

    tool: str = Field(
        ...,
        min_length=1,
        max_length=64,
        description="Tool name (e.g. 'case', 'base64-decode', 'distance').",
    )
    input: str = Field(
        ...,
        description="Raw input as received from the caller.",
    )
    output: str | float | list[str] | None = Field(
        default=None,
        description="Tool result; unset when the call failed.",
    )
    error_kind: ErrorKind | None = Field(
        default=None,
        description="Failure category, if the call failed.",
    )
    message: str | None = Field(
        default=None,
        description="User-facing failure message.",
    )
    variant: CaseVariant | None = Field(
        default=None,
        description="Case variant used by the case tool.",
    )
    direction: DistanceDirection | None = Field(
        default=None,
        description="Conversion direction used by the distance tool.",
    )

    @model_validator(mode="after")
    def _output_xor_error(self) -> "ToolOutcome":
        if self.error_kind is not None and self.output is not None:
            raise ValueError("A failed outcome cannot carry an output")
        if self.error_kind is not None and not self.message:
            raise ValueError("A failed outcome needs a message")
        return self

    @property
    def ok(self) -> bool:
        return self.error_kind is None
