"""JSON export of tool outcomes.

Stable output (sorted keys, UTF-8, trailing newline) so results can be
diffed or fed to other tools.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import ToolOutcome


def render_outcome_json(outcome: ToolOutcome, *, indent: int = 2) -> str:
    """Serialize `outcome` to a JSON document."""

    payload = outcome.model_dump(mode="json")
    payload["ok"] = outcome.ok
    return json.dumps(payload, ensure_ascii=False, indent=indent or None, sort_keys=True) + "\n"


def export_outcome_json(*, outcome: ToolOutcome, output_path: Path, indent: int = 2) -> Path:
    """Write `outcome` as UTF-8 JSON to `output_path`."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_outcome_json(outcome, indent=indent), encoding="utf-8")
    return output_path
