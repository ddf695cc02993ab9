"""Run spannerly from a source checkout without installing it.

    python -m main case "hello world" --to snake
    python -m main base64 decode SGVsbG8sIFdvcmxkIQ==

Puts `src/` on `sys.path` so `cli`, `core` and `adapters` resolve, then
hands over to the Typer app.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    project_root = Path(__file__).resolve().parent
    src = project_root / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
