"""Module entry point for `python -m main` when run from inside `src/`.

Same commands as the installed `spannerly` script, e.g.
`python -m main distance miles-to-km 10`.
"""

from __future__ import annotations

import sys

# Windows consoles default to cp1252; Base64 round-trips print arbitrary text.
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
