"""Word tokenizer for case conversion.

Splits any string into lowercase word tokens, whatever its source style
(camelCase, PascalCase, snake_case, kebab-case, plain words).

Boundary rules:
- any character that is not a letter or digit is a delimiter and is dropped;
- lowercase -> uppercase starts a new token (`helloWorld`);
- letter <-> digit starts a new token (`v2beta` -> `v`, `2`, `beta`);
- in an uppercase run followed by a lowercase letter, the last uppercase
  letter starts the new token (`HTTPServer` -> `http`, `server`).
"""

from __future__ import annotations

_DELIMITER = 0
_UPPER = 1
_LOWER = 2
_DIGIT = 3


def _char_class(ch: str) -> int:
    if ch.isdigit():
        return _DIGIT
    if ch.isalpha():
        # Uncased letters join lowercase runs.
        return _UPPER if ch.isupper() else _LOWER
    return _DELIMITER


def tokenize(text: str) -> list[str]:
    """Return the ordered lowercase tokens of `text`.

    Total over all strings; empty or delimiter-only input yields `[]`.
    """

    tokens: list[str] = []
    current: list[str] = []
    prev = _DELIMITER

    def flush() -> None:
        if current:
            tokens.append("".join(current).lower())
            current.clear()

    for ch in text:
        cls = _char_class(ch)
        if cls == _DELIMITER:
            flush()
        elif prev == _DELIMITER:
            current.append(ch)
        elif (prev == _DIGIT) != (cls == _DIGIT):
            flush()
            current.append(ch)
        elif prev == _LOWER and cls == _UPPER:
            flush()
            current.append(ch)
        elif prev == _UPPER and cls == _LOWER and len(current) >= 2:
            # Acronym: "HTTPS" + "e" -> "HTTP", "Se".
            head = current.pop()
            flush()
            current.extend((head, ch))
        else:
            current.append(ch)
        prev = cls

    flush()
    return tokens
