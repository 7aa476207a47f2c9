"""Deterministic formatting for generated JavaScript.

``format_source`` normalises whitespace so every generated file has the same
layout regardless of how the template that produced it was indented:

* ``\\r\\n`` and ``\\r`` line endings become ``\\n``
* leading tabs become two spaces per tab
* trailing whitespace is stripped from every line
* leading blank lines are dropped and runs of blank lines collapse to one
* non-empty output ends with exactly one newline; empty output stays empty

The transformation is idempotent: ``format_source(format_source(s)) ==
format_source(s)`` for every input.
"""

from __future__ import annotations

import re

INDENT = "  "

_LEADING_TABS = re.compile(r"^\t+")


def _normalise_line(line: str) -> str:
    line = _LEADING_TABS.sub(lambda m: INDENT * len(m.group(0)), line)
    return line.rstrip()


def format_source(source: str) -> str:
    """Return *source* in canonical layout."""
    text = source.replace("\r\n", "\n").replace("\r", "\n")

    lines: list[str] = []
    for raw in text.split("\n"):
        line = _normalise_line(raw)
        if not line and (not lines or not lines[-1]):
            continue
        lines.append(line)

    while lines and not lines[-1]:
        lines.pop()
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
