from __future__ import annotations

import os
from enum import Enum, auto
from typing import Mapping

from .types import UnbalancedReferenceError, UndefinedVariableError

OPEN = "{"
CLOSE = "}"
OPEN_ESCAPES = ("\\", "$")
CLOSE_ESCAPES = ("\\",)


class _Scan(Enum):
    OUTSIDE = auto()
    INSIDE = auto()


def _is_delimiter(raw: str, i: int, escapes: tuple[str, ...]) -> bool:
    return i == 0 or raw[i - 1] not in escapes


def scan_references(raw: str) -> list[str]:
    # An opening brace that is never closed stays literal text
    state = _Scan.OUTSIDE
    start = 0
    names: list[str] = []

    for i, c in enumerate(raw):
        if c == OPEN and _is_delimiter(raw, i, OPEN_ESCAPES):
            if state == _Scan.INSIDE:
                raise UnbalancedReferenceError(raw, i)
            state = _Scan.INSIDE
            start = i + 1
        elif c == CLOSE and _is_delimiter(raw, i, CLOSE_ESCAPES):
            if state == _Scan.INSIDE:
                names.append(raw[start:i])
                state = _Scan.OUTSIDE

    return names


def render_argument(raw: str, environ: Mapping[str, str] | None = None) -> str:
    if environ is None:
        environ = os.environ

    names = list(dict.fromkeys(scan_references(raw)))
    values = {}
    for name in names:
        if name not in environ:
            raise UndefinedVariableError(name, raw)
        values[name] = environ[name]

    # Replaced name by name, so a value spelling a later placeholder is expanded again
    rendered = raw
    for name in names:
        rendered = rendered.replace(OPEN + name + CLOSE, values[name])

    return rendered
