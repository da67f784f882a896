"""Inline rendering of SQL literals.

Literals are written into the query text the way a JSON encoder writes them
(``1``, ``true``, ``null``, ``"hello"``), with numbers following JavaScript's
formatting rules so the output does not depend on the host's ``repr``.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal

SQLLiteral = str | int | float | bool | None

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}
_ESCAPE_RE = re.compile('["\\\\\x00-\x1f\ud800-\udfff]')


def is_sql_literal(obj: object) -> bool:
    return obj is None or isinstance(obj, (str, int, float, bool))


def _escape(match: re.Match[str]) -> str:
    ch = match.group()
    return _ESCAPES.get(ch) or f"\\u{ord(ch):04x}"


def _render_float(value: float) -> str:
    if math.isnan(value) or math.isinf(value):
        return "null"
    magnitude = abs(value)
    if magnitude == 0:
        return "0"
    if 1e-6 <= magnitude < 1e21:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    # repr already switches to exponent form well inside this range
    mantissa, exponent = repr(value).split("e")
    return f"{mantissa}e{int(exponent):+d}"


def render_literal(value: SQLLiteral) -> str:
    # bool before int: True is an int
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _render_float(value)
    if isinstance(value, str):
        return '"' + _ESCAPE_RE.sub(_escape, value) + '"'
    msg = f"not an SQL literal: {value!r}"
    raise TypeError(msg)
