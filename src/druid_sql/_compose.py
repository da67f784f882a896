from __future__ import annotations

import enum
import math
from collections import deque
from collections.abc import Callable, Sequence
from typing import Any, NamedTuple

from ._compat import Template, split_template
from ._errors import (
    InvalidFunctionResultError,
    InvalidSubstitutionError,
    TemplateShapeError,
)
from ._literal import SQLLiteral, is_sql_literal, render_literal
from ._types import SQLParameter, is_sql_parameter, parameter_to_dict

PLACEHOLDER = "?"


class _Omit(enum.Enum):
    OMIT = "OMIT"

    def __repr__(self) -> str:
        return "OMIT"


# Contributes nothing at its slot, unlike None which renders as null.
OMIT = _Omit.OMIT


class InlineSQL(NamedTuple):
    strings: tuple[str, ...]
    values: tuple[Any, ...]


class SQLQuery(NamedTuple):
    query: str
    parameters: tuple[Any, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        if not self.parameters:
            return {"query": self.query}
        return {
            "query": self.query,
            "parameters": [parameter_to_dict(p) for p in self.parameters],
        }


InlineFactory = Callable[..., InlineSQL]
InlineFunction = Callable[[InlineFactory], Any]
SubSQL = SQLLiteral | SQLParameter | InlineSQL | InlineFunction | _Omit


def inline(strings: Template | Sequence[str], *values: Any) -> InlineSQL:
    """Capture a nested template without evaluating it.

    This is the constructor handed to inline functions::

        sql(["SELECT * FROM t ", ""], lambda s: s(["WHERE x = ", ""], CHAR("a")))
    """
    if isinstance(strings, Template):
        if values:
            msg = "t-string templates take no extra values"
            raise TypeError(msg)
        return InlineSQL(*split_template(strings))
    if isinstance(strings, str):
        msg = "strings must be a sequence of segments, not a single str"
        raise TypeError(msg)
    return InlineSQL(tuple(strings), values)


def _as_nested(obj: object) -> InlineSQL | None:
    if isinstance(obj, InlineSQL):
        return obj
    if isinstance(obj, Template):
        return InlineSQL(*split_template(obj))
    if isinstance(obj, (tuple, list)) and len(obj) == 2:
        strings, values = obj
        if (
            isinstance(strings, Sequence)
            and not isinstance(strings, str)
            and len(strings) > 0
            and all(isinstance(s, str) for s in strings)
            and isinstance(values, Sequence)
            and not isinstance(values, str)
        ):
            return InlineSQL(tuple(strings), tuple(values))
    return None


def _check_shape(template: InlineSQL) -> None:
    if len(template.strings) != len(template.values) + 1:
        raise TemplateShapeError(
            segments=len(template.strings),
            values=len(template.values),
        )


def _is_falsy(result: Any) -> bool:
    # NaN counts as falsy for function results, as in JavaScript
    if isinstance(result, float) and math.isnan(result):
        return True
    return is_sql_literal(result) and not result


class _Composer:
    def __init__(self, template: InlineSQL) -> None:
        _check_shape(template)
        self._pending_strings = deque(template.strings)
        self._pending_values: deque[Any] = deque(template.values)
        self._segments = [self._pending_strings.popleft()]
        self._parameters: list[Any] = []

    def compose(self) -> SQLQuery:
        while self._pending_values:
            self._substitute(self._pending_values.popleft())
        query = PLACEHOLDER.join(self._segments).strip()
        return SQLQuery(query, tuple(self._parameters))

    def _substitute(self, value: Any) -> None:
        if value is OMIT:
            self._omit()
        elif is_sql_literal(value):
            # top-level False, None, 0 and "" are literals, not omissions
            self._literal(value)
        elif is_sql_parameter(value):
            self._bind(value)
        elif (nested := _as_nested(value)) is not None:
            self._splice(nested)
        elif callable(value):
            self._substitute_result(value(inline))
        else:
            raise InvalidSubstitutionError(value)

    def _substitute_result(self, result: Any) -> None:
        if result is OMIT or _is_falsy(result):
            self._omit()
        elif is_sql_literal(result):
            self._literal(result)
        elif is_sql_parameter(result):
            self._bind(result)
        elif (nested := _as_nested(result)) is not None:
            self._splice(nested)
        else:
            raise InvalidFunctionResultError(result)

    def _omit(self) -> None:
        self._segments[-1] += self._pending_strings.popleft()

    def _literal(self, value: SQLLiteral) -> None:
        self._segments[-1] += render_literal(value) + self._pending_strings.popleft()

    def _bind(self, parameter: Any) -> None:
        self._segments.append(self._pending_strings.popleft())
        self._parameters.append(parameter)

    def _splice(self, nested: InlineSQL) -> None:
        _check_shape(nested)
        strings = list(nested.strings)
        # the nested tail runs straight into the text after the outer slot
        strings[-1] += self._pending_strings.popleft()
        self._segments[-1] += strings[0]
        self._pending_strings.extendleft(reversed(strings[1:]))
        self._pending_values.extendleft(reversed(nested.values))


def sql(strings: Template | Sequence[str], *values: SubSQL) -> SQLQuery:
    """Compose a template into a flat query and its bind parameters.

    ``strings`` holds the literal segments and ``values`` the slots between
    them, so there is always one more segment than value. On Python 3.14+
    a t-string can be passed instead.

    Each slot is classified in order:

    - ``OMIT`` contributes nothing.
    - ``str``, ``int``, ``float``, ``bool`` and ``None`` are written into the
      query as literals (``"a"``, ``1``, ``true``, ``null``).
    - parameters (anything with a ``type`` and a ``value``) become ``?`` and
      are collected, in order, into ``parameters``.
    - an ``InlineSQL`` pair is spliced in place.
    - callables are called with ``inline``; a falsy literal result omits the
      slot, otherwise the result is handled like a slot value.

    Nested templates are spliced into the work queues rather than composed
    recursively, so nesting depth is unbounded.
    """
    return _Composer(inline(strings, *values)).compose()
