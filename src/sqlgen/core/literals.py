"""
Typed SQL literal rendering.

Each column declares a :class:`ValueKind` up front, so rendering a value never
has to inspect the runtime type to decide how it should be quoted. String
escaping is supplied by the dialect, since engines disagree on backslashes.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Dict

NULL_LITERAL = "NULL"

Escaper = Callable[[str], str]

_TRUE_TEXT = {"1", "true", "yes", "on", "t", "y"}
_FALSE_TEXT = {"0", "false", "no", "off", "f", "n"}


class ValueKind(Enum):
    TEXT = "text"
    TEMPORAL = "temporal"
    UUID = "uuid"
    BOOLEAN = "boolean"
    NUMERIC = "numeric"


def escape_quotes(text: str) -> str:
    return text.replace("'", "''")


def _quote(text: str, escape: Escaper) -> str:
    return f"'{escape(text)}'"


def render_text(value: Any, escape: Escaper = escape_quotes) -> str:
    return _quote(str(value), escape)


def render_temporal(value: Any, escape: Escaper = escape_quotes) -> str:
    if isinstance(value, datetime):
        return _quote(value.isoformat(sep=" "), escape)
    if isinstance(value, (date, time)):
        return _quote(value.isoformat(), escape)
    return _quote(str(value), escape)


def render_uuid(value: Any, escape: Escaper = escape_quotes) -> str:
    return _quote(str(value), escape)


def render_boolean(value: Any, escape: Escaper = escape_quotes) -> str:
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_TEXT:
            return "1"
        if normalized in _FALSE_TEXT:
            return "0"
        raise ValueError(f"Invalid boolean literal {value!r}")
    return "1" if value else "0"


def _finite(value: float, original: Any) -> float:
    if not math.isfinite(value):
        raise ValueError(f"Cannot render non-finite number {original!r} as a SQL literal")
    return value


def render_numeric(value: Any, escape: Escaper = escape_quotes) -> str:
    if isinstance(value, bool):
        return render_boolean(value)
    if isinstance(value, Decimal):
        if not value.is_finite():
            raise ValueError(f"Cannot render non-finite number {value!r} as a SQL literal")
        return format(value, "f")
    if isinstance(value, int):
        return repr(value)
    if isinstance(value, float):
        return repr(_finite(value, value))
    text = str(value).strip()
    try:
        if "." not in text and "e" not in text.lower():
            return str(int(text))
        number = float(text)
    except ValueError as exc:
        raise ValueError(f"Invalid numeric literal {value!r}") from exc
    return repr(_finite(number, value))


_RENDERERS: Dict[ValueKind, Callable[[Any, Escaper], str]] = {
    ValueKind.TEXT: render_text,
    ValueKind.TEMPORAL: render_temporal,
    ValueKind.UUID: render_uuid,
    ValueKind.BOOLEAN: render_boolean,
    ValueKind.NUMERIC: render_numeric,
}


def render_literal(kind: ValueKind, value: Any, escape: Escaper = escape_quotes) -> str:
    """
    Render ``value`` as an inline SQL literal according to ``kind``.

    ``None`` renders as ``NULL`` for every kind. ``escape`` receives the raw
    text of quoted kinds and must return it safe to wrap in single quotes;
    pass the dialect's :meth:`escape_string_literal`.
    """
    if value is None:
        return NULL_LITERAL
    return _RENDERERS[kind](value, escape)
