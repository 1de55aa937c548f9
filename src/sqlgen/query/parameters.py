"""
Parameter bag naming helpers.

Bag keys are bare names; the SQL text refers to them through the dialect's
parameter prefix. Each statement shape uses its own naming pattern so names
produced for one part of a batch never collide with another:

* insert / update SET: ``Name``
* bulk insert rows: ``Name0``, ``Name1`` (row index)
* bulk update SET: ``Name_0``, ``Name_1`` (predicate index)
* predicate values: ``Name_p<bag size>``
"""

from __future__ import annotations

from typing import Any, MutableMapping

from ..errors import NullParameterBagError

ParameterBag = MutableMapping[str, Any]

IDENTITY_OUT_PARAM = "IdOutParam"


def require_params(params: ParameterBag | None) -> ParameterBag:
    if params is None:
        raise NullParameterBagError()
    return params


def row_parameter(name: str, index: int) -> str:
    return f"{name}{index}"


def statement_parameter(name: str, index: int) -> str:
    return f"{name}_{index}"


def next_parameter_name(params: ParameterBag, name: str) -> str:
    """
    Return an unused predicate parameter name derived from ``name``.
    """
    counter = len(params)
    candidate = f"{name}_p{counter}"
    while candidate in params:
        counter += 1
        candidate = f"{name}_p{counter}"
    return candidate


def add_parameter(params: ParameterBag, name: str, value: Any, prefix: str) -> str:
    """
    Store ``value`` under a fresh name and return the prefixed placeholder.
    """
    key = next_parameter_name(params, name)
    params[key] = value
    return f"{prefix}{key}"
