"""
Predicate tree primitives and sort keys.

Predicates render themselves to SQL boolean fragments through the generator
that owns the dialect, appending their bound values to the caller's
parameter bag.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Protocol, Sequence, Tuple, Union

from ..core.mapping import TableMapping
from .parameters import ParameterBag, add_parameter

if TYPE_CHECKING:
    from .generator import SqlGenerator


class Operator(Enum):
    EQ = "eq"
    GT = "gt"
    GE = "ge"
    LT = "lt"
    LE = "le"
    LIKE = "like"


class GroupOperator(Enum):
    AND = "AND"
    OR = "OR"


# (operator, negated operator)
_OPERATOR_SQL = {
    Operator.EQ: ("=", "<>"),
    Operator.GT: (">", "<="),
    Operator.GE: (">=", "<"),
    Operator.LT: ("<", ">="),
    Operator.LE: ("<=", ">"),
    Operator.LIKE: ("LIKE", "NOT LIKE"),
}


def operator_sql(operator: Operator, negate: bool = False) -> str:
    positive, negative = _OPERATOR_SQL[operator]
    return negative if negate else positive


class Predicate(Protocol):
    """
    Anything that renders to a complete SQL boolean expression.
    """

    def render(self, generator: "SqlGenerator", params: ParameterBag) -> str: ...


class BasePredicate:
    """
    Combinator support shared by the concrete predicate nodes.
    """

    negate: bool

    def __and__(self, other: Predicate) -> "PredicateGroup":
        return PredicateGroup(GroupOperator.AND, (self, other))

    def __or__(self, other: Predicate) -> "PredicateGroup":
        return PredicateGroup(GroupOperator.OR, (self, other))

    def __invert__(self):
        return replace(self, negate=not self.negate)  # type: ignore[type-var]


_IN_TYPES = (list, tuple, set, frozenset)


def _in_values(value: Any) -> list:
    if not isinstance(value, (set, frozenset)):
        return list(value)
    try:
        return sorted(value)
    except TypeError:
        return sorted(value, key=lambda item: (type(item).__name__, repr(item)))


@dataclass(frozen=True)
class FieldPredicate(BasePredicate):
    """
    Compare a mapped column with a bound value.

    ``None`` renders ``IS NULL`` and a list, tuple or set renders ``IN (...)``;
    both are only valid with :attr:`Operator.EQ`. Set members are bound in
    sorted order so the same predicate always renders the same SQL.
    """

    mapping: TableMapping
    name: str
    operator: Operator
    value: Any
    negate: bool = False

    def render(self, generator: "SqlGenerator", params: ParameterBag) -> str:
        column = self.mapping.get_column(self.name)
        column_sql = generator.get_column_name(self.mapping, column)
        prefix = generator.dialect.parameter_prefix
        not_ = "NOT " if self.negate else ""

        if self.value is None:
            if self.operator is not Operator.EQ:
                raise ValueError("NULL comparison only supported for equality.")
            return f"{column_sql} IS {not_}NULL"

        if isinstance(self.value, _IN_TYPES):
            if self.operator is not Operator.EQ:
                raise ValueError("IN comparison only supported for equality.")
            if not self.value:
                raise ValueError(f"IN comparison on '{column.name}' requires at least one value.")
            placeholders = [
                add_parameter(params, column.name, item, prefix) for item in _in_values(self.value)
            ]
            return f"{column_sql} {not_}IN ({', '.join(placeholders)})"

        placeholder = add_parameter(params, column.name, self.value, prefix)
        return f"{column_sql} {operator_sql(self.operator, self.negate)} {placeholder}"


@dataclass(frozen=True)
class PropertyPredicate(BasePredicate):
    """Compare two mapped columns, possibly on different tables."""

    mapping: TableMapping
    name: str
    operator: Operator
    other_name: str
    other_mapping: Optional[TableMapping] = None
    negate: bool = False

    def render(self, generator: "SqlGenerator", params: ParameterBag) -> str:
        left = generator.get_column_name_for(self.mapping, self.name)
        right = generator.get_column_name_for(self.other_mapping or self.mapping, self.other_name)
        return f"{left} {operator_sql(self.operator, self.negate)} {right}"


@dataclass(frozen=True)
class BetweenPredicate(BasePredicate):
    mapping: TableMapping
    name: str
    low: Any
    high: Any
    negate: bool = False

    def render(self, generator: "SqlGenerator", params: ParameterBag) -> str:
        column = self.mapping.get_column(self.name)
        column_sql = generator.get_column_name(self.mapping, column)
        prefix = generator.dialect.parameter_prefix
        low = add_parameter(params, column.name, self.low, prefix)
        high = add_parameter(params, column.name, self.high, prefix)
        not_ = "NOT " if self.negate else ""
        return f"{column_sql} {not_}BETWEEN {low} AND {high}"


@dataclass(frozen=True)
class ExistsPredicate(BasePredicate):
    """Correlated or standalone ``EXISTS`` sub-select against another mapping."""

    mapping: TableMapping
    predicate: Predicate
    negate: bool = False

    def render(self, generator: "SqlGenerator", params: ParameterBag) -> str:
        table = generator.get_table_name(self.mapping)
        inner = self.predicate.render(generator, params)
        not_ = "NOT " if self.negate else ""
        return f"{not_}EXISTS (SELECT 1 FROM {table} WHERE {inner})"


@dataclass(frozen=True)
class PredicateGroup(BasePredicate):
    """
    AND/OR combination of nested predicates.

    An empty group renders the dialect's always-true expression.
    """

    operator: GroupOperator
    predicates: Tuple[Predicate, ...] = field(default_factory=tuple)
    negate: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "predicates", tuple(self.predicates))

    def render(self, generator: "SqlGenerator", params: ParameterBag) -> str:
        if not self.predicates:
            sql = generator.dialect.empty_expression
        else:
            separator = f" {self.operator.value} "
            sql = separator.join(predicate.render(generator, params) for predicate in self.predicates)
        if self.negate:
            return f"NOT ({sql})"
        return f"({sql})"


@dataclass(frozen=True)
class Sort:
    """Ordering by a logical column name."""

    name: str
    ascending: bool = True

    @classmethod
    def parse(cls, value: str) -> "Sort":
        """
        Parse ``"name"`` (ascending) or ``"-name"`` (descending).
        """
        descending = value.startswith("-")
        name = value[1:] if descending else value
        if not name:
            raise ValueError(f"Invalid sort expression '{value}'")
        return cls(name=name, ascending=not descending)


SortSpec = Sequence[Union[Sort, str]]


def normalize_sort(sort: Optional[SortSpec]) -> list[Sort]:
    if isinstance(sort, str):
        raise TypeError(f"Sort must be a sequence of sort keys, not the bare string {sort!r}; use [{sort!r}]")
    if not sort:
        return []
    return [item if isinstance(item, Sort) else Sort.parse(item) for item in sort]
