"""
Statement generation and the predicate primitives it renders.
"""

from .generator import SqlGenerator
from .parameters import ParameterBag
from .predicates import (
    BetweenPredicate,
    ExistsPredicate,
    FieldPredicate,
    GroupOperator,
    Operator,
    Predicate,
    PredicateGroup,
    PropertyPredicate,
    Sort,
)

__all__ = [
    "BetweenPredicate",
    "ExistsPredicate",
    "FieldPredicate",
    "GroupOperator",
    "Operator",
    "ParameterBag",
    "Predicate",
    "PredicateGroup",
    "PropertyPredicate",
    "Sort",
    "SqlGenerator",
]
