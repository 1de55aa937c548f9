"""
sqlgen public package initialization.

Dialect-aware generation of parameterized CRUD, paging and bulk SQL from
table mappings, predicate trees and sort keys.
"""

from .config import GeneratorConfig  # noqa: F401
from .core import (
    BooleanColumn,
    ColumnMap,
    DateColumn,
    DateTimeColumn,
    DecimalColumn,
    FloatColumn,
    IntegerColumn,
    KeyType,
    StringColumn,
    TableMapping,
    UUIDColumn,
    ValueKind,
)  # noqa: F401
from .dialects import get_dialect  # noqa: F401
from .errors import (
    ConfigurationError,
    EmptyBatchError,
    EmptyPredicateListError,
    InvalidPagingError,
    MappingConfigurationError,
    MissingPredicateError,
    MissingSortError,
    MultiColumnTriggerIdentityError,
    NoMappedColumnsError,
    NullParameterBagError,
    ParameterNameCollisionError,
    SqlGenerationError,
    UnknownColumnError,
    UnsupportedOperationError,
)  # noqa: F401
from .query import (
    BetweenPredicate,
    ExistsPredicate,
    FieldPredicate,
    GroupOperator,
    Operator,
    PredicateGroup,
    PropertyPredicate,
    Sort,
    SqlGenerator,
)  # noqa: F401

__all__ = [
    "BetweenPredicate",
    "BooleanColumn",
    "ColumnMap",
    "ConfigurationError",
    "DateColumn",
    "DateTimeColumn",
    "DecimalColumn",
    "EmptyBatchError",
    "EmptyPredicateListError",
    "ExistsPredicate",
    "FieldPredicate",
    "FloatColumn",
    "GeneratorConfig",
    "GroupOperator",
    "IntegerColumn",
    "InvalidPagingError",
    "KeyType",
    "MappingConfigurationError",
    "MissingPredicateError",
    "MissingSortError",
    "MultiColumnTriggerIdentityError",
    "NoMappedColumnsError",
    "NullParameterBagError",
    "Operator",
    "ParameterNameCollisionError",
    "PredicateGroup",
    "PropertyPredicate",
    "Sort",
    "SqlGenerationError",
    "SqlGenerator",
    "StringColumn",
    "TableMapping",
    "UUIDColumn",
    "UnknownColumnError",
    "UnsupportedOperationError",
    "ValueKind",
    "get_dialect",
]
