"""
SQL generation from table mappings, predicates and sort keys.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional, Set, Tuple

from ..config import GeneratorConfig
from ..core.columns import ColumnMap, KeyType
from ..core.literals import render_literal
from ..core.mapping import TableMapping
from ..dialects import Dialect, get_dialect
from ..errors import (
    EmptyBatchError,
    EmptyPredicateListError,
    InvalidPagingError,
    MissingPredicateError,
    MissingSortError,
    MultiColumnTriggerIdentityError,
    NoMappedColumnsError,
    ParameterNameCollisionError,
    UnsupportedOperationError,
)
from ..security.redaction import redact_params
from ..utils import get_logger, time_call
from .parameters import (
    IDENTITY_OUT_PARAM,
    ParameterBag,
    require_params,
    row_parameter,
    statement_parameter,
)
from .predicates import Predicate, SortSpec, normalize_sort

_UPDATE_EXCLUDED_KEYS = frozenset({KeyType.IDENTITY, KeyType.ASSIGNED})


class SqlGenerator:
    """
    Build parameterized SQL statements for a single dialect.

    The generator holds no per-call state: every statement is a function of
    its arguments, with predicate values written into the caller's
    parameter bag. One bag must not be shared by concurrent builds.
    """

    def __init__(self, config: GeneratorConfig) -> None:
        self.config = config
        self.dialect: Dialect = config.dialect
        self.logger = get_logger("query.generator")

    @classmethod
    def for_dialect(cls, dialect: Dialect | str, **kwargs: Any) -> "SqlGenerator":
        if isinstance(dialect, str):
            dialect = get_dialect(dialect)
        return cls(GeneratorConfig(dialect=dialect, **kwargs))

    # Naming ------------------------------------------------------------
    def get_table_name(self, mapping: TableMapping) -> str:
        return self.dialect.get_table_name(mapping.schema_name, mapping.table_name)

    def get_column_name(self, mapping: TableMapping, column: ColumnMap, include_alias: bool = False) -> str:
        alias = column.name if include_alias and column.is_renamed else None
        return self.dialect.get_column_name(self.get_table_name(mapping), column.column_name, alias)

    def get_column_name_for(self, mapping: TableMapping, name: str, include_alias: bool = False) -> str:
        return self.get_column_name(mapping, mapping.get_column(name), include_alias)

    def supports_multiple_statements(self) -> bool:
        return self.dialect.supports_multiple_statements()

    # Selection ---------------------------------------------------------
    def select(
        self,
        mapping: TableMapping,
        predicate: Optional[Predicate],
        sort: Optional[SortSpec],
        params: Optional[ParameterBag],
    ) -> str:
        params = require_params(params)
        sql_parts = self._select_parts(mapping, predicate, params)
        order_by = self._order_by(mapping, sort)
        if order_by:
            sql_parts.extend(["ORDER BY", order_by])
        return self._emit("select", " ".join(sql_parts), params)

    def count(
        self,
        mapping: TableMapping,
        predicate: Optional[Predicate],
        params: Optional[ParameterBag],
    ) -> str:
        params = require_params(params)
        total = self.dialect.quote_identifier("Total")
        sql_parts = [f"SELECT COUNT(*) AS {total}", "FROM", self.get_table_name(mapping)]
        if predicate is not None:
            sql_parts.extend(["WHERE", predicate.render(self, params)])
        return self._emit("count", " ".join(sql_parts), params)

    def select_paged(
        self,
        mapping: TableMapping,
        predicate: Optional[Predicate],
        sort: Optional[SortSpec],
        page: int,
        page_size: int,
        params: Optional[ParameterBag],
    ) -> str:
        """
        Select one zero-based page of ``page_size`` rows.
        """
        order_by = self._require_order_by(mapping, sort)
        params = require_params(params)
        if page < 0:
            raise InvalidPagingError(f"Page must be non-negative, got {page}")
        if page_size <= 0:
            raise InvalidPagingError(f"Page size must be positive, got {page_size}")
        inner = self._ordered_select(mapping, predicate, order_by, params)
        sql = self.dialect.get_paging_sql(inner, page, page_size, params)
        return self._emit("select_paged", sql, params)

    def select_set(
        self,
        mapping: TableMapping,
        predicate: Optional[Predicate],
        sort: Optional[SortSpec],
        first_result: int,
        max_results: int,
        params: Optional[ParameterBag],
    ) -> str:
        """
        Select ``max_results`` rows starting at offset ``first_result``.
        """
        order_by = self._require_order_by(mapping, sort)
        params = require_params(params)
        if first_result < 0:
            raise InvalidPagingError(f"First result must be non-negative, got {first_result}")
        if max_results <= 0:
            raise InvalidPagingError(f"Max results must be positive, got {max_results}")
        inner = self._ordered_select(mapping, predicate, order_by, params)
        sql = self.dialect.get_window_sql(inner, first_result, max_results, params)
        return self._emit("select_set", sql, params)

    # Insert ------------------------------------------------------------
    def insert(self, mapping: TableMapping) -> str:
        columns = self._insert_columns(mapping)
        prefix = self.dialect.parameter_prefix
        column_sql = ", ".join(self._target_column(column) for column in columns)
        values_sql = ", ".join(f"{prefix}{column.name}" for column in columns)
        sql = f"INSERT INTO {self.get_table_name(mapping)} ({column_sql}) VALUES ({values_sql})"

        trigger_columns = mapping.columns_with_key(KeyType.TRIGGER_IDENTITY)
        if trigger_columns:
            if len(trigger_columns) > 1:
                raise MultiColumnTriggerIdentityError(
                    mapping.qualified_name, [column.name for column in trigger_columns]
                )
            returning = self._target_column(trigger_columns[0])
            sql += f" RETURNING {returning} INTO {prefix}{IDENTITY_OUT_PARAM}"
        return self._emit("insert", sql)

    def bulk_insert(self, mappings: Iterable[TableMapping]) -> str:
        """
        Build one multi-row INSERT per distinct (schema, table).

        Every input mapping is one row; its parameters are suffixed with the
        row's position in ``mappings``, which keeps names unique across the
        whole batch and tells the caller which entity binds to which row.
        """
        rows = list(mappings or ())
        if not rows:
            raise EmptyBatchError()

        groups: Dict[Tuple[Optional[str], str], List[Tuple[int, TableMapping]]] = {}
        for index, mapping in enumerate(rows):
            groups.setdefault(mapping.identity, []).append((index, mapping))

        prefix = self.dialect.parameter_prefix
        statements: List[str] = []
        bound: Set[str] = set()
        with time_call(
            "generator.bulk_insert",
            self.logger,
            threshold_ms=self.config.slow_generation_ms,
            dialect=self.dialect.name,
            operation="bulk_insert",
            rows=len(rows),
            tables=len(groups),
        ):
            for members in groups.values():
                template = members[0][1]
                columns = self._insert_columns(template)
                column_sql = ", ".join(self._target_column(column) for column in columns)
                values: List[str] = []
                for index, _ in members:
                    names = [row_parameter(column.name, index) for column in columns]
                    self._check_collisions(template, names, bound)
                    values.append("(" + ", ".join(f"{prefix}{name}" for name in names) + ")")
                statements.append(
                    f"INSERT INTO {self.get_table_name(template)} ({column_sql}) VALUES\n"
                    + ",\n".join(values)
                    + ";"
                )
        return self._emit("bulk_insert", "\n".join(statements))

    def bulk_insert_values(self, mapping: TableMapping, rows: Iterable[Mapping[str, Any]]) -> str:
        """
        Build a multi-row INSERT with values inlined as SQL literals.

        Each row maps logical column names to values; missing writable
        columns render ``NULL``. Literal quoting follows each column's
        declared :class:`~sqlgen.core.literals.ValueKind`; quoted kinds are
        escaped by the dialect.
        """
        row_list = list(rows or ())
        if not row_list:
            raise EmptyBatchError()
        columns = self._insert_columns(mapping)
        escape = self.dialect.escape_string_literal
        column_sql = ", ".join(self._target_column(column) for column in columns)

        with time_call(
            "generator.bulk_insert_values",
            self.logger,
            threshold_ms=self.config.slow_generation_ms,
            dialect=self.dialect.name,
            operation="bulk_insert_values",
            rows=len(row_list),
        ):
            values: List[str] = []
            for row in row_list:
                normalized = {}
                for key, value in row.items():
                    normalized[mapping.get_column(key).name] = value
                literals = ", ".join(
                    render_literal(column.kind, normalized.get(column.name), escape)
                    for column in columns
                )
                values.append(f"({literals})")
        sql = f"INSERT INTO {self.get_table_name(mapping)} ({column_sql}) VALUES\n" + ",\n".join(values)
        return self._emit("bulk_insert_values", sql)

    # Update / delete ---------------------------------------------------
    def update(
        self,
        mapping: TableMapping,
        predicate: Optional[Predicate],
        params: Optional[ParameterBag],
        ignore_all_key_properties: bool = False,
    ) -> str:
        if predicate is None:
            raise MissingPredicateError("UPDATE")
        params = require_params(params)
        columns = self._update_columns(mapping, ignore_all_key_properties)
        prefix = self.dialect.parameter_prefix
        set_sql = ", ".join(
            f"{self._target_column(column)} = {prefix}{column.name}" for column in columns
        )
        where_sql = predicate.render(self, params)
        sql = f"UPDATE {self.get_table_name(mapping)} SET {set_sql} WHERE {where_sql}"
        return self._emit("update", sql, params)

    def bulk_update(
        self,
        mapping: TableMapping,
        predicates: Iterable[Predicate],
        params: Optional[ParameterBag],
        ignore_all_key_properties: bool = False,
    ) -> str:
        """
        Build one ``UPDATE ...;`` per predicate, newline separated.

        SET parameters are suffixed with the predicate's index. Whether the
        batch can run as a single call is for the caller to check through
        :meth:`supports_multiple_statements`.
        """
        predicate_list = list(predicates or ())
        if not predicate_list:
            raise EmptyPredicateListError()
        params = require_params(params)
        columns = self._update_columns(mapping, ignore_all_key_properties)
        prefix = self.dialect.parameter_prefix
        table = self.get_table_name(mapping)

        statements: List[str] = []
        with time_call(
            "generator.bulk_update",
            self.logger,
            threshold_ms=self.config.slow_generation_ms,
            dialect=self.dialect.name,
            operation="bulk_update",
            statements=len(predicate_list),
        ):
            for index, predicate in enumerate(predicate_list):
                set_sql = ", ".join(
                    f"{self._target_column(column)} = {prefix}{statement_parameter(column.name, index)}"
                    for column in columns
                )
                where_sql = predicate.render(self, params)
                statements.append(f"UPDATE {table} SET {set_sql} WHERE {where_sql};")
        return self._emit("bulk_update", "\n".join(statements), params)

    def delete(
        self,
        mapping: TableMapping,
        predicate: Optional[Predicate],
        params: Optional[ParameterBag],
    ) -> str:
        if predicate is None:
            raise MissingPredicateError("DELETE")
        params = require_params(params)
        sql = f"DELETE FROM {self.get_table_name(mapping)} WHERE {predicate.render(self, params)}"
        return self._emit("delete", sql, params)

    def identity_sql(self, mapping: TableMapping) -> str:
        if not self.dialect.capabilities.supports_identity_retrieval:
            raise UnsupportedOperationError(
                f"Dialect '{self.dialect.name}' cannot retrieve the identity generated for {mapping.qualified_name}; "
                "map the key as a trigger identity and read it through RETURNING ... INTO."
            )
        return self.dialect.get_identity_sql(self.get_table_name(mapping))

    # Helpers -----------------------------------------------------------
    def _target_column(self, column: ColumnMap) -> str:
        # INSERT/UPDATE targets are never table-qualified.
        return self.dialect.get_column_name(None, column.column_name)

    def _select_columns(self, mapping: TableMapping) -> str:
        return ", ".join(
            self.get_column_name(mapping, column, include_alias=True)
            for column in mapping
            if not column.ignored
        )

    def _select_parts(
        self,
        mapping: TableMapping,
        predicate: Optional[Predicate],
        params: ParameterBag,
    ) -> List[str]:
        sql_parts = [f"SELECT {self._select_columns(mapping)}", "FROM", self.get_table_name(mapping)]
        if predicate is not None:
            sql_parts.extend(["WHERE", predicate.render(self, params)])
        return sql_parts

    def _ordered_select(
        self,
        mapping: TableMapping,
        predicate: Optional[Predicate],
        order_by: str,
        params: ParameterBag,
    ) -> str:
        sql_parts = self._select_parts(mapping, predicate, params)
        sql_parts.extend(["ORDER BY", order_by])
        return " ".join(sql_parts)

    def _order_by(self, mapping: TableMapping, sort: Optional[SortSpec]) -> str:
        return ", ".join(
            f"{self.get_column_name_for(mapping, item.name)} {'ASC' if item.ascending else 'DESC'}"
            for item in normalize_sort(sort)
        )

    def _require_order_by(self, mapping: TableMapping, sort: Optional[SortSpec]) -> str:
        order_by = self._order_by(mapping, sort)
        if not order_by:
            raise MissingSortError()
        return order_by

    def _insert_columns(self, mapping: TableMapping) -> List[ColumnMap]:
        columns = [column for column in mapping if column.writable and not column.is_generated]
        if not columns:
            raise NoMappedColumnsError(mapping.qualified_name)
        return columns

    def _update_columns(self, mapping: TableMapping, ignore_all_key_properties: bool) -> List[ColumnMap]:
        if ignore_all_key_properties:
            columns = [column for column in mapping if column.writable and not column.is_key]
        else:
            columns = [
                column
                for column in mapping
                if column.writable and column.key_type not in _UPDATE_EXCLUDED_KEYS
            ]
        if not columns:
            raise NoMappedColumnsError(mapping.qualified_name)
        return columns

    def _check_collisions(self, mapping: TableMapping, names: List[str], bound: Set[str]) -> None:
        # "Name" at row 10 and "Name1" at row 0 both produce "Name10".
        clashes = [name for name in names if name.lower() in bound]
        if clashes:
            raise ParameterNameCollisionError(mapping.qualified_name, clashes)
        for name in names:
            bound.add(name.lower())

    def _emit(self, operation: str, sql: str, params: Optional[ParameterBag] = None) -> str:
        if self.config.log_statements:
            self.logger.debug(
                "Generated %s statement",
                operation,
                extra={
                    "dialect": self.dialect.name,
                    "operation": operation,
                    "sql": sql,
                    "params": redact_params(params),
                },
            )
        return sql


__all__ = ["SqlGenerator"]
