"""Statement compilers: the four top-level entry points.

Each function creates one :class:`~prepql.compile.sink.ParamSink`, renders
its statement through the shared builders, and collects the sink exactly
once before returning a :class:`~prepql.compile.base.CompiledSQL`.
"""
from __future__ import annotations

import logging
from collections.abc import Iterable

from prepql.compile.base import CompiledSQL
from prepql.compile.builder import QueryBuilder
from prepql.compile.sink import ParamSink
from prepql.schema.expressions import Expression
from prepql.schema.query import Assignment, OutputColumn, Query

logger = logging.getLogger(__name__)


def _finish(kind: str, sql: str, sink: ParamSink) -> CompiledSQL:
    compiled = CompiledSQL(sql=sql, params=sink.collect())
    logger.debug("Compiled %s (%d params): %s", kind, len(compiled.params), sql)
    return compiled


def compile_select(query: Query) -> CompiledSQL:
    """Compile a SELECT query.

    Args:
        query: The query AST.

    Returns:
        ``CompiledSQL`` whose ``sql`` ends with ``;``.
    """
    sink = ParamSink()
    sql = QueryBuilder(sink).render(query)
    return _finish("SELECT", f"{sql};", sink)


def compile_expression(expr: Expression) -> CompiledSQL:
    """Compile a bare scalar expression (no terminator)."""
    sink = ParamSink()
    sql = QueryBuilder(sink).expr.build(expr)
    return _finish("expression", sql, sink)


def compile_update(
    table: str,
    predicate: Expression,
    assignments: Iterable[Assignment | tuple[str, OutputColumn]],
) -> CompiledSQL:
    """Compile an UPDATE statement.

    An assignment whose value renders to exactly the target column name is
    a no-op and is left out of the SET clause.  If every assignment is a
    no-op the SET clause is empty and the resulting SQL is not valid.

    Args:
        table: Table to update.
        predicate: Boolean expression selecting the rows.
        assignments: ``(column, value)`` pairs in SET order.

    Returns:
        ``CompiledSQL`` with assignment parameters first, then the
        predicate's.
    """
    sink = ParamSink()
    builder = QueryBuilder(sink)

    updates: list[str] = []
    for assignment in assignments:
        if isinstance(assignment, Assignment):
            column, value = assignment.column, assignment.value
        else:
            column, value = assignment
        value_sql = builder.select.build_column(value)
        if value_sql != column:
            updates.append(f"{column} = {value_sql}")

    if not updates:
        logger.warning("UPDATE of %s has no effective assignments; SET is empty", table)

    check = builder.expr.build(predicate)
    sql = " ".join(["UPDATE", table, "SET", ", ".join(updates), "WHERE", check])
    return _finish("UPDATE", f"{sql};", sink)


def compile_delete(table: str, predicate: Expression) -> CompiledSQL:
    """Compile a DELETE statement.

    Args:
        table: Table to delete from.
        predicate: Boolean expression selecting the rows.
    """
    sink = ParamSink()
    check = QueryBuilder(sink).expr.build(predicate)
    return _finish("DELETE", f"DELETE FROM {table} WHERE {check};", sink)
