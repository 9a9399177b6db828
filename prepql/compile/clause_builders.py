"""Clause-level SQL builders.

Each class handles exactly one SQL clause.  ``FromClauseBuilder`` receives
a *shared build function* (``Callable[[Query], str]``) rather than a
builder factory, so nested sub-queries are rendered into the **same**
:class:`~prepql.compile.sink.ParamSink` as the outer query and their
parameters land in text order.

Classes
-------
SelectClauseBuilder   — ``SELECT <col>,<col> AS alias,...``
FromClauseBuilder     — ``FROM <table>`` / ``FROM (<sub>),(<sub>)``
OrderByClauseBuilder  — ``ORDER BY <expr> ASC|DESC, ...``
"""
from __future__ import annotations

from collections.abc import Callable, Sequence

from prepql.compile.expression_builder import ExpressionBuilder
from prepql.errors import CompilationError
from prepql.schema.query import OrderByItem, OutputColumn, Query


class SelectClauseBuilder:
    """Builds the ``SELECT …`` clause and single output columns."""

    def __init__(self, expression_builder: ExpressionBuilder) -> None:
        self._expr = expression_builder

    def build(self, columns: Sequence[OutputColumn]) -> str:
        return "SELECT " + ",".join(self.build_column(c) for c in columns)

    def build_column(self, column: OutputColumn) -> str:
        """Render one output column, with ``AS <alias>`` when aliased."""
        expr_sql = self._expr.build(column.expr)
        if column.alias is not None:
            return f"{expr_sql} AS {column.alias}"
        return expr_sql


class FromClauseBuilder:
    """Builds the ``FROM`` clause, or nothing for an empty source list.

    Sub-query sources are delegated to ``build_fn``, which renders into the
    shared sink.
    """

    def __init__(self, build_fn: Callable[[Query], str]) -> None:
        self._build_fn = build_fn

    def build(self, source: str | Sequence[Query]) -> str:
        if isinstance(source, str):
            return f"FROM {source}"
        if isinstance(source, Sequence):
            if not source:
                return ""
            subs = [f"({self._build_fn(q)})" for q in source]
            return "FROM " + ",".join(subs)
        raise CompilationError(
            f"Unknown query source type: {type(source).__name__}", clause="FROM"
        )


class OrderByClauseBuilder:
    """Builds the ``ORDER BY …`` clause."""

    def __init__(self, expression_builder: ExpressionBuilder) -> None:
        self._expr = expression_builder

    def build(self, items: Sequence[OrderByItem]) -> str:
        order_parts = [f"{self._expr.build(o.expr)} {o.direction.value}" for o in items]
        return f"ORDER BY {', '.join(order_parts)}"
