"""Query → SELECT text assembly.

``QueryBuilder`` wires together the expression-level and clause-level
sub-builders around one :class:`~prepql.compile.sink.ParamSink` and renders
a :class:`~prepql.schema.query.Query` clause by clause.

Sub-builder hierarchy
---------------------
QueryBuilder
  ├── ExpressionBuilder     (expression_builder.py)
  ├── PredicateListBuilder  (expression_builder.py)
  ├── SelectClauseBuilder   (clause_builders.py)
  ├── FromClauseBuilder     (clause_builders.py)
  └── OrderByClauseBuilder  (clause_builders.py)

Sink sharing
------------
The sink is injected by the caller and is never collected here: nested
sources in FROM are rendered through :meth:`QueryBuilder.render` on the
same instance, and only the outermost statement compiler
(:mod:`prepql.compile.statements`) finalizes it.
"""

from __future__ import annotations

from prepql.compile.clause_builders import (
    FromClauseBuilder,
    OrderByClauseBuilder,
    SelectClauseBuilder,
)
from prepql.compile.expression_builder import ExpressionBuilder, PredicateListBuilder
from prepql.compile.sink import ParamSink
from prepql.schema.query import Query


class QueryBuilder:
    """Renders a :class:`Query` to SELECT text, pushing literals into ``sink``.

    Args:
        sink: Parameter accumulator shared with the enclosing statement.
    """

    def __init__(self, sink: ParamSink) -> None:
        self.sink = sink
        self.expr = ExpressionBuilder(sink)
        self.preds = PredicateListBuilder(self.expr)
        self.select = SelectClauseBuilder(self.expr)
        self.order_by = OrderByClauseBuilder(self.expr)
        self.from_ = FromClauseBuilder(self.render)

    def render(self, query: Query) -> str:
        """Render ``query`` without a statement terminator.

        Clauses are emitted in fixed order and only when non-empty.
        """
        parts: list[str] = [self.select.build(query.columns)]

        from_sql = self.from_.build(query.source)
        if from_sql:
            parts.append(from_sql)

        if query.restricts:
            parts.append(f"WHERE {self.preds.build(query.restricts)}")

        if query.group_by:
            exprs = ", ".join(self.expr.build(e) for e in query.group_by)
            parts.append(f"GROUP BY {exprs}")

        if query.order_by:
            parts.append(self.order_by.build(query.order_by))

        if query.limit is not None:
            parts.append(f"LIMIT {query.limit.offset},{query.limit.count}")

        return " ".join(parts)
