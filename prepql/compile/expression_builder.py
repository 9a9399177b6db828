"""Expression and predicate-list SQL compilers.

``ExpressionBuilder`` renders one scalar expression tree;
``PredicateListBuilder`` renders a list of boolean expressions as a single
AND-conjunction on top of it.  Both write literals into the shared
:class:`~prepql.compile.sink.ParamSink` as they meet them, so the order of
parameters always follows the order of ``?`` in the emitted text.
"""
from __future__ import annotations

from collections.abc import Sequence

from prepql.compile.sink import ParamSink
from prepql.errors import CompilationError
from prepql.schema.expressions import (
    AggregateExpr,
    BinaryExpr,
    CastExpr,
    ColumnExpr,
    Expression,
    Fun2Expr,
    LiteralExpr,
    UnaryExpr,
)
from prepql.schema.literals import JustLiteral, Lit, NullLiteral, ValueLiteral
from prepql.schema.operators import BinaryOp, UnaryOp

# ---------------------------------------------------------------------------
# Operator tables
# ---------------------------------------------------------------------------

BINARY_OP_SQL: dict[BinaryOp, str] = {
    BinaryOp.GT: ">",
    BinaryOp.LT: "<",
    BinaryOp.GTE: ">=",
    BinaryOp.LTE: "<=",
    BinaryOp.EQ: "=",
    BinaryOp.NEQ: "!=",
    BinaryOp.IS: "IS",
    BinaryOp.IS_NOT: "IS NOT",
    BinaryOp.AND: "AND",
    BinaryOp.OR: "OR",
    BinaryOp.ADD: "+",
    BinaryOp.SUB: "-",
    BinaryOp.MUL: "*",
    BinaryOp.DIV: "/",
    BinaryOp.LIKE: "LIKE",
}

#: Prefix/suffix pairs wrapped around a rendered operand.  ``FUN`` is absent:
#: its prefix is the node's own function name.
UNARY_OP_SQL: dict[UnaryOp, tuple[str, str]] = {
    UnaryOp.ABS: ("ABS(", ")"),
    UnaryOp.SIGN: ("SIGN(", ")"),
    UnaryOp.NEG: ("-(", ")"),
    UnaryOp.NOT: ("NOT(", ")"),
}

_missing = (set(BinaryOp) - set(BINARY_OP_SQL)) | (
    set(UnaryOp) - set(UNARY_OP_SQL) - {UnaryOp.FUN}
)
if _missing:
    raise CompilationError(
        f"No SQL rendering for operators: {sorted(op.value for op in _missing)}"
    )


# ---------------------------------------------------------------------------
# Expression builder
# ---------------------------------------------------------------------------


class ExpressionBuilder:
    """Compiles typed :class:`~prepql.schema.expressions.Expression` nodes to SQL.

    Args:
        sink: Shared parameter accumulator for this statement.
    """

    def __init__(self, sink: ParamSink) -> None:
        self._sink = sink

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def build(self, expr: Expression) -> str:
        """Compile an expression to a SQL fragment."""
        if isinstance(expr, ColumnExpr):
            return expr.col
        if isinstance(expr, LiteralExpr):
            return self._build_lit(expr.lit)
        if isinstance(expr, BinaryExpr):
            return self._build_binary(expr)
        if isinstance(expr, UnaryExpr):
            return self._build_unary(expr.unop, expr.name, expr.arg)
        if isinstance(expr, Fun2Expr):
            left = self.build(expr.left)
            right = self.build(expr.right)
            return f"{expr.fun2}({left}, {right})"
        if isinstance(expr, AggregateExpr):
            return self._build_unary(UnaryOp.FUN, expr.aggr, expr.arg)
        if isinstance(expr, CastExpr):
            return self.build(expr.cast)
        raise CompilationError(
            f"Unknown expression type: {type(expr).__name__}", clause="expression"
        )

    # ------------------------------------------------------------------
    # Node sub-compilers
    # ------------------------------------------------------------------

    def _build_lit(self, lit: Lit) -> str:
        if isinstance(lit, NullLiteral):
            return "NULL"
        if isinstance(lit, JustLiteral):
            return self._build_lit(lit.just)
        if isinstance(lit, ValueLiteral):
            return self._sink.push(lit.value)
        raise CompilationError(
            f"Unknown literal type: {type(lit).__name__}", clause="expression"
        )

    def _build_unary(self, op: UnaryOp, name: str | None, arg: Expression) -> str:
        arg_sql = self.build(arg)
        if op is UnaryOp.FUN:
            return f"{name}({arg_sql})"
        prefix, suffix = UNARY_OP_SQL[op]
        return f"{prefix}{arg_sql}{suffix}"

    def _build_binary(self, expr: BinaryExpr) -> str:
        left = self.build(expr.left)
        right = self.build(expr.right)
        op_sql = BINARY_OP_SQL[expr.binop]
        return f"{_paren(expr.left, left)} {op_sql} {_paren(expr.right, right)}"


def _paren(expr: Expression, sql: str) -> str:
    """Wrap ``sql`` in parentheses unless ``expr`` is a column or literal.

    No precedence analysis: anything but the two leaf forms is wrapped.
    """
    if isinstance(expr, (ColumnExpr, LiteralExpr)):
        return sql
    return f"({sql})"


# ---------------------------------------------------------------------------
# Predicate-list builder
# ---------------------------------------------------------------------------


class PredicateListBuilder:
    """Compiles a list of boolean expressions to ``(p1) AND (p2) AND ...``.

    Used for WHERE.  Callers omit the clause for an empty list.

    Args:
        expression_builder: ExpressionBuilder sharing the statement's sink.
    """

    def __init__(self, expression_builder: ExpressionBuilder) -> None:
        self._expr = expression_builder

    def build(self, preds: Sequence[Expression]) -> str:
        if not preds:
            raise CompilationError("Empty predicate list.", clause="WHERE")
        parts = [self._expr.build(p) for p in preds]
        return "(" + ") AND (".join(parts) + ")"
