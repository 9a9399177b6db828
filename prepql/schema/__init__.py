"""prepQL AST models: expressions, literals, queries."""
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
from prepql.schema.operators import BinaryOp, Direction, UnaryOp
from prepql.schema.query import (
    Assignment,
    LimitClause,
    OrderByItem,
    OutputColumn,
    Query,
)

__all__ = [
    "AggregateExpr",
    "BinaryExpr",
    "CastExpr",
    "ColumnExpr",
    "Expression",
    "Fun2Expr",
    "LiteralExpr",
    "UnaryExpr",
    "JustLiteral",
    "Lit",
    "NullLiteral",
    "ValueLiteral",
    "BinaryOp",
    "Direction",
    "UnaryOp",
    "Assignment",
    "LimitClause",
    "OrderByItem",
    "OutputColumn",
    "Query",
]
