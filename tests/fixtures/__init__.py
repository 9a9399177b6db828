"""Test fixtures: AST factories and sample DDL."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from prepql.schema.expressions import (
    BinaryExpr,
    ColumnExpr,
    Expression,
    LiteralExpr,
    UnaryExpr,
    to_expression,
)
from prepql.schema.literals import JustLiteral, NullLiteral, ValueLiteral
from prepql.schema.operators import BinaryOp, UnaryOp
from prepql.schema.query import OutputColumn

_FIXTURES_DIR = Path(__file__).parent


def col(name: str) -> ColumnExpr:
    return ColumnExpr(col=name)


def val(value: Any) -> LiteralExpr:
    return LiteralExpr(lit=ValueLiteral(value=value))


def null() -> LiteralExpr:
    return LiteralExpr(lit=NullLiteral())


def just(value: Any) -> LiteralExpr:
    return LiteralExpr(lit=JustLiteral(just=ValueLiteral(value=value)))


def binop(op: str | BinaryOp, left: dict | Expression, right: dict | Expression) -> BinaryExpr:
    return BinaryExpr(binop=op, left=to_expression(left), right=to_expression(right))


def unop(op: str | UnaryOp, arg: dict | Expression, name: str | None = None) -> UnaryExpr:
    return UnaryExpr(unop=op, arg=to_expression(arg), name=name)


def out(expr: dict | Expression, alias: str | None = None) -> OutputColumn:
    return OutputColumn(expr=to_expression(expr), alias=alias)


def load_ddl() -> str:
    """Return the sample SQLite DDL used by the integration tests."""
    return (_FIXTURES_DIR / "ddl_sqlite.sql").read_text()
