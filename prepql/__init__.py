"""prepQL – compile typed query ASTs to prepared-statement SQL.

Public API
----------
``compile_select`` / ``compile_update`` / ``compile_delete``
    Compile a statement AST to ``?``-placeholder SQL ending in ``;`` plus
    the ordered list of bound parameters.

``compile_expression``
    Compile a bare scalar expression (no terminator).

``parse_query`` / ``parse_expression``
    Parse a JSON-encoded AST into typed models.

Re-exported types
-----------------
``Query``, ``OutputColumn``, ``Assignment``, all expression and literal
node classes, ``CompiledSQL``, ``Param`` and all error classes.

Example::

    import prepql

    query = prepql.parse_query(ast_json)
    compiled = prepql.compile_select(query)
    cursor.execute(compiled.sql, compiled.values())
"""

from __future__ import annotations

import json

from pydantic import ValidationError as _PydanticValidationError

from prepql.compile.base import CompiledSQL, Param
from prepql.compile.statements import (
    compile_delete,
    compile_expression,
    compile_select,
    compile_update,
)
from prepql.errors import CompilationError, ParseError, PrepQLError
from prepql.schema.expressions import (
    EXPRESSION_ADAPTER,
    AggregateExpr,
    BinaryExpr,
    CastExpr,
    ColumnExpr,
    Expression,
    Fun2Expr,
    LiteralExpr,
    UnaryExpr,
)
from prepql.schema.literals import JustLiteral, NullLiteral, ValueLiteral
from prepql.schema.operators import BinaryOp, Direction, UnaryOp
from prepql.schema.query import (
    Assignment,
    LimitClause,
    OrderByItem,
    OutputColumn,
    Query,
)

__all__ = [
    # Statement compilers
    "compile_select",
    "compile_expression",
    "compile_update",
    "compile_delete",
    # Parsing
    "parse_query",
    "parse_expression",
    # Results
    "CompiledSQL",
    "Param",
    # AST
    "Query",
    "OutputColumn",
    "OrderByItem",
    "LimitClause",
    "Assignment",
    "Expression",
    "ColumnExpr",
    "LiteralExpr",
    "UnaryExpr",
    "BinaryExpr",
    "Fun2Expr",
    "AggregateExpr",
    "CastExpr",
    "NullLiteral",
    "JustLiteral",
    "ValueLiteral",
    "UnaryOp",
    "BinaryOp",
    "Direction",
    # Errors
    "PrepQLError",
    "ParseError",
    "CompilationError",
]


def _load(raw: str) -> object:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Invalid JSON: {exc}", raw=raw) from exc


def parse_query(raw: str) -> Query:
    """Parse a JSON-encoded query AST.

    Args:
        raw: JSON object matching the :class:`Query` shape.

    Returns:
        The typed, frozen :class:`Query`.

    Raises:
        ParseError: If ``raw`` is not valid JSON or not a valid query AST.
    """
    data = _load(raw)
    try:
        return Query.model_validate(data)
    except _PydanticValidationError as exc:
        raise ParseError(f"Query structure is invalid: {exc}", raw=raw) from exc


def parse_expression(raw: str) -> Expression:
    """Parse a JSON-encoded scalar expression AST.

    Raises:
        ParseError: If ``raw`` is not valid JSON or not a valid expression.
    """
    data = _load(raw)
    try:
        return EXPRESSION_ADAPTER.validate_python(data)
    except _PydanticValidationError as exc:
        raise ParseError(f"Expression structure is invalid: {exc}", raw=raw) from exc
