"""Typed scalar expression models.

``Expression`` is a closed union over seven node types.  Pydantic v2
discriminated-union parsing coerces raw dicts (e.g. ``{"col": "age"}``) into
the matching model, so an AST can be built from keyword arguments, from
nested dicts, or from JSON without any change to the node classes.

Usage::

    from prepql.schema.expressions import BinaryExpr, ColumnExpr

    expr = BinaryExpr(binop="GT", left={"col": "age"}, right={"lit": {"value": 18}})
    assert isinstance(expr.left, ColumnExpr)

Nodes are frozen: the compiler treats the tree as immutable input.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Discriminator,
    Tag,
    TypeAdapter,
    model_validator,
)

from prepql.schema.literals import Lit
from prepql.schema.operators import BinaryOp, UnaryOp

_FROZEN = ConfigDict(extra="forbid", frozen=True)


# ---------------------------------------------------------------------------
# Leaves
# ---------------------------------------------------------------------------


class ColumnExpr(BaseModel):
    """A column reference, already qualified upstream: ``{"col": "t.name"}``."""

    model_config = _FROZEN

    col: str


class LiteralExpr(BaseModel):
    """A literal: ``{"lit": {"value": 42}}`` / ``{"lit": {"null": true}}``."""

    model_config = _FROZEN

    lit: Lit


# ---------------------------------------------------------------------------
# Composite nodes
# ---------------------------------------------------------------------------


class UnaryExpr(BaseModel):
    """A unary operator application: ``{"unop": "ABS", "arg": ...}``.

    Named functions use ``{"unop": "FUN", "name": "LOWER", "arg": ...}``.
    """

    model_config = _FROZEN

    unop: UnaryOp
    arg: Expression
    name: str | None = None

    @model_validator(mode="after")
    def _check_function_name(self) -> UnaryExpr:
        if self.unop is UnaryOp.FUN and not self.name:
            raise ValueError("unop FUN requires a function 'name'")
        if self.unop is not UnaryOp.FUN and self.name is not None:
            raise ValueError(f"unop {self.unop.value} does not take a function 'name'")
        return self


class BinaryExpr(BaseModel):
    """An infix operator application: ``{"binop": "EQ", "left": ..., "right": ...}``."""

    model_config = _FROZEN

    binop: BinaryOp
    left: Expression
    right: Expression


class Fun2Expr(BaseModel):
    """A two-argument function call: ``{"fun2": "COALESCE", "left": ..., "right": ...}``."""

    model_config = _FROZEN

    fun2: str
    left: Expression
    right: Expression


class AggregateExpr(BaseModel):
    """An aggregate call: ``{"aggr": "COUNT", "arg": ...}``."""

    model_config = _FROZEN

    aggr: str
    arg: Expression


class CastExpr(BaseModel):
    """A type-level cast: ``{"cast": ...}``.  Invisible in rendered SQL."""

    model_config = _FROZEN

    cast: Expression


# ---------------------------------------------------------------------------
# Discriminated union
# ---------------------------------------------------------------------------

_TAGS: dict[str, type[BaseModel]] = {
    "col": ColumnExpr,
    "lit": LiteralExpr,
    "unop": UnaryExpr,
    "binop": BinaryExpr,
    "fun2": Fun2Expr,
    "aggr": AggregateExpr,
    "cast": CastExpr,
}


def _expression_discriminator(v: Any) -> str | None:
    """Return the tag for the Pydantic discriminated union."""
    if isinstance(v, dict):
        for key in _TAGS:
            if key in v:
                return key
        return None
    for key, model in _TAGS.items():
        if isinstance(v, model):
            return key
    return None


Expression = Annotated[
    Annotated[ColumnExpr, Tag("col")]
    | Annotated[LiteralExpr, Tag("lit")]
    | Annotated[UnaryExpr, Tag("unop")]
    | Annotated[BinaryExpr, Tag("binop")]
    | Annotated[Fun2Expr, Tag("fun2")]
    | Annotated[AggregateExpr, Tag("aggr")]
    | Annotated[CastExpr, Tag("cast")],
    Discriminator(_expression_discriminator),
]

#: Every concrete expression node class.
EXPRESSION_TYPES: tuple[type[BaseModel], ...] = tuple(_TAGS.values())

# Resolve forward references in recursive types.
UnaryExpr.model_rebuild()
BinaryExpr.model_rebuild()
Fun2Expr.model_rebuild()
AggregateExpr.model_rebuild()
CastExpr.model_rebuild()

#: Parse a raw dict into a typed Expression at any call site.
EXPRESSION_ADAPTER: TypeAdapter[Expression] = TypeAdapter(Expression)


def to_expression(v: dict | Expression) -> Expression:
    """Convert a raw expression dict to a typed ``Expression``, or return as-is.

    Args:
        v: A raw ``{"col": ...}`` / ``{"binop": ...}`` dict, or an already-
           typed expression node.

    Returns:
        A typed ``Expression`` instance.
    """
    if isinstance(v, EXPRESSION_TYPES):
        return v
    return EXPRESSION_ADAPTER.validate_python(v)
