"""Pydantic models for relational ASTs: SELECT queries and UPDATE assignments.

A ``Query`` arrives fully built and type-checked by the query builder.
Every field maps to exactly one SQL clause; empty lists and a missing
``limit`` mean the clause is omitted.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from prepql.schema.expressions import Expression
from prepql.schema.operators import Direction

_FROZEN = ConfigDict(extra="forbid", frozen=True)


class OutputColumn(BaseModel):
    """A single entry in the SELECT list.

    Attributes:
        expr: The expression to output.
        alias: Optional output name, emitted as ``<expr> AS <alias>``.
    """

    model_config = _FROZEN

    expr: Expression
    alias: str | None = None


class OrderByItem(BaseModel):
    """A single ORDER BY expression.

    Attributes:
        expr: Expression to order by.
        direction: Sort direction.
    """

    model_config = _FROZEN

    expr: Expression
    direction: Direction = Direction.ASC


class LimitClause(BaseModel):
    """``LIMIT <offset>,<count>``.

    Attributes:
        offset: Number of rows to skip.
        count: Maximum number of rows to return.
    """

    model_config = _FROZEN

    offset: int = Field(0, ge=0)
    count: int = Field(ge=0)


class Query(BaseModel):
    """A SELECT query.

    Attributes:
        columns: Output columns, in SELECT-list order.
        source: A table name, or nested queries cross-joined in FROM.  An
            empty list means the query has no FROM clause.
        restricts: Boolean expressions AND-ed together in WHERE.
        group_by: Grouping expressions.
        order_by: Ordering items.
        limit: Optional offset/count pair.
    """

    model_config = _FROZEN

    columns: list[OutputColumn] = Field(min_length=1)
    source: str | list[Query] = Field(default_factory=list)
    restricts: list[Expression] = Field(default_factory=list)
    group_by: list[Expression] = Field(default_factory=list)
    order_by: list[OrderByItem] = Field(default_factory=list)
    limit: LimitClause | None = None


class Assignment(BaseModel):
    """One ``SET <column> = <value>`` entry of an UPDATE.

    Attributes:
        column: Target column name.
        value: The new value for the column.
    """

    model_config = _FROZEN

    column: str
    value: OutputColumn


# Resolve forward references created by the recursive Query type.
Query.model_rebuild()
