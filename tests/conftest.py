"""Shared pytest fixtures for prepQL unit and integration tests."""
from __future__ import annotations

import pytest

from prepql.compile.expression_builder import ExpressionBuilder
from prepql.compile.sink import ParamSink
from prepql.schema.query import LimitClause, OrderByItem, Query
from tests.fixtures import binop, col, out, val


@pytest.fixture()
def sink() -> ParamSink:
    """A fresh parameter sink for one test."""
    return ParamSink()


@pytest.fixture()
def expr_builder(sink: ParamSink) -> ExpressionBuilder:
    return ExpressionBuilder(sink)


@pytest.fixture(scope="session")
def payroll_query() -> Query:
    """Grouped, ordered, limited query over ``employees`` with two literals."""
    return Query(
        columns=[out(col("dept_id")), out({"aggr": "SUM", "arg": {"col": "salary"}}, "total")],
        source="employees",
        restricts=[
            binop("EQ", col("active"), val(1)),
            binop("GT", col("salary"), val(1000)),
        ],
        group_by=[col("dept_id")],
        order_by=[OrderByItem(expr=col("dept_id"), direction="DESC")],
        limit=LimitClause(offset=0, count=10),
    )
