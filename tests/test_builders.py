"""Tests for ParamSink and the expression/predicate/clause builders."""

from __future__ import annotations

import pytest

from prepql import CompilationError, Param
from prepql.compile.clause_builders import FromClauseBuilder, SelectClauseBuilder
from prepql.compile.expression_builder import (
    BINARY_OP_SQL,
    UNARY_OP_SQL,
    PredicateListBuilder,
)
from prepql.compile.sink import ParamSink
from prepql.schema.operators import BinaryOp, UnaryOp
from tests.fixtures import binop, col, null, out, val


class TestParamSink:
    def test_collect_preserves_push_order(self, sink):
        for v in (3, "b", None, 1.5):
            assert sink.push(v) == "?"
        assert sink.collect() == (Param(3), Param("b"), Param(None), Param(1.5))

    def test_collect_only_once(self, sink):
        sink.collect()
        with pytest.raises(CompilationError, match="already collected"):
            sink.collect()

    def test_push_after_collect_fails(self, sink):
        sink.collect()
        assert sink.closed
        with pytest.raises(CompilationError):
            sink.push(1)

    def test_separate_sinks_are_independent(self):
        a, b = ParamSink(), ParamSink()
        a.push(1)
        assert len(a) == 1
        assert len(b) == 0


class TestExpressionBuilder:
    def test_pushes_in_render_order(self, expr_builder, sink):
        sql = expr_builder.build(binop("SUB", val(5), binop("DIV", val(6), col("x"))))
        assert sql == "? - (? / x)"
        assert sink.collect() == (Param(5), Param(6))

    def test_null_does_not_touch_sink(self, expr_builder, sink):
        assert expr_builder.build(null()) == "NULL"
        assert len(sink) == 0

    def test_unknown_node_is_a_contract_violation(self, expr_builder):
        with pytest.raises(CompilationError) as exc_info:
            expr_builder.build(object())
        assert exc_info.value.clause == "expression"

    def test_operator_tables_are_exhaustive(self):
        assert set(BINARY_OP_SQL) == set(BinaryOp)
        assert set(UNARY_OP_SQL) | {UnaryOp.FUN} == set(UnaryOp)


class TestPredicateListBuilder:
    def test_single_predicate_is_wrapped(self, expr_builder):
        preds = PredicateListBuilder(expr_builder)
        assert preds.build([binop("EQ", col("a"), col("b"))]) == "(a = b)"

    def test_conjunction_keeps_stored_order(self, expr_builder, sink):
        preds = PredicateListBuilder(expr_builder)
        sql = preds.build([binop("EQ", col("a"), val(1)), binop("EQ", col("b"), val(2))])
        assert sql == "(a = ?) AND (b = ?)"
        assert [p.value for p in sink.collect()] == [1, 2]

    def test_empty_list_is_a_contract_violation(self, expr_builder):
        with pytest.raises(CompilationError):
            PredicateListBuilder(expr_builder).build([])


class TestClauseBuilders:
    def test_output_column_alias(self, expr_builder):
        select = SelectClauseBuilder(expr_builder)
        assert select.build_column(out(col("a"), "b")) == "a AS b"
        assert select.build_column(out(col("a"))) == "a"

    def test_select_list_has_no_space_after_comma(self, expr_builder):
        select = SelectClauseBuilder(expr_builder)
        assert select.build([out(col("a")), out(col("b"))]) == "SELECT a,b"

    def test_from_uses_injected_build_fn(self):
        rendered = []

        def fake_build(q):
            rendered.append(q)
            return f"Q{len(rendered)}"

        builder = FromClauseBuilder(fake_build)
        assert builder.build("t") == "FROM t"
        assert builder.build([]) == ""
        assert builder.build(["first", "second"]) == "FROM (Q1),(Q2)"
        assert rendered == ["first", "second"]

    def test_unknown_source_is_a_contract_violation(self):
        with pytest.raises(CompilationError) as exc_info:
            FromClauseBuilder(lambda q: "").build(42)
        assert exc_info.value.clause == "FROM"
