"""prepQL compilation layer: AST → prepared-statement SQL + parameters."""
from prepql.compile.base import CompiledSQL, Param
from prepql.compile.builder import QueryBuilder
from prepql.compile.sink import ParamSink
from prepql.compile.statements import (
    compile_delete,
    compile_expression,
    compile_select,
    compile_update,
)

__all__ = [
    "CompiledSQL",
    "Param",
    "ParamSink",
    "QueryBuilder",
    "compile_delete",
    "compile_expression",
    "compile_select",
    "compile_update",
]
