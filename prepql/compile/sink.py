"""Parameter accumulator shared by every builder in one compilation run."""
from __future__ import annotations

from typing import Any

from prepql.compile.base import Param
from prepql.errors import CompilationError


class ParamSink:
    """Collects literal values in the order their ``?`` placeholders appear.

    A single instance is threaded through every sub-builder and every
    nested sub-query of one statement.  Only the outermost statement
    compiler calls :meth:`collect`, exactly once; after that the sink is
    closed and any further use is a programming error.
    """

    def __init__(self) -> None:
        self._params: list[Param] = []
        self._closed = False

    def __len__(self) -> int:
        return len(self._params)

    @property
    def closed(self) -> bool:
        return self._closed

    def push(self, value: Any) -> str:
        """Store a literal value and return its placeholder text."""
        if self._closed:
            raise CompilationError("Cannot push a parameter into a collected sink.")
        self._params.append(Param(value))
        return "?"

    def collect(self) -> tuple[Param, ...]:
        """Close the sink and return the parameters in encounter order."""
        if self._closed:
            raise CompilationError("Parameter sink was already collected.")
        self._closed = True
        return tuple(self._params)
