"""Compilation output types: Param and CompiledSQL."""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Param:
    """An opaque box around one literal value bound to a ``?`` placeholder.

    The compiler never inspects ``value``; converting it to the database's
    wire format is the driver's job.
    """

    value: Any


@dataclass(frozen=True)
class CompiledSQL:
    """The output of a successful compilation.

    Attributes:
        sql: The compiled SQL text with ``?`` placeholders.
        params: One :class:`Param` per ``?`` in ``sql``, in the same
            left-to-right order.
    """

    sql: str
    params: tuple[Param, ...] = ()

    def values(self) -> list[Any]:
        """Return the raw parameter values, ready for ``cursor.execute``.

        Example::

            compiled = prepql.compile_select(query)
            cursor.execute(compiled.sql, compiled.values())
        """
        return [p.value for p in self.params]

    def __iter__(self) -> Iterator[Any]:
        # Allows ``sql, params = compile_select(query)``.
        yield self.sql
        yield self.params
