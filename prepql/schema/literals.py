"""Typed literal models.

A literal is one of three shapes:

* ``{"null": true}`` – SQL ``NULL``, rendered inline.
* ``{"just": <literal>}`` – an optional/nullable wrapper around another
  literal.  It has no rendering of its own; the inner literal decides.
* ``{"value": 42}`` – a concrete scalar, bound as a ``?`` parameter.

Usage::

    from prepql.schema.literals import LITERAL_ADAPTER, JustLiteral

    lit = LITERAL_ADAPTER.validate_python({"just": {"value": 3}})
    assert isinstance(lit, JustLiteral)
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Discriminator, Tag, TypeAdapter

_FROZEN = ConfigDict(extra="forbid", frozen=True)


class NullLiteral(BaseModel):
    """SQL ``NULL``: ``{"null": true}``."""

    model_config = _FROZEN

    null: Literal[True] = True


class JustLiteral(BaseModel):
    """A present value of a nullable type: ``{"just": {"value": 1}}``."""

    model_config = _FROZEN

    just: Lit


class ValueLiteral(BaseModel):
    """A concrete scalar: ``{"value": 42}`` / ``{"value": "text"}``."""

    model_config = _FROZEN

    value: Any


def _literal_discriminator(v: Any) -> str | None:
    """Return the tag for the literal discriminated union."""
    if isinstance(v, dict):
        for key in ("null", "just", "value"):
            if key in v:
                return key
    if isinstance(v, NullLiteral):
        return "null"
    if isinstance(v, JustLiteral):
        return "just"
    if isinstance(v, ValueLiteral):
        return "value"
    return None


Lit = Annotated[
    Annotated[NullLiteral, Tag("null")]
    | Annotated[JustLiteral, Tag("just")]
    | Annotated[ValueLiteral, Tag("value")],
    Discriminator(_literal_discriminator),
]

JustLiteral.model_rebuild()

#: Parse a raw dict into a typed literal.
LITERAL_ADAPTER: TypeAdapter[Lit] = TypeAdapter(Lit)
