"""Operator and direction enums used by the expression and query models.

Each enum is closed: the compiler keeps one SQL rendering per member and
refuses to import if a member is left without one.
"""

from __future__ import annotations

from enum import Enum

# ---------------------------------------------------------------------------
# Expression operators
# ---------------------------------------------------------------------------


class UnaryOp(str, Enum):
    """Single-operand operators.

    ``FUN`` is a named one-argument function call; the function name lives
    on the expression node itself.
    """

    ABS = "ABS"
    SIGN = "SIGN"
    NEG = "NEG"
    NOT = "NOT"
    FUN = "FUN"


class BinaryOp(str, Enum):
    """Infix operators (2 operands)."""

    GT = "GT"
    LT = "LT"
    GTE = "GTE"
    LTE = "LTE"
    EQ = "EQ"
    NEQ = "NEQ"
    IS = "IS"
    IS_NOT = "IS_NOT"
    AND = "AND"
    OR = "OR"
    ADD = "ADD"
    SUB = "SUB"
    MUL = "MUL"
    DIV = "DIV"
    LIKE = "LIKE"


# ---------------------------------------------------------------------------
# Ordering
# ---------------------------------------------------------------------------


class Direction(str, Enum):
    """Sort direction of an ORDER BY item."""

    ASC = "ASC"
    DESC = "DESC"

