"""Custom exception hierarchy for prepQL.

All public errors inherit from PrepQLError so callers can catch the base
class for any prepQL-specific failure.
"""
from __future__ import annotations


class PrepQLError(Exception):
    """Base exception for all prepQL errors."""


class ParseError(PrepQLError):
    """Raised when input cannot be parsed into a valid AST.

    Args:
        message: Human-readable description.
        raw: The raw string that failed to parse.
    """

    def __init__(self, message: str, raw: str | None = None) -> None:
        super().__init__(message)
        self.raw = raw


class CompilationError(PrepQLError):
    """Raised when compilation hits a contract violation.

    The AST is well-formed by construction, so this always signals a
    programming defect (an unhandled node type, a finalized parameter sink
    being reused) rather than bad user input.

    Args:
        message: Human-readable description.
        clause: The clause being compiled when the error occurred.
    """

    def __init__(self, message: str, clause: str | None = None) -> None:
        super().__init__(message)
        self.clause = clause
