"""Exception hierarchy for fatal translation errors."""

from __future__ import annotations

from typing import Sequence


class CompileError(Exception):
    """Base class for every error that aborts a translation."""

    pass


class ParseError(CompileError):
    """Raised when the token stream does not match the grammar."""

    def __init__(
        self,
        position: int,
        expected: Sequence[str],
        actual: str,
        expected_value: str = "",
    ):
        self.position = position
        self.expected = tuple(expected)
        self.expected_value = expected_value
        self.actual = actual
        wanted = " or ".join(self.expected)
        if expected_value:
            wanted += f" '{expected_value}'"
        super().__init__(
            f"Unexpected token at position {position}: expected {wanted}, but got {actual}"
        )


class LoweringError(CompileError):
    """Raised when a well-formed tree cannot be translated to instructions."""

    pass


class UnsupportedOperatorError(LoweringError):
    """Raised for a condition or increment operator with no instruction."""

    pass


class UnsupportedExpressionError(LoweringError):
    """Raised for expression text outside the supported assignment forms."""

    pass


class UnmappedVariableError(LoweringError, KeyError):
    """Raised when a variable has no register in the symbol table."""

    def __init__(self, name: str, known: Sequence[str]):
        self.name = name
        self.known = tuple(known)
        super().__init__(
            f"Variable '{name}' has no register mapping. Known: {list(self.known)}"
        )

    def __str__(self) -> str:
        return str(self.args[0])
