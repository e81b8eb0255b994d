"""Decoding of raw assignment text captured by the parser.

``Expression`` nodes keep their statement as text; this module turns that
text into an ``Assignment`` of the shape::

    dest <op> operand [<secondary> immediate]

e.g. ``"a += i + 2"`` → ``Assignment("a", "+=", "i", "+", 2)``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import constants
from .errors import UnsupportedExpressionError


@dataclass(frozen=True)
class Assignment:
    dest: str
    operator: str
    operand: str
    secondary_operator: str = ""
    immediate: Optional[int] = None

    @property
    def operand_is_literal(self) -> bool:
        return is_number(self.operand)


def _find_first(text: str, chars: str) -> int:
    return next((i for i, ch in enumerate(text) if ch in chars), -1)


def is_number(text: str) -> bool:
    """True for a non-empty run of ASCII digits."""
    return bool(text) and all(ch in constants.DIGITS for ch in text)


def _is_name(text: str) -> bool:
    return (
        bool(text)
        and text[0] in constants.LETTERS
        and all(ch in constants.ALNUM for ch in text)
    )


def decode_expression(text: str) -> Assignment:
    """Split assignment *text* into destination, operators and operands.

    Raises ``UnsupportedExpressionError`` when the text does not have the
    ``dest op operand [op2 integer]`` shape.
    """
    expr = "".join(text.split())
    op_pos = _find_first(expr, constants.EXPR_PRIMARY_OPS)
    if op_pos < 0:
        raise UnsupportedExpressionError(f"Unsupported operation in expression: {expr}")

    dest = expr[:op_pos]
    operator = expr[op_pos]
    if expr[op_pos + 1 : op_pos + 2] == "=":
        operator += "="
        op_pos += 1
    rest = expr[op_pos + 1 :]

    if not _is_name(dest) or not rest:
        raise UnsupportedExpressionError(f"Unsupported operation in expression: {expr}")

    sec_pos = _find_first(rest, constants.EXPR_SECONDARY_OPS)
    if sec_pos < 0:
        if not (is_number(rest) or _is_name(rest)):
            raise UnsupportedExpressionError(f"Unsupported operand in expression: {expr}")
        return Assignment(dest=dest, operator=operator, operand=rest)

    source, imm_text = rest[:sec_pos], rest[sec_pos + 1 :]
    if not _is_name(source) or not is_number(imm_text):
        raise UnsupportedExpressionError(f"Unsupported operand in expression: {expr}")
    return Assignment(
        dest=dest,
        operator=operator,
        operand=source,
        secondary_operator=rest[sec_pos],
        immediate=int(imm_text),
    )
