"""Named constants — eliminates magic strings across the codebase."""

from __future__ import annotations

import string

KEYWORDS: frozenset[str] = frozenset({"for", "int", "if"})

DIGITS = string.digits
LETTERS = string.ascii_letters
ALNUM = string.ascii_letters + string.digits

OPERATOR_CHARS = "+-*/<=>!"
PUNCTUATION_CHARS = "(){};"

DEFAULT_INITIAL_VALUE = "0"

# Closed variable → register mapping; there is no register allocation.
DEFAULT_REGISTERS: dict[str, str] = {
    "a": "$t0",
    "i": "$t1",
    "b": "$t2",
}

LOOP_START_LABEL = "LOOP_START"
LOOP_END_LABEL = "LOOP_END"

IF_TRUE_LABEL_PREFIX = "IF_TRUE"
IF_FALSE_LABEL_PREFIX = "IF_FALSE"
IF_END_LABEL_PREFIX = "END_IF"

EXPR_PRIMARY_OPS = "=+-*/"
EXPR_SECONDARY_OPS = "+-*/"

DEMO_SOURCE = (
    "int a = 3; int b = 4; int i; "
    "for (i = 0; i <= 3; i++) { "
    "if (a == b) { a += i + 2; } "
    "if (a != b ) { a = a + 1; } "
    "}"
)
