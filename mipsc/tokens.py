"""Scanner — splits source text into a flat token list."""

from __future__ import annotations

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from . import constants

logger = logging.getLogger(__name__)


class TokenKind(str, Enum):
    KEYWORD = "KEYWORD"
    IDENTIFIER = "IDENTIFIER"
    NUMBER = "NUMBER"
    OPERATOR = "OPERATOR"
    PUNCTUATION = "PUNCTUATION"


class Token(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: TokenKind
    text: str
    offset: int = 0  # character index in the source, diagnostics only

    def __str__(self) -> str:
        return f"{self.kind.value} '{self.text}'"


def tokenize(source: str) -> list[Token]:
    """Scan *source* into tokens.

    Characters that start no token are reported with a warning and skipped.
    """
    tokens: list[Token] = []
    i, n = 0, len(source)
    while i < n:
        ch = source[i]
        if ch.isspace():
            i += 1
            continue
        start = i
        if ch in constants.DIGITS:
            while i < n and source[i] in constants.DIGITS:
                i += 1
            tokens.append(Token(kind=TokenKind.NUMBER, text=source[start:i], offset=start))
            continue
        if ch in constants.LETTERS:
            while i < n and source[i] in constants.ALNUM:
                i += 1
            word = source[start:i]
            kind = TokenKind.KEYWORD if word in constants.KEYWORDS else TokenKind.IDENTIFIER
            tokens.append(Token(kind=kind, text=word, offset=start))
            continue
        if ch in constants.OPERATOR_CHARS:
            i += 1
            # any operator character pairs up, e.g. '<=', '++', '=-'
            if i < n and source[i] in constants.OPERATOR_CHARS:
                i += 1
            tokens.append(Token(kind=TokenKind.OPERATOR, text=source[start:i], offset=start))
            continue
        if ch in constants.PUNCTUATION_CHARS:
            i += 1
            tokens.append(Token(kind=TokenKind.PUNCTUATION, text=ch, offset=start))
            continue
        logger.warning("Unexpected character in input at %d: %r", i, ch)
        i += 1
    return tokens
