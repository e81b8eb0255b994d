"""Recursive-descent parser — token list → syntax tree."""

from __future__ import annotations

import logging
from typing import Optional

from .errors import ParseError
from .syntax import (
    Condition,
    Declaration,
    Expression,
    ForLoop,
    IfStatement,
    Increment,
    Initialization,
    LoopStatement,
    Program,
    TopLevelStatement,
)
from .tokens import Token, TokenKind

logger = logging.getLogger(__name__)

_END_OF_INPUT = "end of input"


class Parser:
    """Single forward pass over a token list with one token of lookahead.

    Tokens that cannot start a top-level statement are skipped rather than
    rejected; every other grammar violation raises ``ParseError``.
    """

    def __init__(self, tokens: list[Token]):
        self._tokens = tokens
        self._pos = 0

    # ── helpers ──────────────────────────────────────────────────

    def _peek(self) -> Optional[Token]:
        if self._pos < len(self._tokens):
            return self._tokens[self._pos]
        return None

    def _peek_is(self, kind: TokenKind, text: str = "") -> bool:
        tok = self._peek()
        return tok is not None and tok.kind == kind and (not text or tok.text == text)

    def _consume(self, *kinds: TokenKind, value: str = "") -> Token:
        """Take the next token if its kind is one of *kinds* (and its text is *value*)."""
        tok = self._peek()
        if tok is not None and tok.kind in kinds and (not value or tok.text == value):
            self._pos += 1
            return tok
        raise ParseError(
            position=self._pos,
            expected=[k.value for k in kinds],
            actual=str(tok) if tok is not None else _END_OF_INPUT,
            expected_value=value,
        )

    def _at_block_statement(self) -> bool:
        tok = self._peek()
        return tok is not None and tok.kind != TokenKind.PUNCTUATION

    # ── entry point ──────────────────────────────────────────────

    def parse(self) -> Program:
        body: list[TopLevelStatement] = []
        while (tok := self._peek()) is not None:
            if tok.kind == TokenKind.KEYWORD and tok.text == "int":
                body.append(self._parse_declaration())
            elif tok.kind == TokenKind.KEYWORD and tok.text == "for":
                body.append(self._parse_for_loop())
            else:
                logger.debug("Skipping top-level token %s at %d", tok, self._pos)
                self._pos += 1
        return Program(body=tuple(body))

    # ── productions ──────────────────────────────────────────────

    def _parse_declaration(self) -> Declaration:
        self._consume(TokenKind.KEYWORD, value="int")
        name = self._consume(TokenKind.IDENTIFIER).text
        if self._peek_is(TokenKind.OPERATOR, "="):
            self._consume(TokenKind.OPERATOR, value="=")
            value = self._consume(TokenKind.IDENTIFIER, TokenKind.NUMBER).text
            decl = Declaration(name=name, initial_value=value)
        else:
            decl = Declaration(name=name)
        self._consume(TokenKind.PUNCTUATION, value=";")
        return decl

    def _parse_for_loop(self) -> ForLoop:
        self._consume(TokenKind.KEYWORD, value="for")
        self._consume(TokenKind.PUNCTUATION, value="(")
        init = self._parse_initialization()
        self._consume(TokenKind.PUNCTUATION, value=";")
        cond = self._parse_condition()
        self._consume(TokenKind.PUNCTUATION, value=";")
        incr = self._parse_increment()
        self._consume(TokenKind.PUNCTUATION, value=")")

        self._consume(TokenKind.PUNCTUATION, value="{")
        body: list[LoopStatement] = []
        while self._at_block_statement():
            if self._peek_is(TokenKind.KEYWORD, "if"):
                body.append(self._parse_if_statement())
            else:
                body.append(self._parse_expression())
        self._consume(TokenKind.PUNCTUATION, value="}")
        return ForLoop(init=init, cond=cond, incr=incr, body=tuple(body))

    def _parse_if_statement(self) -> IfStatement:
        self._consume(TokenKind.KEYWORD, value="if")
        self._consume(TokenKind.PUNCTUATION, value="(")
        cond = self._parse_condition()
        self._consume(TokenKind.PUNCTUATION, value=")")
        self._consume(TokenKind.PUNCTUATION, value="{")
        body: list[Expression] = []
        while self._at_block_statement():
            body.append(self._parse_expression())
        self._consume(TokenKind.PUNCTUATION, value="}")
        return IfStatement(cond=cond, body=tuple(body))

    def _parse_initialization(self) -> Initialization:
        name = self._consume(TokenKind.IDENTIFIER).text
        self._consume(TokenKind.OPERATOR, value="=")
        value = self._consume(TokenKind.IDENTIFIER, TokenKind.NUMBER).text
        return Initialization(name=name, value=value)

    def _parse_condition(self) -> Condition:
        name = self._consume(TokenKind.IDENTIFIER).text
        op = self._consume(TokenKind.OPERATOR).text
        value = self._consume(TokenKind.IDENTIFIER, TokenKind.NUMBER).text
        return Condition(name=name, operator=op, value=value)

    def _parse_increment(self) -> Increment:
        # Only the operator token: "i += 2" leaves "2" for the ')' check to reject.
        name = self._consume(TokenKind.IDENTIFIER).text
        op = self._consume(TokenKind.OPERATOR).text
        return Increment(name=name, operator=op)

    def _parse_expression(self) -> Expression:
        parts: list[str] = []
        while self._at_block_statement():
            parts.append(self._tokens[self._pos].text)
            self._pos += 1
        self._consume(TokenKind.PUNCTUATION, value=";")
        return Expression(text=" ".join(parts))


def parse(tokens: list[Token]) -> Program:
    """Parse *tokens* into a ``Program``."""
    return Parser(tokens).parse()
