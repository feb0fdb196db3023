"""Lexer and recursive-descent parser for a small regular-expression language.

Grammar::

    Regex      -> UnionExpr
    UnionExpr  -> ConcatExpr "|" UnionExpr | ConcatExpr
    ConcatExpr -> RepeatExpr ConcatExpr | RepeatExpr
    RepeatExpr -> BaseExpr "*" | BaseExpr
    BaseExpr   -> "(" Regex ")" | char
"""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union


class TokenKind(enum.Enum):
    PIPE = "Pipe"
    ASTERISK = "Asterisk"
    LPAREN = "LParenthesis"
    RPAREN = "RParenthesis"
    CHAR = "char"


_OPERATORS = {
    "|": TokenKind.PIPE,
    "*": TokenKind.ASTERISK,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    char: str
    position: int

    def __str__(self) -> str:
        return repr(self.char)


@dataclass(frozen=True)
class TokenStream:
    """The tokens of ``source`` in order."""

    source: str
    tokens: tuple[Token, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.tokens)

    def __getitem__(self, index: int) -> Token:
        return self.tokens[index]

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __str__(self) -> str:
        return "[" + ", ".join(str(token) for token in self.tokens) + "]"


def lex(source: str) -> TokenStream:
    """Split ``source`` into tokens, skipping whitespace."""
    tokens = tuple(
        Token(_OPERATORS.get(char, TokenKind.CHAR), char, position)
        for position, char in enumerate(source)
        if not char.isspace()
    )
    return TokenStream(source, tokens)


@dataclass(frozen=True)
class Regex:
    expr: Node


@dataclass(frozen=True)
class UnionExpr:
    first: Node
    rest: Node


@dataclass(frozen=True)
class ConcatExpr:
    first: Node
    rest: Node


@dataclass(frozen=True)
class RepeatExpr:
    expr: Node


Node = Union[Regex, UnionExpr, ConcatExpr, RepeatExpr, str]


class ParseError(Exception):
    """A parse failure at a position in the source text."""

    def __init__(self, source: str, position: int, message: str = "") -> None:
        self.source = source
        self.position = position
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        heading = f"parse error: {self.message}" if self.message else "parse error"
        caret = " " * self.position + "^"
        return "\n".join([heading, "  " + self.source, "  " + caret])


class Parser:
    """Parses a token stream into a syntax tree."""

    def __init__(self, token_stream: TokenStream) -> None:
        self._stream = token_stream
        self._index = 0

    def parse(self) -> Regex:
        """Parse the whole stream, raising ParseError on failure."""
        self._index = 0
        regex = self._parse_regex()
        if self._index != len(self._stream):
            raise self._error("did not parse to end")
        return regex

    def _error(self, message: str = "") -> ParseError:
        if self._index < len(self._stream):
            position = self._stream[self._index].position
        else:
            position = len(self._stream.source)
        return ParseError(self._stream.source, position, message)

    def _consume(self) -> Token:
        if self._index >= len(self._stream):
            raise self._error("expected token here")
        token = self._stream[self._index]
        self._index += 1
        return token

    def _expect(self, kind: TokenKind) -> Token:
        start = self._index
        token = self._consume()
        if token.kind is not kind:
            self._index = start
            raise self._error(f"expected {kind.value}, got {token.kind.value}")
        return token

    def _accept(self, kind: TokenKind) -> bool:
        try:
            self._expect(kind)
        except ParseError:
            return False
        return True

    def _parse_regex(self) -> Regex:
        return Regex(self._parse_union_expr())

    def _parse_union_expr(self) -> Node:
        first = self._parse_concat_expr()
        if not self._accept(TokenKind.PIPE):
            return first
        return UnionExpr(first, self._parse_union_expr())

    def _parse_concat_expr(self) -> Node:
        first = self._parse_repeat_expr()
        try:
            rest = self._parse_concat_expr()
        except ParseError:
            return first
        return ConcatExpr(first, rest)

    def _parse_repeat_expr(self) -> Node:
        expr = self._parse_base_expr()
        return RepeatExpr(expr) if self._accept(TokenKind.ASTERISK) else expr

    def _parse_base_expr(self) -> Node:
        start = self._index
        try:
            if self._accept(TokenKind.LPAREN):
                regex = self._parse_regex()
                self._expect(TokenKind.RPAREN)
                return regex
            return self._expect(TokenKind.CHAR).char
        except ParseError:
            self._index = start
            raise


def parse(token_stream: TokenStream) -> Regex:
    """Parse ``token_stream`` into a Regex, raising ParseError on failure."""
    return Parser(token_stream).parse()