"""Tokenizer for the minicalc language."""

from __future__ import annotations

import string
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, List


class TokenType(Enum):
    """Kinds of tokens produced by the lexer."""

    LET = auto()
    PRINT = auto()
    IDENTIFIER = auto()
    NUMBER = auto()
    ASSIGN = auto()
    PLUS = auto()
    MINUS = auto()
    MUL = auto()
    DIV = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    END = auto()


@dataclass(frozen=True)
class Token:
    """A single lexical token."""

    type: TokenType
    value: str


_NUL = "\0"
_WHITESPACE = frozenset(" \t\n\r\v\f")
_DIGITS = frozenset(string.digits)
_LETTERS = frozenset(string.ascii_letters)
_WORD_CHARS = _LETTERS | _DIGITS | {"_"}

_KEYWORDS = {
    "let": TokenType.LET,
    "print": TokenType.PRINT,
}

_SYMBOLS = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MUL,
    "/": TokenType.DIV,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


class Lexer:
    """Splits source text into tokens.

    Unknown characters are silently skipped. A NUL character at the start of
    a token position ends the input.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self._pos = 0

    def _peek(self) -> str:
        return self.source[self._pos] if self._pos < len(self.source) else _NUL

    def _advance(self) -> str:
        if self._pos < len(self.source):
            char = self.source[self._pos]
            self._pos += 1
            return char
        return _NUL

    def _take_while(self, accept: Callable[[str], bool]) -> str:
        start = self._pos
        while accept(self._peek()):
            self._pos += 1
        return self.source[start:self._pos]

    def tokenize(self) -> List[Token]:
        """Return all remaining tokens, terminated by an END token."""
        tokens: List[Token] = []
        while self._peek() != _NUL:
            self._take_while(lambda c: c in _WHITESPACE)
            char = self._peek()
            if char in _DIGITS:
                tokens.append(Token(TokenType.NUMBER, self._take_while(lambda c: c in _DIGITS)))
            elif char in _LETTERS:
                word = self._take_while(lambda c: c in _WORD_CHARS)
                tokens.append(Token(_KEYWORDS.get(word, TokenType.IDENTIFIER), word))
            else:
                char = self._advance()
                kind = _SYMBOLS.get(char)
                if kind is not None:
                    tokens.append(Token(kind, char))
        tokens.append(Token(TokenType.END, ""))
        return tokens


def tokenize(source: str) -> List[Token]:
    """Tokenize ``source`` in one call."""
    return Lexer(source).tokenize()