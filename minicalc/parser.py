"""Recursive-descent parser producing a syntax tree."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence

from .lexer import Token, TokenType


class NodeType(Enum):
    """Kinds of syntax tree nodes."""

    LET_STATEMENT = auto()
    PRINT_STATEMENT = auto()
    NUMBER = auto()
    VARIABLE = auto()
    BINARY_OP = auto()


@dataclass
class Node:
    """A syntax tree node.

    ``value`` holds a literal, a name or an operator. A let statement keeps
    its variable in ``left`` and its expression in ``right``; a print
    statement keeps its expression in ``left``.
    """

    type: NodeType
    value: str = ""
    left: Optional["Node"] = None
    right: Optional["Node"] = None


_END = Token(TokenType.END, "")


class Parser:
    """Parses a token sequence into a list of statements.

    The parser is forgiving: missing ``=``, ``;`` or ``)`` are tolerated, and
    a factor that is not a number, name or parenthesis yields ``None``.
    """

    def __init__(self, tokens: Sequence[Token]) -> None:
        self.tokens = list(tokens)
        self._pos = 0

    def _peek(self) -> Token:
        return self.tokens[self._pos] if self._pos < len(self.tokens) else _END

    def _advance(self) -> Token:
        if self._pos < len(self.tokens):
            token = self.tokens[self._pos]
            self._pos += 1
            return token
        return _END

    def _match(self, kind: TokenType) -> bool:
        if self._peek().type is kind:
            self._advance()
            return True
        return False

    def parse(self) -> List[Optional[Node]]:
        """Parse statements until the END token."""
        program: List[Optional[Node]] = []
        while self._peek().type is not TokenType.END:
            program.append(self._statement())
        return program

    def _statement(self) -> Optional[Node]:
        kind = self._peek().type
        if kind is TokenType.LET:
            return self._let_statement()
        if kind is TokenType.PRINT:
            return self._print_statement()
        return self._expression()

    def _let_statement(self) -> Node:
        self._advance()
        name = self._advance().value
        self._match(TokenType.ASSIGN)
        expr = self._expression()
        self._match(TokenType.SEMICOLON)
        return Node(NodeType.LET_STATEMENT, "", Node(NodeType.VARIABLE, name), expr)

    def _print_statement(self) -> Node:
        self._advance()
        expr = self._expression()
        self._match(TokenType.SEMICOLON)
        return Node(NodeType.PRINT_STATEMENT, "", expr)

    def _binary_chain(self, operand, operators) -> Optional[Node]:
        node = operand()
        while self._peek().type in operators:
            op = self._advance()
            node = Node(NodeType.BINARY_OP, op.value, node, operand())
        return node

    def _expression(self) -> Optional[Node]:
        return self._binary_chain(self._term, (TokenType.PLUS, TokenType.MINUS))

    def _term(self) -> Optional[Node]:
        return self._binary_chain(self._factor, (TokenType.MUL, TokenType.DIV))

    def _factor(self) -> Optional[Node]:
        token = self._advance()
        if token.type is TokenType.NUMBER:
            return Node(NodeType.NUMBER, token.value)
        if token.type is TokenType.IDENTIFIER:
            return Node(NodeType.VARIABLE, token.value)
        if token.type is TokenType.LPAREN:
            expr = self._expression()
            self._match(TokenType.RPAREN)
            return expr
        return None


def parse(tokens: Sequence[Token]) -> List[Optional[Node]]:
    """Parse ``tokens`` in one call."""
    return Parser(tokens).parse()