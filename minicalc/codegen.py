"""Compiles a syntax tree into stack-machine instructions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, TextIO

from .parser import Node, NodeType


class OpCode(Enum):
    """Stack-machine operations."""

    LOAD_CONST = 0
    LOAD_VAR = 1
    STORE_VAR = 2
    ADD = 3
    SUB = 4
    MUL = 5
    DIV = 6
    PRINT = 7


@dataclass(frozen=True)
class Instruction:
    """One instruction with an optional text operand."""

    op: OpCode
    operand: str = ""


_BINARY_OPS = {
    "+": OpCode.ADD,
    "-": OpCode.SUB,
    "*": OpCode.MUL,
    "/": OpCode.DIV,
}


class CodeGenerator:
    """Turns parsed statements into a flat instruction list."""

    def __init__(self, out: Optional[TextIO] = None) -> None:
        self._out = out
        self._bytecode: List[Instruction] = []

    def generate(self, ast: Iterable[Optional[Node]]) -> List[Instruction]:
        """Compile the statements of ``ast`` in order."""
        statements = list(ast)
        self._bytecode = []
        print(
            f"[CodeGen] Generating bytecode from AST with {len(statements)} nodes",
            file=self._out,
        )
        for statement in statements:
            self._statement(statement)
        return list(self._bytecode)

    def _emit(self, op: OpCode, operand: str = "") -> None:
        self._bytecode.append(Instruction(op, operand))

    def _statement(self, node: Optional[Node]) -> None:
        if node is None:
            return
        if node.type is NodeType.LET_STATEMENT:
            self._expression(node.right)
            self._emit(OpCode.STORE_VAR, node.left.value if node.left else "")
        elif node.type is NodeType.PRINT_STATEMENT:
            self._expression(node.left)
            self._emit(OpCode.PRINT)
        else:
            self._expression(node)

    def _expression(self, node: Optional[Node]) -> None:
        if node is None:
            return
        if node.type is NodeType.NUMBER:
            self._emit(OpCode.LOAD_CONST, node.value)
        elif node.type is NodeType.VARIABLE:
            self._emit(OpCode.LOAD_VAR, node.value)
        elif node.type is NodeType.BINARY_OP:
            self._expression(node.left)
            self._expression(node.right)
            op = _BINARY_OPS.get(node.value)
            if op is not None:
                self._emit(op)