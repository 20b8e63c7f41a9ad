"""Stack machine that executes compiled instructions."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, TextIO

from .codegen import Instruction, OpCode

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


class VMError(RuntimeError):
    """Raised when a program fails at run time."""


def _wrap(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer."""
    return (value - _INT_MIN) % 2**32 + _INT_MIN


def _to_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise VMError(f"Invalid integer constant: {text!r}") from None
    if not _INT_MIN <= value <= _INT_MAX:
        raise VMError(f"Integer constant out of range: {text}")
    return value


def _divide(a: int, b: int) -> int:
    if b == 0:
        raise VMError("Division by zero")
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


_ARITHMETIC = {
    OpCode.ADD: lambda a, b: a + b,
    OpCode.SUB: lambda a, b: a - b,
    OpCode.MUL: lambda a, b: a * b,
    OpCode.DIV: _divide,
}


class VM:
    """Executes instructions on an integer stack with named variables.

    Arithmetic uses 32-bit signed integers; division truncates toward zero.
    The stack and variables persist between runs.
    """

    def __init__(self, bytecode: Iterable[Instruction], out: Optional[TextIO] = None) -> None:
        self.code: List[Instruction] = list(bytecode)
        self.stack: List[int] = []
        self.variables: Dict[str, int] = {}
        self._out = out

    def _log(self, message: str) -> None:
        print(message, file=self._out)

    def _pop(self, context: str) -> int:
        if not self.stack:
            raise VMError(f"Stack underflow on {context}")
        return self.stack.pop()

    def run(self) -> List[int]:
        """Execute the program and return the values it printed."""
        printed: List[int] = []
        self._log("[VM] run() started")
        for index, instr in enumerate(self.code):
            self._log(
                f"[VM] Executing instruction {index}: "
                f"opcode={instr.op.value}, operand='{instr.operand}'"
            )
            op = instr.op
            if op is OpCode.LOAD_CONST:
                self.stack.append(_to_int(instr.operand))
            elif op is OpCode.LOAD_VAR:
                if instr.operand not in self.variables:
                    raise VMError(f"Undefined variable: {instr.operand}")
                self.stack.append(self.variables[instr.operand])
            elif op is OpCode.STORE_VAR:
                self.variables[instr.operand] = self._pop("StoreVar")
            elif op in _ARITHMETIC:
                if len(self.stack) < 2:
                    raise VMError("Stack underflow on binary op")
                b = self.stack.pop()
                a = self.stack.pop()
                self.stack.append(_wrap(_ARITHMETIC[op](a, b)))
            elif op is OpCode.PRINT:
                value = self._pop("Print")
                self._log(f"[VM] Print: {value}")
                printed.append(value)
        self._log("[VM] run() finished")
        return printed