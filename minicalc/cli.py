"""Command-line entry point: run a minicalc source file."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from .codegen import CodeGenerator
from .lexer import Lexer
from .parser import Parser
from .vm import VM, VMError

_PROG = "minicalc"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program named on the command line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    print("Program started")
    if len(args) != 1:
        print(f"Usage: {_PROG} <source_file.ml>", file=sys.stderr)
        return 1

    path = args[0]
    print(f"Argument received: {path}")
    try:
        with open(path, "rb") as handle:
            data = handle.read()
    except OSError:
        print(f"Error: Cannot open file {path}", file=sys.stderr)
        return 1

    source = data.decode("latin-1")
    print(f"Source length: {len(data)}")

    try:
        lexer = Lexer(source)
        print("Starting lexer")
        tokens = lexer.tokenize()
        print(f"Tokens count: {len(tokens)}")

        ast = Parser(tokens).parse()
        print(f"AST nodes count: {len(ast)}")

        bytecode = CodeGenerator().generate(ast)
        VM(bytecode).run()
    except VMError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())