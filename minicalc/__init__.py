"""A small integer calculator language with a lexer, parser, bytecode generator and stack VM."""

__version__ = "0.1.0"
__all__ = ["lexer", "parser", "codegen", "vm", "cli"]