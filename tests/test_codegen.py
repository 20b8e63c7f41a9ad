import io

from minicalc.codegen import CodeGenerator, Instruction, OpCode
from minicalc.lexer import tokenize
from minicalc.parser import parse


def compile_source(source):
    return CodeGenerator(out=io.StringIO()).generate(parse(tokenize(source)))


def test_let_statement():
    assert compile_source("let x = 1;") == [
        Instruction(OpCode.LOAD_CONST, "1"),
        Instruction(OpCode.STORE_VAR, "x"),
    ]


def test_print_in_postfix_order():
    assert compile_source("print a + 2 * b;") == [
        Instruction(OpCode.LOAD_VAR, "a"),
        Instruction(OpCode.LOAD_CONST, "2"),
        Instruction(OpCode.LOAD_VAR, "b"),
        Instruction(OpCode.MUL),
        Instruction(OpCode.ADD),
        Instruction(OpCode.PRINT),
    ]


def test_all_binary_operators():
    ops = [instr.op for instr in compile_source("1 + 2 - 3 * 4 / 5")]
    assert ops == [
        OpCode.LOAD_CONST,
        OpCode.LOAD_CONST,
        OpCode.ADD,
        OpCode.LOAD_CONST,
        OpCode.LOAD_CONST,
        OpCode.MUL,
        OpCode.LOAD_CONST,
        OpCode.DIV,
        OpCode.SUB,
    ]


def test_expression_statement_has_no_print_or_store():
    ops = {instr.op for instr in compile_source("x * y")}
    assert OpCode.PRINT not in ops
    assert OpCode.STORE_VAR not in ops


def test_none_statements_are_skipped():
    assert compile_source("; print 3;") == [
        Instruction(OpCode.LOAD_CONST, "3"),
        Instruction(OpCode.PRINT),
    ]


def test_empty_program():
    assert compile_source("") == []


def test_log_line_reports_statement_count():
    out = io.StringIO()
    ast = parse(tokenize("let a = 1; print a;"))
    CodeGenerator(out=out).generate(ast)
    assert out.getvalue() == f"[CodeGen] Generating bytecode from AST with {len(ast)} nodes\n"


def test_log_goes_to_stdout_by_default(capsys):
    CodeGenerator().generate([])
    assert "[CodeGen] Generating bytecode from AST with 0 nodes" in capsys.readouterr().out


def test_generator_is_reset_between_calls():
    gen = CodeGenerator(out=io.StringIO())
    gen.generate(parse(tokenize("print 1;")))
    second = gen.generate(parse(tokenize("let z = 9;")))
    assert second == [
        Instruction(OpCode.LOAD_CONST, "9"),
        Instruction(OpCode.STORE_VAR, "z"),
    ]