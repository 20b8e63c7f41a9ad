from minicalc.lexer import Token, TokenType, tokenize
from minicalc.parser import Node, NodeType, Parser, parse


def num(value):
    return Node(NodeType.NUMBER, value)


def var(name):
    return Node(NodeType.VARIABLE, name)


def binop(op, left, right):
    return Node(NodeType.BINARY_OP, op, left, right)


def test_let_statement():
    assert parse(tokenize("let x = 1;")) == [
        Node(NodeType.LET_STATEMENT, "", var("x"), num("1"))
    ]


def test_print_statement():
    assert parse(tokenize("print y;")) == [Node(NodeType.PRINT_STATEMENT, "", var("y"))]


def test_multiplication_binds_tighter():
    assert parse(tokenize("1 + 2 * 3")) == [
        binop("+", num("1"), binop("*", num("2"), num("3")))
    ]


def test_operators_are_left_associative():
    assert parse(tokenize("1 - 2 - 3")) == [
        binop("-", binop("-", num("1"), num("2")), num("3"))
    ]
    assert parse(tokenize("8 / 4 / 2")) == [
        binop("/", binop("/", num("8"), num("4")), num("2"))
    ]


def test_parentheses_group():
    assert parse(tokenize("(1 + 2) * 3")) == [
        binop("*", binop("+", num("1"), num("2")), num("3"))
    ]


def test_missing_punctuation_is_tolerated():
    program = parse(tokenize("let x 1 print x"))
    assert program == [
        Node(NodeType.LET_STATEMENT, "", var("x"), num("1")),
        Node(NodeType.PRINT_STATEMENT, "", var("x")),
    ]


def test_unclosed_parenthesis():
    assert parse(tokenize("print (a + b")) == [
        Node(NodeType.PRINT_STATEMENT, "", binop("+", var("a"), var("b")))
    ]


def test_stray_semicolon_yields_none():
    assert parse(tokenize(";")) == [None]


def test_expression_statement_then_stray_semicolon():
    assert parse(tokenize("x;")) == [var("x"), None]


def test_empty_program():
    assert parse(tokenize("")) == []
    assert parse([]) == []


def test_tokens_without_end_token():
    assert parse([Token(TokenType.NUMBER, "5")]) == [num("5")]


def test_let_at_end_of_input_has_empty_name():
    assert parse(tokenize("let")) == [Node(NodeType.LET_STATEMENT, "", var(""), None)]


def test_parser_is_exhausted_after_parse():
    parser = Parser(tokenize("print 1; print 2;"))
    assert len(parser.parse()) == 2
    assert parser.parse() == []