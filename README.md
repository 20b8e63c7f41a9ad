# minicalc

minicalc runs programs that are written in a small integer calculator
language. The source text passes through four stages:

1. the lexer splits the text into tokens,
2. the parser builds a syntax tree,
3. the code generator turns the tree into stack bytecode,
4. the virtual machine runs the bytecode.

## The language

A program is a sequence of statements:

```
let x = 10;
let y = (x + 2) * 3;
print y - x / 4;
```

- `let NAME = EXPR;` stores the value of an expression in a variable.
- `print EXPR;` prints the value of an expression.
- Expressions are built from non-negative integer literals, variable names,
  the operators `+ - * /`, and parentheses. `*` and `/` bind tighter than `+`
  and `-`. All operators are left-associative.
- Names start with an ASCII letter and may go on with letters, digits and `_`.
  `let` and `print` are keywords.
- Arithmetic uses signed 32-bit integers. Results wrap around on overflow, and
  division truncates toward zero.
- The parser is forgiving. A missing `=`, `;` or `)` is accepted, and the
  lexer skips characters it does not recognise.
- These things stop the program with an error: dividing by zero, reading a
  variable that was never assigned, an integer literal outside the 32-bit
  range, and an expression that leaves too few values on the stack (for
  example `print ;`).

## Command line

```
minicalc program.ml
```

The command reads the file and reports what each stage does: the source
length in bytes, the token count, the statement count, and each instruction
the virtual machine executes. Each `print` statement writes a line of the
form `[VM] Print: <value>`. The exit status is 0 on success. It is 1 when the
argument is missing or extra arguments are given, when the file cannot be
opened, or when the program fails at run time. In those cases a message goes
to standard error.

## Using it from Python

```python
from minicalc.lexer import tokenize
from minicalc.parser import parse
from minicalc.codegen import CodeGenerator
from minicalc.vm import VM, VMError

tokens = tokenize("let a = 6; print a * 7;")
tree = parse(tokens)
bytecode = CodeGenerator().generate(tree)

try:
    printed = VM(bytecode).run()   # [42]
except VMError as error:
    print("failed:", error)
```

The modules are:

- `minicalc.lexer`: `TokenType`, `Token`, `Lexer` and `tokenize`.
  `tokenize` returns a list of tokens that always ends with a
  `TokenType.END` token.
- `minicalc.parser`: `NodeType`, `Node`, `Parser` and `parse`.
  `parse` returns one node per statement. A node is `None` where a factor
  was not a number, name or parenthesis.
- `minicalc.codegen`: `OpCode`, `Instruction` and `CodeGenerator`.
  `CodeGenerator.generate` returns a list of `Instruction`s.
- `minicalc.vm`: `VM` and the `VMError` it raises. `VM.run` returns the
  values the program printed, in order. The VM's stack and variables stay in
  place between runs and can be read through `VM.stack` and `VM.variables`.
- `minicalc.cli`: `main(argv=None)`, which the `minicalc` command runs. It
  returns the exit status.

`CodeGenerator` and `VM` write their progress lines to standard output. To
send them elsewhere, pass a text stream as `out`:

```python
import io

log = io.StringIO()
VM(bytecode, out=log).run()
```

## What it does not do

minicalc has no interactive prompt. It has no negative literals or unary
minus, and no floating-point numbers, comparisons, conditionals, loops or
functions. It reports no syntax errors: input it cannot make sense of is
skipped or tolerated, and only the run-time errors listed above are
reported.

## Running the tests

```
pip install -e .[test]
pytest
```