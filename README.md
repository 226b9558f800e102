# irexec

`irexec` runs programs for a small imperative language. A program is held as
a linked list of intermediate-representation instructions. The package also
has a lexer for the language's source text.

## Modules

### `irexec.inputbuf`

`InputBuffer(stream=None)` reads characters one at a time from a text stream.
It reads from standard input when no stream is given.

- `get_char()` returns the next character. At end of input it returns `""`.
- `unget_char(c)` pushes a character back so that it is read next.
- `unget_string(s)` pushes a whole string back so that it is read next, in
  order.
- `end_of_input()` is true only after a read has found the stream exhausted
  and no pushed-back characters remain.

### `irexec.lexer`

This module provides `TokenType`, `Token` and `LexicalAnalyzer`.

`LexicalAnalyzer(stream=None)` tokenizes its whole input when it is created.

- `get_token()` consumes and returns the next token. When no tokens remain, it
  returns an `END_OF_FILE` token.
- `peek(how_far)` returns the token `how_far` places ahead without consuming
  it. It returns `END_OF_FILE` past the end. It raises `ValueError` when
  `how_far` is not positive.

The following keywords are recognised: `VAR`, `FOR`, `IF`, `WHILE`, `SWITCH`,
`CASE`, `DEFAULT`, `input` and `output`. `ARRAY` is read as an identifier.

Only `NUM` and `ID` tokens carry their lexeme. A number that starts with `0`
is the single token `0`.

`Token.print(file=None)` writes a token as `{lexeme , TYPE , line}`.

### `irexec.execute`

This module holds the memory model, the instructions and the interpreter.

- **Operators.** `ArithmeticOperator` has `NONE`, `PLUS`, `MINUS`, `MULT` and
  `DIV`. `ConditionOperator` has `GREATER`, `LESS` and `NOTEQUAL`.
- **Instructions.** The instruction classes are `NoopInstruction`,
  `InputInstruction`, `OutputInstruction`, `AssignInstruction`,
  `CJumpInstruction` and `JumpInstruction`. Each one has a `next` field.
- **Linking.** `link(*instructions)` chains instructions in order through
  `next` and returns the first one.
- **Machine.** `Machine(inputs=(), size=1000)` holds a flat integer memory
  and a queue of input values.
  - `allocate(value=0)` stores a value in the next free cell and returns the
    cell's address.
  - `execute(program, out=None)` runs a program. Each output value is written
    to `out`, or to standard output when `out` is not given, followed by a
    space.

Division truncates toward zero.

A `CJumpInstruction` continues with `next` when its condition holds. When the
condition fails, it jumps to `target`.

`ExecutionError` is raised in these cases:

- division by zero
- running out of inputs
- an address outside memory
- memory exhausted
- a jump without a target

### `irexec.demo`

`build_demo_program(machine)` allocates the variables and constants of a
sample program that uses `IF` and `WHILE`. It appends the inputs
`1 2 3 4 5 6` to the machine's input queue and returns the program's first
instruction.

## Example

```python
from irexec.execute import Machine, InputInstruction, OutputInstruction, link

machine = Machine(inputs=[42])
x = machine.allocate()
program = link(InputInstruction(x), OutputInstruction(x))
machine.execute(program)   # prints "42 "
```

## Running the demo

```
irexec-demo
```

This builds the sample program on a fresh machine and runs it. It prints
`2 3 2 3 `.

## What it does not do

There is no parser that turns source text into instructions. The lexer
produces tokens, but programs must be built as instruction lists in Python,
as `build_demo_program` does. The only command is `irexec-demo`, which runs
the built-in sample.

## Tests

```
pip install .[test]
pytest
```