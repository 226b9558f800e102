"""A fixed sample program built directly as an instruction list and run."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from irexec.execute import (
    ArithmeticOperator,
    AssignInstruction,
    CJumpInstruction,
    ConditionOperator,
    InputInstruction,
    Instruction,
    JumpInstruction,
    Machine,
    NoopInstruction,
    OutputInstruction,
    link,
)

DEMO_INPUTS = (1, 2, 3, 4, 5, 6)


def build_demo_program(machine: Machine) -> Instruction:
    """Allocate the sample program's variables and constants and return its first instruction.

    The program corresponds to::

        a, b, c, d;
        {
            input a;
            input b;
            c = 10;
            IF c <> a { output b; }
            IF c > 1 {
                a = b + 900;
                input d;
                IF a > 10 { output d; }
            }
            d = 0;
            WHILE d < 4 {
                c = a + d;
                IF d > 1 { output d; }
                d = d + 1;
            }
        }
        1 2 3 4 5 6

    The inputs ``1 2 3 4 5 6`` are appended to the machine's input queue.
    """
    a = machine.allocate(0)
    b = machine.allocate(0)
    c = machine.allocate(0)
    d = machine.allocate(0)
    ten = machine.allocate(10)
    one = machine.allocate(1)
    nine_hundred = machine.allocate(900)
    machine.allocate(3)
    zero = machine.allocate(0)
    four = machine.allocate(4)

    plus = ArithmeticOperator.PLUS
    none = ArithmeticOperator.NONE

    end_first_if = NoopInstruction()
    end_inner_if = NoopInstruction()
    end_outer_if = NoopInstruction()
    end_loop_if = NoopInstruction()
    end_while = NoopInstruction()

    loop_test = CJumpInstruction(ConditionOperator.LESS, d, four, target=end_while)

    link(
        first := InputInstruction(a),
        InputInstruction(b),
        AssignInstruction(c, none, ten),
        CJumpInstruction(ConditionOperator.NOTEQUAL, c, a, target=end_first_if),
        OutputInstruction(b),
        end_first_if,
        CJumpInstruction(ConditionOperator.GREATER, c, one, target=end_outer_if),
        AssignInstruction(a, plus, b, nine_hundred),
        InputInstruction(d),
        CJumpInstruction(ConditionOperator.GREATER, a, ten, target=end_inner_if),
        OutputInstruction(d),
        end_inner_if,
        end_outer_if,
        AssignInstruction(d, none, zero),
        loop_test,
        AssignInstruction(c, plus, a, d),
        CJumpInstruction(ConditionOperator.GREATER, d, one, target=end_loop_if),
        OutputInstruction(d),
        end_loop_if,
        AssignInstruction(d, plus, d, one),
        JumpInstruction(target=loop_test),
        end_while,
    )

    machine.inputs.extend(DEMO_INPUTS)
    return first


def main(argv: Sequence[str] | None = None) -> int:
    """Build the sample program on a fresh machine and run it, printing to stdout."""
    parser = argparse.ArgumentParser(
        prog="irexec-demo",
        description="Run the built-in sample intermediate-representation program.",
    )
    parser.parse_args(argv)
    machine = Machine()
    program = build_demo_program(machine)
    machine.execute(program, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())