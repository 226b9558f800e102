"""Memory model, instruction list and interpreter for the intermediate representation."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TextIO, Union

MEMORY_SIZE = 1000


class ArithmeticOperator(IntEnum):
    NONE = 123
    PLUS = 124
    MINUS = 125
    MULT = 126
    DIV = 127


class ConditionOperator(IntEnum):
    GREATER = 345
    LESS = 346
    NOTEQUAL = 347


class ExecutionError(Exception):
    """Raised when a program cannot be executed."""


@dataclass(eq=False)
class NoopInstruction:
    next: Instruction | None = field(default=None, repr=False)


@dataclass(eq=False)
class InputInstruction:
    var_loc: int
    next: Instruction | None = field(default=None, repr=False)


@dataclass(eq=False)
class OutputInstruction:
    var_loc: int
    next: Instruction | None = field(default=None, repr=False)


@dataclass(eq=False)
class AssignInstruction:
    """``lhs = op1 <op> op2``; with ArithmeticOperator.NONE only op1 is used."""

    lhs_loc: int
    op: ArithmeticOperator
    op1_loc: int
    op2_loc: int = 0
    next: Instruction | None = field(default=None, repr=False)


@dataclass(eq=False)
class CJumpInstruction:
    """Continue with ``next`` if the condition holds, else jump to ``target``."""

    condition_op: ConditionOperator
    op1_loc: int
    op2_loc: int
    target: Instruction | None = field(default=None, repr=False)
    next: Instruction | None = field(default=None, repr=False)


@dataclass(eq=False)
class JumpInstruction:
    target: Instruction | None = field(default=None, repr=False)
    next: Instruction | None = field(default=None, repr=False)


Instruction = Union[
    NoopInstruction,
    InputInstruction,
    OutputInstruction,
    AssignInstruction,
    CJumpInstruction,
    JumpInstruction,
]


def link(*args: Instruction) -> Instruction | None:
    """Chain the instructions in order through ``next`` and return the first."""
    for current, following in zip(args, args[1:]):
        current.next = following
    return args[0] if args else None


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ExecutionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class Machine:
    """Flat integer memory, an input queue and an interpreter over instruction lists."""

    def __init__(self, inputs: Iterable[int] = (), size: int = MEMORY_SIZE) -> None:
        self.memory: list[int] = [0] * size
        self.next_available = 0
        self.inputs: list[int] = list(inputs)
        self.next_input = 0

    def allocate(self, value: int = 0) -> int:
        """Store ``value`` in the next free cell and return its address."""
        if self.next_available >= len(self.memory):
            raise ExecutionError("memory exhausted")
        address = self.next_available
        self.memory[address] = value
        self.next_available += 1
        return address

    def _load(self, address: int) -> int:
        if not 0 <= address < len(self.memory):
            raise ExecutionError(f"invalid memory address {address}")
        return self.memory[address]

    def _store(self, address: int, value: int) -> None:
        if not 0 <= address < len(self.memory):
            raise ExecutionError(f"invalid memory address {address}")
        self.memory[address] = value

    def _read_input(self) -> int:
        if self.next_input >= len(self.inputs):
            raise ExecutionError("no more inputs")
        value = self.inputs[self.next_input]
        self.next_input += 1
        return value

    def _evaluate(self, inst: AssignInstruction) -> int:
        op1 = self._load(inst.op1_loc)
        if inst.op is ArithmeticOperator.NONE:
            return op1
        op2 = self._load(inst.op2_loc)
        if inst.op is ArithmeticOperator.PLUS:
            return op1 + op2
        if inst.op is ArithmeticOperator.MINUS:
            return op1 - op2
        if inst.op is ArithmeticOperator.MULT:
            return op1 * op2
        if inst.op is ArithmeticOperator.DIV:
            return _truncating_div(op1, op2)
        raise ExecutionError(f"invalid arithmetic operator {inst.op!r}")

    def _condition(self, inst: CJumpInstruction) -> bool:
        op1 = self._load(inst.op1_loc)
        op2 = self._load(inst.op2_loc)
        if inst.condition_op is ConditionOperator.GREATER:
            return op1 > op2
        if inst.condition_op is ConditionOperator.LESS:
            return op1 < op2
        if inst.condition_op is ConditionOperator.NOTEQUAL:
            return op1 != op2
        raise ExecutionError(f"invalid condition operator {inst.condition_op!r}")

    def execute(self, program: Instruction | None, out: TextIO | None = None) -> None:
        """Run the instruction list starting at ``program``, writing outputs to ``out``."""
        out = sys.stdout if out is None else out
        pc = program
        while pc is not None:
            match pc:
                case NoopInstruction():
                    pc = pc.next
                case InputInstruction():
                    self._store(pc.var_loc, self._read_input())
                    pc = pc.next
                case OutputInstruction():
                    out.write(f"{self._load(pc.var_loc)} ")
                    out.flush()
                    pc = pc.next
                case AssignInstruction():
                    self._store(pc.lhs_loc, self._evaluate(pc))
                    pc = pc.next
                case CJumpInstruction():
                    if pc.target is None:
                        raise ExecutionError("conditional jump has no target")
                    pc = pc.next if self._condition(pc) else pc.target
                case JumpInstruction():
                    if pc.target is None:
                        raise ExecutionError("jump has no target")
                    pc = pc.target
                case _:
                    raise ExecutionError(f"invalid instruction {pc!r}")