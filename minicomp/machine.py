"""A small machine that runs linked lists of three-address instructions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterable, Optional, Union

MEMORY_SIZE = 1000
"""Number of integer cells in the machine's memory."""


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


class MachineError(RuntimeError):
    """Raised when a program cannot be executed."""


@dataclass(eq=False)
class _Node:
    next: Optional["Instruction"] = field(default=None, kw_only=True, repr=False)


@dataclass(eq=False)
class NoopInstruction(_Node):
    """Does nothing; a convenient jump target."""


@dataclass(eq=False)
class InputInstruction(_Node):
    """Stores the next input value at ``var_index``."""

    var_index: int


@dataclass(eq=False)
class OutputInstruction(_Node):
    """Emits the value stored at ``var_index``."""

    var_index: int


@dataclass(eq=False)
class AssignInstruction(_Node):
    """Stores ``operand1 op operand2`` (or just ``operand1`` for NONE) at ``lhs_index``."""

    lhs_index: int
    op: ArithmeticOperator
    operand1_index: int
    operand2_index: Optional[int] = None


@dataclass(eq=False)
class CondJumpInstruction(_Node):
    """Falls through when the condition holds, otherwise continues at ``target``."""

    condition: ConditionOperator
    operand1_index: int
    operand2_index: int
    target: Optional["Instruction"] = field(default=None, repr=False)


@dataclass(eq=False)
class JumpInstruction(_Node):
    """Continues unconditionally at ``target``."""

    target: Optional["Instruction"] = field(default=None, repr=False)


Instruction = Union[
    NoopInstruction,
    InputInstruction,
    OutputInstruction,
    AssignInstruction,
    CondJumpInstruction,
    JumpInstruction,
]


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise MachineError("division by zero")
    quotient = abs(a) // abs(b)
    return -quotient if (a < 0) != (b < 0) else quotient


_ARITHMETIC = {
    ArithmeticOperator.PLUS: lambda a, b: a + b,
    ArithmeticOperator.MINUS: lambda a, b: a - b,
    ArithmeticOperator.MULT: lambda a, b: a * b,
    ArithmeticOperator.DIV: _truncating_div,
}

_CONDITIONS = {
    ConditionOperator.GREATER: lambda a, b: a > b,
    ConditionOperator.LESS: lambda a, b: a < b,
    ConditionOperator.NOTEQUAL: lambda a, b: a != b,
}


class Machine:
    """Memory, an input queue and an interpreter for instruction lists."""

    def __init__(self, inputs: Iterable[int] = ()) -> None:
        self.memory = [0] * MEMORY_SIZE
        self.next_available = 0
        self._inputs = iter(list(inputs))

    def allocate(self, value: int = 0) -> int:
        """Reserve the next free memory cell, initialise it to ``value`` and return its address."""
        if self.next_available >= MEMORY_SIZE:
            raise MachineError("out of memory")
        address = self.next_available
        self.memory[address] = value
        self.next_available += 1
        return address

    def _check(self, index: Optional[int]) -> int:
        if index is None or not 0 <= index < MEMORY_SIZE:
            raise MachineError(f"invalid memory address {index}")
        return index

    def _load(self, index: Optional[int]) -> int:
        return self.memory[self._check(index)]

    def _store(self, index: int, value: int) -> None:
        self.memory[self._check(index)] = value

    def execute(self, program: Optional[Instruction]) -> list[int]:
        """Run the instruction list starting at ``program`` and return the values output."""
        outputs: list[int] = []
        pc = program
        while pc is not None:
            match pc:
                case NoopInstruction():
                    pc = pc.next
                case InputInstruction(var_index=index):
                    try:
                        value = next(self._inputs)
                    except StopIteration:
                        raise MachineError("no more inputs") from None
                    self._store(index, value)
                    pc = pc.next
                case OutputInstruction(var_index=index):
                    outputs.append(self._load(index))
                    pc = pc.next
                case AssignInstruction():
                    first = self._load(pc.operand1_index)
                    if pc.op is ArithmeticOperator.NONE:
                        result = first
                    else:
                        result = _ARITHMETIC[pc.op](first, self._load(pc.operand2_index))
                    self._store(pc.lhs_index, result)
                    pc = pc.next
                case CondJumpInstruction():
                    if pc.target is None:
                        raise MachineError("conditional jump target is null")
                    first = self._load(pc.operand1_index)
                    second = self._load(pc.operand2_index)
                    pc = pc.next if _CONDITIONS[pc.condition](first, second) else pc.target
                case JumpInstruction():
                    if pc.target is None:
                        raise MachineError("jump target is null")
                    pc = pc.target
                case _:
                    raise MachineError(f"invalid instruction {pc!r}")
        return outputs