"""A hand-built sample program for the instruction machine."""

from __future__ import annotations

import argparse
import sys

from .machine import (
    ArithmeticOperator,
    AssignInstruction,
    CondJumpInstruction,
    ConditionOperator,
    InputInstruction,
    Instruction,
    JumpInstruction,
    Machine,
    NoopInstruction,
    OutputInstruction,
)


def build_demo() -> tuple[Machine, Instruction]:
    """Return a machine loaded with inputs and the program equivalent to::

        a, b, c, d;
        {
            input a; input b; c = 10;
            IF c <> a { output b; }
            IF c > 1 { a = b + 900; input d; IF a > 10 { output d; } }
            d = 0;
            WHILE d < 4 { c = a + d; IF d > 1 { output d; } d = d + 1; }
        }
        1 2 3 4 5 6
    """
    machine = Machine([1, 2, 3, 4, 5, 6])
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

    after_first_if = NoopInstruction()
    after_inner_if = NoopInstruction()
    after_outer_if = NoopInstruction()
    after_while_if = NoopInstruction()
    after_while = NoopInstruction()
    while_test = CondJumpInstruction(ConditionOperator.LESS, d, four, target=after_while)

    nodes = [
        InputInstruction(a),
        InputInstruction(b),
        AssignInstruction(c, ArithmeticOperator.NONE, ten),
        CondJumpInstruction(ConditionOperator.NOTEQUAL, c, a, target=after_first_if),
        OutputInstruction(b),
        after_first_if,
        CondJumpInstruction(ConditionOperator.GREATER, c, one, target=after_outer_if),
        AssignInstruction(a, ArithmeticOperator.PLUS, b, nine_hundred),
        InputInstruction(d),
        CondJumpInstruction(ConditionOperator.GREATER, a, ten, target=after_inner_if),
        OutputInstruction(d),
        after_inner_if,
        after_outer_if,
        AssignInstruction(d, ArithmeticOperator.NONE, zero),
        while_test,
        AssignInstruction(c, ArithmeticOperator.PLUS, a, d),
        CondJumpInstruction(ConditionOperator.GREATER, d, one, target=after_while_if),
        OutputInstruction(d),
        after_while_if,
        AssignInstruction(d, ArithmeticOperator.PLUS, d, one),
        JumpInstruction(target=while_test),
        after_while,
    ]
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    return machine, nodes[0]


def main(argv: list[str] | None = None) -> int:
    """Run the sample program and print its output values."""
    parser = argparse.ArgumentParser(
        prog="minicomp-demo", description="Run the sample instruction program."
    )
    parser.parse_args(argv)
    machine, program = build_demo()
    sys.stdout.write("".join(f"{value} " for value in machine.execute(program)))
    return 0


if __name__ == "__main__":
    sys.exit(main())