import operator

import pytest

from minicomp.machine import (
    MEMORY_SIZE,
    ArithmeticOperator,
    AssignInstruction,
    CondJumpInstruction,
    ConditionOperator,
    InputInstruction,
    JumpInstruction,
    Machine,
    MachineError,
    NoopInstruction,
    OutputInstruction,
)


def chain(*nodes):
    for current, following in zip(nodes, nodes[1:]):
        current.next = following
    return nodes[0]


def test_allocate_returns_consecutive_addresses_and_stores_values():
    machine = Machine()
    first = machine.allocate(10)
    second = machine.allocate(900)
    assert (first, second) == (0, 1)
    assert machine.memory[first] == 10
    assert machine.memory[second] == 900
    assert machine.next_available == 2


def test_allocate_beyond_memory_raises():
    machine = Machine()
    for _ in range(MEMORY_SIZE):
        machine.allocate()
    with pytest.raises(MachineError):
        machine.allocate()


def test_input_output_round_trip():
    machine = Machine([4, 9])
    a = machine.allocate()
    b = machine.allocate()
    program = chain(
        InputInstruction(a),
        InputInstruction(b),
        OutputInstruction(b),
        OutputInstruction(a),
    )
    assert machine.execute(program) == [9, 4]


def test_assign_without_operator_copies():
    machine = Machine()
    src = machine.allocate(42)
    dst = machine.allocate()
    program = chain(AssignInstruction(dst, ArithmeticOperator.NONE, src), OutputInstruction(dst))
    assert machine.execute(program) == [42]
    assert machine.memory[dst] == machine.memory[src]


@pytest.mark.parametrize(
    "op, func",
    [
        (ArithmeticOperator.PLUS, operator.add),
        (ArithmeticOperator.MINUS, operator.sub),
        (ArithmeticOperator.MULT, operator.mul),
    ],
)
def test_arithmetic(op, func):
    machine = Machine()
    x = machine.allocate(7)
    y = machine.allocate(5)
    result = machine.allocate()
    machine.execute(AssignInstruction(result, op, x, y))
    assert machine.memory[result] == func(7, 5)


@pytest.mark.parametrize("a, b", [(7, 2), (-7, 2), (7, -2), (-7, -2)])
def test_division_truncates_toward_zero(a, b):
    machine = Machine()
    x = machine.allocate(a)
    y = machine.allocate(b)
    result = machine.allocate()
    machine.execute(AssignInstruction(result, ArithmeticOperator.DIV, x, y))
    assert machine.memory[result] == int(a / b)
    assert abs(machine.memory[result]) == abs(a) // abs(b)


def test_division_by_zero_raises():
    machine = Machine()
    x = machine.allocate(1)
    zero = machine.allocate(0)
    with pytest.raises(MachineError):
        machine.execute(AssignInstruction(x, ArithmeticOperator.DIV, x, zero))


@pytest.mark.parametrize(
    "condition, a, b, taken",
    [
        (ConditionOperator.GREATER, 5, 1, True),
        (ConditionOperator.GREATER, 1, 5, False),
        (ConditionOperator.LESS, 1, 5, True),
        (ConditionOperator.LESS, 5, 5, False),
        (ConditionOperator.NOTEQUAL, 1, 5, True),
        (ConditionOperator.NOTEQUAL, 5, 5, False),
    ],
)
def test_conditional_jump(condition, a, b, taken):
    machine = Machine()
    x = machine.allocate(a)
    y = machine.allocate(b)
    end = NoopInstruction()
    jump = CondJumpInstruction(condition, x, y, target=end)
    chain(jump, OutputInstruction(x), end)
    assert machine.execute(jump) == ([a] if taken else [])


def test_countdown_loop():
    machine = Machine([3])
    x = machine.allocate()
    zero = machine.allocate(0)
    one = machine.allocate(1)
    end = NoopInstruction()
    test = CondJumpInstruction(ConditionOperator.GREATER, x, zero, target=end)
    back = JumpInstruction(target=test)
    program = chain(
        InputInstruction(x),
        test,
        OutputInstruction(x),
        AssignInstruction(x, ArithmeticOperator.MINUS, x, one),
        back,
        end,
    )
    assert machine.execute(program) == list(range(3, 0, -1))
    assert machine.memory[x] == 0


def test_conditional_jump_without_target_raises():
    machine = Machine()
    x = machine.allocate()
    with pytest.raises(MachineError):
        machine.execute(CondJumpInstruction(ConditionOperator.LESS, x, x))


def test_jump_without_target_raises():
    with pytest.raises(MachineError):
        Machine().execute(JumpInstruction())


def test_running_out_of_inputs_raises():
    machine = Machine([1])
    x = machine.allocate()
    with pytest.raises(MachineError):
        machine.execute(chain(InputInstruction(x), InputInstruction(x)))


def test_empty_program_outputs_nothing():
    assert Machine().execute(None) == []


def test_invalid_instruction_raises():
    with pytest.raises(MachineError):
        Machine().execute(object())


def test_invalid_address_raises():
    with pytest.raises(MachineError):
        Machine().execute(OutputInstruction(MEMORY_SIZE))