import io

import pytest

from irexec.demo import DEMO_INPUTS, build_demo_program, main
from irexec.execute import ExecutionError, Machine


def _run(machine=None):
    machine = Machine() if machine is None else machine
    program = build_demo_program(machine)
    out = io.StringIO()
    machine.execute(program, out)
    return machine, out.getvalue()


def test_demo_output():
    _, output = _run()
    assert output == "2 3 2 3 "


def test_constants_allocated_after_variables():
    machine = Machine()
    build_demo_program(machine)
    assert machine.memory[4:10] == [10, 1, 900, 3, 0, 4]
    assert machine.memory[0:4] == [0, 0, 0, 0]


def test_inputs_queued():
    machine = Machine()
    build_demo_program(machine)
    assert machine.inputs == list(DEMO_INPUTS)
    assert machine.inputs == [1, 2, 3, 4, 5, 6]


def test_final_memory_invariants():
    machine, _ = _run()
    a, b, c, d = machine.memory[0:4]
    assert b == DEMO_INPUTS[1]
    assert a == b + 900
    assert d == 4
    assert c == a + (d - 1)


def test_program_relocates_with_prior_allocations():
    machine = Machine()
    machine.allocate(77)
    machine.allocate(88)
    _, shifted = _run(machine)
    _, plain = _run()
    assert shifted == plain
    assert machine.memory[0:2] == [77, 88]


def test_running_out_of_inputs_raises():
    machine = Machine()
    program = build_demo_program(machine)
    machine.execute(program, io.StringIO())
    machine.execute(program, io.StringIO())
    with pytest.raises(ExecutionError):
        machine.execute(program, io.StringIO())


def test_main_prints_output(capsys):
    assert main([]) == 0
    _, expected = _run()
    assert capsys.readouterr().out == expected


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit):
        main(["--bogus"])