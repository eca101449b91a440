import pytest

from aoc2024.days import day17
from aoc2024.days.day17 import Vm

EXAMPLE1 = """Register A: 729
Register B: 0
Register C: 0

Program: 0,1,5,4,3,0
"""

EXAMPLE2 = """Register A: 2024
Register B: 0
Register C: 0

Program: 0,3,5,4,3,0
"""


def test_part1_example():
    assert day17.part1(EXAMPLE1) == "4,6,3,5,6,3,5,2,1,0"


def test_part2_example():
    assert day17.part2(EXAMPLE2) == 117440


def test_parse():
    vm = Vm.parse(EXAMPLE1)
    assert (vm.a, vm.b, vm.c, vm.pc) == (729, 0, 0, 0)
    assert vm.program == [(0, 1), (5, 4), (3, 0)]


def test_bst():
    vm = Vm(a=0, b=0, c=9, program=[(2, 6)])
    vm.execute()
    assert vm.b == 1


def test_out():
    vm = Vm(a=10, b=0, c=0, program=[(5, 0), (5, 1), (5, 4)])
    assert vm.execute() == [0, 1, 2]


def test_loop():
    vm = Vm(a=2024, b=0, c=0, program=[(0, 1), (5, 4), (3, 0)])
    assert vm.execute() == [4, 2, 5, 6, 7, 7, 7, 7, 3, 1, 0]
    assert vm.a == 0


def test_bxl():
    vm = Vm(a=0, b=29, c=0, program=[(1, 7)])
    vm.execute()
    assert vm.b == 26


def test_bxc():
    vm = Vm(a=0, b=2024, c=43690, program=[(4, 0)])
    vm.execute()
    assert vm.b == 44354


def test_invalid_combo_operand_raises():
    with pytest.raises(ValueError):
        Vm(a=0, b=0, c=0, program=[(5, 7)]).execute()


def test_invalid_opcode_raises():
    with pytest.raises(ValueError):
        Vm(a=0, b=0, c=0, program=[(8, 0)]).execute()