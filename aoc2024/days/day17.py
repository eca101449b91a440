"""A three-bit computer and the search for a self-printing register value."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


def _register(line: str, name: str) -> int:
    return int(line.removeprefix(f"Register {name}: "))


@dataclass
class Vm:
    """Registers, program counter and (opcode, operand) instruction pairs."""

    a: int
    b: int
    c: int
    program: list[tuple[int, int]] = field(default_factory=list)
    pc: int = 0

    @classmethod
    def parse(cls, text: str) -> Vm:
        lines = text.splitlines()
        if len(lines) < 5:
            raise ValueError("incomplete program description")
        codes = [int(code) for code in lines[4].removeprefix("Program: ").split(",")]
        program = list(zip(codes[::2], codes[1::2]))
        return cls(
            _register(lines[0], "A"),
            _register(lines[1], "B"),
            _register(lines[2], "C"),
            program,
        )

    def _combo(self, operand: int) -> int:
        if 0 <= operand <= 3:
            return operand
        if operand == 4:
            return self.a
        if operand == 5:
            return self.b
        if operand == 6:
            return self.c
        raise ValueError(f"invalid combo operand {operand}")

    def execute(self) -> list[int]:
        """Run until the program counter leaves the program; return the output."""
        out: list[int] = []
        while 0 <= self.pc < len(self.program):
            opcode, operand = self.program[self.pc]
            self.pc += 1
            if opcode == 0:
                self.a >>= self._combo(operand)
            elif opcode == 1:
                self.b ^= operand
            elif opcode == 2:
                self.b = self._combo(operand) % 8
            elif opcode == 3:
                if self.a != 0:
                    self.pc = operand
            elif opcode == 4:
                self.b ^= self.c
            elif opcode == 5:
                out.append(self._combo(operand) % 8)
            elif opcode == 6:
                self.b = self.a >> self._combo(operand)
            elif opcode == 7:
                self.c = self.a >> self._combo(operand)
            else:
                raise ValueError(f"invalid opcode {opcode}")
        return out

    def debug_a(self) -> int:
        """Lowest value of register A for which the program prints itself."""
        expected = [value for pair in self.program for value in pair]
        candidates = [0]
        for position in reversed(range(len(expected))):
            previous, candidates = candidates, []
            for a in previous:
                for digit in range(8):
                    value = a | (digit << (position * 3))
                    out = replace(self, a=value).execute()
                    if position < len(out) and out[position] == expected[position]:
                        candidates.append(value)
        if not candidates:
            raise ValueError("no value of register A reproduces the program")
        return min(candidates)


def part1(text: str) -> str:
    """Program output joined with commas."""
    return ",".join(str(value) for value in Vm.parse(text).execute())


def part2(text: str) -> int:
    """Lowest register A value that makes the program output itself."""
    return Vm.parse(text).debug_a()