"""Scanning corrupted memory for mul instructions."""

from __future__ import annotations

from enum import Enum, auto

_DIGITS = "0123456789"


class _State(Enum):
    START = auto()
    M = auto()
    U = auto()
    L = auto()
    MUL_PAREN = auto()
    DIGITS1 = auto()
    COMMA = auto()
    DIGITS2 = auto()
    D = auto()
    O = auto()
    N = auto()
    QUOTE = auto()
    T = auto()
    DO_PAREN = auto()
    DONT_PAREN = auto()


_TRANSITIONS = {
    (_State.START, "m"): _State.M,
    (_State.M, "u"): _State.U,
    (_State.U, "l"): _State.L,
    (_State.L, "("): _State.MUL_PAREN,
    (_State.DIGITS1, ","): _State.COMMA,
    (_State.START, "d"): _State.D,
    (_State.D, "o"): _State.O,
    (_State.O, "("): _State.DO_PAREN,
    (_State.O, "n"): _State.N,
    (_State.N, "'"): _State.QUOTE,
    (_State.QUOTE, "t"): _State.T,
    (_State.T, "("): _State.DONT_PAREN,
}


def collect_all_mul(text: str, disable_conditionals: bool) -> int:
    """Sum of all well-formed mul(a,b) products.

    With ``disable_conditionals`` set, don't() has no effect.
    """
    total = 0
    state = _State.START
    lhs = rhs = 0
    enabled = True

    for char in text:
        if (state, char) in _TRANSITIONS:
            state = _TRANSITIONS[state, char]
        elif state in (_State.MUL_PAREN, _State.DIGITS1) and char in _DIGITS:
            lhs = lhs * 10 + int(char)
            state = _State.DIGITS1
        elif state in (_State.COMMA, _State.DIGITS2) and char in _DIGITS:
            rhs = rhs * 10 + int(char)
            state = _State.DIGITS2
        elif state is _State.DIGITS2 and char == ")":
            if enabled:
                total += lhs * rhs
            lhs = rhs = 0
            state = _State.START
        elif state is _State.DO_PAREN and char == ")":
            enabled = True
            state = _State.START
        elif state is _State.DONT_PAREN and char == ")":
            enabled = disable_conditionals
            state = _State.START
        else:
            lhs = rhs = 0
            state = _State.START

    return total


def part1(text: str) -> int:
    """Sum of every mul instruction, ignoring do() and don't()."""
    return collect_all_mul(text, True)


def part2(text: str) -> int:
    """Sum of mul instructions that are enabled by do() and don't()."""
    return collect_all_mul(text, False)