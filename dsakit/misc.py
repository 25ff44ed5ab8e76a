"""Small numeric and text routines: temperatures, tables, Fibonacci, Hanoi, Booth."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a Celsius temperature to Fahrenheit."""
    return celsius * 9.0 / 5.0 + 32.0


def multiplication_table(n: int, upto: int = 10) -> list[str]:
    """Return the lines ``n * i = product`` for i from 1 to ``upto``."""
    return [f"{n} * {i} = {n * i}" for i in range(1, upto + 1)]


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting 0, 1."""
    terms: list[int] = []
    current, following = 0, 1
    for _ in range(count):
        terms.append(current)
        current, following = following, current + following
    return terms


@dataclass(frozen=True)
class Move:
    """One disk moved from one peg to another."""

    disk: int
    source: str
    target: str

    def __str__(self) -> str:
        return f"Move Disk {self.disk} from {self.source} to {self.target}"


def _hanoi(disks: int, source: str, auxiliary: str, target: str) -> Iterator[Move]:
    if disks == 0:
        return
    yield from _hanoi(disks - 1, source, target, auxiliary)
    yield Move(disks, source, target)
    yield from _hanoi(disks - 1, auxiliary, source, target)


def hanoi_moves(
    disks: int, source: str = "A", auxiliary: str = "B", target: str = "C"
) -> list[Move]:
    """Return the moves that carry ``disks`` disks from ``source`` to ``target``."""
    if disks < 0:
        raise ValueError("number of disks must not be negative")
    return list(_hanoi(disks, source, auxiliary, target))


def reverse_each_word(text: str) -> str:
    """Reverse every space-separated word in place, keeping the spaces."""
    return " ".join(word[::-1] for word in text.split(" "))


@dataclass(frozen=True)
class BoothStep:
    """Register contents after one step of Booth's multiplication.

    ``accumulator`` and ``multiplier`` are bit strings, most significant first;
    ``extra_bit`` is the bit shifted out to the right of the multiplier.
    """

    operation: str
    accumulator: str
    multiplier: str
    extra_bit: int
    counter: int


def _check_operand(value: int, width: int, name: str) -> None:
    low, high = -(1 << (width - 1)), (1 << (width - 1)) - 1
    if not low <= value <= high:
        raise ValueError(f"{name} {value} does not fit in {width} signed bits")


def booth_trace(multiplicand: int, multiplier: int, width: int = 4) -> list[BoothStep]:
    """Run Booth's algorithm on two signed ``width``-bit numbers and record each step."""
    if width < 1:
        raise ValueError("width must be at least 1")
    _check_operand(multiplicand, width, "multiplicand")
    _check_operand(multiplier, width, "multiplier")
    mask = (1 << width) - 1
    sign = 1 << (width - 1)
    register_m = multiplicand & mask
    acc, reg_q, extra = 0, multiplier & mask, 0

    def record(operation: str, counter: int) -> BoothStep:
        return BoothStep(
            operation, format(acc, f"0{width}b"), format(reg_q, f"0{width}b"), extra, counter
        )

    steps = [record("initial", width)]
    for counter in range(width - 1, -1, -1):
        pair = (reg_q & 1, extra)
        if pair == (1, 0):
            acc = (acc - register_m) & mask
            steps.append(record("A = A - BR", counter + 1))
        elif pair == (0, 1):
            acc = (acc + register_m) & mask
            steps.append(record("A = A + BR", counter + 1))
        extra = reg_q & 1
        reg_q = (reg_q >> 1) | ((acc & 1) << (width - 1))
        acc = (acc >> 1) | (acc & sign)
        steps.append(record("rightShift", counter))
    return steps


def booth_multiply(multiplicand: int, multiplier: int, width: int = 4) -> int:
    """Return the signed product computed by Booth's algorithm."""
    final = booth_trace(multiplicand, multiplier, width)[-1]
    bits = final.accumulator + final.multiplier
    product = int(bits, 2)
    if bits[0] == "1":
        product -= 1 << len(bits)
    return product