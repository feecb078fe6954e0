"""Single-digit problem tables for the practice tests."""

import logging
import operator
from enum import Enum
from typing import Callable, Iterator, NamedTuple, Sequence, Tuple

import numpy as np


# Table Configuration Constants
NUM_DIGITS = 10  # Operands run over the digits 0-9
NUM_CELLS = NUM_DIGITS * NUM_DIGITS

logger = logging.getLogger(__name__)


class Problem(NamedTuple):
    """One problem as shown on the page: first operand above, second below."""
    first: int
    second: int

    @property
    def is_sentinel(self) -> bool:
        return self == SENTINEL


# Placeholder for a division cell whose divisor would be zero
SENTINEL = Problem(-1, -1)


class Operation(Enum):
    """
    The four kinds of test.

    Each member carries its command line tag, the LaTeX glyph printed in
    front of the second operand, and the function that computes the answer.
    """
    ADDITION = ('a', '$+$', operator.add)
    SUBTRACTION = ('s', '$-$', operator.sub)
    MULTIPLICATION = ('m', '$\\times$', operator.mul)
    DIVISION = ('d', '$\\div$', operator.floordiv)

    def __init__(self, tag: str, glyph: str, apply: Callable[[int, int], int]):
        self.tag = tag
        self.glyph = glyph
        self.apply = apply

    @classmethod
    def from_tag(cls, tag: str) -> 'Operation':
        for op in cls:
            if op.tag == tag:
                return op
        raise ValueError(f"Unsupported operation: {tag!r}")

    def answer(self, problem: Problem) -> int:
        return self.apply(problem.first, problem.second)

    @property
    def fixed_cells(self) -> int:
        """Leading cells of the flattened table that never move or render."""
        return NUM_DIGITS if self is Operation.DIVISION else 0


class ProblemTable:
    """
    A 10x10 grid of problems stored row-major.

    Rows and columns are the digits the problems were generated from, not
    the order they end up in on the page. Shuffling produces a new table
    (see `shuffle_table`), so a table is never modified after construction.
    """

    def __init__(self, cells: Sequence[Problem]):
        cells = tuple(Problem(*cell) for cell in cells)
        if len(cells) != NUM_CELLS:
            raise ValueError(f"A problem table needs {NUM_CELLS} cells, got {len(cells)}")
        self._cells = cells

    def __len__(self) -> int:
        return NUM_CELLS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProblemTable):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"ProblemTable({list(self._cells)!r})"

    def cell(self, i: int, j: int) -> Problem:
        if not (0 <= i < NUM_DIGITS and 0 <= j < NUM_DIGITS):
            raise IndexError(f"Cell ({i}, {j}) is outside the {NUM_DIGITS}x{NUM_DIGITS} table")
        return self._cells[i * NUM_DIGITS + j]

    def row(self, i: int) -> Tuple[Problem, ...]:
        if not 0 <= i < NUM_DIGITS:
            raise IndexError(f"Row {i} is outside the {NUM_DIGITS}x{NUM_DIGITS} table")
        return self._cells[i * NUM_DIGITS:(i + 1) * NUM_DIGITS]

    def rows(self) -> Iterator[Tuple[Problem, ...]]:
        for i in range(NUM_DIGITS):
            yield self.row(i)

    def flatten(self) -> Tuple[Problem, ...]:
        return self._cells


def make_problem(operation: Operation, i: int, j: int) -> Problem:
    """Turn the digit pair (i, j) into the problem shown for `operation`."""
    if operation is Operation.SUBTRACTION:
        # Larger digit on top so the difference is never negative
        return Problem(max(i, j), min(i, j))
    if operation is Operation.DIVISION:
        if i == 0:
            return SENTINEL
        # Dividend i*j over divisor i always divides evenly to j
        return Problem(i * j, i)
    return Problem(i, j)


def build_table(operation: Operation) -> ProblemTable:
    """
    Build the canonical table of every digit pair for one operation.

    Addition and multiplication use every pair as is. Subtraction orders each
    pair so the top number is the larger one, which repeats problems like
    5 - 3 instead of leaving half the grid empty. Division fills row 0 with
    sentinels and uses (i*j, i) everywhere else, leaving 90 real problems.
    """
    table = ProblemTable([
        make_problem(operation, i, j)
        for i in range(NUM_DIGITS)
        for j in range(NUM_DIGITS)
    ])
    logger.debug(f"Built {operation.name.lower()} table")
    return table


def shuffle_table(
    table: ProblemTable,
    operation: Operation,
    rng: np.random.Generator
) -> ProblemTable:
    """
    Return a copy of `table` with its problems in a random order.

    The table is treated as one flat sequence of 100 cells. For division the
    first row of sentinels stays where it is and only the other 90 cells are
    permuted, so the renderer can keep skipping that row.
    """
    cells = table.flatten()
    start = operation.fixed_cells
    order = rng.permutation(len(cells) - start) + start
    return ProblemTable(cells[:start] + tuple(cells[k] for k in order))


if __name__ == "__main__":
    print("Problem Tables\n")

    for op in Operation:
        table = build_table(op)
        problems = [p for p in table.flatten() if not p.is_sentinel]
        sample = ", ".join(f"{tuple(p)} -> {op.answer(p)}" for p in problems[-3:])
        print(f"{op.name.lower():15s} {len(problems):3d} problems  e.g. {sample}")
