"""Shared fixtures for the practice-test generator tests."""

from __future__ import annotations

from typing import Callable, List, Optional, Tuple

import numpy as np
import pytest

from pages import ANSWER_ROW_END, ROW_END


ParsedPage = Tuple[List[Tuple[int, int]], Optional[List[int]]]


def _parse_page(page: str) -> ParsedPage:
    """Read the (first, second) pairs and any answers back out of a rendered page."""
    operand_rows = [
        line[:-len(ROW_END)].split(" & & ")
        for line in page.splitlines()
        if line.endswith(ROW_END) and not line.startswith("\\cline")
    ]
    answer_rows = [
        line.rsplit("} ", 1)[1][:-len(ANSWER_ROW_END)]
        for line in page.splitlines()
        if line.startswith("\\cline")
    ]

    pairs = []
    for top, bottom in zip(operand_rows[0::2], operand_rows[1::2]):
        pairs += [(int(a), int(b.split(" ")[-1])) for a, b in zip(top, bottom)]

    if all(row == "" for row in answer_rows):
        return pairs, None
    answers = [int(a) for row in answer_rows for a in row.split(" & & ")]
    return pairs, answers


@pytest.fixture
def parse_page() -> Callable[[str], ParsedPage]:
    return _parse_page


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(1234)
