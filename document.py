"""
Assembly of the complete LaTeX document.

The document opens with a score tracker (one line per test for the time
taken and the number correct), followed by a solutions page and then the
test pages, which are numbered from 1 in the footer.
"""

import logging
from typing import Iterator, List

import numpy as np

from pages import render_page
from problems import Operation, build_table, shuffle_table


PREAMBLE = "\n".join([
    "\\documentclass[12pt, letterpaper]{article}",
    "\\usepackage[margin=1in]{geometry}",
    "\\usepackage{multicol}",
    "\\usepackage{setspace}",
    "\\usepackage{fancyhdr}",
    "\\pagestyle{fancy}",
    "\\renewcommand{\\headrulewidth}{0pt}",
    "\\fancyhf{}",
    "\\begin{document}",
]) + "\n"

PAGE_NUMBERING = "\n".join([
    "\\setcounter{page}{1}",
    "\\lfoot{\\framebox{\\makebox[\\totalheight]{\\thepage}}}",
]) + "\n"

DOCUMENT_END = "\\end{document}"

logger = logging.getLogger(__name__)


def score_line(m: int, num_tests: int) -> str:
    """
    One score-tracker record.

    Numbers with fewer digits than `num_tests` get invisible zeros in front
    so that the entries line up.
    """
    padding = len(str(num_tests)) - len(str(m))
    prefix = f"\\phantom{{{'0' * padding}}}" if padding > 0 else ""
    return (
        f"{prefix}{m}. Time: \\underline{{\\hspace{{6em}}}}"
        f"\\quad Correct: \\underline{{\\hspace{{3em}}}}"
    )


def render_score_tracker(num_tests: int) -> str:
    lines: List[str] = [
        "\\begin{multicols}{2}",
        "\\setlength{\\columnseprule}{0.5pt}",
        "{\\setstretch{1.5}",
        "\\noindent",
    ]
    records = [score_line(m, num_tests) for m in range(1, num_tests + 1)]
    lines.append("\\\\\n".join(records) + "\\par")
    lines += [
        "}",  # closes \setstretch
        "\\end{multicols}",
        "\\newpage",
    ]
    return "\n".join(lines) + "\n"


def iter_document(
    operation: Operation,
    num_tests: int,
    rng: np.random.Generator
) -> Iterator[str]:
    """
    Yield the document piece by piece, in output order.

    The solutions page is rendered from the table before any shuffling.
    Every test page gets its own shuffle of that same table.
    """
    table = build_table(operation)

    yield PREAMBLE
    yield render_score_tracker(num_tests)
    yield render_page(table, operation, include_solutions=True)
    yield PAGE_NUMBERING

    for n in range(num_tests):
        shuffled = shuffle_table(table, operation, rng)
        yield render_page(shuffled, operation, include_solutions=False)
        if (n + 1) % 50 == 0:
            logger.debug(f"Rendered {n + 1}/{num_tests} test pages")

    yield DOCUMENT_END


def build_document(operation: Operation, num_tests: int, rng: np.random.Generator) -> str:
    return "".join(iter_document(operation, num_tests, rng))
