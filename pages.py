"""LaTeX rendering of one page of problems."""

import logging
from typing import List, Sequence

from problems import NUM_DIGITS, Operation, Problem, ProblemTable


# Layout Constants
PHYSICAL_ROWS = 2 * NUM_DIGITS  # Each problem takes two rows of the tabular
NUM_COLUMNS = 2 * NUM_DIGITS - 1  # Problem columns plus a blank spacer between each pair
CELL_SEP = " & & "  # Skips over the spacer column
ROW_END = "\\\\"
ANSWER_ROW_END = "\\\\ \\\\"  # Answer line plus an empty line before the next problem

logger = logging.getLogger(__name__)


def start_row(operation: Operation) -> int:
    """First physical row to render; division skips the row of sentinels."""
    return 2 * (operation.fixed_cells // NUM_DIGITS)


def operand_row(problems: Sequence[Problem], operation: Operation, top: bool) -> str:
    if top:
        cells = [str(p.first) for p in problems]
    else:
        cells = [f"{operation.glyph} {p.second}" for p in problems]
    return CELL_SEP.join(cells) + ROW_END


def answer_rows(problems: Sequence[Problem], operation: Operation, include_solutions: bool) -> str:
    """
    Rules under each problem followed by the answer line.

    With solutions the answers are filled in, otherwise the line is left
    empty for handwritten answers. Both versions take the same height.
    """
    rules = "".join(f"\\cline{{{2 * col + 1}-{2 * col + 1}}} " for col in range(NUM_DIGITS))
    if not include_solutions:
        return rules + ANSWER_ROW_END
    answers = [str(operation.answer(p)) for p in problems]
    return rules + CELL_SEP.join(answers) + ANSWER_ROW_END


def render_page(table: ProblemTable, operation: Operation, include_solutions: bool) -> str:
    """
    Render `table` as one page of problems.

    The problems are laid out in the same 10x10 grid as the table, but each
    problem takes two rows (first operand, then operator and second operand)
    and there is an empty column between neighbouring problems, so the
    tabular has 19 columns. The page always ends with a page break.
    """
    lines: List[str] = ["\\begin{tabular}{" + "r" * NUM_COLUMNS + "}"]

    for physical_row in range(start_row(operation), PHYSICAL_ROWS):
        problems = table.row(physical_row // 2)
        if any(p.is_sentinel for p in problems):
            raise ValueError(f"Row {physical_row // 2} of the {operation.name.lower()} table holds a placeholder cell")

        top = physical_row % 2 == 0
        lines.append(operand_row(problems, operation, top))
        if not top:
            lines.append(answer_rows(problems, operation, include_solutions))

    lines.append("\\end{tabular}")
    lines.append("\\newpage")
    logger.debug(f"Rendered {operation.name.lower()} page (solutions={include_solutions})")
    return "\n".join(lines) + "\n"
