"""Brute-force truth-table enumeration."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

import numpy as np
import pandas as pd

from boolsolve.logic.assignment import Assignment
from boolsolve.logic.boolean_parser import Node
from boolsolve.logic.errors import LimitExceeded

logger = logging.getLogger(__name__)

# At 20 variables a table holds a 20 MiB bit matrix and a 1 MiB result column.
# Rows are only materialised when accessed.
DEFAULT_MAX_VARIABLES = 20
WARN_VARIABLES = 16
RESULT_COLUMN = "Result"


@dataclass(frozen=True, eq=False)
class TruthTableRow:
    variables: tuple[str, ...]
    bits: np.ndarray
    result: bool

    @property
    def assignment(self) -> Assignment:
        return Assignment.from_bits(self.variables, self.bits)

    def values(self) -> tuple[bool, ...]:
        return tuple(bool(bit) for bit in self.bits)


@dataclass(frozen=True, eq=False)
class TruthTable:
    """All assignments of `variables` as rows of the read-only `matrix`, with the value of
    `expression` for each row in `result_column`."""

    expression: Node
    variables: tuple[str, ...]
    matrix: np.ndarray
    result_column: np.ndarray

    def __len__(self):
        return len(self.result_column)

    def __iter__(self) -> Iterator[TruthTableRow]:
        return (self[i] for i in range(len(self)))

    def __getitem__(self, index: int) -> TruthTableRow:
        return TruthTableRow(
            self.variables, self.matrix[index], bool(self.result_column[index])
        )

    def results(self) -> list[bool]:
        return self.result_column.tolist()

    def minterms(self) -> list[int]:
        """Indices of the rows that evaluate to true."""
        return np.flatnonzero(self.result_column).tolist()

    def to_dataframe(self) -> pd.DataFrame:
        """One 0/1 column per variable, in first-occurrence order, followed by the result."""
        df = pd.DataFrame(np.array(self.matrix), columns=list(self.variables))
        df[RESULT_COLUMN] = self.result_column.astype(np.int64)
        return df


def truth_table(
    expr: Node, max_variables: int | None = DEFAULT_MAX_VARIABLES
) -> TruthTable:
    """Evaluates `expr` under all 2^n assignments of its n distinct variables.

    Row i assigns bit (n-1-j) of i to the j-th variable, so the first variable is the most
    significant bit. Rows are returned in increasing i. All rows are evaluated at once, one
    boolean column per variable.

    Raises:
        LimitExceeded: if n is larger than `max_variables`. Pass None to disable the check.
    """
    variables = expr.variables()
    num_variables = len(variables)
    if max_variables is not None and num_variables > max_variables:
        raise LimitExceeded(num_variables, max_variables)
    if num_variables > WARN_VARIABLES:
        logger.warning(
            "Enumerating %s rows for %s variables.", 2**num_variables, num_variables
        )
    logger.debug("Building truth table over variables %s", variables)

    matrix = Assignment.bit_matrix(num_variables)
    flags = matrix.view(bool)
    columns = {v: flags[:, j] for j, v in enumerate(variables)}
    result_column = np.array(expr.eval_columns(columns, len(matrix)), dtype=bool)
    result_column.setflags(write=False)
    return TruthTable(expr, variables, matrix, result_column)
