"""Helpers for the interactive command-line front end."""

import logging
from typing import TextIO

from boolsolve.evaluation.evaluate import DEFAULT_VALUE, evaluate
from boolsolve.evaluation.truth_table import DEFAULT_MAX_VARIABLES, truth_table
from boolsolve.logic.assignment import Assignment
from boolsolve.logic.boolean_parser import parse
from boolsolve.logic.normalize import normalize_complements
from boolsolve.rendering import (
    render_json,
    render_result_html,
    render_result_text,
    render_table_csv,
    render_table_text,
    render_truth_table_html,
)

logger = logging.getLogger(__name__)

BANNER = (
    "Boolean Expression Solver\n"
    "-------------------------\n"
    "Enter a Boolean expression (use '+' for OR, '·' for AND, '!' for NOT):"
)

MODES = ("eval", "tt")
FORMATS = ("text", "json", "html", "csv")


def read_expression(stream: TextIO, out: TextIO | None = None) -> str:
    if out is not None:
        print(BANNER, file=out)
    line = stream.readline()
    if not line:
        raise EOFError("Error reading expression.")
    return line.rstrip("\n")


def solve(
    expression: str,
    mode: str = "eval",
    assignment: Assignment | None = None,
    default: bool = DEFAULT_VALUE,
    normalize: bool = True,
    max_variables: int | None = DEFAULT_MAX_VARIABLES,
    fmt: str = "text",
) -> str:
    """Parses `expression`, evaluates it or builds its truth table, and renders the outcome.

    Raises:
        ExpressionSyntaxError: if the expression is malformed.
        LimitExceeded: if the truth table would have too many variables.
        ValueError: for an unknown mode or format.
    """
    if mode not in MODES:
        raise ValueError(f"Unknown mode {mode!r}. Expected one of {MODES}.")
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format {fmt!r}. Expected one of {FORMATS}.")
    if fmt == "csv" and mode != "tt":
        raise ValueError("CSV output is only available for truth tables.")

    text = normalize_complements(expression) if normalize else expression
    expr = parse(text)
    logger.info("Solving %s in mode %s", expr, mode)

    if mode == "tt":
        table = truth_table(expr, max_variables=max_variables)
        match fmt:
            case "json":
                return render_json(expression, table)
            case "html":
                return render_truth_table_html(expression, table)
            case "csv":
                return render_table_csv(table)
            case _:
                return render_table_text(table)

    result = evaluate(expr, assignment, default=default)
    match fmt:
        case "json":
            return render_json(expression, result)
        case "html":
            return render_result_html(expression, result)
        case _:
            return render_result_text(result)
