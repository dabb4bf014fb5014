"""Query-string front end: reads `expr` and an optional `mode=tt` and renders an HTML page."""

import logging
from urllib.parse import parse_qs

from boolsolve.evaluation.evaluate import evaluate
from boolsolve.evaluation.truth_table import DEFAULT_MAX_VARIABLES, truth_table
from boolsolve.logic.errors import ExpressionSyntaxError, LimitExceeded
from boolsolve.logic.normalize import parse_normalized
from boolsolve.rendering import (
    render_error_html,
    render_result_html,
    render_truth_table_html,
)

logger = logging.getLogger(__name__)

TRUTH_TABLE_MODE = "tt"


def get_query_param(query: str, name: str) -> str | None:
    """Returns the URL-decoded value of the first `name` parameter, or None if it is absent."""
    values = parse_qs(query, keep_blank_values=True).get(name)
    return values[0] if values else None


def handle_query(
    query: str | None, max_variables: int | None = DEFAULT_MAX_VARIABLES
) -> tuple[int, str]:
    """Handles one request.

    Returns:
        An exit status (0 on success, 1 on error) and the HTML page to send.
    """
    if not query:
        return 1, render_error_html("No query string provided.")
    expression = get_query_param(query, "expr")
    if expression is None:
        return 1, render_error_html("No expression provided.")

    mode = get_query_param(query, "mode")
    try:
        expr = parse_normalized(expression)
        if mode == TRUTH_TABLE_MODE:
            table = truth_table(expr, max_variables=max_variables)
            return 0, render_truth_table_html(expression, table)
        return 0, render_result_html(expression, evaluate(expr))
    except (ExpressionSyntaxError, LimitExceeded) as e:
        logger.warning("Rejected expression %r: %s", expression, e)
        return 1, render_error_html(str(e))
