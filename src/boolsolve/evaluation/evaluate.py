from collections.abc import Mapping

from boolsolve.logic.assignment import Assignment
from boolsolve.logic.boolean_parser import Node

DEFAULT_VALUE = True


def as_assignment(assignment: Assignment | Mapping[str, bool] | None) -> Assignment:
    if assignment is None:
        return Assignment()
    if isinstance(assignment, Assignment):
        return assignment
    return Assignment.from_mapping(assignment)


def evaluate(
    expr: Node,
    assignment: Assignment | Mapping[str, bool] | None = None,
    default: bool = DEFAULT_VALUE,
) -> bool:
    """Evaluates an expression tree.

    Args:
        expr: The parsed expression.
        assignment: Truth values for (some of) the variables of `expr`.
        default: Value of any variable missing from `assignment`. Defaults to true,
            i.e. with no assignment every variable is assumed true.

    Returns:
        The truth value of `expr`.
    """
    return expr.eval(as_assignment(assignment), default)
