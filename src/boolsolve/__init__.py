"""Public API for the boolsolve package."""

from boolsolve.evaluation import TruthTable, evaluate, truth_table
from boolsolve.hydra_utils.utils import register_custom_resolvers
from boolsolve.logic import (
    Assignment,
    ExpressionSyntaxError,
    LimitExceeded,
    normalize_complements,
    parse,
)

register_custom_resolvers()

__all__ = [
    "parse",
    "evaluate",
    "truth_table",
    "TruthTable",
    "Assignment",
    "ExpressionSyntaxError",
    "LimitExceeded",
    "normalize_complements",
]
