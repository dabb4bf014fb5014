from .assignment import Assignment
from .boolean_parser import (
    AndNode,
    BinaryNode,
    LiteralNode,
    Node,
    NotNode,
    OrNode,
    VarNode,
    parse,
    variable_set,
)
from .errors import ExpressionSyntaxError, LimitExceeded
from .normalize import normalize_complements, parse_normalized

__all__ = [
    "Assignment",
    "Node",
    "LiteralNode",
    "VarNode",
    "NotNode",
    "BinaryNode",
    "AndNode",
    "OrNode",
    "parse",
    "variable_set",
    "ExpressionSyntaxError",
    "LimitExceeded",
    "normalize_complements",
    "parse_normalized",
]
