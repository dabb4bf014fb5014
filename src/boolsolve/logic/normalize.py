"""Rewrites complement notation (A' and A with a combining overline) into prefix negation."""

import re

from boolsolve.logic.boolean_parser import Node, parse

COMBINING_OVERLINE = "̅"
COMPLEMENT_REGEX = re.compile(rf"([A-Za-z])['{COMBINING_OVERLINE}]")


def normalize_complements(expression: str) -> str:
    """Replaces every `X'` and `X̅` with `!X`. Repeated marks stack, so `A''` becomes `!!A`."""
    while True:
        rewritten = COMPLEMENT_REGEX.sub(r"!\1", expression)
        if rewritten == expression:
            return rewritten
        expression = rewritten


def parse_normalized(expression: str) -> Node:
    return parse(normalize_complements(expression))
