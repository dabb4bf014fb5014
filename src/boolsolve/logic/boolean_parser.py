import functools
import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, NoReturn

import numpy as np

from boolsolve.logic.boolean_lexer import AND_SYMBOL, Lexer, Token, TokenType
from boolsolve.logic.errors import ExpressionSyntaxError

if TYPE_CHECKING:
    from boolsolve.logic.assignment import Assignment

logger = logging.getLogger(__name__)


class Parser:
    """
    Recursive-descent parser for the grammar

        expression = term { '+' term }
        term       = factor { '·' factor }
        factor     = '!' factor | '(' expression ')' | '0' | '1' | letter
    """

    def __init__(self, expression: str):
        self.expression = expression
        lexer = Lexer(expression)
        self.tokens: list[Token] = lexer.lex()
        self.pos = 0
        self.current_token: Token | None = (
            self.tokens[self.pos] if self.tokens else None
        )

    def parse(self) -> "Node":
        result = self.parse_expression()
        if self.current_token is not None:
            self.error(f"Unexpected token at the end: {self.current_token.value!r}")
        return result

    def parse_expression(self) -> "Node":
        node = self.parse_and()
        while self.match(TokenType.OR):
            right = self.parse_and()
            node = OrNode(node, right)
        return node

    def parse_and(self) -> "Node":
        node = self.parse_primary()
        while self.match(TokenType.AND):
            right = self.parse_primary()
            node = AndNode(node, right)
        return node

    def parse_primary(self) -> "Node":
        if self.match(TokenType.NOT):
            return NotNode(self.parse_primary())
        elif self.match(TokenType.LPAREN):
            node = self.parse_expression()
            if not self.match(TokenType.RPAREN):
                self.error("Expected ')'")
            return node
        elif self.current_token and self.current_token.type == TokenType.LITERAL:
            node = LiteralNode(self.current_token.value == "1")
            self.next_token()
            return node
        else:
            return self.parse_variable()

    def parse_variable(self) -> "Node":
        if self.current_token and self.current_token.type == TokenType.VAR:
            node = VarNode(self.current_token.value)
            self.next_token()
            return node
        elif self.current_token is None:
            self.error("Unexpected end of expression")
        else:
            self.error(f"Unexpected token: {self.current_token.value!r}")

    def match(self, token_type: TokenType) -> bool:
        if self.current_token and self.current_token.type == token_type:
            self.next_token()
            return True
        return False

    def next_token(self) -> None:
        self.pos += 1
        if self.pos < len(self.tokens):
            self.current_token = self.tokens[self.pos]
        else:
            self.current_token = None

    def error(self, message: str) -> NoReturn:
        position = (
            self.current_token.position
            if self.current_token is not None
            else len(self.expression)
        )
        raise ExpressionSyntaxError(message, self.expression, position)


class Node(ABC):
    @abstractmethod
    def eval(self, assignment: "Assignment", default: bool = True) -> bool:
        pass

    @abstractmethod
    def eval_columns(
        self, columns: Mapping[str, np.ndarray], num_rows: int, default: bool = True
    ) -> np.ndarray:
        """Evaluates the expression for many assignments at once. `columns` maps each variable
        to a boolean array with one entry per assignment."""

    def variables(self) -> tuple[str, ...]:
        """Distinct variable names in order of first occurrence."""
        seen: dict[str, None] = {}
        for name in self._iter_variables():
            seen.setdefault(name, None)
        return tuple(seen)

    @abstractmethod
    def _iter_variables(self):
        pass


@dataclass(frozen=True)
class LiteralNode(Node):
    value: bool

    def __repr__(self) -> str:
        return "1" if self.value else "0"

    def eval(self, assignment: "Assignment", default: bool = True) -> bool:
        return self.value

    def eval_columns(
        self, columns: Mapping[str, np.ndarray], num_rows: int, default: bool = True
    ) -> np.ndarray:
        return np.full(num_rows, self.value, dtype=bool)

    def _iter_variables(self):
        return iter(())


@dataclass(frozen=True)
class VarNode(Node):
    name: str

    def __repr__(self) -> str:
        return self.name

    def eval(self, assignment: "Assignment", default: bool = True) -> bool:
        return assignment.value(self.name, default)

    def eval_columns(
        self, columns: Mapping[str, np.ndarray], num_rows: int, default: bool = True
    ) -> np.ndarray:
        if self.name in columns:
            return columns[self.name]
        return np.full(num_rows, default, dtype=bool)

    def _iter_variables(self):
        yield self.name


@dataclass(frozen=True)
class NotNode(Node):
    operand: Node

    def __repr__(self) -> str:
        return f"!{self.operand}"

    def eval(self, assignment: "Assignment", default: bool = True) -> bool:
        return not self.operand.eval(assignment, default)

    def eval_columns(
        self, columns: Mapping[str, np.ndarray], num_rows: int, default: bool = True
    ) -> np.ndarray:
        return np.logical_not(self.operand.eval_columns(columns, num_rows, default))

    def _iter_variables(self):
        yield from self.operand._iter_variables()


@dataclass(frozen=True, eq=False)
class BinaryNode(Node):
    """A binary operator. Chains such as `A · B · C` nest to the left, so every walk over a
    node goes through `operands`, which follows the left spine in a loop."""

    left: Node
    right: Node

    symbol: ClassVar[str]

    @functools.cached_property
    def operands(self) -> tuple[Node, ...]:
        """Operands of the chain of same-type nodes rooted here, from left to right."""
        right_operands = []
        node: Node = self
        while type(node) is type(self):
            right_operands.append(node.right)
            node = node.left
        return (node, *reversed(right_operands))

    def __repr__(self) -> str:
        return "(" + f" {self.symbol} ".join(map(repr, self.operands)) + ")"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.operands == other.operands

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.operands))

    def _iter_variables(self):
        for operand in self.operands:
            yield from operand._iter_variables()


@dataclass(frozen=True, eq=False, repr=False)
class AndNode(BinaryNode):
    symbol: ClassVar[str] = AND_SYMBOL

    def eval(self, assignment: "Assignment", default: bool = True) -> bool:
        return all(operand.eval(assignment, default) for operand in self.operands)

    def eval_columns(
        self, columns: Mapping[str, np.ndarray], num_rows: int, default: bool = True
    ) -> np.ndarray:
        return functools.reduce(
            np.logical_and,
            (op.eval_columns(columns, num_rows, default) for op in self.operands),
        )


@dataclass(frozen=True, eq=False, repr=False)
class OrNode(BinaryNode):
    symbol: ClassVar[str] = "+"

    def eval(self, assignment: "Assignment", default: bool = True) -> bool:
        return any(operand.eval(assignment, default) for operand in self.operands)

    def eval_columns(
        self, columns: Mapping[str, np.ndarray], num_rows: int, default: bool = True
    ) -> np.ndarray:
        return functools.reduce(
            np.logical_or,
            (op.eval_columns(columns, num_rows, default) for op in self.operands),
        )


@functools.lru_cache(maxsize=10_000)
def parse(expression: str) -> Node:
    try:
        node = Parser(expression).parse()
    except RecursionError:
        raise ExpressionSyntaxError(
            "Expression nested too deeply", expression
        ) from None
    logger.debug("Parsed %r as %r", expression, node)
    return node


def variable_set(expression: str) -> tuple[str, ...]:
    """Distinct variable letters of an expression in order of first occurrence."""
    seen: dict[str, None] = {}
    for token in Lexer(expression).lex():
        if token.type == TokenType.VAR:
            seen.setdefault(token.value, None)
    return tuple(seen)
