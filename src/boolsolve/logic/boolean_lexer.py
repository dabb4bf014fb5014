from dataclasses import dataclass
from enum import Enum

from boolsolve.logic.errors import ExpressionSyntaxError

AND_SYMBOL = "·"


class TokenType(Enum):
    OR = "+"
    AND = AND_SYMBOL
    NOT = "!"
    LPAREN = "("
    RPAREN = ")"
    LITERAL = "literal"
    VAR = "var"


SYMBOLS = {
    "+": TokenType.OR,
    AND_SYMBOL: TokenType.AND,
    "!": TokenType.NOT,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    value: str
    position: int

    def __repr__(self) -> str:
        return f"{self.value!r}@{self.position}"


class Lexer:
    """Splits an expression into tokens. Every letter is a variable on its own."""

    def __init__(self, expression: str):
        self.expression = expression
        self.pos = 0

    def lex(self) -> list[Token]:
        tokens = []
        while (token := self.next_token()) is not None:
            tokens.append(token)
        return tokens

    def next_token(self) -> Token | None:
        self.skip_whitespace()
        if self.pos >= len(self.expression):
            return None
        char = self.expression[self.pos]
        start = self.pos
        self.pos += 1
        if char in SYMBOLS:
            return Token(SYMBOLS[char], char, start)
        if char in ("0", "1"):
            return Token(TokenType.LITERAL, char, start)
        if char.isascii() and char.isalpha():
            return Token(TokenType.VAR, char, start)
        raise ExpressionSyntaxError(
            f"Unrecognized character {char!r}", self.expression, start
        )

    def skip_whitespace(self) -> None:
        while self.pos < len(self.expression) and self.expression[self.pos].isspace():
            self.pos += 1
