class ExpressionSyntaxError(SyntaxError):
    """Raised when an expression violates the grammar. Carries the offending position."""

    def __init__(self, message: str, expression: str = "", position: int | None = None):
        super().__init__(message)
        self.message = message
        self.expression = expression
        self.position = position

    def __str__(self) -> str:
        if self.position is None:
            return self.message
        return f"{self.message} at position {self.position}"


class LimitExceeded(Exception):
    """Raised when a truth table would need more variables than allowed."""

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"Expression has {count} distinct variables, the limit is {limit}."
        )
        self.count = count
        self.limit = limit
