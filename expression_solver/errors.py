"""Exception hierarchy for parsing and evaluating expressions."""

from typing import Optional


class ExpressionError(ValueError):
    """Base class for every error raised by expression_solver."""
    pass


class ParseError(ExpressionError):
    """Raised when the input text cannot be turned into an expression tree."""

    def __init__(self, message: str, text: Optional[str] = None):
        if text is not None:
            message = f"{message} in {text!r}"
        super().__init__(message)
        self.text = text


class MalformedLiteralError(ParseError):
    """A leaf is neither the variable 'x' nor a floating-point literal."""
    pass


class UnmatchedParenthesisError(ParseError):
    """An opening or closing parenthesis has no partner."""

    def __init__(self, text: str, position: int):
        super().__init__(f"Unmatched parenthesis at position {position}", text)
        self.position = position


class UnboundVariableError(ExpressionError):
    """The variable 'x' was reached during closed-form evaluation."""

    def __init__(self, message: str = "Variable 'x' has no binding"):
        super().__init__(message)
