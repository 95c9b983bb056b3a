from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from .helpers import format_problem

if TYPE_CHECKING:
    from .lexer import Token, TokenType


class CucumberExpressionError(Exception):
    """Base class for all cukexpr errors."""

    def __init__(self, message: str, *args: object) -> None:
        super().__init__(message, *args)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message})"


class InvalidNodeError(CucumberExpressionError):
    """Raised when a Node is constructed with an inconsistent set of fields."""


@enum.unique
class SyntaxErrorKind(enum.Enum):
    ESCAPED_END_OF_LINE = enum.auto()
    CANNOT_ESCAPE_NON_RESERVED_CHARACTER = enum.auto()
    MISSING_END_TOKEN = enum.auto()


class ExpressionSyntaxError(CucumberExpressionError):
    """Raised when a cucumber expression can not be tokenized or parsed.

    The message is a fully rendered diagnostic pointing at the offending column.
    The structured parts are available as attributes for programmatic handling.

    """

    def __init__(
        self,
        kind: SyntaxErrorKind,
        expression: str,
        column: int,
        problem: str,
        solution: str,
    ) -> None:
        self.kind = kind
        self.expression = expression
        self.column = column
        self.problem = problem
        self.solution = solution

        super().__init__(format_problem(expression, column, problem, solution))

    def __reduce__(self) -> tuple[type[ExpressionSyntaxError], tuple[object, ...]]:
        return (
            self.__class__,
            (self.kind, self.expression, self.column, self.problem, self.solution),
        )


def escaped_end_of_line(expression: str) -> ExpressionSyntaxError:
    return ExpressionSyntaxError(
        SyntaxErrorKind.ESCAPED_END_OF_LINE,
        expression,
        len(expression) + 1,
        "The end of line can not be escaped.",
        "You can use '\\\\' to escape the the '\\'",
    )


def cant_escape(expression: str, index: int) -> ExpressionSyntaxError:
    """Error for an escaped character that is not reserved.

    Args:
        expression (str): the expression source
        index (int): zero-based index of the escaped character (not the backslash)

    """
    return ExpressionSyntaxError(
        SyntaxErrorKind.CANNOT_ESCAPE_NON_RESERVED_CHARACTER,
        expression,
        index + 1,
        "Only the characters '{', '}', '(', ')', '\\', '/' and whitespace can be escaped.",
        "If you did mean to use an '\\' you can use '\\\\' to escape it",
    )


def missing_end_token(
    expression: str, begin: TokenType, end: TokenType, current: Token
) -> ExpressionSyntaxError:
    """Error for an opening delimiter without its closing counterpart.

    Args:
        expression (str): the expression source
        begin (TokenType): the opening token type
        end (TokenType): the expected closing token type
        current (Token): the unmatched opening token

    """
    return ExpressionSyntaxError(
        SyntaxErrorKind.MISSING_END_TOKEN,
        expression,
        current.start + 1,
        f"The '{begin.symbol}' does not have a matching '{end.symbol}'.",
        f"If you did not intend to use {begin.purpose} you can use "
        f"'\\{begin.symbol}' to escape the {begin.purpose}",
    )
