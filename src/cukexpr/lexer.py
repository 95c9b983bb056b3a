"""Tokenizer for cucumber expressions.

The lexer splits an expression into whitespace runs, text runs and single
character structural tokens. Escapes are resolved here: an escaped reserved
character (or whitespace) becomes part of the surrounding text token, while the
token offsets still cover the escaping backslash in the original source.

"""
from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, NamedTuple, cast

from . import config
from .error import CucumberExpressionError, cant_escape, escaped_end_of_line

logger = logging.getLogger(__name__)


class TokenType(Enum):
    def __new__(cls, symbol: str | None = None, purpose: str | None = None) -> "TokenType":
        obj = object.__new__(cls)
        obj._value_ = len(cls.__members__) + 1
        obj._symbol = symbol  # type: ignore[attr-defined]
        obj._purpose = purpose  # type: ignore[attr-defined]
        return obj

    @property
    def symbol(self) -> str:
        """The delimiter character of a structural token type.

        Raises:
            ValueError: if the token type is not structural

        """
        symbol = cast("str | None", self._symbol)  # type: ignore[attr-defined]
        if symbol is None:
            raise ValueError(f"{self.name} does not have a symbol")

        return symbol

    @property
    def purpose(self) -> str:
        """What a structural token type is used for, as used in error messages.

        Raises:
            ValueError: if the token type is not structural

        """
        purpose = cast("str | None", self._purpose)  # type: ignore[attr-defined]
        if purpose is None:
            raise ValueError(f"{self.name} does not have a purpose")

        return purpose

    START_OF_LINE = ()
    END_OF_LINE = ()
    WHITE_SPACE = ()
    BEGIN_OPTIONAL = ("(", "optional text")
    END_OPTIONAL = (")", "optional text")
    BEGIN_PARAMETER = ("{", "a parameter")
    END_PARAMETER = ("}", "a parameter")
    ALTERNATION = ("/", "alternation")
    TEXT = ()


_STRUCTURAL_TOKEN_TYPES = {
    tok_type.symbol: tok_type
    for tok_type in (
        TokenType.BEGIN_OPTIONAL,
        TokenType.END_OPTIONAL,
        TokenType.BEGIN_PARAMETER,
        TokenType.END_PARAMETER,
        TokenType.ALTERNATION,
    )
}

_ESCAPE = "\\"

# Besides whitespace
_ESCAPABLE_CHARS = frozenset((*_STRUCTURAL_TOKEN_TYPES, _ESCAPE))

# Consecutive characters of these types are collected into a single token
_RUN_TOKEN_TYPES = (TokenType.WHITE_SPACE, TokenType.TEXT)


class Token(NamedTuple):
    type: TokenType
    text: str
    start: int
    end: int

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r}, {self.start}, {self.end})"

    def __eq__(self, value: object) -> bool:
        # Allow "matching" with TokenType by type only
        if isinstance(value, TokenType):
            return self.type is value

        if isinstance(value, Token):
            return tuple(self) == tuple(value)

        return NotImplemented

    def __ne__(self, value: object) -> bool:
        if isinstance(value, TokenType):
            return self.type is not value

        if isinstance(value, Token):
            return tuple(self) != tuple(value)

        return NotImplemented

    __hash__ = tuple.__hash__


def _char_token_type(char: str) -> TokenType:
    if char.isspace():
        return TokenType.WHITE_SPACE

    return _STRUCTURAL_TOKEN_TYPES.get(char, TokenType.TEXT)


def _scan(text: str) -> Iterator[Token]:
    yield Token(TokenType.START_OF_LINE, "", 0, 0)

    buffer: list[str] = []
    buffer_type = TokenType.TEXT
    buffer_start = 0
    escaped = False

    for index, char in enumerate(text):
        if escaped:
            if not (char.isspace() or char in _ESCAPABLE_CHARS):
                raise cant_escape(text, index)

            escaped = False
            char_type = TokenType.TEXT
            # Token offsets cover the backslash as well
            char_start = index - 1
        elif char == _ESCAPE:
            escaped = True
            continue
        else:
            char_type = _char_token_type(char)
            char_start = index

        if buffer and (char_type is not buffer_type or char_type not in _RUN_TOKEN_TYPES):
            yield Token(buffer_type, "".join(buffer), buffer_start, char_start)
            buffer = []

        if not buffer:
            buffer_type = char_type
            buffer_start = char_start

        buffer.append(char)

    if escaped:
        raise escaped_end_of_line(text)

    if buffer:
        yield Token(buffer_type, "".join(buffer), buffer_start, len(text))

    yield Token(TokenType.END_OF_LINE, "", len(text), len(text))


def tokenize(expression: str) -> tuple[Token, ...]:
    """Public API to tokenize a cucumber expression.

    Args:
        expression (str): the expression

    Raises:
        TypeError: if expression is not a string
        ExpressionSyntaxError: on an escaped end of line or an escaped
            non-reserved character. Scanning stops at the first one.

    Returns:
        tuple[Token, ...]: the tokens, starting with START_OF_LINE and ending with END_OF_LINE

    """
    if not isinstance(expression, str):
        raise TypeError(f"Expected a string expression, got {type(expression).__name__}")

    try:
        return tuple(_scan(expression))
    except CucumberExpressionError:
        raise
    except Exception as e:
        if config.TRACE_LOGGING:
            logger.debug("Internal error tokenizing expression", exc_info=True)
        raise CucumberExpressionError(
            "Failed to tokenize a cucumber expression due to internal error. Please report it!"
        ) from e
