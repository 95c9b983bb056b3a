"""This module implements a recursive descent parser for cucumber expressions.

The informal grammar (whitespace is significant):

expression: (parameter | optional | alternation | text)*

alternation: word_part* "/" word_part* ("/" word_part*)*

word_part: parameter | optional | text

optional: "(" (parameter | text | "(" | "/")* ")"

parameter: "{" (text | "(" | ")" | "{" | "/")* "}"

text: TEXT | WHITE_SPACE | ")" | "}"

An alternation is bounded by whitespace (or the expression edges), i.e. it only
spans the word that contains the "/". Closing delimiters without a matching
opening delimiter are plain text, while an opening delimiter without a match is
an error.

All functions operate on an explicit `[start, stop)` range of token indexes and
keep no state between calls.

"""
import logging
from typing import Callable, Sequence

from . import config
from .error import CucumberExpressionError, missing_end_token
from .lexer import Token, TokenType, tokenize
from .node import Node, NodeType

logger = logging.getLogger(__name__)

# Top level parts before alternations are resolved. Whitespace and alternation
# tokens are kept as is, since they drive the alternation splitting.
_Item = Node | Token

_ContentParser = Callable[[str, Sequence[Token], int, int], list[Node]]


def _text_node(token: Token) -> Node:
    return Node.text(token.start, token.end, token.text)


def _parse_between(
    expression: str,
    tokens: Sequence[Token],
    index: int,
    stop: int,
    node_type: NodeType,
    begin: TokenType,
    end: TokenType,
    parse_content: _ContentParser,
) -> tuple[Node, int]:
    """Parse a bracketed node starting at the `begin` token at `index`.

    The node is closed by the first `end` token before `stop`.

    Returns:
        tuple[Node, int]: the node and the index of the first token after it

    Raises:
        ExpressionSyntaxError: if there is no closing token

    """
    close = next((i for i in range(index + 1, stop) if tokens[i].type is end), None)

    if close is None:
        raise missing_end_token(expression, begin, end, tokens[index])

    node = Node.composite(
        node_type,
        tokens[index].start,
        tokens[close].end,
        parse_content(expression, tokens, index + 1, close),
    )

    return node, close + 1


def _parse_parameter_content(
    expression: str, tokens: Sequence[Token], start: int, stop: int
) -> list[Node]:
    # Parameter names have no structure
    return [_text_node(token) for token in tokens[start:stop]]


def _parse_optional_content(
    expression: str, tokens: Sequence[Token], start: int, stop: int
) -> list[Node]:
    nodes: list[Node] = []
    index = start

    while index < stop:
        if tokens[index].type is TokenType.BEGIN_PARAMETER:
            node, index = _parse_parameter(expression, tokens, index, stop)
        else:
            # Nested optionals and alternations are not supported, so "(" and "/" are text
            node, index = _text_node(tokens[index]), index + 1

        nodes.append(node)

    return nodes


def _parse_parameter(
    expression: str, tokens: Sequence[Token], index: int, stop: int
) -> tuple[Node, int]:
    return _parse_between(
        expression,
        tokens,
        index,
        stop,
        NodeType.PARAMETER_NODE,
        TokenType.BEGIN_PARAMETER,
        TokenType.END_PARAMETER,
        _parse_parameter_content,
    )


def _parse_optional(
    expression: str, tokens: Sequence[Token], index: int, stop: int
) -> tuple[Node, int]:
    return _parse_between(
        expression,
        tokens,
        index,
        stop,
        NodeType.OPTIONAL_NODE,
        TokenType.BEGIN_OPTIONAL,
        TokenType.END_OPTIONAL,
        _parse_optional_content,
    )


def _parse_items(expression: str, tokens: Sequence[Token], start: int, stop: int) -> list[_Item]:
    items: list[_Item] = []
    index = start

    while index < stop:
        token = tokens[index]

        match token.type:
            case TokenType.BEGIN_PARAMETER:
                node, index = _parse_parameter(expression, tokens, index, stop)
                items.append(node)
            case TokenType.BEGIN_OPTIONAL:
                node, index = _parse_optional(expression, tokens, index, stop)
                items.append(node)
            case TokenType.WHITE_SPACE | TokenType.ALTERNATION:
                items.append(token)
                index += 1
            case _:
                # Text as well as unmatched closing delimiters
                items.append(_text_node(token))
                index += 1

    return items


def _is_alternation(item: _Item) -> bool:
    return isinstance(item, Token) and item.type is TokenType.ALTERNATION


def _as_node(item: _Item) -> Node:
    if isinstance(item, Token):
        return _text_node(item)

    return item


def _parse_alternation(word: Sequence[_Item]) -> Node:
    """Build an alternation node from a word containing at least one "/"."""
    word_start = word[0].start
    word_end = word[-1].end

    alternatives: list[Node] = []
    alternative: list[Node] = []
    alternative_start = word_start

    for item in word:
        if _is_alternation(item):
            alternatives.append(
                Node.composite(
                    NodeType.ALTERNATIVE_NODE, alternative_start, item.start, alternative
                )
            )
            alternative = []
            alternative_start = item.end
            continue

        alternative.append(_as_node(item))

    alternatives.append(
        Node.composite(NodeType.ALTERNATIVE_NODE, alternative_start, word_end, alternative)
    )

    return Node.composite(NodeType.ALTERNATION_NODE, word_start, word_end, alternatives)


def _parse_word(word: Sequence[_Item]) -> list[Node]:
    if not word:
        return []

    if any(_is_alternation(item) for item in word):
        return [_parse_alternation(word)]

    return [_as_node(item) for item in word]


def _resolve_alternations(items: Sequence[_Item]) -> list[Node]:
    """Split items into whitespace separated words and turn words with a "/"
    into alternations."""
    nodes: list[Node] = []
    word: list[_Item] = []

    for item in items:
        if isinstance(item, Token) and item.type is TokenType.WHITE_SPACE:
            nodes.extend(_parse_word(word))
            nodes.append(_text_node(item))
            word = []
            continue

        word.append(item)

    nodes.extend(_parse_word(word))

    return nodes


def parse_tokens(expression: str, tokens: Sequence[Token]) -> Node:
    """Build the syntax tree of an already tokenized expression.

    Args:
        expression (str): the expression source, used for error messages
        tokens (Sequence[Token]): tokens as returned by `tokenize`

    Raises:
        ExpressionSyntaxError: if an opening delimiter has no matching closing delimiter

    Returns:
        Node: the EXPRESSION_NODE root

    """
    if (
        len(tokens) < 2
        or tokens[0].type is not TokenType.START_OF_LINE
        or tokens[-1].type is not TokenType.END_OF_LINE
    ):
        raise ValueError("Tokens must start with START_OF_LINE and end with END_OF_LINE")

    items = _parse_items(expression, tokens, 1, len(tokens) - 1)

    return Node.composite(
        NodeType.EXPRESSION_NODE,
        tokens[0].start,
        tokens[-1].end,
        _resolve_alternations(items),
    )


def parse(expression: str) -> Node:
    """Public API to parse a cucumber expression.

    Args:
        expression (str): the expression

    Raises:
        ExpressionSyntaxError: on invalid escapes or unmatched opening delimiters.
            The message is a rendered diagnostic, `kind` and `column` are
            available as attributes.

    Returns:
        Node: the EXPRESSION_NODE root

    """
    tokens = tokenize(expression)

    try:
        return parse_tokens(expression, tokens)
    except CucumberExpressionError:
        raise
    except Exception as e:
        if config.TRACE_LOGGING:
            logger.debug("Internal error parsing expression", exc_info=True)
        raise CucumberExpressionError(
            "Failed to parse a cucumber expression due to internal error. Please report it!"
        ) from e
