import logging

import pytest
from cukexpr.error import CucumberExpressionError, ExpressionSyntaxError, SyntaxErrorKind
from cukexpr.lexer import Token, TokenType, tokenize


def test_token_type_symbol_and_purpose():
    assert TokenType.BEGIN_OPTIONAL.symbol == "("
    assert TokenType.END_OPTIONAL.symbol == ")"
    assert TokenType.BEGIN_PARAMETER.symbol == "{"
    assert TokenType.END_PARAMETER.symbol == "}"
    assert TokenType.ALTERNATION.symbol == "/"

    assert TokenType.BEGIN_OPTIONAL.purpose == "optional text"
    assert TokenType.END_OPTIONAL.purpose == "optional text"
    assert TokenType.BEGIN_PARAMETER.purpose == "a parameter"
    assert TokenType.END_PARAMETER.purpose == "a parameter"
    assert TokenType.ALTERNATION.purpose == "alternation"


@pytest.mark.parametrize(
    "tok_type",
    [
        TokenType.START_OF_LINE,
        TokenType.END_OF_LINE,
        TokenType.WHITE_SPACE,
        TokenType.TEXT,
    ],
)
def test_token_type_without_symbol(tok_type: TokenType):
    with pytest.raises(ValueError, match=f"{tok_type.name} does not have a symbol"):
        tok_type.symbol

    with pytest.raises(ValueError, match=f"{tok_type.name} does not have a purpose"):
        tok_type.purpose


def test_token_types_are_distinct():
    assert len(set(TokenType)) == 9


def test_token_equality():
    token1 = Token(TokenType.TEXT, "test", 0, 4)
    token2 = Token(TokenType.TEXT, "test", 2, 6)
    token3 = Token(TokenType.TEXT, "test", 0, 4)
    token4 = Token(TokenType.WHITE_SPACE, "test", 0, 4)

    assert token1 == token3
    assert token1 != token2
    assert token1 != token4
    assert hash(token1) == hash(token3)

    # Matching by type only
    assert token1 == TokenType.TEXT
    assert token1 != TokenType.WHITE_SPACE


def test_empty_string():
    assert tokenize("") == (
        Token(TokenType.START_OF_LINE, "", 0, 0),
        Token(TokenType.END_OF_LINE, "", 0, 0),
    )


def test_phrase():
    assert tokenize("three blind mice") == (
        Token(TokenType.START_OF_LINE, "", 0, 0),
        Token(TokenType.TEXT, "three", 0, 5),
        Token(TokenType.WHITE_SPACE, " ", 5, 6),
        Token(TokenType.TEXT, "blind", 6, 11),
        Token(TokenType.WHITE_SPACE, " ", 11, 12),
        Token(TokenType.TEXT, "mice", 12, 16),
        Token(TokenType.END_OF_LINE, "", 16, 16),
    )


def test_whitespace_run_is_a_single_token():
    assert tokenize("a \t b") == (
        Token(TokenType.START_OF_LINE, "", 0, 0),
        Token(TokenType.TEXT, "a", 0, 1),
        Token(TokenType.WHITE_SPACE, " \t ", 1, 4),
        Token(TokenType.TEXT, "b", 4, 5),
        Token(TokenType.END_OF_LINE, "", 5, 5),
    )


def test_structural_characters():
    assert [t.type for t in tokenize("(){}/")] == [
        TokenType.START_OF_LINE,
        TokenType.BEGIN_OPTIONAL,
        TokenType.END_OPTIONAL,
        TokenType.BEGIN_PARAMETER,
        TokenType.END_PARAMETER,
        TokenType.ALTERNATION,
        TokenType.END_OF_LINE,
    ]


def test_consecutive_structural_characters_are_not_merged():
    assert tokenize("//")[1:-1] == (
        Token(TokenType.ALTERNATION, "/", 0, 1),
        Token(TokenType.ALTERNATION, "/", 1, 2),
    )


def test_parameter():
    assert tokenize("{string}")[1:-1] == (
        Token(TokenType.BEGIN_PARAMETER, "{", 0, 1),
        Token(TokenType.TEXT, "string", 1, 7),
        Token(TokenType.END_PARAMETER, "}", 7, 8),
    )


def test_escaped_optional():
    assert tokenize("\\(blind\\)")[1:-1] == (Token(TokenType.TEXT, "(blind)", 0, 9),)


@pytest.mark.parametrize("char", ["(", ")", "{", "}", "/", "\\", " "])
def test_escaped_reserved_characters_are_text(char: str):
    assert tokenize(f"a\\{char}b")[1:-1] == (Token(TokenType.TEXT, f"a{char}b", 0, 4),)


def test_escaped_whitespace_joins_text():
    assert tokenize("blind\\ mice")[1:-1] == (Token(TokenType.TEXT, "blind mice", 0, 11),)


def test_escaped_end_of_line():
    with pytest.raises(ExpressionSyntaxError) as excinfo:
        tokenize("\\")

    assert excinfo.value.kind is SyntaxErrorKind.ESCAPED_END_OF_LINE
    assert excinfo.value.column == 2


def test_escape_non_reserved_character():
    with pytest.raises(ExpressionSyntaxError) as excinfo:
        tokenize("abc\\[")

    assert excinfo.value.kind is SyntaxErrorKind.CANNOT_ESCAPE_NON_RESERVED_CHARACTER
    assert excinfo.value.column == 5


def test_first_escape_error_wins():
    with pytest.raises(ExpressionSyntaxError) as excinfo:
        tokenize("\\[ \\")

    assert excinfo.value.kind is SyntaxErrorKind.CANNOT_ESCAPE_NON_RESERVED_CHARACTER
    assert excinfo.value.column == 2


@pytest.mark.parametrize(
    "expression, kind, column",
    [
        ("a b\\[ c\\", SyntaxErrorKind.CANNOT_ESCAPE_NON_RESERVED_CHARACTER, 5),
        ("{a\\b} \\(", SyntaxErrorKind.CANNOT_ESCAPE_NON_RESERVED_CHARACTER, 4),
        ("a\\ b\\", SyntaxErrorKind.ESCAPED_END_OF_LINE, 6),
    ],
)
def test_scanning_stops_at_first_escape_error(
    expression: str, kind: SyntaxErrorKind, column: int
):
    with pytest.raises(ExpressionSyntaxError) as excinfo:
        tokenize(expression)

    assert excinfo.value.kind is kind
    assert excinfo.value.column == column


def test_non_string_expression_is_rejected():
    with pytest.raises(TypeError):
        tokenize(None)  # type: ignore[arg-type]

    with pytest.raises(TypeError):
        tokenize(b"three blind mice")  # type: ignore[arg-type]


def test_internal_error_is_wrapped(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, cukexpr_config
):
    import cukexpr.lexer

    def broken(char: str) -> TokenType:
        raise RuntimeError("boom")

    monkeypatch.setattr(cukexpr.lexer, "_char_token_type", broken)

    with caplog.at_level(logging.DEBUG, logger="cukexpr.lexer"):
        with cukexpr_config(logging=True):
            with pytest.raises(CucumberExpressionError) as excinfo:
                tokenize("three blind mice")

    assert not isinstance(excinfo.value, ExpressionSyntaxError)
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    assert "internal error" in str(excinfo.value)

    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.DEBUG
    assert caplog.records[0].exc_info is not None
    assert caplog.records[0].exc_info[0] is RuntimeError


def test_internal_error_is_not_logged_by_default(
    monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, cukexpr_config
):
    import cukexpr.lexer

    def broken(char: str) -> TokenType:
        raise RuntimeError("boom")

    monkeypatch.setattr(cukexpr.lexer, "_char_token_type", broken)

    with caplog.at_level(logging.DEBUG, logger="cukexpr.lexer"):
        with cukexpr_config(logging=False):
            with pytest.raises(CucumberExpressionError):
                tokenize("three blind mice")

    assert not caplog.records
