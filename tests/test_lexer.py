"""Test lexical classification and lexical error reporting."""

import pytest

import gridraw
import gridtest


def test_full_sentence_tokens():
    """Every symbol of a valid sentence becomes a token."""
    tokens, errors = gridraw.tokenize("HI bar D2,5; fill A2; line B4,D2 BYE")
    assert errors == []
    assert gridtest.kinds(tokens) == [
        "START", "BAR", "X", "Y", "COMMA", "Y", "SEMICOLON",
        "FILL", "X", "Y", "SEMICOLON",
        "LINE", "X", "Y", "COMMA", "X", "Y",
        "END",
    ]


def test_offsets():
    """Tokens record where they start in the source."""
    tokens, _ = gridraw.tokenize("HI bar D2,5")
    assert [t.offset for t in tokens] == [0, 3, 7, 8, 9, 10, 11]


def test_case_normalization():
    """Markers are uppercase, actions lowercase, X letters uppercase."""
    tokens, errors = gridraw.tokenize("hi BAR d2,5; Fill e1 Bye")
    assert errors == []
    assert gridtest.literals(tokens) == [
        "HI", "bar", "D", "2", ",", "5", ";", "fill", "E", "1", "BYE"]


def test_whitespace_is_skipped():
    tokens, errors = gridraw.tokenize(" \tHI\n\rfill  A2 \t BYE\n")
    assert errors == []
    assert gridtest.literals(tokens) == ["HI", "fill", "A", "2", "BYE"]


@gridtest.params(
    "text",
    empty="",
    sentence="HI fill A2 BYE",
    errors="HI fil Z 9 @ BYE",
    trailing_space="HI   ",
)
def test_single_end_of_input(key, text):
    """Exactly one end of input token, positioned at the input length."""
    tokens, _ = gridraw.tokenize(text)
    eos = [t for t in tokens if t.kind is gridraw.TokenKind.EOS]
    assert eos == [tokens[-1]]
    assert tokens[-1].offset == len(text)
    assert tokens[-1].literal == ""


def test_tokens_are_immutable():
    tokens, _ = gridraw.tokenize("HI")
    with pytest.raises(AttributeError):
        tokens[0].literal = "BYE"


def test_lexer_instance():
    """The Lexer keeps its cursor and results on the instance."""
    lexer = gridraw.Lexer("HI fill")
    tokens, errors = lexer.tokenize()
    assert tokens is lexer.tokens
    assert errors is lexer.errors
    assert lexer.pos == len("HI fill")


def test_invalid_action():
    tokens, errors = gridraw.tokenize("HI fil A2 BYE")
    assert errors == ["action `fil` not valid: expected one of bar, line, fill"]
    assert not any(t.kind.is_action for t in tokens)


def test_stray_variable_with_digit():
    """An out of range letter next to a digit is reported with the digit."""
    tokens, errors = gridraw.tokenize("HI bar F2,3 BYE")
    assert errors == [
        "stray variable `F2` is invalid: `F` is not an <x> value, expected one of A-E"]
    assert gridtest.kinds(tokens) == ["START", "BAR", "COMMA", "Y", "END"]


def test_stray_variable_alone():
    _, errors = gridraw.tokenize("HI fill G BYE")
    assert errors == [
        "variable `G` not valid: <x> must be one of A-E and followed by a <y> of 1-5"]


@gridtest.params(
    "text, message",
    after_letter=(
        "HI fill A7 BYE",
        "invalid <y> value `7` in `A7`: <y> must be one of 1-5"),
    standalone=(
        "HI bar A1,7 BYE",
        "invalid <y> value `7`: <y> must be one of 1-5"),
    zero=(
        "HI fill A0 BYE",
        "value `0` not recognized: <y> must be a single digit 1-5"),
    two_digits=(
        "HI fill A12 BYE",
        "value `12` not recognized: <y> must be a single digit 1-5"),
    two_small_digits=(
        "HI fill A00 BYE",
        "value `00` not recognized: <y> must be a single digit 1-5"),
    symbol=(
        "HI fill A2! BYE",
        "unrecognized symbol `!`"),
)
def test_single_errors(key, text, message):
    _, errors = gridraw.tokenize(text)
    assert errors == [message]


@gridtest.params(
    "text, context",
    upper=("HI bar A9,8 BYE", "A9,8"),
    lower=("HI bar d9,8 BYE", "d9,8"),
    spaced=("HI bar A9, 8 BYE", "A9, 8"),
)
def test_grouped_y_errors(key, text, context):
    """Nearby out of range <y> digits are one combined message."""
    _, errors = gridraw.tokenize(text)
    assert errors == [f"invalid <y> values `9`, `8` in `{context}`: <y> must be one of 1-5"]


def test_distant_y_errors_stay_separate():
    _, errors = gridraw.tokenize("HI bar A9,2; fill B8 BYE")
    assert errors == [
        "invalid <y> value `9` in `A9`: <y> must be one of 1-5",
        "invalid <y> value `8` in `B8`: <y> must be one of 1-5",
    ]


@gridtest.params(
    "text, errors",
    at_window=(
        "HI fill A9 ;8 BYE",
        ["invalid <y> values `9`, `8` in `A9 ;8`: <y> must be one of 1-5"]),
    past_window=(
        "HI fill A9 ; 8 BYE",
        ["invalid <y> value `9` in `A9`: <y> must be one of 1-5",
         "invalid <y> value `8`: <y> must be one of 1-5"]),
)
def test_y_error_window_edge(key, text, errors):
    """Digits 3 apart share a message and digits 4 apart do not."""
    assert gridraw.tokenize(text)[1] == errors


def test_all_errors_in_input_order():
    """Lexing reports every problem and never stops early."""
    _, errors = gridraw.tokenize("HI fil Z 9 @ BYE")
    assert errors == [
        "action `fil` not valid: expected one of bar, line, fill",
        "variable `Z` not valid: <x> must be one of A-E and followed by a <y> of 1-5",
        "invalid <y> value `9`: <y> must be one of 1-5",
        "unrecognized symbol `@`",
    ]


def test_separators_survive_errors():
    """Commas and semicolons always tokenize, whatever surrounds them."""
    tokens, errors = gridraw.tokenize("?,#;")
    assert gridtest.kinds(tokens) == ["COMMA", "SEMICOLON"]
    assert errors == ["unrecognized symbol `?`", "unrecognized symbol `#`"]


def test_non_ascii_letter_is_a_symbol():
    _, errors = gridraw.tokenize("HI fill É2 BYE")
    assert errors == ["unrecognized symbol `É`"]
