"""Unit testing quality of life and readability helpers for gridraw tests."""

import pytest

import gridraw


def params(names, **cases):
    """Simplified parametrize decorator for test cases.

    Args:
        names: Space or comma-separated string of parameter names
        **cases: Named test cases where key is the test ID and value is
                either a single argument or tuple of arguments

    Returns:
        pytest.mark.parametrize decorator with 'key' as first parameter

    Example:
        @params("text expected", fill=("HI fill A2 BYE", True))
        def test_accepts(key, text, expected):
            assert gridraw.recognize(text).accepted == expected
    """
    keys = list(cases)
    values = []
    for k, v in cases.items():
        if isinstance(v, tuple):
            values.append((k, *v))
        else:
            values.append((k, v))

    columns = names.replace(",", " ").split()
    columns.insert(0, "key")
    return pytest.mark.parametrize(columns, values, ids=keys)


def node(label, *children):
    """Build a TreeNode from nested calls: node("<x>", node("A"))."""
    return gridraw.TreeNode(label, children)


def kinds(tokens):
    """Token kind names without the trailing end of input token."""
    assert tokens[-1].kind is gridraw.TokenKind.EOS
    return [t.kind.name for t in tokens[:-1]]


def literals(tokens):
    """Token literals without the trailing end of input token."""
    return [t.literal for t in tokens[:-1]]


def parse_ok(text):
    """Recognize text that must be accepted and return the recognition."""
    recognition = gridraw.recognize(text)
    assert recognition.errors == []
    assert recognition.accepted, f"rejected {text!r}"
    return recognition


def parse_error(text):
    """Recognize text that must fail parsing and return its one syntax error."""
    recognition = gridraw.recognize(text)
    assert recognition.lex_errors == [], recognition.lex_errors
    assert recognition.result is not None
    assert recognition.root is None
    assert len(recognition.result.errors) == 1
    return recognition.result.errors[0]


# Sentences of the language, with their normalized text
ACCEPTED = {
    "fill": ("HI fill A2 BYE", "HI fill A2 BYE"),
    "bar": ("HI bar D2,5 BYE", "HI bar D2,5 BYE"),
    "line": ("HI line B4,D2 BYE", "HI line B4,D2 BYE"),
    "three": (
        "HI bar D2,5; fill A2; line B4,D2 BYE",
        "HI bar D2,5; fill A2; line B4,D2 BYE"),
    "lowercase": ("hi fill e5 bye", "HI fill E5 BYE"),
    "mixed_case": ("Hi BAR c1,3; Fill b2 ByE", "HI bar C1,3; fill B2 BYE"),
    "spacing": (
        "  HI\tfill C3 ;bar A1 , 2;line b2 ,c3\n  BYE ",
        "HI fill C3; bar A1,2; line B2,C3 BYE"),
    "packed": ("HI fill A2;fill B3;fill C4 BYE", "HI fill A2; fill B3; fill C4 BYE"),
    "no_spaces_digit": ("HI fill A2BYE", "HI fill A2 BYE"),
}

# Lines the language rejects, lexically or syntactically
REJECTED = {
    "missing_comma": "HI bar A1 BYE",
    "missing_semicolon": "HI bar A1,2 fill B3 BYE",
    "no_actions": "HI BYE",
    "no_start": "fill A2 BYE",
    "no_end": "HI fill A2",
    "trailing": "HI fill A2 BYE BYE",
    "trailing_semicolon": "HI fill A2; BYE",
    "bad_action": "HI fil A2 BYE",
    "glued_action": "HI fillA2 BYE",
    "long_keyword": "HI bare1,2 BYE",
    "x_range": "HI fill F2 BYE",
    "y_range": "HI fill A7 BYE",
    "two_digits": "HI fill A12 BYE",
    "glued_start": "HIfill A2 BYE",
    "swapped": "HI fill 2A BYE",
    "line_short": "HI line A1,2 BYE",
    "symbol": "HI fill A2! BYE",
    "empty": "",
}
