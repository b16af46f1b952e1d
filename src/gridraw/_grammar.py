"""Grammar constants and help text for the gridraw drawing language.

The grammar is fixed:

    <graph>  -> HI <draw> BYE
    <draw>   -> <action> | <action> ; <draw>
    <action> -> bar <x><y>,<y> | line <x><y>,<x><y> | fill <x><y>
    <x>      -> A | B | C | D | E
    <y>      -> 1 | 2 | 3 | 4 | 5

Keyword spellings and the coordinate ranges are the only externally
meaningful format, so they live here and are shared by the lexer, the
parser and the help text.
"""

__all__ = [
    "START_WORD",
    "END_WORD",
    "ACTION_WORDS",
    "KEYWORDS",
    "X_VALUES",
    "Y_VALUES",
    "ACTION_SHAPES",
    "GRAMMAR_HELP",
]

START_WORD = "HI"
END_WORD = "BYE"
ACTION_WORDS = ("bar", "line", "fill")

# Lowercased spelling -> canonical literal
KEYWORDS = {
    "hi": START_WORD,
    "bye": END_WORD,
    "bar": "bar",
    "line": "line",
    "fill": "fill",
}

X_VALUES = "ABCDE"
Y_VALUES = "12345"

# Right hand side of each <action> production after the keyword.
ACTION_SHAPES = {
    "bar": ("<x>", "<y>", ",", "<y>"),
    "line": ("<x>", "<y>", ",", "<x>", "<y>"),
    "fill": ("<x>", "<y>"),
}


GRAMMAR_HELP = f"""\
Grammar:

    <graph>  -> {START_WORD} <draw> {END_WORD}
    <draw>   -> <action>
              | <action> ; <draw>
    <action> -> bar <x><y>,<y>
              | line <x><y>,<x><y>
              | fill <x><y>
    <x>      -> {' | '.join(X_VALUES)}
    <y>      -> {' | '.join(Y_VALUES)}

Keywords are case-insensitive. Whitespace between symbols is ignored.

Example:

    {START_WORD} bar D2,5; fill A2; line B4,D2 {END_WORD}
"""
