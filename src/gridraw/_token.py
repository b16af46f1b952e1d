"""Token model and sentence spacing."""

__all__ = ["TokenKind", "Token", "join_symbols", "tokens_to_sentence"]

import enum
from dataclasses import dataclass

from ._grammar import END_WORD, START_WORD


class TokenKind(enum.Enum):
    """Lexical categories of the drawing language."""

    START = "start marker"
    END = "end marker"
    BAR = "bar"
    LINE = "line"
    FILL = "fill"
    X = "X letter"
    Y = "Y digit"
    COMMA = "comma"
    SEMICOLON = "semicolon"
    EOS = "end of input"

    @property
    def is_action(self):
        """(bool) True for the three action keywords."""
        return self in (TokenKind.BAR, TokenKind.LINE, TokenKind.FILL)

    @property
    def is_coordinate(self):
        """(bool) True for X letters and Y digits."""
        return self in (TokenKind.X, TokenKind.Y)

    def canonical(self, text):
        """Normalize source text of this kind to its token literal.

        Args:
            text: (str) Text as written in the source

        Returns:
            (str) Literal stored on the token
        """
        if self is TokenKind.START:
            return START_WORD
        if self is TokenKind.END:
            return END_WORD
        if self.is_action:
            return text.lower()
        if self is TokenKind.X:
            return text.upper()
        return text


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        kind: (TokenKind) Lexical category
        literal: (str) Normalized token text, empty for end of input
        offset: (int) Character offset into the source line
    """

    kind: TokenKind
    literal: str
    offset: int

    def describe(self):
        """Text used to name this token in diagnostics."""
        if self.kind is TokenKind.EOS:
            return "end of input"
        return f"`{self.literal}`"


def _attaches_left(symbol):
    # Separators and <y> values sit directly against what precedes them
    return symbol in (",", ";", "<y>") or (len(symbol) == 1 and symbol.isdigit())


def join_symbols(symbols):
    """Join grammar symbols into text with the language's spacing.

    Symbols are separated by one space except that `,`, `;` and <y> values
    attach to the symbol before them, and nothing is spaced after `,`.
    The same rules apply to terminals and to non-terminal placeholders, so
    `HI bar <x><y>,<y>; <draw> BYE` and `HI bar D2,5; fill A2 BYE` are both
    produced here.

    Args:
        symbols: (Iterable[str]) Terminal literals and non-terminal labels

    Returns:
        (str) Joined text
    """
    parts = []
    previous = None
    for symbol in symbols:
        if parts and previous != "," and not _attaches_left(symbol):
            parts.append(" ")
        parts.append(symbol)
        previous = symbol
    return "".join(parts)


def tokens_to_sentence(tokens):
    """Rebuild the normalized sentence text from a token sequence."""
    return join_symbols(t.literal for t in tokens if t.kind is not TokenKind.EOS)
