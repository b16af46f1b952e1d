"""Lexer for the gridraw drawing language.

Lexing is a single left to right scan that never stops early. Malformed
input is recorded as an error message and the scan carries on, so one pass
reports every lexical problem in the line, in input order.

Out of range <y> digits that sit close together (like the `9` and `8` in
`A9,8`) are reported as one grouped message rather than one per digit.
"""

__all__ = ["Lexer", "tokenize", "BAD_Y_WINDOW"]

import logging
import string

from ._grammar import ACTION_WORDS, END_WORD, KEYWORDS, START_WORD, X_VALUES, Y_VALUES
from ._token import Token, TokenKind

log = logging.getLogger(__name__)

WHITESPACE = " \t\n\r"
LETTERS = string.ascii_letters
DIGITS = string.digits

# Largest offset distance between two bad <y> digits reported together
BAD_Y_WINDOW = 3

_KEYWORD_KINDS = {
    START_WORD: TokenKind.START,
    END_WORD: TokenKind.END,
    "bar": TokenKind.BAR,
    "line": TokenKind.LINE,
    "fill": TokenKind.FILL,
}

_X_RANGE = f"{X_VALUES[0]}-{X_VALUES[-1]}"
_Y_RANGE = f"{Y_VALUES[0]}-{Y_VALUES[-1]}"


class Lexer:
    """Convert one source line into tokens and lexical error messages.

    A lexer holds the scan cursor for a single call; create a new one for
    every line.

    Args:
        text: (str) Source line

    Attributes:
        text: (str) Source line
        pos: (int) Scan cursor
        tokens: (list[Token]) Tokens produced so far
        errors: (list[str]) Error messages produced so far
    """

    def __init__(self, text):
        self.text = text
        self.pos = 0
        self.tokens = []
        self.errors = []
        # (offset, digit, context_start) for out of range <y> digits not yet reported
        self._bad_y = []

    def tokenize(self):
        """Scan the whole line.

        Returns:
            (tuple[list[Token], list[str]]) Tokens ending with exactly one
            end of input token, and the lexical errors in input order
        """
        text = self.text
        while self.pos < len(text):
            ch = text[self.pos]
            if ch in WHITESPACE:
                self.pos += 1
            elif ch in LETTERS:
                self._word()
            elif ch in DIGITS:
                self._number()
            elif ch == ",":
                self._emit(TokenKind.COMMA, ch, self.pos)
                self.pos += 1
            elif ch == ";":
                self._emit(TokenKind.SEMICOLON, ch, self.pos)
                self.pos += 1
            else:
                self._error(f"unrecognized symbol `{ch}`")
                self.pos += 1

        self._flush_bad_y()
        self.tokens.append(Token(TokenKind.EOS, "", len(text)))
        log.debug("lexed %d tokens with %d errors", len(self.tokens), len(self.errors))
        return self.tokens, self.errors

    def _emit(self, kind, literal, offset):
        self.tokens.append(Token(kind, literal, offset))

    def _error(self, message):
        # Earlier pending <y> digits come first in the input
        self._flush_bad_y()
        self.errors.append(message)

    def _scan(self, start, chars):
        end = start
        while end < len(self.text) and self.text[end] in chars:
            end += 1
        return end

    def _word(self):
        start = self.pos
        end = self._scan(start, LETTERS)
        word = self.text[start:end]
        self.pos = end

        keyword = KEYWORDS.get(word.lower())
        if keyword is not None:
            kind = _KEYWORD_KINDS[keyword]
            self._emit(kind, kind.canonical(word), start)
        elif len(word) == 1 and word.upper() in X_VALUES:
            self._emit(TokenKind.X, TokenKind.X.canonical(word), start)
        elif len(word) == 1:
            self._stray_letter(word, start)
        else:
            self._error(
                f"action `{word}` not valid: expected one of {', '.join(ACTION_WORDS)}")

    def _stray_letter(self, letter, start):
        digits_end = self._scan(self.pos, DIGITS)
        if digits_end > self.pos:
            context = self.text[start:digits_end]
            self.pos = digits_end
            self._error(
                f"stray variable `{context}` is invalid: `{letter}` is not an <x> value, "
                f"expected one of {_X_RANGE}")
        else:
            self._error(
                f"variable `{letter}` not valid: <x> must be one of {_X_RANGE} "
                f"and followed by a <y> of {_Y_RANGE}")

    def _number(self):
        start = self.pos
        end = self._scan(start, DIGITS)
        run = self.text[start:end]
        self.pos = end

        if len(run) > 1 or run == "0":
            self._error(f"value `{run}` not recognized: <y> must be a single digit {_Y_RANGE}")
        elif run in Y_VALUES:
            self._emit(TokenKind.Y, run, start)
        else:
            self._bad_y_digit(run, start)

    def _bad_y_digit(self, digit, offset):
        if self._bad_y and offset - self._bad_y[-1][0] > BAD_Y_WINDOW:
            self._flush_bad_y()

        context_start = offset
        previous = self.tokens[-1] if self.tokens else None
        if (previous is not None and previous.kind is TokenKind.X
                and previous.offset + 1 == offset):
            context_start = previous.offset
        self._bad_y.append((offset, digit, context_start))

    def _flush_bad_y(self):
        if not self._bad_y:
            return
        group, self._bad_y = self._bad_y, []

        start = group[0][2]
        end = group[-1][0] + 1
        context = self.text[start:end]
        values = ", ".join(f"`{digit}`" for _, digit, _ in group)
        plural = "s" if len(group) > 1 else ""
        where = f" in `{context}`" if context != group[0][1] else ""
        self.errors.append(
            f"invalid <y> value{plural} {values}{where}: <y> must be one of {_Y_RANGE}")


def tokenize(text):
    """Tokenize one source line.

    Args:
        text: (str) Source line

    Returns:
        (tuple[list[Token], list[str]]) Token sequence and lexical errors
    """
    return Lexer(text).tokenize()
