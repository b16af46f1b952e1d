"""Recognize source lines: lexing, then parsing when lexing was clean."""

__all__ = ["Recognition", "recognize", "parse_text"]

import logging
from dataclasses import dataclass, field

from ._error import LexError
from ._lexer import tokenize
from ._parser import Parser, ParseResult

log = logging.getLogger(__name__)


@dataclass
class Recognition:
    """Everything learned about one source line.

    Lexical errors short-circuit parsing, so `result` is None whenever
    `lex_errors` is not empty and the two error classes never mix.

    Attributes:
        text: (str) The stripped source line
        tokens: (list[Token]) Lexer output
        lex_errors: (list[str]) Lexical errors in input order
        result: (ParseResult | None) Parser output when lexing was clean
    """

    text: str
    tokens: list = field(default_factory=list)
    lex_errors: list = field(default_factory=list)
    result: ParseResult | None = None

    @property
    def accepted(self):
        """(bool) True when the line is a sentence of the language."""
        return self.result is not None and self.result.ok

    @property
    def errors(self):
        """(list[str]) The lexical errors, or else the syntax errors."""
        if self.lex_errors:
            return self.lex_errors
        if self.result is not None:
            return self.result.errors
        return []

    @property
    def root(self):
        """(TreeNode | None) Parse tree of an accepted line."""
        return self.result.root if self.result is not None else None

    @property
    def derivation(self):
        """(list[str]) Derivation steps, empty when lexing failed."""
        return self.result.derivation if self.result is not None else []


def recognize(text):
    """Lex and parse one source line.

    Args:
        text: (str) Source line, surrounding whitespace is ignored

    Returns:
        (Recognition) Tokens, diagnostics and, when lexing was clean, the
        parse result
    """
    text = text.strip()
    tokens, lex_errors = tokenize(text)
    recognition = Recognition(text, tokens, lex_errors)
    if lex_errors:
        log.debug("skipping parse after %d lexical errors", len(lex_errors))
        return recognition
    recognition.result = Parser(tokens).parse()
    return recognition


def parse_text(text):
    """Parse one source line into a tree, raising on any error.

    Args:
        text: (str) Source line

    Returns:
        (TreeNode) Root of the parse tree

    Raises:
        gridraw.LexError: If the line contains malformed tokens
        gridraw.ParseError: If the tokens do not form a sentence
    """
    tokens, lex_errors = tokenize(text.strip())
    if lex_errors:
        raise LexError(lex_errors)
    return Parser(tokens).run()
