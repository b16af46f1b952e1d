"""Error classes and helpers"""

__all__ = [
    "GridrawError",
    "LexError",
    "ParseError",
    "ConfigError",
    "DerivationError",
]


class GridrawError(Exception):
    """Base class for every error raised by gridraw."""


class LexError(GridrawError):
    """Input contained malformed tokens.

    Lexing reports every problem in one pass, so this carries all of them.

    Args:
        messages: (list[str]) Lexical error descriptions in input order

    Attributes:
        messages: (list[str]) Lexical error descriptions in input order
    """

    def __init__(self, messages):
        self.messages = list(messages)
        super().__init__("; ".join(self.messages))


class ParseError(GridrawError):
    """Exception raised for parsing errors.

    Args:
        message: (str) Error description
        position: (int | None) Optional character position where error occurred

    Attributes:
        message: (str) Error description
        position: (int | None) Character position where error occurred
    """

    def __init__(self, message, position=None):
        self.message = message
        self.position = position
        super().__init__(message)


class ConfigError(GridrawError):
    """Invalid configuration value."""


class DerivationError(GridrawError):
    """Tree building and derivation narration went out of step."""
