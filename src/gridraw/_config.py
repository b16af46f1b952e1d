"""Output settings for the command line and the REPL.

Settings come from the environment first and command line flags second:

    GRIDRAW_STYLE   tree layout, "listing" or "grid"
    GRIDRAW_COLOR   "always", "never" or "auto"
    NO_COLOR        any value turns automatic color off
"""

__all__ = ["Settings", "TREE_STYLES"]

import dataclasses
import os

from ._colorize import should_use_color
from ._error import ConfigError

TREE_STYLES = ("listing", "grid")

_COLOR_MODES = {"always": True, "never": False, "auto": None}


@dataclasses.dataclass(frozen=True)
class Settings:
    """What to show and how to show it.

    Attributes:
        style: (str) Tree layout, one of TREE_STYLES
        color: (bool | None) Force color on or off, None to detect
        show_tokens: (bool) Print the token stream
        show_derivation: (bool) Print the derivation steps
        show_tree: (bool) Print the parse tree
    """

    style: str = "listing"
    color: bool | None = None
    show_tokens: bool = False
    show_derivation: bool = True
    show_tree: bool = True

    def __post_init__(self):
        if self.style not in TREE_STYLES:
            raise ConfigError(
                f"unknown tree style {self.style!r}, expected one of {', '.join(TREE_STYLES)}")

    @classmethod
    def from_env(cls, environ=None):
        """Read settings from environment variables.

        Args:
            environ: (Mapping | None) Environment, defaults to os.environ

        Returns:
            (Settings) Settings with environment overrides applied

        Raises:
            ConfigError: If a variable holds an unknown value
        """
        environ = os.environ if environ is None else environ
        values = {}

        style = environ.get("GRIDRAW_STYLE", "").strip().lower()
        if style:
            values["style"] = style

        color = environ.get("GRIDRAW_COLOR", "").strip().lower()
        if color:
            if color not in _COLOR_MODES:
                raise ConfigError(
                    f"GRIDRAW_COLOR must be one of {', '.join(_COLOR_MODES)}, got {color!r}")
            values["color"] = _COLOR_MODES[color]

        return cls(**values)

    def merged(self, **overrides):
        """Copy with every override that is not None applied."""
        return dataclasses.replace(
            self, **{key: value for key, value in overrides.items() if value is not None})

    def use_color(self, stream, environ=None):
        """(bool) Whether output written to `stream` should be colored."""
        if self.color is not None:
            return self.color
        return should_use_color(stream, environ)
