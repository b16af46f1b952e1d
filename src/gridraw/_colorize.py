"""Terminal colors for command line and REPL output.

Public API
----------
paint(text, style, enabled)   → str wrapped in ANSI codes when enabled
strip_ansi(text)              → str with ANSI codes removed
should_use_color(stream)      → bool (TTY detection + NO_COLOR)
"""

__all__ = ["STYLES", "paint", "strip_ansi", "should_use_color"]

import os
import re

RESET = "\033[0m"

# ANSI escape codes for each kind of output
STYLES = {
    "error": "\033[31m",    # red
    "accept": "\033[32m",   # green
    "step": "\033[36m",     # cyan
    "heading": "\033[1m",   # strong
}

ANSI_PATTERN = re.compile(r"\033\[[0-9;]*m")


def paint(text, style, enabled=True):
    """Wrap text in the ANSI codes for a style.

    Args:
        text: (str) Text to color
        style: (str) Key of STYLES
        enabled: (bool) When False the text is returned unchanged

    Returns:
        (str) Colored text
    """
    if not enabled or not text:
        return text
    return f"{STYLES[style]}{text}{RESET}"


def strip_ansi(text):
    """Remove ANSI escape codes from text."""
    return ANSI_PATTERN.sub("", text)


def should_use_color(stream, environ=None):
    """Determine if color output should be used.

    Checks:
    - NO_COLOR environment variable is not set
    - Stream is a TTY

    Args:
        stream: Output stream (like sys.stdout)
        environ: (Mapping | None) Environment, defaults to os.environ

    Returns:
        (bool) True if colors should be applied
    """
    environ = os.environ if environ is None else environ
    # https://no-color.org/
    if environ.get("NO_COLOR") is not None:
        return False
    try:
        return stream.isatty()
    except AttributeError:
        return False
