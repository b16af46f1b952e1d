"""Interactive REPL for the gridraw language.

Reads one sentence per line, recognizes it and prints the report.
"""

import sys

import gridraw

BANNER = f"""\
gridraw REPL v{gridraw.__version__}
Type a sentence like: HI bar D2,5; fill A2 BYE
Type 'help' for the grammar, 'exit' or Ctrl-D to quit.
"""

PROMPT = "gridraw> "
EXIT_COMMANDS = ("exit", "quit", ":q")


def handle_line(line, settings, color=False):
    """Respond to one line of input.

    Args:
        line: (str) Raw input line
        settings: (gridraw.Settings) Output settings
        color: (bool) Apply ANSI colors

    Returns:
        (str | None) Text to print, None for blank lines
    """
    line = line.strip()
    if not line:
        return None
    if line.lower() == "help":
        return gridraw.GRAMMAR_HELP
    recognition = gridraw.recognize(line)
    return gridraw.format_report(recognition, settings, color)


def repl(settings=None, stdin=None, stdout=None):
    """Run the interactive REPL until exit or end of input.

    Args:
        settings: (gridraw.Settings | None) Output settings, read from the
            environment when None
        stdin: Input stream, defaults to sys.stdin
        stdout: Output stream, defaults to sys.stdout
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    if settings is None:
        settings = gridraw.Settings.from_env()
    color = settings.use_color(stdout)
    interactive = stdin.isatty() if hasattr(stdin, "isatty") else False

    print(BANNER, file=stdout)

    while True:
        try:
            if interactive:
                stdout.write(PROMPT)
                stdout.flush()
            line = stdin.readline()
            if not line:
                print("\nGoodbye!", file=stdout)
                break

            if line.strip().lower() in EXIT_COMMANDS:
                print("Goodbye!", file=stdout)
                break

            output = handle_line(line, settings, color)
            if output:
                print(output, file=stdout)
                print(file=stdout)

        except KeyboardInterrupt:
            print("\nKeyboardInterrupt", file=stdout)
            print("Type 'exit' to quit.", file=stdout)
            continue


def main():
    """Main entry point for REPL."""
    try:
        repl()
    except KeyboardInterrupt:
        print("\n\nGoodbye!")
        sys.exit(0)


if __name__ == "__main__":
    main()
