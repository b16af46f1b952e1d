#!/usr/bin/env python3
"""gridraw CLI - Command-line interface for the gridraw drawing language.

Usage:
    gridraw "HI bar D2,5; fill A2 BYE"            # Derivation and parse tree
    gridraw "HI fill A2 BYE" --style grid         # Centered tree layout
    gridraw "HI fill A2 BYE" --tokens             # Also show the token stream
    gridraw "HI fill A2 BYE" --lark               # Show the reference lark tree
    gridraw --grammar                             # Show the grammar
    gridraw                                       # Interactive REPL
"""

import argparse
import logging
import sys

import gridraw
from gridraw import repl


def show_lark(source):
    """Print the reference grammar's tree for a sentence.

    Returns:
        (int) Exit status
    """
    try:
        tree = gridraw.lark_parse(source)
    except gridraw.ParseError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1
    print(tree.pretty().rstrip())
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="gridraw",
        description="Recognize HI ... BYE drawing sentences")
    parser.add_argument("source", nargs="?",
        help="Sentence to recognize, starts the REPL when omitted")
    parser.add_argument("--tokens", action="store_true", default=None,
        help="Show the token stream")
    parser.add_argument("--no-derivation", dest="show_derivation", action="store_false", default=None,
        help="Hide the derivation steps")
    parser.add_argument("--no-tree", dest="show_tree", action="store_false", default=None,
        help="Hide the parse tree")
    parser.add_argument("--style", choices=gridraw.TREE_STYLES,
        help="Parse tree layout (default from GRIDRAW_STYLE, else listing)")
    parser.add_argument("--lark", action="store_true",
        help="Show the reference lark parse tree instead")
    parser.add_argument("--grammar", action="store_true",
        help="Show the grammar and exit")
    parser.add_argument("--color", dest="color", action="store_true", default=None,
        help="Always color output")
    parser.add_argument("--no-color", dest="color", action="store_false",
        help="Never color output")
    parser.add_argument("-v", "--verbose", action="store_true",
        help="Log lexer and parser decisions to stderr")

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, stream=sys.stderr, format="%(name)s: %(message)s")

    try:
        settings = gridraw.Settings.from_env().merged(
            style=args.style,
            color=args.color,
            show_tokens=args.tokens,
            show_derivation=args.show_derivation,
            show_tree=args.show_tree,
        )
    except gridraw.ConfigError as e:
        parser.error(str(e))

    if args.grammar:
        print(gridraw.GRAMMAR_HELP.rstrip())
        return 0

    if args.source is None:
        if args.lark:
            parser.error("--lark requires a sentence")
        repl.repl(settings)
        return 0

    if args.lark:
        return show_lark(args.source)

    recognition = gridraw.recognize(args.source)
    print(gridraw.format_report(recognition, settings, settings.use_color(sys.stdout)))
    return 0 if recognition.accepted else 1


if __name__ == "__main__":
    sys.exit(main())
