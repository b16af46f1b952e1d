"""Lark reference grammar for the drawing language.

The hand-written lexer and parser are what gridraw uses to recognize
sentences. The grammar in `lark/gridraw.lark` describes the same language
declaratively; it is used to show lark's view of a sentence and to check
that both agree on which sentences are accepted.
"""

__all__ = ["lark_parse", "lark_to_tree", "GRAMMAR_PATH"]

import pathlib

import lark

from ._error import ParseError
from ._token import TokenKind
from ._tree import TreeNode

GRAMMAR_PATH = pathlib.Path(__file__).parent / "lark" / "gridraw.lark"

# Global parser instance, built on first use
_parser: lark.Lark | None = None


def _get_parser():
    """Get the cached Lark parser instance.

    Returns:
        lark.Lark: Cached Lark parser instance
    """
    global _parser
    if _parser is None:
        _parser = lark.Lark(
            GRAMMAR_PATH.read_text(encoding="utf-8"),
            parser="lalr",
            start="graph",
            propagate_positions=True,
        )
    return _parser


def lark_parse(text):
    """Parse a sentence with the reference grammar.

    Args:
        text: (str) Source line

    Returns:
        (lark.Tree) Lark parse tree rooted at `graph`

    Raises:
        ParseError: If lark rejects the sentence
    """
    try:
        return _get_parser().parse(text.strip())
    except lark.exceptions.UnexpectedInput as e:
        raise ParseError(
            f"reference grammar rejected input: {e}", getattr(e, "pos_in_stream", None)) from e
    except lark.exceptions.LarkError as e:
        raise ParseError(f"reference grammar rejected input: {e}") from e


class _ToTreeNode(lark.Transformer):
    """Rebuild a lark tree with gridraw labels and literals."""

    def __default__(self, data, children, meta):
        return TreeNode(f"<{data}>", children)

    def __default_token__(self, token):
        return TreeNode(TokenKind[token.type].canonical(str(token)))


def lark_to_tree(tree):
    """Convert a reference grammar tree into a gridraw parse tree.

    Args:
        tree: (lark.Tree) Result of `lark_parse`

    Returns:
        (TreeNode) Tree labeled the way the hand-written parser labels it
    """
    return _ToTreeNode().transform(tree)
