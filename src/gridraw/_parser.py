"""Recursive descent parser with leftmost derivation tracing.

Each non-terminal has its own routine that peeks at the next token to pick a
production. Picking a production and narrating it are the same operation:
`Parser._expand` attaches the production's symbols as children of the tree
node and records the new sentential form in one step. The sentential form is
the ordered list of tree leaves, and each derivation step is that list
joined into text.

The `<draw>` choice between `<action>` and `<action> ; <draw>` depends on
what follows the action. The extent of an action is fixed by its keyword, so
a forward scan (`scan_action`) finds the token after it without parsing.

Parsing stops at the first syntax error.
"""

__all__ = ["ActionInfo", "ParseResult", "Parser", "parse", "scan_action", "scan_actions"]

import logging
from dataclasses import dataclass, field

from ._error import DerivationError, ParseError
from ._grammar import ACTION_SHAPES, ACTION_WORDS, END_WORD, START_WORD, X_VALUES, Y_VALUES
from ._token import TokenKind, join_symbols
from ._tree import TreeNode

log = logging.getLogger(__name__)

_RANGES = {
    TokenKind.X: f"{X_VALUES[0]}-{X_VALUES[-1]}",
    TokenKind.Y: f"{Y_VALUES[0]}-{Y_VALUES[-1]}",
}


@dataclass(frozen=True)
class ActionInfo:
    """Summary of one drawing action found by a forward scan.

    Attributes:
        kind: (str) Action keyword, one of bar, line, fill
        parameters: (tuple[str, ...]) Coordinate literals in order
    """

    kind: str
    parameters: tuple

    def __str__(self):
        # Fill the production's placeholders with the parameters found
        parameters = iter(self.parameters)
        symbols = [
            next(parameters, symbol) if symbol in ("<x>", "<y>") else symbol
            for symbol in ACTION_SHAPES[self.kind]
        ]
        return join_symbols([self.kind, *symbols])


def scan_action(tokens, index):
    """Look ahead over the action whose keyword is at `index`.

    The scan trusts the keyword's arity and does not validate the tokens it
    steps over.

    Args:
        tokens: (list[Token]) Token sequence ending in end of input
        index: (int) Position of an action keyword token

    Returns:
        (tuple[ActionInfo, int]) The action summary and the index of the
        token just past the action, clamped to the end of input token
    """
    keyword = tokens[index].kind.value
    end = min(index + 1 + len(ACTION_SHAPES[keyword]), len(tokens) - 1)
    parameters = tuple(t.literal for t in tokens[index + 1:end] if t.kind.is_coordinate)
    return ActionInfo(keyword, parameters), end


def scan_actions(tokens):
    """Summaries of every action keyword in a token sequence, in order."""
    return [scan_action(tokens, i)[0] for i, token in enumerate(tokens) if token.kind.is_action]


@dataclass
class ParseResult:
    """Outcome of parsing one token sequence.

    Attributes:
        root: (TreeNode | None) Parse tree, None when parsing failed
        derivation: (list[str]) Sentential forms of the leftmost derivation,
            up to the failure point when parsing failed
        errors: (list[str]) Syntax errors, at most one
    """

    root: TreeNode | None = None
    derivation: list = field(default_factory=list)
    errors: list = field(default_factory=list)

    @property
    def ok(self):
        """(bool) True when the tokens formed a valid sentence."""
        return self.root is not None and not self.errors


class Parser:
    """Predictive parser for one token sequence.

    Args:
        tokens: (list[Token]) Lexer output, ending in end of input

    Attributes:
        tokens: (list[Token]) Token sequence
        pos: (int) Index of the next unread token
        derivation: (list[str]) Sentential forms recorded so far
    """

    def __init__(self, tokens):
        if not tokens or tokens[-1].kind is not TokenKind.EOS:
            raise ValueError("token sequence must end with an end of input token")
        self.tokens = tokens
        self.pos = 0
        self.derivation = []
        self._form = []

    def parse(self):
        """Parse the tokens, reporting a syntax error in the result.

        Returns:
            (ParseResult) Tree and derivation on success, or the partial
            derivation and the error message on failure
        """
        try:
            root = self.run()
        except ParseError as e:
            log.debug("syntax error at offset %s: %s", e.position, e.message)
            return ParseResult(None, self.derivation, [e.message])
        return ParseResult(root, self.derivation, [])

    def run(self):
        """Parse the tokens.

        Returns:
            (TreeNode) Root `<graph>` node

        Raises:
            ParseError: On the first syntax error
        """
        root = TreeNode("<graph>")
        self._form = [root]
        self._record()
        self._graph(root)
        if self._leftmost() is not None:
            raise DerivationError("parse finished with unexpanded non-terminals")
        log.debug("parsed %d derivation steps", len(self.derivation))
        return root

    # Cursor

    def _peek(self):
        return self.tokens[self.pos]

    def _advance(self):
        token = self.tokens[self.pos]
        if token.kind is not TokenKind.EOS:
            self.pos += 1
        return token

    # Tree building and derivation

    def _leftmost(self):
        for index, node in enumerate(self._form):
            if node.is_nonterminal:
                return index
        return None

    def _record(self):
        self.derivation.append(join_symbols(node.label for node in self._form))

    def _expand(self, node, labels):
        """Apply a production to `node` and record the resulting sentential form.

        Args:
            node: (TreeNode) The leftmost unexpanded non-terminal
            labels: (Sequence[str]) Right hand side symbols

        Returns:
            (list[TreeNode]) The new child nodes
        """
        index = self._leftmost()
        if index is None or self._form[index] is not node:
            raise DerivationError(f"{node.label} is not the leftmost non-terminal")
        children = [node.add(TreeNode(label)) for label in labels]
        self._form[index:index + 1] = children
        self._record()
        return children

    # Grammar

    def _graph(self, node):
        token = self._peek()
        if token.kind is not TokenKind.START:
            raise ParseError(
                f"expected start marker `{START_WORD}`, found {token.describe()}", token.offset)
        _, draw, _ = self._expand(node, (START_WORD, "<draw>", END_WORD))
        self._advance()

        self._draw(draw)

        token = self._peek()
        if token.kind is not TokenKind.END:
            raise ParseError(
                f"expected end marker `{END_WORD}`, found {token.describe()}", token.offset)
        self._advance()

        token = self._peek()
        if token.kind is not TokenKind.EOS:
            raise ParseError(
                f"unexpected token `{token.literal}` after end marker `{END_WORD}`", token.offset)

    def _draw(self, node):
        while True:
            token = self._peek()
            if token.kind is TokenKind.EOS:
                raise ParseError("unexpected end of input while parsing action", token.offset)
            if not token.kind.is_action:
                raise ParseError(
                    f"action `{token.literal}` not valid: expected one of {', '.join(ACTION_WORDS)}",
                    token.offset)

            info, end = scan_action(self.tokens, self.pos)
            more = self.tokens[end].kind is TokenKind.SEMICOLON
            log.debug("<draw> for %s, more actions follow: %s", info, more)
            labels = ("<action>", ";", "<draw>") if more else ("<action>",)
            children = self._expand(node, labels)

            self._action(children[0])
            if not more:
                return

            token = self._advance()
            if token.kind is not TokenKind.SEMICOLON:
                raise DerivationError(f"expected ';' at offset {token.offset}")
            node = children[2]

    def _action(self, node):
        keyword = self._advance().kind.value
        children = self._expand(node, (keyword, *ACTION_SHAPES[keyword]))
        for child in children[1:]:
            if child.label == "<x>":
                self._coordinate(child, TokenKind.X)
            elif child.label == "<y>":
                self._coordinate(child, TokenKind.Y)
            else:
                self._comma()

    def _coordinate(self, node, kind):
        token = self._peek()
        if token.kind is kind:
            self._expand(node, (token.literal,))
            self._advance()
            return

        expected = f"{kind.value} ({_RANGES[kind]})"
        if token.kind is TokenKind.EOS:
            raise ParseError(f"unexpected end of input, expected {kind.value}", token.offset)
        if token.kind.is_coordinate:
            raise ParseError(
                f"variable `{token.literal}` not valid here, expected {expected}", token.offset)
        raise ParseError(
            f"value `{token.literal}` not recognized, expected {expected}", token.offset)

    def _comma(self):
        token = self._peek()
        if token.kind is not TokenKind.COMMA:
            pair = self.tokens[self.pos - 2].literal + self.tokens[self.pos - 1].literal
            raise ParseError(
                f"expected ',' after `{pair}`, found {token.describe()}", token.offset)
        self._advance()


def parse(tokens):
    """Parse a token sequence.

    Args:
        tokens: (list[Token]) Lexer output

    Returns:
        (ParseResult) Parse outcome
    """
    return Parser(tokens).parse()
