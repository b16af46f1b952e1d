"""Text rendering for parse trees, derivations and token streams.

Public API
----------
render_tree(root)          → str indented connector listing
render_grid(root)          → str centered multi-row layout
format_derivation(steps)   → str numbered derivation with arrows
format_tokens(tokens)      → str one token per line
format_report(rec, ...)    → str full report for the CLI and REPL

None of these know anything about the grammar; they only walk labels and
children.
"""

__all__ = [
    "EMPTY_TREE",
    "render_tree",
    "render_grid",
    "format_derivation",
    "format_tokens",
    "format_report",
]

from ._colorize import paint

EMPTY_TREE = "(empty tree)"

# Columns between sibling subtrees in the grid layout
GRID_GAP = 2


def render_tree(root):
    """Render a tree as an indented listing with box drawing connectors.

    Args:
        root: (TreeNode | None) Tree to render

    Returns:
        (str) One line per node
    """
    if root is None:
        return EMPTY_TREE
    lines = [root.label]
    _listing(root, "", lines)
    return "\n".join(lines)


def _listing(node, prefix, lines):
    last = len(node.children) - 1
    for index, child in enumerate(node.children):
        connector = "└── " if index == last else "├── "
        lines.append(prefix + connector + child.label)
        _listing(child, prefix + ("    " if index == last else "│   "), lines)


def render_grid(root):
    """Render a tree top-down with each parent centered over its children.

    A parent with one child connects straight down with `│`. A parent with
    several children sits over a horizontal span running from the first
    child to the last.

    Args:
        root: (TreeNode | None) Tree to render

    Returns:
        (str) Rendered rows with trailing spaces removed
    """
    if root is None:
        return EMPTY_TREE
    rows, _ = _grid_block(root)
    return "\n".join(row.rstrip() for row in rows)


def _grid_block(node):
    """Lay out a subtree as rows of equal width.

    Returns:
        (tuple[list[str], int]) The rows and the column of the node's center
    """
    label = node.label
    if node.is_leaf:
        return [label], (len(label) - 1) // 2

    blocks = [_grid_block(child) for child in node.children]
    height = max(len(block_rows) for block_rows, _ in blocks)

    rows = [""] * height
    centers = []
    width = 0
    for index, (block_rows, center) in enumerate(blocks):
        if index:
            rows = [row + " " * GRID_GAP for row in rows]
            width += GRID_GAP
        block_width = len(block_rows[0])
        for r in range(height):
            rows[r] += block_rows[r] if r < len(block_rows) else " " * block_width
        centers.append(width + center)
        width += block_width

    connector = [" "] * width
    if len(centers) == 1:
        mid = centers[0]
        connector[mid] = "│"
    else:
        mid = (centers[0] + centers[-1]) // 2
        # Sit over a middle child that is off the span center by one column
        for column in centers[1:-1]:
            if abs(column - mid) <= 1:
                mid = column
        for column in range(centers[0], centers[-1] + 1):
            connector[column] = "─"
        for column in centers[1:-1]:
            connector[column] = "┬"
        connector[centers[0]] = "┌"
        connector[centers[-1]] = "┐"
        connector[mid] = "┼" if mid in centers else "┴"
    rows.insert(0, "".join(connector))

    # Widen the block when the label overhangs the children
    start = mid - (len(label) - 1) // 2
    left = max(0, -start)
    right = max(0, start + len(label) - width)
    if left or right:
        rows = [" " * left + row + " " * right for row in rows]
        start += left
        mid += left
        width += left + right

    label_row = " " * start + label + " " * (width - start - len(label))
    return [label_row, *rows], mid


def format_derivation(steps):
    """Number derivation steps and mark each rewrite with an arrow.

    Args:
        steps: (Sequence[str]) Sentential forms, start symbol first

    Returns:
        (str) One numbered line per step
    """
    digits = len(str(len(steps)))
    lines = []
    for number, step in enumerate(steps, 1):
        arrow = "=>" if number > 1 else "  "
        lines.append(f"{number:>{digits}}  {arrow} {step}")
    return "\n".join(lines)


def format_tokens(tokens):
    """List tokens as `KIND: 'literal' @offset`, one per line."""
    return "\n".join(f"{t.kind.name}: {t.literal!r} @{t.offset}" for t in tokens)


def format_report(recognition, settings, color=False):
    """Describe a recognition for display.

    Args:
        recognition: (Recognition) Result of `gridraw.recognize`
        settings: (Settings) Which sections to show and the tree style
        color: (bool) Apply ANSI colors

    Returns:
        (str) Report text
    """
    sections = []
    if recognition.accepted:
        sections.append(paint("ACCEPTED", "accept", color) + f": {recognition.text}")
    else:
        sections.append(paint("REJECTED", "error", color) + f": {recognition.text}")

    if settings.show_tokens:
        sections.append(paint("Tokens:", "heading", color) + "\n" + format_tokens(recognition.tokens))

    if not recognition.accepted:
        kind = "lexical error" if recognition.lex_errors else "syntax error"
        sections.append("\n".join(
            paint(kind, "error", color) + f": {message}" for message in recognition.errors))
        return "\n\n".join(sections)

    if settings.show_derivation:
        steps = format_derivation(recognition.derivation)
        sections.append(paint("Derivation:", "heading", color) + "\n" + paint(steps, "step", color))
    if settings.show_tree:
        render = render_grid if settings.style == "grid" else render_tree
        sections.append(paint("Parse tree:", "heading", color) + "\n" + render(recognition.root))
    return "\n\n".join(sections)
