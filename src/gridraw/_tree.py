"""Parse tree model.

Parse trees are ordinary lark trees so the lark visitors, `pretty()` and the
`find_data()` family work on them directly. A node's `data` is its label:
`<graph>`, `<draw>`, `<action>`, `<x>` and `<y>` for non-terminals, and the
token literal for terminal leaves. Every child is itself a `TreeNode`; leaves
simply have no children.
"""

__all__ = ["TreeNode"]

import lark


class TreeNode(lark.Tree):
    """A labeled node owning an ordered list of child nodes.

    Args:
        label: (str) Node label
        children: (list[TreeNode] | None) Initial children
    """

    def __init__(self, label, children=None):
        super().__init__(label, list(children) if children else [])

    @property
    def label(self):
        """(str) Node label."""
        return self.data

    @property
    def is_leaf(self):
        """(bool) True when the node has no children."""
        return not self.children

    @property
    def is_nonterminal(self):
        """(bool) True for `<...>` grammar placeholders."""
        return self.data.startswith("<") and self.data.endswith(">")

    def add(self, node):
        """Append a child node and return it."""
        self.children.append(node)
        return node

    def leaf_labels(self):
        """Labels of the leaves, left to right."""
        if self.is_leaf:
            return [self.data]
        labels = []
        for child in self.children:
            labels.extend(child.leaf_labels())
        return labels
