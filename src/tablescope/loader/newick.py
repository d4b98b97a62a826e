"""Newick tree parsing.

Supports names, branch lengths (':0.5'), quoted labels and nested subtrees,
e.g. '((A:0.1,B:0.2)AB:0.3,C:0.4)root;'. Comments in square brackets are
skipped.
"""
import logging
import os

from ..errors import LoaderError
from ..table import TreeNode

logger = logging.getLogger(__name__)

_DELIMITERS = set('(),:;[')


class _NewickParser:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def error(self, message: str) -> LoaderError:
        return LoaderError(f"Malformed Newick tree at position {self.pos}: {message}")

    def peek(self) -> str:
        self._skip()
        return self.text[self.pos] if self.pos < len(self.text) else ''

    def _skip(self):
        """Skip whitespace and [comments]."""
        while self.pos < len(self.text):
            ch = self.text[self.pos]
            if ch.isspace():
                self.pos += 1
            elif ch == '[':
                end = self.text.find(']', self.pos)
                if end < 0:
                    raise self.error("unterminated comment")
                self.pos = end + 1
            else:
                break

    def expect(self, ch: str):
        if self.peek() != ch:
            raise self.error(f"expected {ch!r}")
        self.pos += 1

    def label(self) -> str:
        self._skip()
        if self.pos < len(self.text) and self.text[self.pos] == "'":
            end = self.text.find("'", self.pos + 1)
            if end < 0:
                raise self.error("unterminated quoted label")
            value = self.text[self.pos + 1:end]
            self.pos = end + 1
            return value
        start = self.pos
        while self.pos < len(self.text) and self.text[self.pos] not in _DELIMITERS:
            self.pos += 1
        return self.text[start:self.pos].strip().replace('_', ' ')

    def subtree(self) -> TreeNode:
        node = TreeNode()
        if self.peek() == '(':
            self.pos += 1
            node.children.append(self.subtree())
            while self.peek() == ',':
                self.pos += 1
                node.children.append(self.subtree())
            self.expect(')')
        node.name = self.label()
        if self.peek() == ':':
            self.pos += 1
            length = self.label()
            try:
                node.length = float(length)
            except ValueError:
                raise self.error(f"invalid branch length {length!r}") from None
        return node

    def parse(self) -> TreeNode:
        root = self.subtree()
        self.expect(';')
        if self.peek():
            raise self.error("unexpected text after ';'")
        return root


def parse_newick(text: str) -> TreeNode:
    """Parse a Newick string into a tree. Raises LoaderError when malformed."""
    if not text.strip():
        raise LoaderError("Empty Newick tree")
    return _NewickParser(text.strip()).parse()


def load_newick(file_path: str) -> TreeNode:
    if not os.path.isfile(file_path):
        raise LoaderError(f"File not found: {file_path}")
    with open(file_path, 'r', encoding='utf-8') as f:
        tree = parse_newick(f.read())
    logger.info(f"Loaded {os.path.basename(file_path)}: {tree.num_nodes} nodes, {len(tree.leaves())} leaves")
    return tree
