"""Binary decode trie built from a code table.

Nodes live in a flat tuple and refer to their children by index. Node 0 is
the root and stands for the empty pattern. ``.`` follows the ``dot`` edge,
``-`` follows the ``dash`` edge.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, replace

from PySide6.QtCore import QCoreApplication

from .alphabet import CodeTable
from .errors import DuplicatePatternError
from .models import Pattern, Symbol, TrieNode, render_pattern

logger = logging.getLogger(__name__)

ROOT = 0


def _tr(text: str) -> str:
    return QCoreApplication.translate("DecodeTrie", text)


@dataclass(frozen=True)
class Step:
    """One character of a token as seen by the walker."""

    index: int
    char: str
    node: int  # node id after this character
    moved: bool


class DecodeTrie:
    def __init__(self, nodes: tuple[TrieNode, ...]) -> None:
        if not nodes:
            raise ValueError(_tr("Trie needs at least a root node"))
        self._nodes = nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def node(self, node_id: int) -> TrieNode:
        return self._nodes[node_id]

    @property
    def root(self) -> TrieNode:
        return self._nodes[ROOT]

    def walk(self, token: str) -> Iterator[Step]:
        """Consume ``token`` from the root, one character at a time.

        A character that is not a symbol, or a symbol with no edge from the
        current node, leaves the walker in place.
        """
        current = ROOT
        for index, char in enumerate(token):
            symbol = Symbol.from_char(char)
            target = self._nodes[current].child(symbol) if symbol is not None else None
            if target is not None:
                current = target
            yield Step(index, char, current, target is not None)

    def resolve(self, token: str) -> str | None:
        current = ROOT
        for step in self.walk(token):
            current = step.node
        return self._nodes[current].letter

    def lookup(self, pattern: Pattern) -> str | None:
        """Exact lookup: None unless every symbol has an edge."""
        current = ROOT
        for symbol in pattern:
            target = self._nodes[current].child(symbol)
            if target is None:
                return None
            current = target
        return self._nodes[current].letter

    def depth(self) -> int:
        deepest = 0
        pending = [(ROOT, 0)]
        while pending:
            node_id, level = pending.pop()
            deepest = max(deepest, level)
            node = self._nodes[node_id]
            for child in (node.dot, node.dash):
                if child is not None:
                    pending.append((child, level + 1))
        return deepest


def build_trie(table: CodeTable) -> DecodeTrie:
    nodes: list[TrieNode] = [TrieNode()]
    for letter, pattern in table.items():
        current = ROOT
        for symbol in pattern:
            child = nodes[current].child(symbol)
            if child is None:
                child = len(nodes)
                nodes.append(TrieNode())
                if symbol is Symbol.DOT:
                    nodes[current] = replace(nodes[current], dot=child)
                else:
                    nodes[current] = replace(nodes[current], dash=child)
            current = child
        existing = nodes[current].letter
        if existing is not None:
            raise DuplicatePatternError(render_pattern(pattern), existing, letter)
        nodes[current] = replace(nodes[current], letter=letter)

    logger.debug("Built decode trie: %d letters, %d nodes", len(table), len(nodes))
    return DecodeTrie(tuple(nodes))
