"""Nodes of the reversed-label suffix tree.

Each SuffixNode holds one domain label and a dict of uniquely-labelled
children. The wildcard "*" is stored as an ordinary child key; it only
gets special treatment in find_child(), which is what lookups use.

A wildcard hit does not descend into the "*" child. It returns a
WildcardMatch: a detached value carrying the queried label and no
children. The next find_child() on it always fails, so one "*" absorbs
exactly one label. "*.sch.uk" matches "y.sch.uk" but never "x.y.sch.uk".
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple

from pslookup.domain.types import WILDCARD_LABEL, Label


class WildcardMatch(NamedTuple):
    """Transient result of a wildcard hit. Never inserted into a tree."""
    label: Label

    def find_child(self, label: Label) -> None:
        return None

    def has_children(self) -> bool:
        return False

    def count_children(self) -> int:
        return 0


@dataclass(slots=True)
class SuffixNode:
    """A node in the suffix tree.

    children maps a label (or "*") to the owned child node. Keys are
    unique; iteration order means nothing outside of render().
    """
    label: Label
    children: dict[Label, SuffixNode] = field(default_factory=dict)

    def find_child(self, label: Label) -> SuffixNode | WildcardMatch | None:
        """Return the child for label, falling back to a wildcard child.

        An exact child always wins over "*". When only "*" is present,
        the result is a fresh WildcardMatch for the queried label.
        """
        child = self.children.get(label)
        if child is not None:
            return child
        if WILDCARD_LABEL in self.children:
            return WildcardMatch(label)
        return None

    def find_exact(self, label: Label) -> SuffixNode | None:
        """Exact child lookup with no wildcard fallback (used when building)."""
        return self.children.get(label)

    def add_child(self, node: SuffixNode) -> SuffixNode:
        """Attach node unless a child with its label exists.

        Returns whichever node ends up under that label, so an already
        expanded subtree is never replaced.
        """
        return self.children.setdefault(node.label, node)

    def has_children(self) -> bool:
        return bool(self.children)

    def count_children(self) -> int:
        return len(self.children)

    def render(self, indent: int = 0) -> str:
        """Indented dump of this subtree, siblings sorted by label."""
        lines = [f"{'  ' * indent}{self.label}"]
        for key in sorted(self.children):
            lines.append(self.children[key].render(indent + 1))
        return "\n".join(lines)
