"""SuffixTree: Public Suffix List rules as a reversed-label tree.

Every qualifying rule line is split on "." and reversed so the TLD comes
first: "schools.nsw.edu.au" becomes ["au", "edu", "nsw", "schools"].
Inserting a line walks from the root and creates whatever nodes are
missing, so the tree is the union of all rule paths. Lines only ever
add paths, which makes the final shape independent of line order.

Lookup reverses the FQDN the same way and walks greedily from the root,
stopping at the first label with no matching child. There is no
backtracking: each step either descends or terminates.

Two quirks of the list format are kept as-is:
  - Lines without a "." are skipped. A bare TLD such as "uk" only gets a
    node if some longer rule ("co.uk") introduces it.
  - Labels are compared case-sensitively.

Thread safety: build once, then share. Nothing mutates a tree after
construction, so concurrent lookups need no lock. To pick up a new list,
build another tree and swap the reference (see SuffixTreeHolder).
"""
from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from pslookup.domain.result import ETLDResult
from pslookup.domain.types import (
    COMMENT_MARKER,
    LABEL_SEPARATOR,
    ROOT_LABEL,
    DomainName,
    split_labels,
)
from pslookup.tree.node import SuffixNode, WildcardMatch

log = logging.getLogger(__name__)


@dataclass(slots=True)
class BuildStats:
    """Counters from the most recent construction."""
    lines: int = 0
    comments: int = 0
    bare_labels: int = 0
    rules: int = 0
    nodes: int = 1


class SuffixTree:
    """Reversed-label tree over PSL rules with single-level wildcards.

    Usage:
        tree = SuffixTree.build(open("public_suffix_list.dat"))
        tree.lookup_etld("www.kevin.co.uk")   # "co.uk"
        tree.lookup_etld("x.y.sch.uk")        # "y.sch.uk" (via *.sch.uk)
    """

    def __init__(self) -> None:
        self._root = SuffixNode(ROOT_LABEL)
        self._stats = BuildStats()

    @classmethod
    def build(cls, lines: Iterable[str]) -> SuffixTree:
        """Construct a tree from PSL lines.

        Any exception raised while iterating lines (ReadError from a file
        source) propagates unchanged and no tree is returned.
        """
        tree = cls()
        tree.rebuild(lines)
        return tree

    @property
    def root(self) -> SuffixNode:
        return self._root

    @property
    def stats(self) -> BuildStats:
        return self._stats

    def rebuild(self, lines: Iterable[str]) -> None:
        """Replace this tree's contents with a tree built from lines.

        The new root is only installed once every line has been consumed,
        so a failing line source leaves the previous contents in place.
        Not safe to call while other threads are looking up.
        """
        root = SuffixNode(ROOT_LABEL)
        stats = BuildStats()

        for raw in lines:
            stats.lines += 1
            line = raw.rstrip("\r\n")
            if line.startswith(COMMENT_MARKER):
                stats.comments += 1
                continue
            if LABEL_SEPARATOR not in line:
                stats.bare_labels += 1
                continue
            stats.nodes += self._insert(root, line)
            stats.rules += 1

        self._root = root
        self._stats = stats
        log.info(
            "Built suffix tree: %d lines, %d rules, %d comments, "
            "%d bare labels skipped, %d nodes",
            stats.lines, stats.rules, stats.comments,
            stats.bare_labels, stats.nodes,
        )

    @staticmethod
    def _insert(root: SuffixNode, rule: str) -> int:
        """Add the path for one rule line. Returns the number of new nodes.

        Uses exact matching only: "*" in a rule is stored literally and
        never stands in for another label during construction.
        """
        created = 0
        node = root
        for label in split_labels(rule):
            child = node.find_exact(label)
            if child is None:
                child = node.add_child(SuffixNode(label))
                created += 1
            node = child
        return created

    def lookup(self, fqdn: DomainName | None) -> ETLDResult:
        """Walk the tree for fqdn and return the matched labels.

        Returns ETLDResult.NONE for None, "" or anything whose most
        general label is not in the tree.
        """
        if fqdn is None:
            return ETLDResult.NONE

        matched: list[str] = []
        wildcard = False
        node: SuffixNode | WildcardMatch = self._root
        for label in split_labels(fqdn):
            child = node.find_child(label)
            if child is None:
                break
            matched.append(child.label)
            wildcard = isinstance(child, WildcardMatch)
            node = child

        if not matched:
            return ETLDResult.NONE
        return ETLDResult(tuple(matched), wildcard)

    def lookup_etld(self, fqdn: DomainName | None) -> str:
        """Return the eTLD of fqdn, or "" when none can be determined."""
        return self.lookup(fqdn).suffix

    def node_count(self) -> int:
        """Count total nodes including the root (for memory reporting)."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def render(self) -> str:
        """Indented dump of the whole tree, for debugging."""
        return self._root.render()


def build_suffix_tree(lines: Iterable[str]) -> SuffixTree:
    """Build a SuffixTree from PSL lines."""
    return SuffixTree.build(lines)


def lookup_etld(tree: SuffixTree, fqdn: DomainName | None) -> str:
    """Return the eTLD of fqdn according to tree, or ""."""
    return tree.lookup_etld(fqdn)
