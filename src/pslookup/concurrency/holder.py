"""Publish-and-swap holder for the current suffix tree.

Thread safety strategy: copy-on-write at the granularity of the whole
tree. reload() builds a brand new SuffixTree without holding any lock,
then replaces the reference under a writer lock. Readers grab the
reference once per lookup and walk a tree that nobody mutates, so they
never block and never observe a half-built tree.

The writer lock only serializes concurrent reload() calls so the
generation counter and the published tree stay in step.
"""
from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from pslookup.domain.types import DomainName
from pslookup.tree.suffix_tree import SuffixTree

log = logging.getLogger(__name__)


class SuffixTreeHolder:
    """Holds the published SuffixTree and swaps it atomically on reload.

    Args:
        tree: initial tree to publish. Defaults to an empty tree, which
            resolves every lookup to "".
    """

    def __init__(self, tree: SuffixTree | None = None) -> None:
        self._tree = tree or SuffixTree()
        self._generation = 0
        self._write_lock = threading.Lock()

    @property
    def current(self) -> SuffixTree:
        return self._tree

    @property
    def generation(self) -> int:
        """Number of successful reloads since construction."""
        return self._generation

    def reload(self, lines: Iterable[str]) -> SuffixTree:
        """Build a tree from lines and publish it.

        If building fails (ReadError from the line source), the exception
        propagates and the previously published tree stays current.
        """
        tree = SuffixTree.build(lines)
        with self._write_lock:
            self._tree = tree
            self._generation += 1
            generation = self._generation
        log.info("Published suffix tree generation %d (%d rules)",
                 generation, tree.stats.rules)
        return tree

    def lookup_etld(self, fqdn: DomainName | None) -> str:
        return self._tree.lookup_etld(fqdn)
