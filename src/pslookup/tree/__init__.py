"""Suffix tree construction and eTLD lookup."""

from pslookup.tree.node import SuffixNode, WildcardMatch
from pslookup.tree.suffix_tree import (
    BuildStats,
    SuffixTree,
    build_suffix_tree,
    lookup_etld,
)

__all__ = [
    "BuildStats",
    "SuffixNode",
    "SuffixTree",
    "WildcardMatch",
    "build_suffix_tree",
    "lookup_etld",
]
