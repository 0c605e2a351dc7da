"""Sharing a suffix tree between threads: build once, swap on reload."""
from pslookup.concurrency.holder import SuffixTreeHolder

__all__ = ["SuffixTreeHolder"]
