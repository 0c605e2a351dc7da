"""Local file source for Public Suffix List lines.

The tree builder accepts any iterable of lines. This module supplies the
common case, a UTF-8 .dat file on disk, and turns every failure to read
it into ReadError so callers have one thing to catch.

Fetching the list from publicsuffix.org is deliberately left to
whatever tooling drops the file in place.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

from pslookup.tree.suffix_tree import SuffixTree

log = logging.getLogger(__name__)


class ReadError(Exception):
    """Raised when the list of suffix rules cannot be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = str(path)
        self.reason = reason
        super().__init__(f"cannot read suffix list {self.path}: {reason}")


def read_lines(path: str | Path, encoding: str = "utf-8") -> Iterator[str]:
    """Yield lines of the file at path, newlines included.

    The file is opened on first iteration. Missing files, permission
    problems and decode errors all surface as ReadError.
    """
    try:
        with open(path, "r", encoding=encoding) as f:
            yield from f
    except UnicodeDecodeError as e:
        raise ReadError(path, f"not valid {encoding}: {e.reason}") from e
    except LookupError as e:
        raise ReadError(path, f"unknown encoding {encoding!r}") from e
    except OSError as e:
        raise ReadError(path, e.strerror or str(e)) from e


def load_suffix_tree(path: str | Path, encoding: str = "utf-8") -> SuffixTree:
    """Build a SuffixTree from the list file at path."""
    log.debug("Loading suffix list from %s", path)
    tree = SuffixTree.build(read_lines(path, encoding))
    log.info("Loaded %d rules from %s", tree.stats.rules, path)
    return tree
