"""Shared fixtures: a small Public Suffix List excerpt on disk."""
from __future__ import annotations

from pathlib import Path

import pytest

from pslookup.tree.suffix_tree import SuffixTree

DATA_DIR = Path(__file__).parent / "data"
PSL_FILE = DATA_DIR / "public_suffix_list.dat"

RULES = [
    "co.uk",
    "org.uk",
    "*.sch.uk",
    "edu.au",
    "nsw.edu.au",
    "schools.nsw.edu.au",
    "blogspot.com",
    "github.io",
]


@pytest.fixture
def psl_file() -> Path:
    return PSL_FILE


@pytest.fixture
def psl_lines() -> list[str]:
    with open(PSL_FILE, "r", encoding="utf-8") as f:
        return f.readlines()


@pytest.fixture
def psl_tree(psl_lines) -> SuffixTree:
    return SuffixTree.build(psl_lines)


@pytest.fixture
def rules() -> list[str]:
    return list(RULES)


@pytest.fixture
def small_tree(rules) -> SuffixTree:
    """Tree built from RULES only, no comments or bare labels."""
    return SuffixTree.build(rules)
