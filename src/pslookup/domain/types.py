"""Shared type aliases and list-format constants."""
from __future__ import annotations

from typing import TypeAlias

Label: TypeAlias = str
DomainName: TypeAlias = str

LABEL_SEPARATOR = "."
COMMENT_MARKER = "//"
WILDCARD_LABEL = "*"
ROOT_LABEL = "ROOT"

# Upper bound on segments produced when splitting a rule line or an FQDN.
# Anything past the ninth separator stays glued to the last segment.
MAX_LABELS = 10


def split_labels(name: str) -> list[Label]:
    """Split a dotted name and reverse it so the most general label is first.

    "www.kevin.co.uk" becomes ["uk", "co", "kevin", "www"].
    """
    labels = name.split(LABEL_SEPARATOR, MAX_LABELS - 1)
    labels.reverse()
    return labels
