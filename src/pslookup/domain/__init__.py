"""Domain types for pslookup.

Re-exports the public types for convenient access:
    from pslookup.domain import ETLDResult, DomainName
"""
from pslookup.domain.result import ETLDResult
from pslookup.domain.types import (
    COMMENT_MARKER,
    LABEL_SEPARATOR,
    MAX_LABELS,
    ROOT_LABEL,
    WILDCARD_LABEL,
    DomainName,
    Label,
    split_labels,
)

__all__ = [
    "ETLDResult",
    "COMMENT_MARKER",
    "LABEL_SEPARATOR",
    "MAX_LABELS",
    "ROOT_LABEL",
    "WILDCARD_LABEL",
    "DomainName",
    "Label",
    "split_labels",
]
