"""ETLDResult: outcome of walking a suffix tree for one FQDN.

Internally a lookup either determines a suffix or it doesn't. Callers
that need the distinction (CLI, tests, anything logging misses) use
this type; the plain-string boundary collapses NONE to "".
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from pslookup.domain.types import LABEL_SEPARATOR, Label


@dataclass(frozen=True, slots=True)
class ETLDResult:
    """Matched labels, most general first.

    wildcard is True when the deepest label was absorbed by a "*" rule
    rather than matched literally.
    """
    labels: tuple[Label, ...] = ()
    wildcard: bool = False

    NONE: ClassVar[ETLDResult]

    @property
    def found(self) -> bool:
        return bool(self.labels)

    @property
    def depth(self) -> int:
        return len(self.labels)

    @property
    def suffix(self) -> str:
        """Dot-joined suffix in domain-name order, e.g. "co.uk"."""
        return LABEL_SEPARATOR.join(reversed(self.labels))

    def __str__(self) -> str:
        return self.suffix


ETLDResult.NONE = ETLDResult()
