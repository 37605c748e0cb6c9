"""Exception hierarchy for vtes_proxies."""
from __future__ import annotations

from typing import Sequence


class ProxySheetError(Exception):
    """Base exception for all proxy sheet errors."""


class DeckListError(ProxySheetError):
    """A deck list line could not be split into quantity and card name."""

    def __init__(self, line_number: int, line: str, reason: str):
        self.line_number = line_number
        self.line = line
        self.reason = reason
        super().__init__(f"Line {line_number}: {reason}: {line!r}")


class AmbiguousGroupError(ProxySheetError):
    """
    More than one group image exists for a single crypt card.

    Picking one of them would print the wrong vampire, so the whole run
    is aborted and the image folder has to be fixed.
    """

    def __init__(self, key: str, matched_groups: Sequence[int]):
        self.key = key
        self.matched_groups = tuple(matched_groups)
        groups = ", ".join(str(g) for g in self.matched_groups)
        super().__init__(f"Multiple groups found for card {key} (groups {groups})")


class DocumentWriteError(ProxySheetError):
    """The PDF could not be written to its output path."""
