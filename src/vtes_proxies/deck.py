"""Deck list reading: line classification and card name normalization."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from rich.markup import escape

from .diagnostics import Diagnostics
from .errors import DeckListError
from .keys import ImageKey


LIBRARY = "library"
CRYPT = "crypt"

SectionMap = Dict[ImageKey, int]

_NON_ALPHANUMERIC_RE = re.compile(r"[^A-Za-z0-9]")

# "Crypt", "Crypt:" or "Crypt (12 cards, min=20, max=40)" in the name field
_CRYPT_HEADING_RE = re.compile(r"^crypt\s*(?::|\(|$)", re.IGNORECASE)


@dataclass
class DeckList:
    """The two section maps of a deck list."""

    library: SectionMap = field(default_factory=dict)
    crypt: SectionMap = field(default_factory=dict)

    def section(self, name: str) -> SectionMap:
        return self.crypt if name == CRYPT else self.library


def normalize_card_name(name: Optional[str]) -> Optional[str]:
    """
    Map a printed card name to its image key string.

    Every character that is not an ASCII letter or digit is dropped and the
    rest is lower-cased: `"Ur (Adv)"` becomes `"uradv"`.
    """
    if name is None:
        return None
    return _NON_ALPHANUMERIC_RE.sub("", name).lower()


def split_deck_line(line: str, line_number: int) -> Tuple[int, str]:
    """Split a `<quantity> <name>` line into its two fields."""
    fields = line.split(None, 1)
    if len(fields) < 2:
        raise DeckListError(line_number, line, "expected '<quantity> <card name>'")
    quantity_field, name = fields
    try:
        quantity = int(quantity_field)
    except ValueError:
        raise DeckListError(line_number, line, "quantity is not a number") from None
    if quantity <= 0:
        raise DeckListError(line_number, line, "quantity must be positive")
    return quantity, name.strip()


def is_crypt_marker(line: str) -> bool:
    """Check whether a line starts the crypt section."""
    fields = line.split(None, 1)
    if not fields:
        return False
    if fields[0].lower().startswith(CRYPT):
        return True
    return len(fields) == 2 and _CRYPT_HEADING_RE.match(fields[1].strip()) is not None


def parse_deck_lines(
    lines: Iterable[str],
    diagnostics: Optional[Diagnostics] = None,
) -> DeckList:
    """
    Build the library and crypt section maps from deck list lines.

    - Lines before the first crypt marker belong to the library.
    - The marker line itself is discarded; everything after it is crypt.
    - Blank lines are skipped.
    - Repeated cards within a section are added up.
    """
    deck = DeckList()
    section = LIBRARY

    for line_number, line in enumerate(lines, start=1):
        if not line.strip():
            continue

        if section == LIBRARY and is_crypt_marker(line):
            if diagnostics is not None:
                diagnostics.debug(f"Crypt section detected at line {line_number}.")
            section = CRYPT
            continue

        quantity, name = split_deck_line(line, line_number)
        normalized = normalize_card_name(name)
        if not normalized:
            raise DeckListError(line_number, line, "card name has no letters or digits")

        key = ImageKey.parse(normalized)
        entries = deck.section(section)
        entries[key] = entries.get(key, 0) + quantity
        if diagnostics is not None:
            diagnostics.debug(f"Adding card to {section}: {escape(name)} -> {key} x{quantity}")

    return deck


def read_deck_list(
    deck_path: Path,
    diagnostics: Optional[Diagnostics] = None,
) -> DeckList:
    """Read a deck list file. Raises OSError if it cannot be read."""
    lines: List[str] = deck_path.read_text(encoding="utf-8-sig").splitlines()
    if diagnostics is not None:
        diagnostics.debug(f"Parsing {len(lines)} lines from {escape(str(deck_path))}")
    return parse_deck_lines(lines, diagnostics=diagnostics)
