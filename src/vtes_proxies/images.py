"""Expansion of section maps into the ordered list of card images to print."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Mapping

from .deck import CRYPT, LIBRARY, DeckList
from .diagnostics import Diagnostics
from .keys import ImageKey


@dataclass(frozen=True)
class CardImage:
    """Represents one printed copy of a card whose image exists on disk."""

    image_path: Path
    section: str
    key: str


def collect_section_images(
    entries: Mapping[ImageKey, int],
    image_folder: Path,
    section: str,
    diagnostics: Diagnostics,
) -> List[CardImage]:
    """
    Expand `key -> quantity` into one CardImage per copy, sorted by path.

    Keys without an image file are skipped and recorded as missing.
    """
    images: List[CardImage] = []

    for key, quantity in entries.items():
        image_path = image_folder / key.filename
        if not image_path.exists():
            # crypt misses were already reported while resolving groups
            message = None
            if section == LIBRARY:
                message = f"No image found for library card [bold]{key}[/bold]"
            diagnostics.record_missing(
                section=section,
                key=str(key),
                image_path=image_path,
                quantity=quantity,
                message=message,
            )
            continue
        images.extend(
            CardImage(image_path=image_path, section=section, key=str(key))
            for _ in range(quantity)
        )

    return sorted(images, key=lambda c: str(c.image_path))


def build_image_list(
    deck: DeckList,
    image_folder: Path,
    diagnostics: Diagnostics,
) -> List[CardImage]:
    """All crypt images first, then all library images, each block sorted by path."""
    crypt_images = collect_section_images(deck.crypt, image_folder, CRYPT, diagnostics)
    library_images = collect_section_images(deck.library, image_folder, LIBRARY, diagnostics)
    diagnostics.debug(
        f"Resolved {len(crypt_images)} crypt and {len(library_images)} library images"
    )
    return crypt_images + library_images
