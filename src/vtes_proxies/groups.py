"""Resolution of crypt cards to their group-specific image files."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Mapping

from rich.markup import escape

from .diagnostics import Diagnostics
from .errors import AmbiguousGroupError
from .keys import MAX_GROUP, ImageKey


def image_exists(image_folder: Path, key: ImageKey, diagnostics: Diagnostics) -> bool:
    """Check whether `<image_folder>/<key>.jpg` exists."""
    path = image_folder / key.filename
    diagnostics.debug(f"Checking path: {escape(str(path))}")
    return path.exists()


def find_group_matches(
    image_folder: Path,
    key: ImageKey,
    diagnostics: Diagnostics,
) -> List[int]:
    """
    Return every group 1..7 that has an image for `key`, in ascending order.

    The group tag goes before the advanced marker, so `uradv` is probed as
    `urg1adv.jpg`, `urg2adv.jpg`, ...
    """
    return [
        group
        for group in range(1, MAX_GROUP + 1)
        if image_exists(image_folder, key.with_group(group), diagnostics)
    ]


def resolve_crypt_groups(
    crypt: Mapping[ImageKey, int],
    image_folder: Path,
    diagnostics: Diagnostics,
) -> Dict[ImageKey, int]:
    """
    Resolve each crypt key to the group variant that exists on disk.

    The input mapping is only read. A new mapping is built and returned, so
    the caller swaps it in once the whole pass has succeeded:

    - Keys that already carry a group are kept; a missing file is reported.
    - Exactly one matching group rewrites the key to that group.
    - No matching group keeps the key; it is dropped later if no file exists.
    - Two or more matching groups raise `AmbiguousGroupError`.

    Running it again on its own result changes nothing.
    """
    diagnostics.debug(f"Processing {len(crypt)} crypt entries")
    resolved: Dict[ImageKey, int] = {}

    for key, quantity in crypt.items():
        new_key = key

        if key.has_group:
            diagnostics.debug(f"Key already ends with group indicator: {key}. Checking only group {key.group}")
            if not image_exists(image_folder, key, diagnostics):
                diagnostics.warn(f"No image found for crypt card [bold]{key}[/bold] (group {key.group})")
        else:
            matches = find_group_matches(image_folder, key, diagnostics)
            if len(matches) > 1:
                diagnostics.error(f"Multiple groups found for card [bold]{key}[/bold]: {matches}")
                raise AmbiguousGroupError(str(key), matches)
            if matches:
                new_key = key.with_group(matches[0])
                diagnostics.debug(f"Only one group found. Updating key from {key} to {new_key}")
            elif image_exists(image_folder, key, diagnostics):
                diagnostics.debug(f"No group image for {key}, using {key.filename}")
            else:
                diagnostics.warn(f"No group found for card [bold]{key}[/bold]")

        resolved[new_key] = resolved.get(new_key, 0) + quantity

    return resolved
